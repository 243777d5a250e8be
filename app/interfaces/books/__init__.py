"""HTTP interface of the books bounded context."""

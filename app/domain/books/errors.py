"""
Domain-specific errors for the books bounded context.

Expected outcomes (missing book, bad page number) are returned as values
by the use cases and never raised. These errors cover the remaining
failures and are classified into HTTP responses by the shared error
translator. No framework imports allowed.
"""


class BookDomainError(Exception):
    """Base error for all books domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ResourceNotFoundError(BookDomainError):
    """Raised when a resource is required to exist but does not."""

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class InvalidArgumentError(BookDomainError):
    """Raised when an argument is missing or malformed."""

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"Invalid argument '{argument}': {reason}")
        self.argument = argument
        self.reason = reason


class InvalidOperationError(BookDomainError):
    """Raised when an operation is not valid in the current state."""


class UnauthorizedError(BookDomainError):
    """Raised when the caller may not access a resource."""

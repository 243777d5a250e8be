"""Adapters for the books bounded context."""

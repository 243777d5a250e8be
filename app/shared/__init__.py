"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error translation and the error envelope
- Logging configuration
"""

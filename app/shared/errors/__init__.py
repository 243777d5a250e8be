"""
Shared error handling package.

Centralizes exception-to-HTTP mapping so that failures nobody
handled are consistently translated into the error envelope.
"""

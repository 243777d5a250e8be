"""
Books bounded context: domain layer.

Pure business rules for the Book resource. No framework imports.
"""

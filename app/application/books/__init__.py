"""
Books application layer.

Use cases orchestrate the repository port and return Result values.
Expected failures (not found, invalid input) are values, not exceptions.
"""

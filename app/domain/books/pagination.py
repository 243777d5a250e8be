"""Pagination arithmetic for book listings."""


def total_pages(total: int, page_size: int) -> int:
    """Return ceil(total / page_size); zero when there is nothing to page."""
    if total <= 0:
        return 0
    return -(-total // page_size)


def page_offset(page: int, page_size: int) -> int:
    """Return the zero-based row offset of a 1-based page."""
    return (page - 1) * page_size

"""
Pagination Helpers

Computes page metadata for paged listings from the requested page, the page
size and the total number of matching documents.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageInfo:
    """Metadata describing one page of a listing."""

    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


def page_offset(page: int, page_size: int) -> int:
    """Number of documents to skip to reach the first item of `page`."""
    return (page - 1) * page_size


def build_page_info(page: int, page_size: int, total_count: int) -> PageInfo:
    """
    Assemble pagination metadata.

    total_pages uses integer ceiling division, so an empty collection has
    zero pages and never a next page. has_previous_page only looks at the
    requested page number, even when it lies past the last page.

    Args:
        page: Requested page (1-indexed, already validated)
        page_size: Items per page (already validated, > 0)
        total_count: Total number of items across all pages

    Returns:
        PageInfo for the requested page
    """
    total_pages = (total_count + page_size - 1) // page_size if total_count > 0 else 0

    return PageInfo(
        page=page,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )

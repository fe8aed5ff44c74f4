"""
Exhaustive offset pagination over a remote collection.
"""

import logging
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

PAGE_SIZE = 100


def collect_all(
    fetch_page: Callable[[int, int], list[T]],
    page_size: int = PAGE_SIZE,
    label: str = "records",
) -> list[T]:
    """
    Fetch every page of a collection, one page at a time.

    Stops at the first page holding fewer than `page_size` items. When the
    collection size is an exact multiple of the page size, this costs one
    extra call that returns an empty page.

    Args:
        fetch_page: Callable taking (offset, limit) and returning one page
        page_size: Items requested per page
        label: Collection name used in log messages

    Returns:
        All items, in the order the pages returned them
    """
    items: list[T] = []
    offset = 0

    while True:
        page = fetch_page(offset, page_size)
        items.extend(page)
        logger.info(f"Fetched {len(page)} {label} at offset {offset}")

        if len(page) < page_size:
            break
        offset += page_size

    return items

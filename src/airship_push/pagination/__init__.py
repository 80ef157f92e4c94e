"""Pagination – iterate ``next_page``-linked listings."""
from airship_push.pagination.page_iterator import PageIterator

__all__ = ["PageIterator"]

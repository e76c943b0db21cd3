"""Lazy, pull-based iteration over paginated AWS listings."""

import logging
from typing import Callable, Iterator, TypeVar

from sns_monitor.models.page import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Paginator(Iterator[T]):
    """
    Iterator that fetches pages only as their items are consumed.

    Pages come from a page iterator, normally one built on a boto3
    paginator, which owns the continuation token. The iterator ends when
    the pages run out or when fetching a page fails. Fetch failures are
    logged, never raised. A paginator is single-use: once exhausted it
    never fetches again.
    """

    def __init__(
        self,
        pages: Callable[[], Iterator[Page[T]]],
        description: str = "items",
    ):
        """
        Initialize paginator.

        Args:
            pages: Returns the page iterator. Not called until the first
                item is requested.
            description: What is being listed, used in log messages.
        """
        self._pages_factory = pages
        self._pages: Iterator[Page[T]] | None = None
        self._description = description
        self._items: list[T] = []
        self._index = 0
        self._exhausted = False
        self.pages_fetched = 0

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> "Paginator[T]":
        return self

    def __next__(self) -> T:
        while self._index >= len(self._items):
            if self._exhausted:
                raise StopIteration
            self._load_next_page()

        item = self._items[self._index]
        self._index += 1
        return item

    def _load_next_page(self) -> None:
        self._items = []
        self._index = 0
        try:
            if self._pages is None:
                self._pages = self._pages_factory()
            page = next(self._pages)
        except StopIteration:
            self._exhausted = True
            return
        except Exception as e:
            logger.warning("Unable to get next page of %s: %s", self._description, e)
            self._exhausted = True
            return

        self.pages_fetched += 1
        self._items = list(page.items)

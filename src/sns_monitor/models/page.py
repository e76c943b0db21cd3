"""Page of results returned by a list or receive call."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of items plus the token for the next page, if any."""

    items: list[T] = field(default_factory=list)
    next_token: str | None = None

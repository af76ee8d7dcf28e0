from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Content:
    raw_markup: str


@dataclass(frozen=True)
class Unavailable:
    reason: str


FetchResult = Union[Content, Unavailable]


@dataclass(frozen=True)
class SearchQuery:
    """Fragments that must all appear, optionally inside a CSS-selected scope."""

    fragments: tuple[str, ...]
    selector: str | None = None

    def __post_init__(self) -> None:
        if not self.fragments:
            raise ValueError("SearchQuery needs at least one fragment")
        if any(not f for f in self.fragments):
            raise ValueError("SearchQuery fragments must be non-empty")


@dataclass(frozen=True)
class SearchReport:
    total: int
    unavailable: int
    matched: tuple[str, ...] = ()

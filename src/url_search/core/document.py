from __future__ import annotations

from typing import Any, Protocol, Sequence

from bs4 import BeautifulSoup, Tag


class Document(Protocol):
    """Parsed markup that the matcher can query without knowing the parser."""

    def select_all(self, selector: str) -> Sequence[Any]: ...

    def text_content(self, node: Any) -> str: ...

    def body_text(self) -> str: ...


class SoupDocument:
    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def from_markup(cls, markup: str) -> SoupDocument:
        return cls(BeautifulSoup(markup, "lxml"))

    def select_all(self, selector: str) -> list[Tag]:
        # soupsieve returns matches in document order.
        return self._soup.select(selector)

    def text_content(self, node: Tag) -> str:
        return node.get_text()

    def body_text(self) -> str:
        body = self._soup.body
        if body is None:
            return ""
        return body.get_text()


def parse_markup(markup: str) -> Document:
    return SoupDocument.from_markup(markup)

from __future__ import annotations

from typing import Callable

from url_search.core.document import Document, parse_markup
from url_search.core.models import Content, FetchResult, SearchQuery


def extract_target_text(document: Document, selector: str | None) -> str:
    if not selector:
        return document.body_text()
    # Element texts are joined with a single space and nothing else, so a
    # fragment only spans two elements if that space makes it contiguous.
    return " ".join(document.text_content(node) for node in document.select_all(selector))


def contains_all(text: str, fragments: tuple[str, ...]) -> bool:
    return all(fragment in text for fragment in fragments)


def matches(
    result: FetchResult,
    query: SearchQuery,
    *,
    parse: Callable[[str], Document] = parse_markup,
) -> bool:
    """Return True when every query fragment is in the page's target text.

    Matching is literal and case-sensitive. An ``Unavailable`` result never
    matches and is not parsed.
    """

    if not isinstance(result, Content):
        return False
    document = parse(result.raw_markup)
    return contains_all(extract_target_text(document, query.selector), query.fragments)

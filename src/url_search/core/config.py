from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import soupsieve

from url_search.core.models import SearchQuery

DEFAULT_OUTPUT_FILE = "search_results.txt"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class FetchSettings:
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = 10.0


@dataclass(frozen=True)
class SearchConfig:
    url_file: Path
    query: SearchQuery
    output_file: Path = Path(DEFAULT_OUTPUT_FILE)


def _validate_selector(selector: str) -> None:
    try:
        soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise ConfigError(f"Invalid CSS selector {selector!r}: {e}") from e


def build_config(
    *,
    url_file: str | Path | None,
    fragments: list[str],
    output_file: str | Path | None = None,
    css_selector: str | None = None,
) -> SearchConfig:
    """Validate raw user input and freeze it into a SearchConfig.

    Everything that can be checked before touching the network is checked
    here, so a bad run fails before the first URL is fetched.
    """

    if not fragments:
        raise ConfigError("At least one search text is required.")
    if any(not f for f in fragments):
        raise ConfigError("Search texts must not be empty.")

    if not url_file or not str(url_file).strip():
        raise ConfigError("A URL list file is required.")
    path = Path(str(url_file).strip())
    if not path.is_file():
        raise ConfigError(f"URL list file not found: {path}")

    selector = (css_selector or "").strip() or None
    if selector is not None:
        _validate_selector(selector)

    out = Path(output_file) if output_file else Path(DEFAULT_OUTPUT_FILE)
    return SearchConfig(
        url_file=path,
        query=SearchQuery(fragments=tuple(fragments), selector=selector),
        output_file=out,
    )

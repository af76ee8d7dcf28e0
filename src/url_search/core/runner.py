from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import aiohttp

from url_search.core.config import FetchSettings, SearchConfig
from url_search.core.fetcher import PageFetcher
from url_search.core.matching import matches
from url_search.core.models import FetchResult, SearchQuery, SearchReport, Unavailable
from url_search.core.url_list import read_url_list, write_results

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def fetch(self, url: str) -> FetchResult: ...


class SearchRunner:
    def __init__(self, *, fetcher: Fetcher, query: SearchQuery) -> None:
        self._fetcher = fetcher
        self._query = query

    async def run(self, urls: list[str]) -> SearchReport:
        """Fetch and match each URL in order, one at a time.

        A URL that cannot be fetched counts as a non-match; the loop always
        continues with the next URL.
        """

        matched: list[str] = []
        unavailable = 0
        total = len(urls)
        for i, url in enumerate(urls, start=1):
            logger.info("[%d/%d] Processing %s", i, total, url)
            result = await self._fetcher.fetch(url)
            if isinstance(result, Unavailable):
                unavailable += 1
            if matches(result, self._query):
                logger.info("All conditions matched: %s", url)
                matched.append(url)
            else:
                logger.debug("No match: %s", url)
        return SearchReport(total=total, unavailable=unavailable, matched=tuple(matched))


def _log_plan(urls: list[str], query: SearchQuery) -> None:
    logger.info("Loaded %d URLs", len(urls))
    logger.info("Search conditions: %d", len(query.fragments))
    for i, fragment in enumerate(query.fragments, start=1):
        logger.info("Condition %d: %r", i, fragment)
    if query.selector:
        logger.info("CSS selector: %r", query.selector)
    logger.info("Looking for URLs that satisfy every condition (AND)")


async def run_search(config: SearchConfig, settings: FetchSettings | None = None) -> tuple[SearchReport, Path | None]:
    """Run a full search: read the URL list, check every URL, write the matches.

    Returns the report and the path written, or ``None`` when nothing matched.
    I/O errors on the URL list or the output file propagate to the caller.
    """

    urls = read_url_list(config.url_file)
    _log_plan(urls, config.query)

    async with aiohttp.ClientSession() as session:
        fetcher = PageFetcher(session=session, settings=settings or FetchSettings())
        report = await SearchRunner(fetcher=fetcher, query=config.query).run(urls)

    logger.info("Search finished")
    logger.info("%d of %d URLs satisfied all conditions", len(report.matched), report.total)
    if report.unavailable:
        logger.info("%d URLs could not be fetched", report.unavailable)

    written = write_results(report.matched, config.output_file)
    if written is not None:
        logger.info("Results saved to %s", written.resolve())
    return report, written

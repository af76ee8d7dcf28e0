from __future__ import annotations

import logging

import aiohttp

from url_search.core.config import FetchSettings
from url_search.core.models import Content, FetchResult, Unavailable

logger = logging.getLogger(__name__)


class PageFetcher:
    def __init__(self, *, session: aiohttp.ClientSession, settings: FetchSettings) -> None:
        self._session = session
        self._settings = settings

    async def fetch(self, url: str) -> FetchResult:
        """GET ``url`` once and return its body, or ``Unavailable`` on any failure.

        Failures are logged here and never raised; the caller only sees the
        absence of content.
        """

        headers = {"User-Agent": self._settings.user_agent}
        timeout = aiohttp.ClientTimeout(total=self._settings.timeout_seconds)
        try:
            async with self._session.get(url, headers=headers, timeout=timeout, allow_redirects=True) as resp:
                resp.raise_for_status()
                text = await resp.text(errors="ignore")
        except Exception as e:
            reason = str(e) or type(e).__name__
            logger.warning("Could not fetch HTML from %s: %s", url, reason)
            return Unavailable(reason=reason)
        return Content(raw_markup=text)

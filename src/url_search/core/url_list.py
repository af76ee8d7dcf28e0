from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


def read_url_list(path: Path) -> list[str]:
    data = path.read_text(encoding="utf-8")
    return [line.strip() for line in data.split("\n") if line.strip()]


def write_results(urls: Sequence[str], path: Path) -> Path | None:
    """Write matched URLs one per line; an empty result writes nothing."""

    if not urls:
        return None
    path.write_text("\n".join(urls), encoding="utf-8")
    logger.debug("Wrote %d URLs to %s", len(urls), path)
    return path

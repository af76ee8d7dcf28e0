from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def url_file(tmp_path: Path) -> Path:
    path = tmp_path / "urls.txt"
    path.write_text("https://a.example\n\n  https://b.example  \n", encoding="utf-8")
    return path

"""Shared test fixtures for nextroutes."""

from __future__ import annotations

from pathlib import Path

import pytest


def write_page(root: Path, relative: str, content: str = "export default function Page() {}\n") -> Path:
    """Write a page file under *root* and return its path."""
    p = root / relative
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content)
    return p


@pytest.fixture
def tmp_app(tmp_path: Path) -> Path:
    """Create a minimal Next.js project with a pages/ directory.

    Returns the path to the project root.
    """
    for relative in (
        "pages/index.tsx",
        "pages/about.tsx",
        "pages/_app.tsx",
        "pages/posts/[id].tsx",
    ):
        write_page(tmp_path, relative)
    return tmp_path

"""Shared test fixtures for sitemapper."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from xml.etree.ElementTree import Element, fromstring

import pytest

from sitemapper.app import Sitemap
from sitemapper.config import SitemapConfig
from sitemapper.observability import EventLog, GenerationCollector

NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

FIXED_NOW = datetime(2024, 5, 17, 12, 30, 45, tzinfo=UTC)


@pytest.fixture
def fixed_clock():
    """A clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def collector() -> GenerationCollector:
    return GenerationCollector(EventLog())


@pytest.fixture
def make_sitemap(tmp_path: Path, fixed_clock, collector):
    """Factory for a Sitemap writing to ``tmp_path / "out"``."""

    def _make(limit: int = 25_000, base_url: str = "https://example.com") -> Sitemap:
        config = SitemapConfig(
            root=tmp_path,
            base_url=base_url,
            output=Path("out"),
            limit=limit,
        )
        return Sitemap(config, clock=fixed_clock, collector=collector)

    return _make


def parse_xml(path: Path) -> Element:
    """Parse an XML file written by sitemapper."""
    return fromstring(path.read_bytes())


def locs(root: Element) -> list[str]:
    """Return every <loc> text under a <urlset> or <sitemapindex>."""
    return [el.text or "" for el in root.iter(f"{{{NS}}}loc")]

"""Sitemapper application — configure, collect entries, generate output.

``Sitemap`` is the programmatic entry point; ``generate()`` is the
file-driven pipeline behind ``sitemapper generate``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from sitemapper.config import SitemapConfig
from sitemapper.config_loader import load_config
from sitemapper.entries import Entry, EntryCollector
from sitemapper.export.writer import GenerationResult, SitemapWriter

if TYPE_CHECKING:
    from sitemapper._types import Clock
    from sitemapper.observability.collector import GenerationCollector


class Sitemap:
    """Collects URL entries and writes them as sitemap files.

    Example::

        sitemap = Sitemap(SitemapConfig(
            base_url="https://www.example.com",
            output=Path("public"),
            limit=10_000,
        ))
        sitemap.add("/index.html")
        sitemap.add("/news.html", "2016-09-10", "daily", 0.7)
        sitemap.generate()

    Entries are kept after :meth:`generate`, so calling it again rewrites
    the same output.  Instances are not safe for concurrent use.

    Args:
        config: Frozen configuration.  Defaults to ``SitemapConfig()``.
        clock: Source of the index timestamp (see :class:`SitemapWriter`).
        collector: Optional event collector shared by ingestion and output.

    """

    __slots__ = ("_config", "_entries", "_writer")

    def __init__(
        self,
        config: SitemapConfig | None = None,
        *,
        clock: Clock | None = None,
        collector: GenerationCollector | None = None,
    ) -> None:
        self._config = config if config is not None else SitemapConfig()
        self._entries = EntryCollector(self._config.base_url, collector=collector)
        self._writer = SitemapWriter(self._config, clock=clock, collector=collector)

    @property
    def config(self) -> SitemapConfig:
        return self._config

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Entries collected so far, in insertion order."""
        return self._entries.snapshot()

    def add(
        self,
        location: str,
        lastmod: object = None,
        changefreq: object = None,
        priority: object = None,
    ) -> bool:
        """Add a URL relative to the base URL.  See :meth:`EntryCollector.add`."""
        return self._entries.add(location, lastmod, changefreq, priority)

    def clear(self) -> int:
        """Drop all collected entries."""
        return self._entries.clear()

    def generate(self) -> GenerationResult:
        """Clean the output directory and write sitemap files and index.

        Raises:
            WriteError: On any filesystem failure.

        """
        return self._writer.generate(self._entries.snapshot())

    def __len__(self) -> int:
        return len(self._entries)


def generate(
    root: str | Path = ".",
    source: str | Path | None = None,
    **kwargs: object,
) -> GenerationResult:
    """Generate sitemaps for the entries listed in ``source``.

    Args:
        root: Project root; holds the optional ``sitemapper.yaml``/``.toml``.
        source: CSV or ``.txt`` entry file.  Relative paths resolve against
            the current directory.  None generates from zero entries, which
            only cleans stale output.
        **kwargs: Override SitemapConfig fields.

    Raises:
        ConfigError: If the configuration is invalid.
        SourceError: If the entry file cannot be read.
        WriteError: On any filesystem failure.

    """
    from sitemapper.observability.collector import GenerationCollector
    from sitemapper.sources import read_entries

    config = load_config(Path(root), **kwargs)
    collector = GenerationCollector()
    sitemap = Sitemap(config, collector=collector)

    raw_entries = read_entries(Path(source)) if source is not None else []
    for raw in raw_entries:
        sitemap.add(raw.location, raw.lastmod, raw.changefreq, raw.priority)

    result = sitemap.generate()
    _print_summary(result, rejections=collector.log.rejections())
    return result


def _print_summary(
    result: GenerationResult,
    *,
    rejections: dict[str, int] | None = None,
) -> None:
    """Print generation summary to stderr."""
    rejections = dict(rejections or {})
    lines = [
        "",
        "─" * 41,
        f"  Collected {result.total_entries} URL{'s' if result.total_entries != 1 else ''}",
    ]
    skipped = rejections.pop("location", 0)
    if skipped:
        lines.append(f"  Skipped {skipped} row{'s' if skipped != 1 else ''} without a location")
    if rejections:
        dropped = ", ".join(f"{name}={count}" for name, count in sorted(rejections.items()))
        lines.append(f"  Dropped invalid fields: {dropped}")
    if result.removed:
        lines.append(f"  Removed {len(result.removed)} stale file(s)")
    for f in result.files:
        unit = "URL" if f.kind == "sitemap" else "sitemap"
        lines.append(
            f"  Wrote {f.filename} ({f.entries} {unit}{'s' if f.entries != 1 else ''})"
        )
    lines.append(f"  Output: {result.output_dir}")
    lines.append(f"  Done in {result.duration_ms:.0f}ms")

    print("\n".join(lines), file=sys.stderr)

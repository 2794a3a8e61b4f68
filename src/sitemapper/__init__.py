"""Sitemapper — sitemap and sitemap index writer.

Collects URL entries with optional crawl hints and writes them as
sitemaps.org protocol files, splitting across numbered files when the
per-file limit is exceeded and referencing them from a sitemap index.

Quick start::

    from pathlib import Path

    from sitemapper import Sitemap, SitemapConfig

    sitemap = Sitemap(SitemapConfig(base_url="https://example.com", output=Path("public")))
    sitemap.add("/index.html")
    sitemap.add("/news.html", "2016-09-10", "daily", 0.7)
    sitemap.generate()

File-driven::

    sitemapper generate --input urls.csv --base-url https://example.com --output public

"""

__version__ = "0.1.0.dev0"
__all__ = [
    "Entry",
    "EntryCollector",
    "Sitemap",
    "SitemapConfig",
    "SitemapWriter",
    "__version__",
    "generate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import sitemapper`` fast while providing a clean top-level API.
    """
    if name == "SitemapConfig":
        from sitemapper.config import SitemapConfig

        return SitemapConfig

    if name in ("Entry", "EntryCollector"):
        from sitemapper import entries

        return getattr(entries, name)

    if name == "SitemapWriter":
        from sitemapper.export.writer import SitemapWriter

        return SitemapWriter

    if name in ("Sitemap", "generate"):
        from sitemapper import app

        return getattr(app, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

"""Sitemapper error hierarchy.

All sitemapper-specific errors inherit from SitemapError for easy catching.
Entry validation never raises; only configuration, input and I/O do.
"""


class SitemapError(Exception):
    """Base error for all sitemapper operations."""


class ConfigError(SitemapError):
    """Invalid or missing configuration."""


class SourceError(SitemapError):
    """Unreadable or malformed entry source file."""


class WriteError(SitemapError):
    """Filesystem failure while cleaning or writing sitemap output."""

"""Export layer — sitemap and sitemap index output.

Serializes collected entries into ``<urlset>`` files, splitting across
numbered files when the per-file limit is exceeded, and writes the
``<sitemapindex>`` that references them.
"""

from sitemapper.export.writer import GenerationResult, SitemapWriter, WrittenFile

__all__ = ["GenerationResult", "SitemapWriter", "WrittenFile"]

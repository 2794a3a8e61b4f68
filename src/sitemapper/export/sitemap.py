"""Sitemap serialization — render ``<urlset>`` and ``<sitemapindex>`` documents.

Pure data-to-markup functions: no filesystem access and no clock reads.
Absent optional fields are omitted, never emitted empty.  Output is compact
(no pretty-printing) with an explicit UTF-8 XML declaration.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement, tostring

if TYPE_CHECKING:
    from sitemapper.entries import Entry

# XML namespace for sitemaps
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def render_urlset(entries: Iterable[Entry]) -> str:
    """Render a sitemap document listing ``entries`` in order.

    Args:
        entries: Validated entries for a single sitemap file.

    Returns:
        Complete XML string suitable for writing to ``sitemapN.xml``.

    """
    urlset = Element("urlset")
    urlset.set("xmlns", SITEMAP_NS)

    for entry in entries:
        url_el = SubElement(urlset, "url")
        SubElement(url_el, "loc").text = entry.loc
        if entry.lastmod is not None:
            SubElement(url_el, "lastmod").text = entry.lastmod
        if entry.changefreq is not None:
            SubElement(url_el, "changefreq").text = entry.changefreq
        if entry.priority is not None:
            SubElement(url_el, "priority").text = entry.priority

    return _serialize(urlset)


def render_sitemapindex(urls: Iterable[str], lastmod: str) -> str:
    """Render a sitemap index referencing each of ``urls``.

    Args:
        urls: Public URLs of the sitemap files, in generation order.
        lastmod: Generation timestamp shared by every ``<sitemap>`` node.

    Returns:
        Complete XML string suitable for writing to ``sitemap.xml``.

    """
    index = Element("sitemapindex")
    index.set("xmlns", SITEMAP_NS)

    for url in urls:
        node = SubElement(index, "sitemap")
        SubElement(node, "loc").text = url
        SubElement(node, "lastmod").text = lastmod

    return _serialize(index)


def _serialize(root: Element) -> str:
    body = tostring(root, encoding="unicode", xml_declaration=False)
    return _XML_DECLARATION + body + "\n"

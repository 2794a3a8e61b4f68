"""Generation observability — structured events for sitemap runs.

Records what ``add()`` dropped and what ``generate()`` removed and wrote.

All events are frozen dataclasses with nanosecond timestamps.

Quick Start:
    >>> from sitemapper.observability import EventLog, GenerationCollector
    >>> log = EventLog()
    >>> collector = GenerationCollector(log)
    >>> # Pass collector to Sitemap(config, collector=collector)

"""

from sitemapper.observability.collector import GenerationCollector
from sitemapper.observability.events import (
    EntryRejected,
    IndexWritten,
    SitemapEvent,
    SitemapWritten,
    StaleFileRemoved,
    now_ns,
)
from sitemapper.observability.log import EventLog

__all__ = [
    "EntryRejected",
    "EventLog",
    "GenerationCollector",
    "IndexWritten",
    "SitemapEvent",
    "SitemapWritten",
    "StaleFileRemoved",
    "now_ns",
]

"""Event model for generation observability.

Defines event types for entry ingestion and file output.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

"""

import time
from dataclasses import dataclass

from sitemapper._types import RejectedField


# ---------------------------------------------------------------------------
# Ingestion events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class EntryRejected:
    """An entry or one of its optional fields was dropped during ``add()``.

    Attributes:
        path: Relative location passed to ``add()``.
        field: Which input was dropped.  ``"location"`` means the whole
            entry was discarded.
        value: ``repr()`` of the raw input value.
        reason: Short human-readable explanation.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    field: RejectedField
    value: str
    reason: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Output events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class StaleFileRemoved:
    """A sitemap file left over from a previous run was deleted.

    Attributes:
        path: Absolute path of the removed file.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class SitemapWritten:
    """A ``<urlset>`` file was written.

    Attributes:
        path: Absolute output path.
        url: Public URL of the file.
        entries: Number of ``<url>`` nodes in the file.
        size_bytes: Bytes written.
        duration_ms: Time to render and write the file.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    url: str
    entries: int
    size_bytes: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class IndexWritten:
    """The ``<sitemapindex>`` file was written.

    Attributes:
        path: Absolute output path.
        sitemaps: Number of sitemap references listed.
        size_bytes: Bytes written.
        duration_ms: Time to render and write the file.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    sitemaps: int
    size_bytes: int
    duration_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type SitemapEvent = (
    EntryRejected
    | StaleFileRemoved
    | SitemapWritten
    | IndexWritten
)


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()

"""Generation collector — records ingestion and output events.

Both :class:`~sitemapper.entries.EntryCollector` and
:class:`~sitemapper.export.writer.SitemapWriter` accept an optional
collector and report through the ``record_*`` helpers below.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitemapper.observability.events import (
    EntryRejected,
    IndexWritten,
    SitemapWritten,
    StaleFileRemoved,
    now_ns,
)
from sitemapper.observability.log import EventLog

if TYPE_CHECKING:
    from sitemapper._types import RejectedField


class GenerationCollector:
    """Event collector for one or more generation runs.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Ingestion -----

    def record_rejected(
        self,
        path: str,
        field: RejectedField,
        value: object,
        reason: str,
    ) -> None:
        """Record a dropped field or a discarded entry."""
        self._log.append(
            EntryRejected(
                path=path,
                field=field,
                value=repr(value),
                reason=reason,
                timestamp_ns=now_ns(),
            )
        )

    # ----- Output -----

    def record_removed(self, path: str) -> None:
        """Record a stale sitemap file deletion."""
        self._log.append(StaleFileRemoved(path=path, timestamp_ns=now_ns()))

    def record_sitemap(
        self,
        path: str,
        url: str,
        *,
        entries: int,
        size_bytes: int,
        duration_ms: float,
    ) -> None:
        """Record a written sitemap file."""
        self._log.append(
            SitemapWritten(
                path=path,
                url=url,
                entries=entries,
                size_bytes=size_bytes,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_index(
        self,
        path: str,
        *,
        sitemaps: int,
        size_bytes: int,
        duration_ms: float,
    ) -> None:
        """Record a written sitemap index file."""
        self._log.append(
            IndexWritten(
                path=path,
                sitemaps=sitemaps,
                size_bytes=size_bytes,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

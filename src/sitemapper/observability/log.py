"""Event log — bounded store of generation events.

Keeps the most recent ``SitemapEvent`` objects of one or more runs and
answers the questions the CLI summary and tests ask: what was dropped
from which field, and which files were removed or written.

Not locked: a log belongs to a single ``Sitemap`` and generation is
single-threaded.

"""

from collections import Counter, deque

from sitemapper.observability.events import EntryRejected, SitemapEvent


class EventLog:
    """Ring buffer of generation events.

    When the buffer is full the oldest events are discarded.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events",)

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[SitemapEvent] = deque(maxlen=max_events)

    def append(self, event: SitemapEvent) -> None:
        """Record an event in the log."""
        self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        since_ns: int = 0,
        path: str | None = None,
        limit: int = 100,
    ) -> list[SitemapEvent]:
        """Return matching events, most recent first.

        Args:
            event_type: Only return events of this type.
            since_ns: Only return events at or after this timestamp.
            path: Only return events whose path contains this substring.
            limit: Maximum number of events to return.

        """
        results: list[SitemapEvent] = []
        for event in reversed(self._events):
            if len(results) >= limit:
                break
            if event_type is not None and not isinstance(event, event_type):
                continue
            if event.timestamp_ns < since_ns:
                continue
            if path is not None and path not in event.path:
                continue
            results.append(event)
        return results

    def rejections(self) -> dict[str, int]:
        """Count dropped inputs per field (``"location"`` = discarded entry)."""
        counts = Counter(
            event.field for event in self._events if isinstance(event, EntryRejected)
        )
        return dict(counts)

    def clear(self) -> int:
        """Clear all events and return the count that was cleared."""
        count = len(self._events)
        self._events.clear()
        return count

    def __len__(self) -> int:
        return len(self._events)

"""Entry collection — validate and normalize sitemap URL records.

Every optional field is validated independently: an invalid value is
dropped from the entry, never defaulted, and never raises.  Only an empty
location discards the whole entry.

Accepted inputs:
    ``lastmod``     ISO 8601, RFC 2822, or a few common date layouts;
                    ``date`` / ``datetime`` objects are taken as-is.
    ``changefreq``  One of :data:`CHANGE_FREQUENCIES` (case-sensitive).
    ``priority``    Number or numeric string with ``0 <= p <= 1``.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, date, datetime
from decimal import ROUND_HALF_UP, Decimal
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitemapper._types import ChangeFreq, RejectedField
    from sitemapper.observability.collector import GenerationCollector

CHANGE_FREQUENCIES: frozenset[str] = frozenset({
    "always", "hourly", "daily", "weekly", "monthly", "yearly", "never",
})

# Fallback layouts tried after ISO 8601 and RFC 2822
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%d.%m.%Y",
    "%Y-%m-%d %H:%M",
    "%d %B %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)

_TENTH = Decimal("0.1")


@dataclass(frozen=True, slots=True)
class Entry:
    """A single validated ``<url>`` record.

    Attributes:
        loc: Absolute URL (base URL + relative location).
        lastmod: Normalized ``YYYY-MM-DDTHH:MM:SS+HH:MM`` timestamp, or None.
        changefreq: Change-frequency token, or None.
        priority: Priority formatted with one decimal (``"0.5"``), or None.

    """

    loc: str
    lastmod: str | None = None
    changefreq: ChangeFreq | None = None
    priority: str | None = None


def compose_location(base_url: str, location: str) -> str:
    """Join ``location`` onto ``base_url`` with its trailing slashes stripped."""
    return base_url.rstrip("/") + location


def normalize_lastmod(value: object) -> str | None:
    """Return ``value`` as an ISO 8601 timestamp with offset, or None.

    Naive values are taken as UTC.  Moments at or before the Unix epoch
    are rejected.
    """
    if value is None or value == "":
        return None

    parsed: datetime | None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = _parse_datetime(value)
    else:
        return None

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    if parsed.timestamp() <= 0:
        return None
    return parsed.isoformat(timespec="seconds")


def _parse_datetime(raw: str) -> datetime | None:
    text = raw.strip()
    if not text:
        return None

    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError, OverflowError):
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def normalize_changefreq(value: object) -> ChangeFreq | None:
    """Return ``value`` if it is a recognized change-frequency token."""
    if isinstance(value, str) and value in CHANGE_FREQUENCIES:
        return value  # type: ignore[return-value]
    return None


def normalize_priority(value: object) -> str | None:
    """Return ``value`` formatted to one decimal if within [0.0, 1.0].

    The range check is made on the value scaled to tenths.  Rounding is
    half away from zero, so ``0.25`` becomes ``"0.3"``.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None
    if not isinstance(value, int | float | Decimal | str):
        return None
    # ArithmeticError covers InvalidOperation and Overflow from huge exponents
    try:
        number = Decimal(str(value).strip())
        if not number.is_finite():
            return None
        scaled = number * 10
        if scaled < 0 or scaled > 10:
            return None
        # abs() folds "-0" into "0"; negatives were rejected above
        return str(abs(number).quantize(_TENTH, rounding=ROUND_HALF_UP))
    except ArithmeticError:
        return None


class EntryCollector:
    """Ordered store of validated entries.

    Insertion order is preserved and duplicates are kept.  Generation reads
    a :meth:`snapshot`, so entries survive a run and the collector can be
    generated again.

    Args:
        base_url: Prefix composed onto every added location.
        collector: Optional event collector notified of dropped input.

    """

    __slots__ = ("_base_url", "_collector", "_entries")

    def __init__(
        self,
        base_url: str,
        *,
        collector: GenerationCollector | None = None,
    ) -> None:
        self._base_url = base_url
        self._collector = collector
        self._entries: list[Entry] = []

    def add(
        self,
        location: str,
        lastmod: object = None,
        changefreq: object = None,
        priority: object = None,
    ) -> bool:
        """Validate and append one entry.

        Args:
            location: Location relative to the base URL (e.g. ``"/about.html"``).
            lastmod: Date/time string, ``date`` or ``datetime``.
            changefreq: Change-frequency token.
            priority: Number between 0.0 and 1.0.

        Returns:
            True if the entry was stored, False if the location was empty.

        """
        if not isinstance(location, str) or location == "":
            self._reject(str(location or ""), "location", location, "empty location")
            return False

        entry = Entry(
            loc=compose_location(self._base_url, location),
            lastmod=normalize_lastmod(lastmod),
            changefreq=normalize_changefreq(changefreq),
            priority=normalize_priority(priority),
        )

        if entry.lastmod is None and _provided(lastmod):
            self._reject(location, "lastmod", lastmod, "unparsable date")
        if entry.changefreq is None and _provided(changefreq):
            self._reject(location, "changefreq", changefreq, "unknown token")
        if entry.priority is None and _provided(priority):
            self._reject(location, "priority", priority, "outside 0.0-1.0")

        self._entries.append(entry)
        return True

    def snapshot(self) -> tuple[Entry, ...]:
        """Return an immutable copy of the current entries."""
        return tuple(self._entries)

    def clear(self) -> int:
        """Remove all entries and return how many were removed."""
        count = len(self._entries)
        self._entries.clear()
        return count

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.snapshot())

    def _reject(
        self, path: str, field: RejectedField, value: object, reason: str,
    ) -> None:
        if self._collector is not None:
            self._collector.record_rejected(path, field, value, reason)


def _provided(value: object) -> bool:
    return value is not None and value != ""

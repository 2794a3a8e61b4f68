"""Sitemap writer — partition entries into files and write the index.

Generation is a strict sequence of blocking filesystem steps:

    1. Delete every ``sitemap*.xml`` file in the output directory
    2. Slice the entry snapshot into batches of ``limit`` (insertion order)
    3. Write one ``<urlset>`` file per batch
    4. Write ``sitemap.xml`` as a ``<sitemapindex>`` when batches were numbered

Naming follows a lookahead rule: a batch gets a numbered filename (and an
index reference) when entries remain after it or earlier batches were
already referenced.  In practice a single batch is written bare as
``sitemap.xml`` with no index, and multiple batches are written as
``sitemap1.xml`` … ``sitemapN.xml`` plus the index at ``sitemap.xml``.  The
bare sitemap and the index therefore never coexist.

The run is not atomic: a failure part-way leaves the files written so far
and no index.  Any ``OSError`` aborts the run as :class:`WriteError`.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from sitemapper._errors import WriteError
from sitemapper.export.sitemap import render_sitemapindex, render_urlset

if TYPE_CHECKING:
    from sitemapper._types import Clock, FileKind
    from sitemapper.config import SitemapConfig
    from sitemapper.entries import Entry
    from sitemapper.observability.collector import GenerationCollector

INDEX_FILENAME = "sitemap.xml"
STALE_PATTERN = "sitemap*.xml"


@dataclass(frozen=True, slots=True)
class BatchPlan:
    """Placement of one slice of the entry snapshot.

    Attributes:
        number: 1-based batch position.
        start: Index of the first entry in the snapshot.
        stop: Index one past the last entry.
        filename: Output filename (``sitemap.xml`` or ``sitemapN.xml``).
        referenced: Whether the file is listed in the sitemap index.

    """

    number: int
    start: int
    stop: int
    filename: str
    referenced: bool


@dataclass(frozen=True, slots=True)
class WrittenFile:
    """Record of a single file written during generation.

    Attributes:
        filename: Bare filename inside the output directory.
        output_path: Absolute filesystem path to the written file.
        url: Public URL (base URL + ``/`` + filename).
        kind: ``"sitemap"`` for a ``<urlset>``, ``"index"`` for the index.
        entries: ``<url>`` nodes for sitemaps, references for the index.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to render and write this file.

    """

    filename: str
    output_path: Path
    url: str
    kind: FileKind
    entries: int
    size_bytes: int
    duration_ms: float


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Aggregate result of one ``generate()`` run.

    Attributes:
        files: All files written, sitemaps first, index last.
        removed: Stale files deleted before writing.
        total_entries: Number of entries in the snapshot.
        duration_ms: Total wall-clock time for the run.
        output_dir: Absolute path to the output directory.

    """

    files: tuple[WrittenFile, ...]
    removed: tuple[Path, ...]
    total_entries: int
    duration_ms: float
    output_dir: Path

    @property
    def sitemap_files(self) -> tuple[WrittenFile, ...]:
        """Written ``<urlset>`` files in batch order."""
        return tuple(f for f in self.files if f.kind == "sitemap")

    @property
    def index_file(self) -> WrittenFile | None:
        """The written index, or None when a single sitemap sufficed."""
        for f in self.files:
            if f.kind == "index":
                return f
        return None


def sitemap_filename(number: int | None) -> str:
    """Return ``sitemap{number}.xml``, or ``sitemap.xml`` for None."""
    return f"sitemap{'' if number is None else number}.xml"


def plan_batches(total: int, limit: int) -> list[BatchPlan]:
    """Split ``total`` entries into consecutive batches of at most ``limit``.

    Returns an empty list when ``total`` is zero.
    """
    plans: list[BatchPlan] = []
    referenced = 0
    for number, start in enumerate(range(0, total, limit), start=1):
        stop = min(start + limit, total)
        numbered = (total - stop) > 0 or referenced > 0
        plans.append(BatchPlan(
            number=number,
            start=start,
            stop=stop,
            filename=sitemap_filename(number if numbered else None),
            referenced=numbered,
        ))
        if numbered:
            referenced += 1
    return plans


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SitemapWriter:
    """Writes sitemap files and the sitemap index for a set of entries.

    Args:
        config: Frozen sitemapper configuration.
        clock: Source of the index generation timestamp.  Read once per run.
        collector: Optional event collector notified of removals and writes.

    """

    def __init__(
        self,
        config: SitemapConfig,
        *,
        clock: Clock | None = None,
        collector: GenerationCollector | None = None,
    ) -> None:
        self._config = config
        self._clock = clock if clock is not None else _utc_now
        self._collector = collector

    def generate(self, entries: Sequence[Entry]) -> GenerationResult:
        """Clean the output directory and write sitemaps for ``entries``.

        Returns:
            GenerationResult describing every removed and written file.

        Raises:
            WriteError: If cleanup or any write fails.  Writing stops at
                the first failure.

        """
        start = time.perf_counter()
        output_dir = self._config.output_path
        snapshot = tuple(entries)

        removed = self._remove_stale(output_dir)

        files: list[WrittenFile] = []
        references: list[str] = []
        for plan in plan_batches(len(snapshot), self._config.limit):
            written = self._write_sitemap(
                output_dir, plan, snapshot[plan.start:plan.stop],
            )
            files.append(written)
            if plan.referenced:
                references.append(written.url)

        if references:
            files.append(self._write_index(output_dir, references))

        elapsed = (time.perf_counter() - start) * 1000
        return GenerationResult(
            files=tuple(files),
            removed=removed,
            total_entries=len(snapshot),
            duration_ms=elapsed,
            output_dir=output_dir,
        )

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _remove_stale(self, output_dir: Path) -> tuple[Path, ...]:
        """Delete ``sitemap*.xml`` files left by a previous run."""
        removed: list[Path] = []
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            for path in sorted(output_dir.glob(STALE_PATTERN)):
                if not path.is_file():
                    continue
                path.unlink()
                removed.append(path)
                if self._collector is not None:
                    self._collector.record_removed(str(path))
        except OSError as exc:
            msg = f"Failed to clean sitemap files in {output_dir}: {exc}"
            raise WriteError(msg) from exc
        return tuple(removed)

    def _write_sitemap(
        self,
        output_dir: Path,
        plan: BatchPlan,
        batch: Sequence[Entry],
    ) -> WrittenFile:
        t0 = time.perf_counter()
        path = output_dir / plan.filename
        size = self._write_xml(path, render_urlset(batch))
        elapsed = (time.perf_counter() - t0) * 1000

        url = self._public_url(plan.filename)
        if self._collector is not None:
            self._collector.record_sitemap(
                str(path), url,
                entries=len(batch), size_bytes=size, duration_ms=elapsed,
            )
        return WrittenFile(
            filename=plan.filename,
            output_path=path,
            url=url,
            kind="sitemap",
            entries=len(batch),
            size_bytes=size,
            duration_ms=elapsed,
        )

    def _write_index(self, output_dir: Path, references: list[str]) -> WrittenFile:
        t0 = time.perf_counter()
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        lastmod = now.isoformat(timespec="seconds")

        path = output_dir / INDEX_FILENAME
        size = self._write_xml(path, render_sitemapindex(references, lastmod))
        elapsed = (time.perf_counter() - t0) * 1000

        if self._collector is not None:
            self._collector.record_index(
                str(path),
                sitemaps=len(references), size_bytes=size, duration_ms=elapsed,
            )
        return WrittenFile(
            filename=INDEX_FILENAME,
            output_path=path,
            url=self._public_url(INDEX_FILENAME),
            kind="index",
            entries=len(references),
            size_bytes=size,
            duration_ms=elapsed,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _public_url(self, filename: str) -> str:
        return f"{self._config.base}/{filename}"

    @staticmethod
    def _write_xml(path: Path, xml: str) -> int:
        """Write an XML document and return the size in bytes written."""
        data = xml.encode("utf-8")
        try:
            path.write_bytes(data)
        except OSError as exc:
            msg = f"Failed to write {path}: {exc}"
            raise WriteError(msg) from exc
        return len(data)

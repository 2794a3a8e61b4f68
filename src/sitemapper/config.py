"""Sitemapper configuration.

SitemapConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from sitemapper._errors import ConfigError

# Protocol-recommended default for URLs per sitemap file
DEFAULT_LIMIT = 25_000


@dataclass(frozen=True, slots=True)
class SitemapConfig:
    """Configuration for a sitemap generation run.

    Attributes:
        root: Project root directory.  Always resolved to an absolute path
              on construction.
        base_url: Prefix for every ``<loc>`` and index reference.  Trailing
            slashes are stripped before concatenation.
        output: Directory that is cleaned and written to.  Relative paths
            resolve against ``root``.
        limit: Maximum number of URL entries per sitemap file.

    """

    root: Path = field(default_factory=Path.cwd)
    base_url: str = "https://example.com/"
    output: Path = field(default_factory=lambda: Path("."))
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            msg = f"limit must be an integer, got {self.limit!r}"
            raise ConfigError(msg)
        if self.limit < 1:
            msg = f"limit must be at least 1, got {self.limit}"
            raise ConfigError(msg)

    @property
    def base(self) -> str:
        """Base URL without trailing slashes."""
        return self.base_url.rstrip("/")

    @property
    def output_path(self) -> Path:
        """Absolute path to output directory."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output

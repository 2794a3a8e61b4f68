"""Shared type definitions for sitemapper."""

from collections.abc import Callable
from datetime import datetime
from typing import Literal

# Recognized <changefreq> tokens
type ChangeFreq = Literal[
    "always", "hourly", "daily", "weekly", "monthly", "yearly", "never",
]

# Kind of file produced by a generation run
type FileKind = Literal["sitemap", "index"]

# Source of "now" for index timestamps
type Clock = Callable[[], datetime]

# add() input that can be dropped; "location" means the whole entry
type RejectedField = Literal["location", "lastmod", "changefreq", "priority"]

"""Load SitemapConfig from sitemapper.yaml / sitemapper.toml if present.

Merges file config with keyword overrides. Overrides take precedence.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from sitemapper._errors import ConfigError
from sitemapper.config import SitemapConfig

_KNOWN_KEYS = ("base_url", "output", "limit")


def load_config(root: Path, **overrides: object) -> SitemapConfig:
    """Load SitemapConfig from root, optionally merging a config file.

    Looks for sitemapper.yaml, sitemapper.yml, or sitemapper.toml in root.
    If found, loads and merges with overrides.  Overrides whose value is
    ``None`` are ignored so that unset CLI flags do not mask file values.

    Raises:
        ConfigError: If the config file cannot be parsed or a value is invalid.

    """
    file_config = _read_config_file(root)
    merged = {
        **file_config,
        **{k: v for k, v in overrides.items() if v is not None},
    }
    # Normalize output to Path
    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    if "limit" in merged and isinstance(merged["limit"], str):
        try:
            merged["limit"] = int(merged["limit"])
        except ValueError as exc:
            msg = f"limit must be an integer, got {merged['limit']!r}"
            raise ConfigError(msg) from exc
    return SitemapConfig(root=root, **merged)


def _read_config_file(root: Path) -> dict[str, object]:
    """Read config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("sitemapper.yaml", "sitemapper.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "sitemapper.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Cannot read config file {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping"
        raise ConfigError(msg)
    return _flatten_sitemap_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Cannot read config file {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_sitemap_section(data)


def _flatten_sitemap_section(data: dict[str, object]) -> dict[str, object]:
    """Extract sitemap.* keys and known top-level keys into flat config."""
    result: dict[str, object] = {}
    for k, v in data.items():
        if k in _KNOWN_KEYS:
            result[k] = v
    section = data.get("sitemap")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _KNOWN_KEYS:
                result[k] = v
    return result

"""Tests for sitemapper.app — Sitemap facade and the file-driven pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitemapper._errors import SourceError
from sitemapper.app import Sitemap, generate
from sitemapper.config import SitemapConfig
from tests.conftest import NS, locs, parse_xml


class TestSitemapScenarios:
    """End-to-end behaviour through the Sitemap facade."""

    def test_two_files_and_index(self, make_sitemap, tmp_path: Path) -> None:
        sitemap = make_sitemap(limit=2)
        sitemap.add("/a")
        sitemap.add("/b", "2020-01-01", "daily", 0.5)
        sitemap.add("/c", priority=1.5)

        result = sitemap.generate()
        out = tmp_path / "out"

        first = parse_xml(out / "sitemap1.xml")
        assert locs(first) == ["https://example.com/a", "https://example.com/b"]
        url_a, url_b = first.findall(f"{{{NS}}}url")
        assert len(url_a) == 1
        assert url_b.findtext(f"{{{NS}}}lastmod") == "2020-01-01T00:00:00+00:00"
        assert url_b.findtext(f"{{{NS}}}changefreq") == "daily"
        assert url_b.findtext(f"{{{NS}}}priority") == "0.5"

        second = parse_xml(out / "sitemap2.xml")
        assert locs(second) == ["https://example.com/c"]
        assert second.find(f"{{{NS}}}url/{{{NS}}}priority") is None

        index = parse_xml(out / "sitemap.xml")
        assert locs(index) == [
            "https://example.com/sitemap1.xml",
            "https://example.com/sitemap2.xml",
        ]
        stamps = {el.text for el in index.iter(f"{{{NS}}}lastmod")}
        assert stamps == {"2024-05-17T12:30:45+00:00"}
        assert len(result.sitemap_files) == 2

    def test_single_entry_no_index(self, make_sitemap, tmp_path: Path) -> None:
        sitemap = make_sitemap()
        sitemap.add("/only")

        result = sitemap.generate()

        out = tmp_path / "out"
        assert sorted(p.name for p in out.iterdir()) == ["sitemap.xml"]
        root = parse_xml(out / "sitemap.xml")
        assert root.tag == f"{{{NS}}}urlset"
        assert locs(root) == ["https://example.com/only"]
        assert result.index_file is None

    def test_empty_locations_never_written(self, make_sitemap, tmp_path: Path) -> None:
        sitemap = make_sitemap()
        assert sitemap.add("") is False
        sitemap.generate()
        assert list((tmp_path / "out").iterdir()) == []

    def test_unparsable_lastmod_omitted(self, make_sitemap, tmp_path: Path) -> None:
        sitemap = make_sitemap()
        sitemap.add("/x", "31st of Smarch")
        sitemap.generate()
        root = parse_xml(tmp_path / "out" / "sitemap.xml")
        assert root.find(f"{{{NS}}}url/{{{NS}}}lastmod") is None

    @pytest.mark.parametrize(
        "base_url", ["https://example.com", "https://example.com/", "https://example.com//"],
    )
    def test_base_url_slash_variants(self, make_sitemap, tmp_path: Path, base_url: str) -> None:
        sitemap = make_sitemap(limit=1, base_url=base_url)
        sitemap.add("/p")
        sitemap.add("/q")
        sitemap.generate()
        out = tmp_path / "out"
        assert locs(parse_xml(out / "sitemap1.xml")) == ["https://example.com/p"]
        assert locs(parse_xml(out / "sitemap.xml"))[0] == "https://example.com/sitemap1.xml"

    def test_entries_survive_generate(self, make_sitemap) -> None:
        sitemap = make_sitemap()
        sitemap.add("/a")
        sitemap.generate()
        assert len(sitemap) == 1
        assert sitemap.entries[0].loc == "https://example.com/a"

    def test_clear(self, make_sitemap, tmp_path: Path) -> None:
        sitemap = make_sitemap()
        sitemap.add("/a")
        sitemap.generate()
        assert sitemap.clear() == 1
        sitemap.generate()
        assert list((tmp_path / "out").iterdir()) == []

    def test_default_config(self) -> None:
        sitemap = Sitemap()
        assert sitemap.config == SitemapConfig(root=sitemap.config.root)
        sitemap.add("/index.html")
        assert sitemap.entries[0].loc == "https://example.com/index.html"


class TestGeneratePipeline:
    """generate() — config file + entry source + summary output."""

    def test_csv_source(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "urls.csv"
        source.write_text(
            "location,lastmod,changefreq,priority\n"
            "/a,2020-01-01,daily,0.5\n"
            "/b,,,\n"
            ",2020-01-01,,\n"
            "/c\n"
        )

        result = generate(
            tmp_path, source, base_url="https://example.com", output="public", limit=2,
        )

        out = tmp_path / "public"
        assert sorted(p.name for p in out.iterdir()) == [
            "sitemap.xml", "sitemap1.xml", "sitemap2.xml",
        ]
        assert result.total_entries == 3
        err = capsys.readouterr().err
        assert "Collected 3 URLs" in err
        assert "Skipped 1 row without a location" in err
        assert "Wrote sitemap.xml (2 sitemaps)" in err

    def test_summary_counts_dropped_fields(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        source = tmp_path / "urls.csv"
        source.write_text(
            "/a,garbage,daily,1e999999\n"
            "/b,1 Jan 99999999999999999999 00:00:00 +0000,sometimes,0.5\n"
        )

        result = generate(tmp_path, source, base_url="https://example.com")

        assert result.total_entries == 2
        root = parse_xml(tmp_path / "sitemap.xml")
        assert root.find(f"{{{NS}}}url/{{{NS}}}lastmod") is None
        err = capsys.readouterr().err
        assert "Dropped invalid fields: changefreq=1, lastmod=2, priority=1" in err
        assert "Skipped" not in err

    def test_config_file_used(self, tmp_path: Path) -> None:
        (tmp_path / "sitemapper.yaml").write_text(
            "sitemap:\n  base_url: https://cfg.example\n  output: site\n"
        )
        source = tmp_path / "urls.txt"
        source.write_text("# pages\n/home\n\n/about\n")

        generate(tmp_path, source)

        root = parse_xml(tmp_path / "site" / "sitemap.xml")
        assert locs(root) == ["https://cfg.example/home", "https://cfg.example/about"]

    def test_no_source_only_cleans(self, tmp_path: Path) -> None:
        (tmp_path / "sitemap1.xml").write_text("old")
        result = generate(tmp_path, None)
        assert result.files == ()
        assert not (tmp_path / "sitemap1.xml").exists()

    def test_missing_source_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SourceError):
            generate(tmp_path, tmp_path / "missing.csv")

"""Tests for the catalog scanner."""

from unittest.mock import patch

import pytest

from cody.catalog.scanner import (
    category_of,
    collect_all_entries,
    iter_catalog_files,
    scan_entries,
    search_entries,
)


class TestIterCatalogFiles:
    """Tests for iter_catalog_files."""

    def test_missing_root_is_empty(self, tmp_path):
        assert list(iter_catalog_files(tmp_path / "missing")) == []

    def test_only_code_files(self, settings, catalog):
        catalog("work", "a\n")
        (settings.catalog_dir / "notes.txt").write_text("b\n")
        (settings.catalog_dir / "dir.code").mkdir()

        files = list(iter_catalog_files(settings.catalog_dir))
        assert files == [settings.catalog_dir / "work.code"]

    def test_recursive(self, settings, catalog):
        catalog("top", "a\n")
        catalog("nested/deep", "b\n")

        files = set(iter_catalog_files(settings.catalog_dir))
        assert files == {
            settings.catalog_dir / "top.code",
            settings.catalog_dir / "nested" / "deep.code",
        }


class TestScanEntries:
    """Tests for scan_entries and collect_all_entries."""

    def test_empty_root(self, settings):
        assert collect_all_entries(settings.catalog_dir) == []

    def test_trims_and_skips_blank_lines(self, settings, catalog):
        catalog(
            "test",
            "line one\nline two with pattern\nline three\n"
            "   line four with spaces   \nline five with pattern again\n\n"
            "line seven (line six was empty)",
        )
        assert collect_all_entries(settings.catalog_dir) == [
            "line one",
            "line two with pattern",
            "line three",
            "line four with spaces",
            "line five with pattern again",
            "line seven (line six was empty)",
        ]

    def test_order_within_file_preserved(self, settings, catalog):
        catalog("a", "3\n1\n2\n")
        catalog("b", "z\ny\n")

        urls = collect_all_entries(settings.catalog_dir)
        assert set(urls) == {"1", "2", "3", "y", "z"}
        assert [u for u in urls if u.isdigit()] == ["3", "1", "2"]
        assert [u for u in urls if u.isalpha()] == ["z", "y"]

    def test_entries_carry_category(self, settings, catalog):
        catalog("work/infra", "git@github.com:org/tf.git\n")
        [entry] = scan_entries(settings.catalog_dir)
        assert entry.category == "work/infra"
        assert entry.url == "git@github.com:org/tf.git"
        assert entry.source == settings.catalog_dir / "work" / "infra.code"

    def test_read_error_aborts_scan(self, settings, catalog):
        catalog("a", "x\n")
        catalog("b", "y\n")

        with patch("cody.catalog.scanner.read_entries", side_effect=OSError("unreadable")):
            with pytest.raises(OSError, match="unreadable"):
                scan_entries(settings.catalog_dir)


class TestSearchEntries:
    """Tests for search_entries."""

    def test_pattern(self, settings, catalog):
        catalog("test", "line one\nline two with pattern\n")
        assert [e.url for e in search_entries(settings.catalog_dir, "pattern")] == ["line two with pattern"]

    def test_case_sensitive(self, settings, catalog):
        catalog("test", "Repo\nrepo\n")
        assert [e.url for e in search_entries(settings.catalog_dir, "repo")] == ["repo"]

    def test_no_pattern_returns_all(self, settings, catalog):
        catalog("test", "a\nb\n")
        assert len(search_entries(settings.catalog_dir)) == 2
        assert len(search_entries(settings.catalog_dir, "")) == 2


class TestCategoryOf:
    """Tests for category_of."""

    def test_strips_root_and_extension(self, tmp_path):
        assert category_of(tmp_path, tmp_path / "work" / "infra.code") == "work/infra"

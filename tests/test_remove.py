"""Tests for the removal engine (rm)."""

import os
from unittest.mock import Mock

from cody.catalog.remove import confirm_prompt, remove_entries

REPO1 = "git@github.com:user/repo1.git"
REPO2 = "git@gitlab.com:user/repo2.git"
REPO3 = "git@github.com:org/tool.git"


def _always(answer):
    return Mock(return_value=answer)


class TestRemoveEntries:
    """Tests for remove_entries."""

    def test_confirmed_single_match(self, settings, catalog):
        """Only the matching line goes; other files stay byte-for-byte."""
        target = catalog("github", f"{REPO1}\n{REPO3}\n")
        other_content = f"{REPO2}\n\n  spaced  \n"
        other = catalog("gitlab", other_content)
        other_mtime = os.stat(other).st_mtime_ns

        confirm = _always(True)
        report = remove_entries(settings, "repo1", confirm=confirm)

        assert target.read_text() == f"{REPO3}\n"
        assert other.read_text() == other_content
        assert os.stat(other).st_mtime_ns == other_mtime
        assert [e.url for e in report.removed] == [REPO1]
        assert report.rewritten == [target]
        confirm.assert_called_once_with(confirm_prompt(REPO1, "github"))

    def test_declined_keeps_line(self, settings, catalog):
        path = catalog("github", f"{REPO1}\n{REPO3}\n")

        report = remove_entries(settings, "repo1", confirm=_always(False))

        assert report.found is True
        assert report.removed == []
        assert [e.url for e in report.kept] == [REPO1]
        assert path.read_text() == f"{REPO1}\n{REPO3}\n"
        assert report.rewritten == [path]

    def test_rewrite_drops_blank_lines(self, settings, catalog):
        """A matched file is rewritten with trimmed, non-empty lines."""
        path = catalog("github", f"\n  {REPO3}  \n\n{REPO1}")

        remove_entries(settings, "repo1", confirm=_always(True))

        assert path.read_text() == f"{REPO3}\n"

    def test_force_skips_confirmation(self, settings, catalog):
        path = catalog("github", f"{REPO1}\n{REPO3}\n")
        confirm = Mock()

        report = remove_entries(settings, "github.com", confirm=confirm, force=True)

        confirm.assert_not_called()
        assert len(report.removed) == 2
        assert path.read_text() == ""

    def test_each_occurrence_judged_independently(self, settings, catalog):
        a = catalog("a", f"{REPO1}\n")
        b = catalog("b", f"{REPO1}\n{REPO2}\n")
        confirm = Mock(side_effect=[True, False])

        report = remove_entries(settings, "repo1", confirm=confirm)

        assert confirm.call_count == 2
        assert a.read_text() == ""
        assert b.read_text() == f"{REPO1}\n{REPO2}\n"
        assert [(e.category, e.url) for e in report.removed] == [("a", REPO1)]
        assert [(e.category, e.url) for e in report.kept] == [("b", REPO1)]

    def test_partial_confirmation_preserves_order(self, settings, catalog):
        path = catalog("mix", "keep-1\nmatch-a\nkeep-2\nmatch-b\nkeep-3\n")
        confirm = Mock(side_effect=[False, True])

        remove_entries(settings, "match", confirm=confirm)

        assert path.read_text() == "keep-1\nmatch-a\nkeep-2\nkeep-3\n"

    def test_not_found(self, settings, catalog):
        path = catalog("github", f"{REPO1}\n")
        mtime = os.stat(path).st_mtime_ns

        report = remove_entries(settings, "nope", confirm=_always(True))

        assert report.found is False
        assert report.rewritten == []
        assert os.stat(path).st_mtime_ns == mtime

    def test_on_removed_callback(self, settings, catalog):
        catalog("github", f"{REPO1}\n")
        seen = []

        remove_entries(settings, "repo1", confirm=_always(True), on_removed=seen.append)

        assert [e.url for e in seen] == [REPO1]
        assert seen[0].category == "github"

    def test_empty_catalog(self, settings):
        report = remove_entries(settings, "x", confirm=_always(True))
        assert report.found is False

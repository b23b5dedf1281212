"""Tests for MultiGlobMatcher."""

from pathlib import Path

import pytest

from mdtrack.sources import MultiGlobMatcher, parse_glob_patterns


class TestMultiGlobMatcher:
    """Tests for include/exclude matching."""

    def test_requires_include_pattern(self):
        """Only exclusions is an error."""
        with pytest.raises(ValueError):
            MultiGlobMatcher(["!templates/**"])

    def test_splits_includes_and_excludes(self):
        matcher = MultiGlobMatcher(["**/*.md", "!templates/**", "!*.tmp.md"])

        assert matcher.includes == ["**/*.md"]
        assert matcher.excludes == ["templates/**", "*.tmp.md"]

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("2024-01-01.md", True),
            ("journal/2024-01-01.md", True),
            ("journal\\2024-01-01.md", True),
            ("templates/daily.md", False),
            ("notes.txt", False),
        ],
    )
    def test_matches(self, path, expected):
        matcher = MultiGlobMatcher(["**/*.md", "!templates/**"])
        assert matcher.matches(path) is expected

    def test_is_excluded(self):
        matcher = MultiGlobMatcher(["**/*.md", "!**/drafts/*"])

        assert matcher.is_excluded("drafts/2024-01-01.md")
        assert matcher.is_excluded("journal/drafts/2024-01-01.md")
        assert not matcher.is_excluded("journal/2024-01-01.md")

    def test_list_matching_files(self, journal_dir: Path):
        matcher = MultiGlobMatcher(["**/*.md", "!templates/**"])
        paths = [p.relative_to(journal_dir).as_posix() for p in matcher.list_matching_files(journal_dir)]

        assert "templates/2024-01-09.md" not in paths
        assert "notes/2024-01-03.md" in paths
        assert "2024-01-01.md" in paths

    def test_list_matching_files_deduplicates(self, journal_dir: Path):
        matcher = MultiGlobMatcher(["*.md", "**/*.md"])
        paths = list(matcher.list_matching_files(journal_dir))

        assert len(paths) == len(set(paths))
        assert journal_dir / "README.md" in paths


class TestParseGlobPatterns:
    """Tests for parse_glob_patterns."""

    def test_default(self):
        assert parse_glob_patterns(None) == ["**/*.md"]
        assert parse_glob_patterns([]) == ["**/*.md"]

    def test_string(self):
        assert parse_glob_patterns("*.md") == ["*.md"]

    def test_list_copied(self):
        patterns = ["*.md", "!x.md"]
        result = parse_glob_patterns(patterns)

        assert result == patterns
        assert result is not patterns

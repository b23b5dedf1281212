"""Include/exclude glob matching for corpus enumeration."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator

from loguru import logger

DEFAULT_PATTERNS = ["**/*.md"]


class MultiGlobMatcher:
    """Match files against include patterns, minus ``!``-prefixed excludes.

    Example:
        matcher = MultiGlobMatcher(["**/*.md", "!templates/**"])
        matcher.matches("journal/2024-01-01.md")  # True
        matcher.matches("templates/daily.md")     # False
    """

    def __init__(self, patterns: list[str]) -> None:
        """Initialize with pattern list.

        Raises:
            ValueError: If no include patterns are provided.
        """
        self.includes = [p for p in patterns if not p.startswith("!")]
        self.excludes = [p[1:] for p in patterns if p.startswith("!")]

        if not self.includes:
            raise ValueError(
                "At least one include pattern required (patterns without ! prefix)"
            )

    def is_excluded(self, path: str) -> bool:
        """Check a relative path (forward slashes) against the exclude patterns."""
        normalized = path.replace("\\", "/")
        return any(_match(normalized, pattern) for pattern in self.excludes)

    def matches(self, path: str) -> bool:
        """Check if a relative path matches any include and no exclude."""
        normalized = path.replace("\\", "/")
        if not any(_match(normalized, pattern) for pattern in self.includes):
            return False
        return not self.is_excluded(normalized)

    def list_matching_files(self, base_path: Path) -> Iterator[Path]:
        """Yield files under base_path matching the pattern set, sorted and deduplicated."""
        seen: set[Path] = set()
        for pattern in self.includes:
            for file_path in sorted(base_path.glob(pattern)):
                if file_path in seen or not file_path.is_file():
                    continue
                rel_path = file_path.relative_to(base_path).as_posix()
                if self.is_excluded(rel_path):
                    logger.debug(f"Excluded by pattern: {rel_path}")
                    continue
                seen.add(file_path)
                yield file_path


def _match(path: str, pattern: str) -> bool:
    """Glob match where a leading ``**/`` also matches at the root."""
    if fnmatchcase(path, pattern):
        return True
    if pattern.startswith("**/"):
        return _match(path, pattern[3:])
    return False


def parse_glob_patterns(patterns: list[str] | str | None) -> list[str]:
    """Normalize glob pattern input to a list, defaulting to ``**/*.md``."""
    if not patterns:
        return list(DEFAULT_PATTERNS)
    if isinstance(patterns, str):
        return [patterns]
    return list(patterns)

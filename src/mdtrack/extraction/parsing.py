"""Parsing utilities for markdown documents.

Provides functions to parse YAML frontmatter, read the frontmatter tag list,
and find outbound wiki links in markdown content.
"""

import re
from dataclasses import dataclass
from typing import Any

import yaml
from loguru import logger


@dataclass
class FrontmatterResult:
    """Result from parsing YAML frontmatter.

    Attributes:
        data: Parsed YAML data as dictionary (empty if no frontmatter).
        content: Document content after frontmatter is removed.
        has_frontmatter: Whether frontmatter was found.
    """

    data: dict[str, Any]
    content: str
    has_frontmatter: bool


# Regex to match YAML frontmatter block at start of document
# Matches: ---\n<yaml content>\n---\n
_FRONTMATTER_PATTERN = re.compile(
    r"^---\s*\n(.*?)\n---\s*\n?",
    re.DOTALL,
)

# Matches [[target]], [[target|alias]], [[target#heading]]; embeds (![[...]]) excluded
_WIKILINK_PATTERN = re.compile(r"(?<!!)\[\[([^\]|]+)(?:\|[^\]]*)?\]\]")


def parse_frontmatter(content: str) -> FrontmatterResult:
    """Parse YAML frontmatter from markdown content.

    Extracts the YAML block between --- delimiters at the start
    of the document, if present.

    Args:
        content: Full markdown document content.

    Returns:
        FrontmatterResult with parsed data and remaining content.

    Example:
        >>> result = parse_frontmatter('''---
        ... weight: 72.5
        ... tags: [exercise, mood]
        ... ---
        ... # Monday
        ... ''')
        >>> result.data
        {'weight': 72.5, 'tags': ['exercise', 'mood']}
    """
    match = _FRONTMATTER_PATTERN.match(content)
    if not match:
        return FrontmatterResult(data={}, content=content, has_frontmatter=False)

    yaml_text = match.group(1)
    remaining_content = content[match.end() :]

    try:
        data = yaml.safe_load(yaml_text)
        if data is None:
            data = {}
        elif not isinstance(data, dict):
            # YAML could parse to a scalar or list
            data = {"_raw": data}
    except yaml.YAMLError as e:
        logger.debug(f"Invalid YAML frontmatter ignored: {e}")
        return FrontmatterResult(data={}, content=content, has_frontmatter=False)

    return FrontmatterResult(data=data, content=remaining_content, has_frontmatter=True)


def extract_tags_from_field(value: Any) -> list[str]:
    """Extract tags from a frontmatter field value.

    Handles various YAML formats for tags:
    - String: "tag1, tag2" or "#tag1 #tag2"
    - List: ["tag1", "tag2"]
    - Single value: "tag1"

    Leading ``#`` is stripped; nested paths (``parent/child``) are preserved.

    Args:
        value: Field value from YAML frontmatter.

    Returns:
        List of extracted tag strings.
    """
    if value is None:
        return []

    if isinstance(value, list):
        tags = []
        for item in value:
            if item is not None:
                tags.append(str(item).strip().lstrip("#"))
        return [t for t in tags if t]

    if isinstance(value, str):
        if "," in value:
            return [t.strip().lstrip("#") for t in value.split(",") if t.strip()]
        # Only split on whitespace if it looks like a list of #-prefixed items
        if re.search(r"#[\w/-]+\s+#[\w/-]+", value):
            return [t.lstrip("#") for t in value.split() if t.strip("#")]
        tag = value.strip().lstrip("#")
        return [tag] if tag else []

    return [str(value).strip()] if value else []


def extract_wiki_links(content: str) -> list[str]:
    """Extract outbound wiki link targets, one entry per occurrence.

    Aliases are dropped; the link target is kept as written.

    Example:
        >>> extract_wiki_links("Met [[Alice]] and [[Bob|Robert]] at [[Alice]]")
        ['Alice', 'Bob', 'Alice']
    """
    return [m.group(1).strip() for m in _WIKILINK_PATTERN.finditer(content)]

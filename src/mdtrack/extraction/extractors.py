"""Per-document extractors, one per search type.

Each extractor turns one document and one query into a nullable number:
None means no evidence was found, a float is the document's contribution.
A document that matched but measured zero contributes 0.0, not None.
"""

from __future__ import annotations

import re
from functools import lru_cache
from itertools import islice
from typing import Callable

from loguru import logger

from mdtrack.core.exceptions import UnparseableValueError
from mdtrack.core.types import Document, SearchType
from mdtrack.extraction.values import parse_number, select_segment
from mdtrack.query.model import Query

Extractor = Callable[[Document, Query], "float | None"]

# Bounds per-document work for caller-supplied patterns
TEXT_MATCH_LIMIT = 10_000

# Frontmatter field holding the structured tag list; not a numeric field
RESERVED_TAG_FIELD = "tags"

# JavaScript-style named group "(?<name>", but not lookbehind "(?<=" / "(?<!"
_JS_NAMED_GROUP = re.compile(r"(?<!\\)\(\?<(?=[A-Za-z_])")


def _hashtag_pattern(tag_name: str) -> re.Pattern[str]:
    """Build the content pattern for ``#tag``, ``#tag/sub`` and ``#tag:value``."""
    return re.compile(
        r"(?<!\S)#"
        + re.escape(tag_name)
        + r"(?:/[\w-]+)*"
        + r"(?::(?P<values>[\d./-]*)[a-zA-Z]*)?"
        + r"[.!,?;~-]*"
        + r"(?!\S)",
        re.MULTILINE,
    )


@lru_cache(maxsize=256)
def _compile_hashtag(tag_name: str) -> re.Pattern[str]:
    return _hashtag_pattern(tag_name)


@lru_cache(maxsize=256)
def compile_text_pattern(source: str) -> re.Pattern[str] | None:
    """Compile a text query pattern, or None if it is not a valid regex.

    Named groups written as ``(?<value>...)`` are accepted.
    """
    translated = _JS_NAMED_GROUP.sub("(?P<", source)
    try:
        return re.compile(translated, re.MULTILINE)
    except re.error as e:
        logger.warning(f"Invalid text pattern {source!r}, query ignored: {e}")
        return None


def _attached_value(values: str, query: Query) -> float | None:
    """Value carried by a ``#tag:value`` match, or None if it contributes nothing."""
    segments = values.split("/")
    try:
        if len(segments) == 1:
            value = parse_number(values.strip())
            if query.options.ignore_zero_value and value == 0:
                return None
            return value
        if query.has_sub_index:
            return parse_number(select_segment(values, query.sub_index))
    except UnparseableValueError as e:
        logger.debug(f"Dropping attached value for #{query.target}: {e}")
    return None


def extract_tag(document: Document, query: Query) -> float | None:
    """Measure a tag in the frontmatter tag list and in the content.

    Frontmatter tags match exactly or as a nested child (``target/...``) and
    count ``weight`` each. Content hashtags count ``weight`` each, unless they
    carry an attached value that is not ignored, in which case the value is
    added instead.
    """
    options = query.options
    target = query.target
    measure = 0.0
    matched = False

    for tag in document.tags:
        if tag == target or tag.startswith(target + "/"):
            measure += options.weight
            matched = True

    # Multi-value tags are written under the parent name: "#bp:120/80"
    tag_name = query.parent_target if query.parent_target else target
    for match in _compile_hashtag(tag_name).finditer(document.content):
        values = match.group("values")
        if not options.ignore_attached_value and values is not None:
            value = _attached_value(values, query)
            if value is not None:
                measure += value
                matched = True
        else:
            measure += options.weight
            matched = True

    return measure if matched else None


def extract_frontmatter(document: Document, query: Query) -> float | None:
    """Read a numeric frontmatter field.

    A field present under ``target`` is parsed directly. Otherwise a
    multi-value field under ``parent_target`` ("10/20/30" or a YAML list) is
    indexed by ``sub_index``.
    """
    if query.target == RESERVED_TAG_FIELD:
        return None

    frontmatter = document.frontmatter
    try:
        raw = frontmatter.get(query.target)
        if raw is not None:
            return parse_number(raw)

        if query.parent_target is not None:
            parent = frontmatter.get(query.parent_target)
            if parent is not None:
                return parse_number(select_segment(parent, query.sub_index))
    except UnparseableValueError as e:
        logger.debug(f"{document.path}: dropping field {query.target!r}: {e}")
    return None


def extract_wiki_link(document: Document, query: Query) -> float | None:
    """Count outbound wiki links to ``target``."""
    count = sum(1 for link in document.links if link == query.target)
    if count == 0:
        return None
    return count * query.options.weight


def extract_text(
    document: Document,
    query: Query,
    limit: int = TEXT_MATCH_LIMIT,
) -> float | None:
    """Match a regular expression against the content.

    If the pattern defines named groups and attached values are not ignored,
    the ``value`` group of each match is added. Otherwise each match counts
    ``weight``. At most ``limit`` matches are considered.
    """
    pattern = compile_text_pattern(query.target)
    if pattern is None:
        return None

    options = query.options
    use_values = bool(pattern.groupindex) and not options.ignore_attached_value
    measure = 0.0
    matched = False

    for match in islice(pattern.finditer(document.content), limit):
        if not use_values:
            measure += options.weight
            matched = True
            continue

        raw = match.groupdict().get("value")
        if raw is None:
            continue
        try:
            value = parse_number(raw)
        except UnparseableValueError:
            continue
        if options.ignore_zero_value and value == 0:
            continue
        measure += value
        matched = True

    return measure if matched else None


EXTRACTORS: dict[SearchType, Extractor] = {
    SearchType.TAG: extract_tag,
    SearchType.FRONTMATTER: extract_frontmatter,
    SearchType.WIKI: extract_wiki_link,
    SearchType.TEXT: extract_text,
}


def extract(
    document: Document,
    query: Query,
    *,
    text_match_limit: int = TEXT_MATCH_LIMIT,
) -> float | None:
    """Run the extractor matching the query's search type."""
    if query.type is SearchType.TEXT:
        return extract_text(document, query, limit=text_match_limit)
    return EXTRACTORS[query.type](document, query)

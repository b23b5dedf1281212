"""Evidence extraction from markdown documents.

Parsing utilities:
- parse_frontmatter: Extract YAML frontmatter
- extract_tags_from_field: Parse the frontmatter tag list
- extract_wiki_links: Find outbound [[links]]

Extractors:
- extract_tag, extract_frontmatter, extract_wiki_link, extract_text
- extract: dispatch on the query's search type
"""

from mdtrack.extraction.parsing import (
    FrontmatterResult,
    extract_tags_from_field,
    extract_wiki_links,
    parse_frontmatter,
)
from mdtrack.extraction.values import parse_number, select_segment
from mdtrack.extraction.extractors import (
    EXTRACTORS,
    TEXT_MATCH_LIMIT,
    Extractor,
    compile_text_pattern,
    extract,
    extract_frontmatter,
    extract_tag,
    extract_text,
    extract_wiki_link,
)

__all__ = [
    "FrontmatterResult",
    "parse_frontmatter",
    "extract_tags_from_field",
    "extract_wiki_links",
    "parse_number",
    "select_segment",
    "EXTRACTORS",
    "TEXT_MATCH_LIMIT",
    "Extractor",
    "compile_text_pattern",
    "extract",
    "extract_tag",
    "extract_frontmatter",
    "extract_wiki_link",
    "extract_text",
]

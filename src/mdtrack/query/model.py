"""Query model: one declarative measurement over the corpus."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from mdtrack.core.exceptions import InvalidQueryError
from mdtrack.core.types import SearchType

# Bracketed non-negative integer, e.g. "expenses[1]"
_SUB_INDEX_PATTERN = re.compile(r"\[(?P<value>[0-9]+)\]")

NO_SUB_INDEX = -1


@dataclass(frozen=True)
class QueryOptions:
    """Per-query extraction and transform options.

    Attributes:
        weight: Value contributed per plain match.
        ignore_attached_value: Count "#tag:value" style matches as plain matches.
        ignore_zero_value: Drop attached values equal to zero.
        accumulate: Replace the series with its running sum after reshaping.
        penalty: Value substituted for days without data (None = leave gaps).
        name: Dataset display name.
    """

    weight: float = 1.0
    ignore_attached_value: bool = False
    ignore_zero_value: bool = False
    accumulate: bool = False
    penalty: float | None = None
    name: str = "untitled"


@dataclass(frozen=True)
class Query:
    """Immutable description of one measurement.

    Identity is ``(type, target)``: two queries with different ids but the
    same type and target are duplicates and share contributions when merged.

    Attributes:
        id: Caller-assigned handle, not part of identity.
        type: What kind of evidence is measured.
        target: Tag name, frontmatter field, link name, or regex source.
        options: Extraction and transform options.
        parent_target: Target with bracket indexes removed (only if sub_index >= 0).
        sub_index: Parsed bracket index, or -1.
    """

    id: int = field(compare=False)
    type: SearchType
    target: str
    options: QueryOptions = field(default_factory=QueryOptions, compare=False, repr=False)
    parent_target: str | None = field(init=False, default=None, compare=False)
    sub_index: int = field(init=False, default=NO_SUB_INDEX, compare=False)

    def __post_init__(self) -> None:
        match = _SUB_INDEX_PATTERN.search(self.target)
        if match:
            object.__setattr__(self, "sub_index", int(match.group("value")))
            object.__setattr__(
                self, "parent_target", _SUB_INDEX_PATTERN.sub("", self.target)
            )

    @classmethod
    def create(
        cls,
        id: int,
        type: SearchType | str,
        target: str,
        **options: Any,
    ) -> "Query":
        """Build a query, accepting a search type name and option keywords.

        Example:
            >>> Query.create(0, "frontmatter", "scores[1]", weight=2.0).sub_index
            1
        """
        return cls(
            id=id,
            type=SearchType.parse(type),
            target=target,
            options=QueryOptions(**options),
        )

    @property
    def has_sub_index(self) -> bool:
        return self.sub_index >= 0

    def equal_to(self, other: "Query") -> bool:
        """True when both queries measure the same thing."""
        return self.type is other.type and self.target == other.target


def parse_query_spec(spec: str, id: int, **options: Any) -> Query:
    """Parse a ``TYPE:TARGET`` command-line query.

    Only the first ``:`` separates type from target, so text patterns may
    contain colons.

    Raises:
        InvalidQueryError: If the separator, type, or target is missing.
    """
    type_name, sep, target = spec.partition(":")
    if not sep or not target:
        raise InvalidQueryError(f"Query must look like TYPE:TARGET, got {spec!r}")
    return Query.create(id, type_name, target, **options)

"""Query model."""

from mdtrack.query.model import NO_SUB_INDEX, Query, QueryOptions, parse_query_spec

__all__ = ["NO_SUB_INDEX", "Query", "QueryOptions", "parse_query_spec"]

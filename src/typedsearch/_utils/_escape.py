"""Percent-encoding helpers for path segments and query strings."""

from typing import Any, Mapping
from urllib.parse import quote, urlencode

# Sub-delimiters that are legal inside a single path segment.
_PATH_SEGMENT_SAFE = "$&+:=@"


def escape_path_segment(value: str) -> str:
    """Escape a value so it always lands in exactly one path segment.

    ``/``, ``,``, ``;``, ``?`` and anything outside the unreserved set are
    percent-encoded, so a value can never change the structure of the path.

    Examples:
        >>> escape_path_segment("logs-2024")
        'logs-2024'
        >>> escape_path_segment("../_all")
        '..%2F_all'
        >>> escape_path_segment("a,b")
        'a%2Cb'
    """
    return quote(value, safe=_PATH_SEGMENT_SAFE)


def format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(format_query_value(item) for item in value)
    return str(value)


def encode_query(values: Mapping[str, str]) -> str:
    """Encode a query mapping, keys sorted so equal mappings encode equally."""
    return urlencode(sorted(values.items()))

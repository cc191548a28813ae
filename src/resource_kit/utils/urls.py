from typing import Any, Mapping, Optional
from urllib.parse import quote

from resource_kit.utils.types import is_sequence

# Characters left unescaped by JavaScript's encodeURIComponent
_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: Any) -> str:
    """Percent-encode a single query-string key or value."""
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe=_COMPONENT_SAFE)


def build_query_string(query: Optional[Mapping[str, Any]]) -> str:
    """
    Construct a query string from the key/value pairs of `query`.

    Falsy keys and values are skipped. List values are emitted once per element
    as `key[]=value`. The result has no leading '?' or '&'; prepending the
    right separator is the caller's job.
    """
    if not query:
        return ""

    components = []
    for key, value in query.items():
        if not key or not value:
            continue
        if is_sequence(value):
            for element in value:
                components.append(f"{encode_component(key)}[]={encode_component(element)}")
        else:
            components.append(f"{encode_component(key)}={encode_component(value)}")

    return "&".join(components)


def build_full_url(base_url: str, suffix: Any = None, query: Optional[Mapping[str, Any]] = None) -> str:
    """
    Append `suffix` to `base_url` as a path segment, then append `query` as a query string.

    Args:
        base_url: relative or absolute URL, with or without a trailing slash
        suffix: path segment (e.g. an item id), may be None
        query: mapping turned into a query string with build_query_string, may be None

    Returns:
        The composed URL
    """
    url = base_url
    if suffix is not None and suffix != "":
        if not base_url.endswith("/"):
            url += "/"
        url += str(suffix)

    query_string = build_query_string(query)
    if query_string:
        url += ("&" if "?" in url else "?") + query_string

    return url

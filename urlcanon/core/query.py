from __future__ import annotations

from urlcanon.core.encoding import escape, percent_decode_once
from urlcanon.core.models import ParsedUrl, QueryBinding, QueryValue
from urlcanon.core.options import CanonicalizeOptions


def parse_query(query: str) -> list[QueryBinding]:
    """Parse ``key=value`` pairs, grouping repeated keys in encounter order.

    Each key and value is decoded exactly once. Pairs that are empty on both
    sides of the ``=`` carry no information and are skipped.
    """
    bindings: dict[str, QueryValue] = {}
    for pair in query.split("&"):
        raw_key, _, raw_value = pair.partition("=")
        if not raw_key and not raw_value:
            continue
        key = percent_decode_once(raw_key)
        value = percent_decode_once(raw_value)
        existing = bindings.get(key)
        if existing is None:
            bindings[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            bindings[key] = [existing, value]
    return list(bindings.items())


def sort_bindings(bindings: list[QueryBinding]) -> list[QueryBinding]:
    return sorted(bindings, key=lambda binding: binding[0])


def render_query(bindings: list[QueryBinding]) -> str:
    """Render bindings as an escaped query string without the leading "?".

    Keys bound to several values repeat once per value. An empty value
    renders as the bare key.
    """
    pairs: list[str] = []
    for key, value in bindings:
        values = value if isinstance(value, list) else [value]
        encoded_key = escape(key, extra="&=")
        for item in values:
            if item:
                pairs.append(f"{encoded_key}={escape(item, extra='&')}")
            else:
                pairs.append(encoded_key)
    return "&".join(pairs)


def normalize_query(parsed: ParsedUrl, options: CanonicalizeOptions) -> str:
    """Normalize the query of ``parsed`` and return its rendered suffix.

    Args:
        parsed (ParsedUrl): URL whose ``raw_query`` is parsed into ``query``.
        options (CanonicalizeOptions): Sorting and empty-delimiter policy.

    Returns:
        str: ``"?"`` plus the rendered query, a bare ``"?"`` when the URL had
        a delimiter but no bindings, or ``""``.
    """
    bindings = parse_query(parsed.raw_query)
    if options.sort_query_params:
        bindings = sort_bindings(bindings)
    parsed.query = bindings

    rendered = render_query(bindings)
    if rendered:
        return f"?{rendered}"
    if parsed.had_query_delimiter and not options.remove_empty_query_delimiter:
        return "?"
    return ""

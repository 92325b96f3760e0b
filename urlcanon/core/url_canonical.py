from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from urlcanon.core.cleaning import preclean
from urlcanon.core.encoding import decode_fixed_point, escape, to_byte_text
from urlcanon.core.host import normalize_host
from urlcanon.core.models import ParsedUrl
from urlcanon.core.options import CanonicalizeOptions
from urlcanon.core.path import normalize_path
from urlcanon.core.query import normalize_query
from urlcanon.core.splitter import split_url


logger = logging.getLogger(__name__)

DEFAULT_PORTS: Mapping[str, int] = MappingProxyType({"http": 80, "https": 443})


def canonicalize(raw: str, options: CanonicalizeOptions | None = None) -> str:
    """Canonicalize a URL for stable comparisons, deduping and matching.

    Args:
        raw (str): URL-like string as supplied by a user or a feed.
        options (CanonicalizeOptions | None): Query rendering policy.

    Returns:
        str: Canonical URL, or an empty string when no URL structure can be
        recovered from the input.

    Raises:
        TypeError: If ``raw`` is not a string.

    Notes:
        The whole URL is percent-decoded to a fixed point before it is split,
        so every layer of encoding collapses before structure is inspected.
        Fragments are always dropped and default ports omitted.
    """
    if not isinstance(raw, str):
        raise TypeError(f"canonicalize() expects str, got {type(raw).__name__}")
    if options is None:
        options = CanonicalizeOptions()

    cleaned = preclean(to_byte_text(raw))
    if not cleaned:
        logger.debug("Rejected blank input")
        return ""

    decoded = decode_fixed_point(cleaned)
    parsed = split_url(decoded.text)
    if parsed is None:
        return ""

    parsed.host = normalize_host(parsed.host or "")
    if not parsed.host:
        logger.debug("Rejected URL whose host normalized to nothing")
        return ""
    parsed.path = normalize_path(parsed.path)
    query_suffix = normalize_query(parsed, options)
    return assemble(parsed, query_suffix)


def is_equivalent(left: str, right: str, options: CanonicalizeOptions | None = None) -> bool:
    """True when both inputs canonicalize to the same non-empty URL."""
    canonical = canonicalize(left, options)
    return bool(canonical) and canonical == canonicalize(right, options)


def build_authority(parsed: ParsedUrl) -> str:
    authority = ""
    if parsed.user or parsed.password:
        authority += escape(parsed.user or "")
        if parsed.password:
            authority += ":" + escape(parsed.password)
        authority += "@"

    authority += escape(parsed.host or "")

    if parsed.port is not None and DEFAULT_PORTS.get(parsed.scheme or "") != parsed.port:
        authority += f":{parsed.port}"
    return authority


def assemble(parsed: ParsedUrl, query_suffix: str) -> str:
    """Join normalized components into the canonical URL.

    ``query_suffix`` comes from the query normalizer with its keys and values
    already escaped; every other component is escaped here. Escaping maps
    bytes one at a time, so each byte of the result is escaped exactly once.
    """
    scheme = parsed.scheme or "http"
    return f"{scheme}://{build_authority(parsed)}{escape(parsed.path)}{query_suffix}"

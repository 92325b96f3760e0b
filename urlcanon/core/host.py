from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable


MAX_IPV4 = 0xFFFFFFFF
MAX_OCTET = 0xFF

_DOT_RUN = re.compile(r"\.{2,}")
_HEX = re.compile(r"0x[0-9a-f]+")
_OCTAL = re.compile(r"[0-7]+")
_OCTAL_PART = re.compile(r"0[0-7]*")
# 4294967295 has ten digits; longer runs are never an IPv4 address.
_DECIMAL = re.compile(r"[1-9][0-9]{0,9}")
_NUMERIC = re.compile(r"[0-9]+")


def fold_case(host: str) -> str:
    """Lower-case a host given as byte text.

    UTF-8 sequences are folded as characters; bytes that do not decode are
    left untouched.
    """
    text = host.encode("latin-1").decode("utf-8", "surrogateescape")
    return text.lower().encode("utf-8", "surrogateescape").decode("latin-1")


def normalize_host(host: str) -> str:
    """Case-fold, tidy dots and render IP literals canonically.

    Args:
        host (str): Host byte text as split from the authority.

    Returns:
        str: Canonical host. Hosts that are not IP literals under any
        supported notation are returned as plain hostnames.
    """
    folded = fold_case(host)
    tidied = _DOT_RUN.sub(".", folded.strip("."))
    literal = normalize_ip_literal(tidied)
    if literal is not None:
        return literal
    return tidied


def normalize_ip_literal(host: str) -> str | None:
    """Return the canonical form of an IP literal, or None for hostnames.

    Notes:
        Recognizers are tried in order and each either converts the whole
        host or declines. Hex, octal, decimal and mixed dotted forms are the
        notations HTTP clients and resolvers have historically accepted for
        IPv4, which makes them a filter-bypass vector.

        Packed forms are read after zero stripping, so any all-0-7 digit run
        is octal. Dotted parts keep their leading zero as the octal marker.
    """
    standard = _standard_literal(host)
    if standard is not None:
        return standard

    candidate = strip_leading_zeros(host)
    for recognizer in _PACKED_RECOGNIZERS:
        result = recognizer(candidate)
        if result is not None:
            return result
    return _dotted_quad(host)


def strip_leading_zeros(host: str) -> str:
    """Drop leading zeros from purely numeric dot-components."""
    parts = []
    for part in host.split("."):
        if _NUMERIC.fullmatch(part):
            part = part.lstrip("0") or "0"
        parts.append(part)
    return ".".join(parts)


def _standard_literal(host: str) -> str | None:
    bracketed = host.startswith("[") and host.endswith("]")
    candidate = host[1:-1] if bracketed else host
    try:
        address = ipaddress.ip_address(candidate)
    except ValueError:
        return None
    if address.version == 6:
        return f"[{address.compressed}]"
    return str(address)


def _parse_part(text: str) -> int | None:
    if _HEX.fullmatch(text):
        return int(text[2:], 16)
    if _OCTAL_PART.fullmatch(text):
        return int(text, 8)
    if _NUMERIC.fullmatch(text):
        stripped = text.lstrip("0")
        if _DECIMAL.fullmatch(stripped):
            return int(stripped)
    return None


def _from_packed(value: int) -> str | None:
    if value > MAX_IPV4:
        return None
    return str(ipaddress.IPv4Address(value))


def _packed_hex(host: str) -> str | None:
    if not _HEX.fullmatch(host):
        return None
    return _from_packed(int(host[2:], 16))


def _packed_octal(host: str) -> str | None:
    if not _OCTAL.fullmatch(host):
        return None
    return _from_packed(int(host, 8))


def _packed_decimal(host: str) -> str | None:
    if not _DECIMAL.fullmatch(host):
        return None
    return _from_packed(int(host))


def _dotted_quad(host: str) -> str | None:
    parts = host.split(".")
    if len(parts) != 4:
        return None
    octets = []
    for part in parts:
        value = _parse_part(part)
        if value is None or value > MAX_OCTET:
            return None
        octets.append(str(value))
    return ".".join(octets)


_PACKED_RECOGNIZERS: tuple[Callable[[str], str | None], ...] = (
    _packed_hex,
    _packed_octal,
    _packed_decimal,
)

from __future__ import annotations

import re


DEFAULT_SCHEME = "http"

_TRIM = " \t\n\r\x0b\x0c\x00"
_REMOVED = str.maketrans("", "", "\t\r\n")
_SCHEME_PREFIX = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*://")


def preclean(text: str) -> str:
    """Trim, drop TAB/CR/LF and make sure the URL starts with a scheme.

    Only ASCII whitespace is trimmed: the text is a byte string and 0x85 or
    0xA0 may be continuation bytes of a multi-byte character.
    """
    cleaned = text.strip(_TRIM).translate(_REMOVED)
    if not cleaned:
        return ""
    if not _SCHEME_PREFIX.match(cleaned):
        cleaned = f"{DEFAULT_SCHEME}://{cleaned}"
    return cleaned

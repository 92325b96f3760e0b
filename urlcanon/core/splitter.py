from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

from urlcanon.core.encoding import percent_decode_once
from urlcanon.core.models import ParsedUrl


logger = logging.getLogger(__name__)

MAX_PORT = 65535
# Zero padding aside, 65535 has five digits.
MAX_PORT_DIGITS = 5

# Bytes urlsplit strips, rejects or normalizes. "%" is included so that the
# substitution can be reversed with a single decode pass.
_PROTECTED = re.compile(r"[%\x00-\x20\x7f-\xff]")
_PORT = re.compile(r"[0-9]+")


def _protect(text: str) -> str:
    return _PROTECTED.sub(lambda match: f"%{ord(match.group(0)):02X}", text)


def _restore(text: str) -> str:
    return percent_decode_once(text)


def split_url(text: str) -> ParsedUrl | None:
    """Split a cleaned, decoded URL into its components.

    Args:
        text (str): Byte text that already carries a scheme.

    Returns:
        ParsedUrl | None: Components with the protection reversed, or None
        when no usable host/port structure can be found.

    Notes:
        Split points are chosen on the structural characters present in the
        text; bytes the generic parser would mangle are carried through it as
        percent-triplets and restored per component.
    """
    try:
        parts = urlsplit(_protect(text))
    except ValueError as exc:
        logger.debug("Rejected URL the parser could not split: %s", exc)
        return None

    userinfo, _, hostport = parts.netloc.rpartition("@")
    split_host = _split_hostport(hostport)
    if split_host is None:
        return None
    host, port = split_host

    user: str | None = None
    password: str | None = None
    if userinfo:
        user_text, _, password_text = userinfo.partition(":")
        user = _restore(user_text) or None
        password = _restore(password_text) or None

    head = text.split("#", 1)[0]
    return ParsedUrl(
        scheme=parts.scheme.lower() or None,
        host=_restore(host),
        port=port,
        user=user,
        password=password,
        path=_restore(parts.path),
        raw_query=_restore(parts.query),
        fragment=_restore(parts.fragment) if "#" in text else None,
        had_query_delimiter="?" in head,
    )


def _split_hostport(hostport: str) -> tuple[str, int | None] | None:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            logger.debug("Rejected unterminated IPv6 literal: %r", hostport)
            return None
        host = hostport[: end + 1]
        rest = hostport[end + 1 :]
        if rest and not rest.startswith(":"):
            logger.debug("Rejected trailing text after IPv6 literal: %r", hostport)
            return None
        port_text = rest[1:]
    else:
        host, sep, port_text = hostport.rpartition(":")
        if not sep:
            host, port_text = hostport, ""
        elif ":" in host:
            logger.debug("Rejected unbracketed host containing ':': %r", hostport)
            return None

    if not host:
        logger.debug("Rejected URL without a host")
        return None

    if not port_text:
        return host, None
    if not _PORT.fullmatch(port_text):
        logger.debug("Rejected non-numeric port: %r", port_text)
        return None
    digits = port_text.lstrip("0") or "0"
    if len(digits) > MAX_PORT_DIGITS:
        logger.debug("Rejected out-of-range port: %r", digits[:32])
        return None
    port = int(digits)
    if port > MAX_PORT:
        logger.debug("Rejected out-of-range port: %d", port)
        return None
    return host, port

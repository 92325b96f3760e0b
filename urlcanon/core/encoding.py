from __future__ import annotations

import logging
import re
from functools import lru_cache

from urlcanon.core.models import DecodeResult


logger = logging.getLogger(__name__)

MAX_DECODE_ROUNDS = 16

_TRIPLET = re.compile(r"%([0-9A-Fa-f]{2})")
_UNSAFE_CODES = [*range(0x00, 0x21), *range(0x7F, 0x100), ord("%"), ord("#")]


def to_byte_text(value: str) -> str:
    """Map a Python string onto its UTF-8 bytes, one code point per byte.

    Notes:
        Lone surrogates are passed through rather than rejected so that no
        input string can make the pipeline raise.
    """
    return value.encode("utf-8", "surrogatepass").decode("latin-1")


def percent_decode_once(text: str) -> str:
    """Replace each ``%XX`` triplet with the byte it denotes.

    Triplets are matched left to right without overlap, so ``%2541`` becomes
    ``%41`` and not ``A``. A ``%`` not followed by two hex digits is kept.
    """
    return _TRIPLET.sub(lambda match: chr(int(match.group(1), 16)), text)


def decode_fixed_point(text: str, max_rounds: int = MAX_DECODE_ROUNDS) -> DecodeResult:
    """Percent-decode repeatedly until the text stops changing.

    Args:
        text (str): Byte text to decode.
        max_rounds (int): Upper bound on decoding passes.

    Returns:
        DecodeResult: Decoded text, number of passes that changed it, and
        whether a fixed point was reached within the bound.
    """
    current = text
    for rounds in range(max_rounds):
        decoded = percent_decode_once(current)
        if decoded == current:
            return DecodeResult(text=current, rounds=rounds, converged=True)
        current = decoded

    converged = percent_decode_once(current) == current
    if not converged:
        logger.debug("Percent-decoding stopped after %d rounds without converging", max_rounds)
    return DecodeResult(text=current, rounds=max_rounds, converged=converged)


@lru_cache(maxsize=None)
def _escape_table(extra: str) -> dict[int, str]:
    codes = set(_UNSAFE_CODES)
    codes.update(ord(char) for char in extra)
    return {code: f"%{code:02X}" for code in codes}


def escape(text: str, extra: str = "") -> str:
    """Percent-encode control, space, non-ASCII, ``%`` and ``#`` bytes.

    Args:
        text (str): Byte text to escape.
        extra (str): Additional characters to encode in this context.

    Returns:
        str: 7-bit printable text using upper-case hex digits.
    """
    return text.translate(_escape_table(extra))

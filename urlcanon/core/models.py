from __future__ import annotations

from dataclasses import dataclass, field


QueryValue = str | list[str]
QueryBinding = tuple[str, QueryValue]


@dataclass
class ParsedUrl:
    """URL components carried through the canonicalization stages.

    Text fields hold byte strings: every code point is below 256 and stands
    for one byte of the UTF-8 input.
    """
    scheme: str | None = None
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    path: str = ""
    raw_query: str = ""
    query: list[QueryBinding] = field(default_factory=list)
    fragment: str | None = None
    had_query_delimiter: bool = False


@dataclass
class DecodeResult:
    """Outcome of the iterative whole-URL percent-decode."""
    text: str
    rounds: int
    converged: bool

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from urlcanon.core.options import CanonicalizeOptions
from urlcanon.core.url_canonical import canonicalize


@dataclass
class CanonicalGroup:
    """Raw inputs that share one canonical URL."""
    canonical: str
    inputs: list[str] = field(default_factory=list)
    count: int = 0


@dataclass
class DedupeResult:
    groups: list[CanonicalGroup] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)


def dedupe_urls(urls: Iterable[str], options: CanonicalizeOptions | None = None) -> DedupeResult:
    """Group raw URLs by canonical form.

    Args:
        urls (Iterable[str]): Raw URL strings in input order.
        options (CanonicalizeOptions | None): Canonicalization options.

    Returns:
        DedupeResult: Groups sorted by canonical URL (inputs keep their
        encounter order) and the inputs that could not be canonicalized.
    """
    groups: dict[str, CanonicalGroup] = {}
    rejected: list[str] = []
    for raw in urls:
        canonical = canonicalize(raw, options)
        if not canonical:
            rejected.append(raw)
            continue
        group = groups.setdefault(canonical, CanonicalGroup(canonical=canonical))
        group.inputs.append(raw)
        group.count += 1
    return DedupeResult(groups=_sorted(list(groups.values())), rejected=rejected)


def load_urls(path: str) -> list[str]:
    """Load a URL list, ignoring blanks and comments."""
    urls: list[str] = []
    with open(path, "r", encoding="utf-8") as handle:
        for line in handle:
            value = line.strip()
            if not value or value.startswith("#"):
                continue
            urls.append(value)
    return urls


def write_groups(path: str, groups: list[CanonicalGroup]) -> str:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as handle:
        for group in groups:
            handle.write(json.dumps(group.__dict__, sort_keys=True) + "\n")
    return str(out)


def _sorted(groups: list[CanonicalGroup]) -> list[CanonicalGroup]:
    return sorted(groups, key=lambda item: item.canonical)

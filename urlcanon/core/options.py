from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class CanonicalizeOptions:
    remove_empty_query_delimiter: bool = False
    sort_query_params: bool = False

    @staticmethod
    def from_file(path: str) -> "CanonicalizeOptions":
        """Load options from a YAML or JSON document.

        Raises:
            ValueError: If the extension is unsupported or the document is
                not a mapping of known boolean options.
        """
        ext = Path(path).suffix.lower()
        with open(path, "r", encoding="utf-8") as handle:
            if ext in {".yaml", ".yml"}:
                data = yaml.safe_load(handle)
            elif ext == ".json":
                data = json.load(handle)
            else:
                raise ValueError(f"Unsupported options file extension: {ext}")
        return CanonicalizeOptions.from_mapping(data or {})

    @staticmethod
    def from_mapping(data: Any) -> "CanonicalizeOptions":
        if not isinstance(data, dict):
            raise ValueError("Options document must be a mapping")
        known = {item.name for item in fields(CanonicalizeOptions)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(sorted(map(str, unknown)))}")
        for key, value in data.items():
            if not isinstance(value, bool):
                raise ValueError(f"Option {key} must be true or false, got {value!r}")
        return CanonicalizeOptions(
            remove_empty_query_delimiter=data.get("remove_empty_query_delimiter", False),
            sort_query_params=data.get("sort_query_params", False),
        )

    def with_overrides(self, **overrides: bool | None) -> "CanonicalizeOptions":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def snapshot(self) -> dict:
        return {
            "remove_empty_query_delimiter": self.remove_empty_query_delimiter,
            "sort_query_params": self.sort_query_params,
        }

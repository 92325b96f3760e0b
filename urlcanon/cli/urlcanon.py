"""urlcanon command-line interface entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

import yaml

from urlcanon.core.dedupe import dedupe_urls, load_urls, write_groups
from urlcanon.core.options import CanonicalizeOptions
from urlcanon.core.samples import SAMPLE_URLS
from urlcanon.core.url_canonical import canonicalize
from urlcanon.core.version import get_urlcanon_version


_CONFIG_ERRORS = (OSError, ValueError, json.JSONDecodeError, yaml.YAMLError)


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean from the environment with a safe default.

    Notes:
        CLI flags can still override this; env values only provide a baseline
        for convenience in automation.
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes"}


def _build_options(args: argparse.Namespace) -> CanonicalizeOptions:
    """Resolve options from config file or environment, then flags."""
    if args.config:
        options = CanonicalizeOptions.from_file(args.config)
    else:
        options = CanonicalizeOptions(
            remove_empty_query_delimiter=_env_bool("URLCANON_REMOVE_EMPTY_QUERY_DELIMITER", False),
            sort_query_params=_env_bool("URLCANON_SORT_QUERY_PARAMS", False),
        )
    return options.with_overrides(
        remove_empty_query_delimiter=True if args.remove_empty_query_delimiter else None,
        sort_query_params=True if args.sort_query_params else None,
    )


def _print_result(raw: str, canonical: str, output_format: str) -> None:
    if output_format == "jsonl":
        print(json.dumps({"canonical": canonical, "input": raw}, sort_keys=True))
    else:
        print(canonical)


def canonicalize_command(args: argparse.Namespace) -> int:
    """Print one canonical URL per input."""
    try:
        options = _build_options(args)
        urls = list(args.url or [])
        if args.file:
            urls.extend(load_urls(args.file))
    except _CONFIG_ERRORS as exc:
        print(str(exc), file=sys.stderr)
        return 2
    if not urls:
        print("No URLs given: pass URL arguments or --file", file=sys.stderr)
        return 2

    for raw in urls:
        _print_result(raw, canonicalize(raw, options), args.format)
    return 0


def dedupe_command(args: argparse.Namespace) -> int:
    """Group a URL list by canonical form; files are always JSONL."""
    try:
        options = _build_options(args)
        urls = load_urls(args.file)
    except _CONFIG_ERRORS as exc:
        print(str(exc), file=sys.stderr)
        return 2

    result = dedupe_urls(urls, options)
    if args.out:
        write_groups(args.out, result.groups)
        print(
            "Dedupe complete: "
            f"inputs={len(urls)} groups={len(result.groups)} rejected={len(result.rejected)} out={args.out}"
        )
    else:
        for group in result.groups:
            if args.format == "jsonl":
                print(json.dumps(group.__dict__, sort_keys=True))
            else:
                print(f"{group.count}\t{group.canonical}")
    if result.rejected:
        print(f"Rejected {len(result.rejected)} unparsable URL(s)", file=sys.stderr)
    return 0


def demo_command(args: argparse.Namespace) -> int:
    """Canonicalize the bundled adversarial samples."""
    try:
        options = _build_options(args)
    except _CONFIG_ERRORS as exc:
        print(str(exc), file=sys.stderr)
        return 2
    for raw in SAMPLE_URLS:
        _print_result(raw, canonicalize(raw, options), args.format)
    return 0


def _add_option_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to options YAML/JSON file")
    parser.add_argument(
        "--sort-query-params",
        action="store_true",
        help="Order query parameters by key",
    )
    parser.add_argument(
        "--remove-empty-query-delimiter",
        action="store_true",
        help="Drop a trailing '?' that carries no parameters",
    )


def _add_format_flag(parser: argparse.ArgumentParser, default: str = "text") -> None:
    parser.add_argument(
        "--format",
        choices=["text", "jsonl"],
        default=default,
        help=f"Output format on stdout (default: {default})",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint and command registration."""
    parser = argparse.ArgumentParser(prog="urlcanon")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_urlcanon_version()}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=os.environ.get("URLCANON_LOG_LEVEL", "WARNING").upper(),
        help="Logging verbosity (stderr)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    canon_parser = subparsers.add_parser("canonicalize", help="Canonicalize URLs")
    canon_parser.add_argument("url", nargs="*", help="URL to canonicalize (repeatable)")
    canon_parser.add_argument("--file", default=None, help="Path to URL list (one per line)")
    _add_option_flags(canon_parser)
    _add_format_flag(canon_parser)
    canon_parser.set_defaults(func=canonicalize_command)

    dedupe_parser = subparsers.add_parser("dedupe", help="Group URLs by canonical form")
    dedupe_parser.add_argument("--file", required=True, help="Path to URL list (one per line)")
    dedupe_parser.add_argument("--out", default=None, help="Write JSONL groups to a file")
    _add_option_flags(dedupe_parser)
    _add_format_flag(dedupe_parser, default="jsonl")
    dedupe_parser.set_defaults(func=dedupe_command)

    demo_parser = subparsers.add_parser("demo", help="Canonicalize the bundled sample URLs")
    _add_option_flags(demo_parser)
    _add_format_flag(demo_parser)
    demo_parser.set_defaults(func=demo_command)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

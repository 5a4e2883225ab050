"""Command-line entry point for hostparts.

Parses URIs given as arguments (or one per line on stdin) and prints
their domain parts.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, TextIO

from .core.config import ConfigError, ConfigManager
from .core.constants import APP_NAME, APP_VERSION
from .core.errors import ParseError
from .core.logging_config import setup_logging
from .core.models import DomainParts, SuffixList
from .core.parser import parse
from .core.psl_loader import load_suffix_list

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Split URIs into public suffix, registrable domain and subdomains",
    )
    parser.add_argument("uris", nargs="*", metavar="URI",
                        help="URIs to parse (read from stdin when omitted)")
    parser.add_argument("--private", action="store_true", default=None,
                        help="Include rules from the private domains section")
    parser.add_argument("--suffix-list", type=str, default=None, metavar="PATH",
                        help="Suffix list file to use instead of the bundled one")
    parser.add_argument("--config", type=str, default=None, metavar="PATH",
                        help="JSON configuration file")
    parser.add_argument("--log-file", type=str, default=None, metavar="PATH",
                        help="Write a rotating debug log to this file")
    parser.add_argument("--json", action="store_true",
                        help="Print one JSON object per URI")
    parser.add_argument("--debug", action="store_true",
                        help="Print debug logging to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def _iter_uris(uris: list[str], stdin: TextIO) -> Iterable[str]:
    """Yield URIs from arguments, or non-blank stdin lines when none were given."""
    if uris:
        yield from uris
        return
    for line in stdin:
        line = line.strip()
        if line:
            yield line


def _format_result(uri: str, parts: DomainParts, as_json: bool) -> str:
    if as_json:
        return json.dumps({"uri": uri, **parts.to_dict()}, ensure_ascii=False)
    return "\t".join(
        [uri, parts.top_level_domain, parts.second_level_domain, parts.transit_routing_domain]
    )


def run(uris: Iterable[str], suffix_list: SuffixList, as_json: bool = False,
        out: TextIO | None = None, err: TextIO | None = None) -> int:
    """
    Parse each URI and write results.

    Returns:
        Exit code: 0 if every URI parsed, 1 otherwise
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    failures = 0
    for uri in uris:
        try:
            parts = parse(uri, suffix_list)
        except ParseError as e:
            failures += 1
            print(f"{uri}: {type(e).__name__}: {e}", file=err)
            continue
        print(_format_result(uri, parts, as_json), file=out)

    if failures:
        logger.info("%d URI(s) failed to parse", failures)
    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 for success)
    """
    args = _build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config)
    except ConfigError as e:
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        return 2

    settings = config.settings
    if args.private is not None:
        settings["include_private"] = args.private
    if args.suffix_list:
        settings["suffix_list_path"] = args.suffix_list
    if args.log_file:
        settings["log_file"] = args.log_file

    setup_logging(debug_mode=args.debug, log_file=settings["log_file"])

    try:
        suffix_list = load_suffix_list(
            include_private=settings["include_private"],
            path=settings["suffix_list_path"],
        )
    except OSError as e:
        print(f"{APP_NAME}: cannot read suffix list: {e}", file=sys.stderr)
        return 1

    return run(_iter_uris(args.uris, sys.stdin), suffix_list, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())

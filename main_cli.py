#!/usr/bin/env python3
"""
Main CLI Entry Point
Walk a file of terms and show their glossary definitions one term at a time

Usage:
  python main_cli.py terms.txt            # start at the first line
  python main_cli.py terms.txt 12         # resume at line 12
  python main_cli.py terms.txt --results-class definition -v
"""

import argparse
import logging
import sys

import requests

from core.config import get_config, parse_timeout, setup_logging
from core.errors import ArgumentError, ProgramError
from core.term_resolver import TermResolver
from core.term_walk import TermWalkController, load_terms
from utils.console import ConsoleDisplay, setup_console

logger = logging.getLogger(__name__)


def parse_start_index(raw) -> int:
    """Parse the 1-based start position; anything below 1 is rejected"""
    if raw is None:
        return 1
    try:
        start = int(raw)
    except ValueError:
        raise ArgumentError(f"Start position must be an integer, got '{raw}'")
    if start < 1:
        raise ArgumentError(f"Start position must be 1 or greater, got {start}")
    return start


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Look up each term of a file in the glossary, one term at a time')
    parser.add_argument('terms_file', nargs='?',
                        help='Text file with one term per line')
    parser.add_argument('start', nargs='?',
                        help='1-based line to start from (default: 1)')
    parser.add_argument('--results-class', default=None,
                        help='CSS class of the search results container')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Request timeout in seconds (default: wait indefinitely)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def run(args, config) -> int:
    if not args.terms_file:
        raise ArgumentError("Missing terms file path")
    start = parse_start_index(args.start)

    if args.results_class:
        config.RESULTS_CONTAINER_CLASS = args.results_class
    if args.timeout is not None:
        config.REQUEST_TIMEOUT = parse_timeout(args.timeout, '--timeout')

    terms = load_terms(args.terms_file)

    with requests.Session() as session:
        resolver = TermResolver(config=config, session=session)
        controller = TermWalkController(resolver, ConsoleDisplay())
        state = controller.run(terms, start)

    logger.info(f"Finished after {state.processed} term(s)")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_console()

    try:
        config = get_config()
        setup_logging(config, verbose=args.verbose)
        return run(args, config)
    except ProgramError as e:
        logger.debug(f"Program Error: {e!r}")
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n[INFO] Interrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())

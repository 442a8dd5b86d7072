#!/usr/bin/env python3
"""Classify a single query / product description pair from the command line.

Usage examples:
    classify-query --query "iPhone 15 Pro" --description "Apple iPhone 15 Pro, 256GB"
    classify-query --example substitute --json
    python -m shopping_classifier.cli --example exact --api-url http://localhost:8000

Exit codes: 0 result shown, 1 request failed, 2 missing input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from shopping_classifier.client import get_client
from shopping_classifier.config.settings import update_from_kwargs
from shopping_classifier.examples import EXAMPLES, find_example
from shopping_classifier.presentation import display_label, format_confidence, resolve
from shopping_classifier.session import ClassificationSession, SessionState

EXIT_OK = 0
EXIT_REQUEST_FAILED = 1
EXIT_INVALID_INPUT = 2


def parse_cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Classify the relationship between a search query and a product."
    )
    parser.add_argument("--query", default="", help="Search query text")
    parser.add_argument("--description", default="", help="Product description text")
    parser.add_argument(
        "--example",
        choices=[e.kind.lower() for e in EXAMPLES],
        help="Use one of the built-in example pairs instead of --query/--description",
    )
    parser.add_argument("--api-url", dest="api_url", help="Classifier base URL")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", dest="log_level", help="Logging level")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser.parse_args(argv)


def _report(state: SessionState) -> dict:
    result = state.result
    descriptor = resolve(result.relationship)
    return {
        "relationship": result.relationship,
        "confidence": result.confidence,
        "label": display_label(result.relationship),
        "confidence_text": format_confidence(result.confidence),
        "interpretation": descriptor.interpretation,
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_cli(argv)
    settings = update_from_kwargs(
        api_url=args.api_url,
        request_timeout_sec=args.timeout,
        log_level=args.log_level,
    )
    logging.basicConfig(level=settings.log_level)

    session = ClassificationSession()
    if args.example:
        example = find_example(args.example)
        session.load_example(example.query, example.description)
    else:
        session.edit_query(args.query)
        session.edit_description(args.description)

    client = get_client("http", base_url=settings.api_url, timeout=settings.request_timeout_sec)
    try:
        state = session.submit(client)
    finally:
        client.close()

    if state.result is None:
        print(f"Error: {state.error_message}", file=sys.stderr)
        return EXIT_REQUEST_FAILED if state.phase_name == "Failed" else EXIT_INVALID_INPUT

    report = _report(state)
    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        print(f"{resolve(report['relationship']).icon} {report['label']}")
        print(f"Confidence: {report['confidence_text']}")
        print(report["interpretation"])
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

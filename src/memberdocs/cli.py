"""Print normalized documentation for a module as JSON.

Usage:
    memberdocs MyApp.Worker
    memberdocs MyApp.Worker --category docs --path ./docs_chunks
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from memberdocs.client import DocsClient
from memberdocs.config import Config
from memberdocs.markup import TreeMarkdownRenderer
from memberdocs.models import Category, MemberIdentity
from memberdocs.stores import JsonDocsStore


def _to_json(value: Any) -> Any:
    """Convert entries to JSON-ready values, identities as "name/arity"."""
    if isinstance(value, MemberIdentity):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_json(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [_to_json(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _to_json(v) for k, v in value.items()}
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memberdocs", description="Show normalized module documentation."
    )
    parser.add_argument("module", help="Module identifier")
    parser.add_argument(
        "--category",
        choices=[c.value for c in Category],
        default=Category.DOCS.value,
        help="Documentation category (default: docs)",
    )
    parser.add_argument(
        "--path",
        default=Config.DOCS_PATH,
        help=f"Directory of <module>.json chunks (default: {Config.DOCS_PATH})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print one category of a module's documentation."""
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    store = JsonDocsStore(args.path)
    client = DocsClient(store, TreeMarkdownRenderer(), store)

    result = client.get_documentation(args.module, args.category)
    if result is None:
        print(f"No documentation available for {args.module}", file=sys.stderr)
        return 1

    print(json.dumps(_to_json(result), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())

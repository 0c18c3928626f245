"""CLI entry point for the link-recognizer."""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from .catalog import CatalogError, load_catalog
from .checker import check_catalog
from .models import CheckSummary

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "LINK_RECOGNIZER_CATALOG"


def _ensure_utf8() -> None:
    """Catalog titles and URLs may carry non-ASCII text; keep Windows consoles on UTF-8."""
    if sys.platform != "win32":
        return
    os.environ.setdefault("PYTHONUTF8", "1")
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="link-recognizer",
        description="Check candidate URLs against the canonical links of catalog products",
    )
    parser.add_argument(
        "catalog",
        nargs="?",
        default=None,
        help=f"JSON catalog file (or set {CATALOG_ENV_VAR} env var)",
    )
    parser.add_argument(
        "--expected",
        type=int,
        default=None,
        help="Number of product links expected across the catalog",
    )
    parser.add_argument(
        "--output",
        choices=["json", "table"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def _print_table(summary: CheckSummary) -> None:
    for report in summary.reports:
        for verdict in report.verdicts:
            status = "is" if verdict.is_match else "is not"
            print(
                f"Your requested link {verdict.url} {status} a product link "
                f"for the base link {report.product.canonical_link}"
            )

    if summary.expected is None:
        print(f"\nProduct links found: {summary.total_matches}")
    else:
        finished = "yes" if summary.finished else "no"
        print(
            f"\nWe finished for this mass of tests? {finished} "
            f"[{summary.total_matches} of {summary.expected}]"
        )


def main(argv: Optional[list[str]] = None) -> int:
    _ensure_utf8()
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Resolve catalog path
    catalog_path = args.catalog or os.getenv(CATALOG_ENV_VAR)
    if not catalog_path:
        parser.error(f"a catalog file is required or set {CATALOG_ENV_VAR} env var")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        entries = load_catalog(catalog_path)
    except CatalogError as exc:
        logger.error(str(exc))
        return 2

    summary = check_catalog(entries, expected=args.expected)

    if args.output == "json":
        print(json.dumps(summary.model_dump(), indent=2))
    else:
        _print_table(summary)

    return 0 if summary.finished else 1


if __name__ == "__main__":
    sys.exit(main())

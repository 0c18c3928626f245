"""Batch checking of candidate URLs against catalog products."""

import logging
import time
from typing import Iterable, Optional

from .matcher import evaluate
from .models import CatalogEntry, CheckSummary, LinkReport, ReferenceProduct

logger = logging.getLogger(__name__)


def check_links(product: ReferenceProduct, urls: Iterable[str]) -> LinkReport:
    """Evaluate every URL against one product, keeping input order."""
    verdicts = [evaluate(product, url) for url in urls]
    report = LinkReport(product=product, verdicts=verdicts)
    logger.info(
        f"{product.canonical_link}: {report.matches} of {len(verdicts)} "
        f"candidates are product links"
    )
    return report


def check_catalog(
    entries: Iterable[CatalogEntry],
    expected: Optional[int] = None,
) -> CheckSummary:
    """Check all entries of a catalog.

    Args:
        entries: catalog entries to process.
        expected: number of product links the caller expects in total.

    Returns:
        CheckSummary with one report per entry and the grand total.
    """
    started = time.perf_counter()
    reports = [check_links(entry.product, entry.urls_to_check) for entry in entries]
    total = sum(report.matches for report in reports)
    elapsed = time.perf_counter() - started

    logger.info(f"Checked {len(reports)} products in {elapsed:.4f}s, {total} product links")
    summary = CheckSummary(reports=reports, total_matches=total, expected=expected)
    if not summary.finished:
        logger.warning(f"Expected {expected} product links, found {total}")
    return summary

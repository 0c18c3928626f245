"""Two-stage heuristic deciding whether a URL points at a catalog product."""

import logging

from .models import MatchVerdict, ReferenceProduct
from .segmenter import segment

logger = logging.getLogger(__name__)

# Empirically tuned on the catalog fixtures; keep as is.
OVERLAP_THRESHOLD = 1  # shared segments must exceed this
CONTAINMENT_THRESHOLD = 2  # title/id hits must reach this


def _overlap_count(candidate: list[str], reference: list[str]) -> int:
    """Count candidate segments found anywhere in the reference segments."""
    known = set(reference)
    return sum(1 for value in candidate if value in known)


def _containment_score(candidate: list[str], title: str, identifier: str) -> int:
    """Score title and identifier substrings found inside candidate segments.

    A single segment can score twice: once for the title, once for the id.
    An empty title or identifier never counts as found.
    """
    score = 0
    for value in candidate:
        if title and title in value:
            score += 1
        if identifier and identifier in value:
            score += 1
    return score


def evaluate(reference: ReferenceProduct, candidate_url: str) -> MatchVerdict:
    """Match a candidate URL against a reference product.

    Stage A accepts candidates sharing more than one literal segment with the
    canonical link. Otherwise stage B looks for the normalized title and the
    product id inside the candidate segments and needs two hits.
    """
    candidate = segment(candidate_url)
    overlap = _overlap_count(candidate, reference.reference_segments)

    if overlap > OVERLAP_THRESHOLD:
        logger.debug(f"{candidate_url}: overlap={overlap}, accepted by overlap")
        return MatchVerdict(
            url=candidate_url, is_match=True, stage="overlap", overlap_count=overlap
        )

    score = _containment_score(
        candidate, reference.normalized_title, reference.identifier_text
    )
    is_match = score >= CONTAINMENT_THRESHOLD
    logger.debug(
        f"{candidate_url}: overlap={overlap}, containment={score}, match={is_match}"
    )
    return MatchVerdict(
        url=candidate_url,
        is_match=is_match,
        stage="containment" if is_match else None,
        overlap_count=overlap,
        containment_score=score,
    )


def is_product_link(reference: ReferenceProduct, candidate_url: str) -> bool:
    """Return True if the candidate URL refers to the reference product."""
    return evaluate(reference, candidate_url).is_match

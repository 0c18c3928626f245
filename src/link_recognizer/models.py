"""Pydantic models for product-link recognition."""

from __future__ import annotations

import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .segmenter import segment

_WHITESPACE = re.compile(r"\s+")


class ReferenceProduct(BaseModel):
    """A catalog product whose canonical link is treated as ground truth."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=0, description="Catalog identifier of the product")
    title: str = Field(description="Human readable product title")
    price: float = Field(description="Catalog price, not used for matching")
    canonical_link: str = Field(
        alias="link",
        description="URL stored against the product in the catalog",
    )

    @property
    def normalized_title(self) -> str:
        """Lower-cased title with whitespace runs replaced by a dash."""
        return _WHITESPACE.sub("-", self.title.strip().lower())

    @property
    def identifier_text(self) -> str:
        return str(self.id)

    @property
    def reference_segments(self) -> list[str]:
        return segment(self.canonical_link)


class MatchVerdict(BaseModel):
    """Outcome of matching one candidate URL, with the evidence behind it."""

    url: str = Field(description="The candidate URL that was tested")
    is_match: bool = Field(default=False)
    stage: Optional[Literal["overlap", "containment"]] = Field(
        default=None,
        description="Stage that accepted the candidate, or null when rejected",
    )
    overlap_count: int = Field(
        default=0,
        description="Candidate segments also present in the canonical link",
    )
    containment_score: int = Field(
        default=0,
        description=(
            "Title and identifier hits inside candidate segments. "
            "Left at 0 when the overlap stage already accepted the URL."
        ),
    )


class CatalogEntry(BaseModel):
    """A reference product together with the URLs to check against it."""

    product: ReferenceProduct
    urls_to_check: list[str] = Field(default_factory=list)


class LinkReport(BaseModel):
    """Verdicts for every candidate URL of one catalog entry."""

    product: ReferenceProduct
    verdicts: list[MatchVerdict] = Field(default_factory=list)

    @computed_field
    @property
    def matches(self) -> int:
        return sum(1 for v in self.verdicts if v.is_match)


class CheckSummary(BaseModel):
    """Final result of checking a whole catalog."""

    reports: list[LinkReport] = Field(default_factory=list)
    total_matches: int = Field(default=0)
    expected: Optional[int] = Field(
        default=None,
        description="Number of product links the caller expected to find",
    )

    @computed_field
    @property
    def finished(self) -> bool:
        return self.expected is None or self.total_matches == self.expected

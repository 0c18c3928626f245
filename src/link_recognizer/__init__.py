"""link-recognizer: decide whether a URL points at a known catalog product."""

from .catalog import CatalogError, load_catalog, parse_catalog
from .checker import check_catalog, check_links
from .matcher import evaluate, is_product_link
from .models import CatalogEntry, CheckSummary, LinkReport, MatchVerdict, ReferenceProduct
from .segmenter import segment

__all__ = [
    "CatalogEntry",
    "CatalogError",
    "CheckSummary",
    "LinkReport",
    "MatchVerdict",
    "ReferenceProduct",
    "check_catalog",
    "check_links",
    "evaluate",
    "is_product_link",
    "load_catalog",
    "parse_catalog",
    "segment",
]

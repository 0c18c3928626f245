"""Loading catalog entries from JSON."""

import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from .models import CatalogEntry

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[CatalogEntry])


class CatalogError(ValueError):
    """Raised when a catalog document cannot be read or validated."""


def _nest(item: Any) -> Any:
    """Accept the flat form where product fields sit next to urls_to_check."""
    if isinstance(item, dict) and "product" not in item:
        product = {k: v for k, v in item.items() if k != "urls_to_check"}
        return {"product": product, "urls_to_check": item.get("urls_to_check", [])}
    return item


def parse_catalog(data: Any, source: str = "<data>") -> list[CatalogEntry]:
    """Validate already-decoded catalog data.

    Args:
        data: a list of entries, either flat ({"id", "title", "price",
            "link", "urls_to_check"}) or nested under a "product" key.
        source: name used in error messages.
    """
    if not isinstance(data, list):
        raise CatalogError(f"{source}: expected a list of entries, got {type(data).__name__}")
    try:
        entries = _ENTRIES.validate_python([_nest(item) for item in data])
    except ValidationError as exc:
        raise CatalogError(f"{source}: invalid catalog entry\n{exc}") from exc
    logger.debug(f"Loaded {len(entries)} catalog entries from {source}")
    return entries


def load_catalog(path: Union[str, Path]) -> list[CatalogEntry]:
    """Read and validate a JSON catalog file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"{path}: cannot read catalog ({exc})") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogError(f"{path}: not valid JSON ({exc})") from exc
    return parse_catalog(data, source=str(path))

"""URL segmentation for structural product-link matching."""

import re

# Host, then up to five path components, then an optional tracking suffix
# that is consumed but never captured.
URL_PATTERN = re.compile(
    r"https?://([\w.]+)"
    r"(/[\w-]*)?(/[\w-]+)?(/[\w-]+)?(/[\w-]+)?(/[\w-]+)?"
    r"(?:[/?+][\w=+]+)?",
    re.IGNORECASE | re.ASCII,
)

MAX_SEGMENTS = 6


def _normalize_capture(value: str) -> str:
    return value.replace("/", "")


def segment(url: str) -> list[str]:
    """Split a URL into its host and path segments.

    Groups are collected in order and collection stops at the first group
    that did not take part in the match. Slashes are stripped from every
    capture; a bare "/" path leaves nothing behind and is not kept.

    Returns an empty list when the input is not an http(s) URL.
    """
    match = URL_PATTERN.search(url)
    if match is None:
        return []

    segments: list[str] = []
    for index in range(1, MAX_SEGMENTS + 1):
        start, end = match.span(index)
        if start < 0 or end <= start:
            break
        value = _normalize_capture(url[start:end])
        if value:
            segments.append(value)
    return segments

"""Content-Range header parsing."""

from typing import Optional


def parse_content_range(header: Optional[str]) -> Optional[int]:
    """Return the total from ``0-9/25`` or ``*/0``; None when unknown (``0-9/*``)."""
    if not header or "/" not in header:
        return None

    total = header.rsplit("/", 1)[1].strip()
    if total == "*" or not total.isdigit():
        return None
    return int(total)

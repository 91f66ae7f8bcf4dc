"""Domain or IP extraction from lines holding URLs."""

from __future__ import annotations

from .urls import get_domain


def process_domain_line(line: str) -> str | None:
    """Return the host of the URL on the line, or None if none can be found."""
    return get_domain(line) or None
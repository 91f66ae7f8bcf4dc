"""URL extraction from httpx output lines."""

from __future__ import annotations

import re

from .urls import is_valid_url, strip_url_components

_BRACKETED_URL = re.compile(r"\[(https?://[^\]]*)\]")


def process_httpx_line(
    line: str, extract_redirect: bool = False, strip_components: bool = False
) -> str | None:
    """Return the URL from an httpx line, or the last bracketed redirect target if asked."""
    fields = line.split()
    if not fields or not is_valid_url(fields[0]):
        return None
    chosen = fields[0]

    if extract_redirect:
        targets = _BRACKETED_URL.findall(line)
        if targets and is_valid_url(targets[-1]):
            chosen = targets[-1]

    if strip_components:
        chosen = strip_url_components(chosen)
    return chosen or None
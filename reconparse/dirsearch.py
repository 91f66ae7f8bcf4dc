"""URL extraction from dirsearch report lines."""

from __future__ import annotations

from .urls import is_valid_url, strip_url_components

_REDIRECT_MARKER = "-> REDIRECTS TO:"


def process_dirsearch_line(
    line: str, extract_redirect: bool = False, strip_components: bool = False
) -> str | None:
    """Return the URL reported on a dirsearch line, or None if there is none.

    Lines look like ``STATUS SIZE URL [-> REDIRECTS TO: TARGET]``.
    """
    if line.startswith("#"):
        return None
    fields = line.split()
    if len(fields) < 3:
        return None

    original = fields[2]
    if not is_valid_url(original):
        found = next((field for field in fields if is_valid_url(field)), None)
        if found is None:
            return None
        original = found

    redirect = ""
    joined = " ".join(fields)
    _, marker, after = joined.partition(_REDIRECT_MARKER)
    if marker:
        parts = after.split()
        if parts and is_valid_url(parts[0]):
            redirect = parts[0]

    chosen = redirect if extract_redirect and redirect else original
    if strip_components:
        chosen = strip_url_components(chosen)
    return chosen or None
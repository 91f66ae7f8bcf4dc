"""URL and WAF extraction from wafw00f output lines."""

from __future__ import annotations

import re
from enum import Enum

from .urls import _parse_url


class WafKind(str, Enum):
    """Category of the firewall reported for a URL."""

    NONE = "none"
    GENERIC = "generic"
    KNOWN = "known"


_LEADING_URL = re.compile(r"[\t\n\f\r ]*(https?://[^\t\n\f\r ]+)")


def _kind_of(name: str) -> WafKind:
    if name == "None":
        return WafKind.NONE
    if name == "Generic":
        return WafKind.GENERIC
    return WafKind.KNOWN


def process_wafw00f_line(line: str, kind: WafKind | str = WafKind.NONE) -> str | None:
    """Return the URL (and WAF name) from a wafw00f line when its kind matches.

    For the ``none`` kind only the URL is returned; otherwise ``"URL - WAF"``.
    The URL loses its query and fragment. Raises ValueError for an unknown kind.
    """
    wanted = WafKind(kind)

    match = _LEADING_URL.match(line)
    if match is None:
        return None
    try:
        url = _parse_url(match.group(1))
    except ValueError:
        return None
    url.raw_query = ""
    url.fragment = ""
    url.raw_fragment = ""
    display = str(url)

    paren = line.rfind(")")
    if paren == -1:
        return None
    name = line[paren + 1 :].strip()
    if not name:
        return None

    actual = _kind_of(name)
    if actual is not wanted:
        return None
    if actual is WafKind.NONE:
        return display
    return f"{display} - {name}"
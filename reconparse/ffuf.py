"""URL extraction and filtering for ffuf CSV output lines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .urls import (
    _URL,
    _Mode,
    _escape,
    _parse_url,
    _unescape,
    is_valid_url,
    strip_url_components,
)

_HEADER_PREFIX = "FUZZ,url,redirectlocation"
_MIN_COLUMNS = 10

FilterSpec = "str | Iterable[str] | None"


def _filter_values(spec: str | Iterable[str] | None) -> list[str]:
    """Turn a comma-separated string or an iterable of values into a list."""
    if not spec:
        return []
    if isinstance(spec, str):
        return spec.split(",")
    return list(spec)


def _resolve_path(base: str, ref: str) -> str:
    """Merge a reference path onto a base path and remove dot segments."""
    if not ref:
        full = base
    elif not ref.startswith("/"):
        full = base[: base.rfind("/") + 1] + ref
    else:
        full = ref
    if not full:
        return ""

    out = "/"
    first = True
    elem = ""
    remaining = full
    found = True
    while found:
        elem, sep, remaining = remaining.partition("/")
        found = bool(sep)
        if elem == ".":
            first = False
            continue
        if elem == "..":
            written = out[1:]
            index = written.rfind("/")
            if index == -1:
                out = "/"
                first = True
            else:
                out = "/" + written[:index]
        else:
            if not first:
                out += "/"
            out += elem
            first = False
    if elem in (".", ".."):
        out += "/"
    if len(out) > 1 and out[1] == "/":
        out = out[1:]
    return out


def _set_path(url: _URL, escaped: str) -> None:
    try:
        path = _unescape(escaped, _Mode.PATH)
    except ValueError:
        return
    url.path = path
    url.raw_path = "" if _escape(path, _Mode.PATH) == escaped else escaped


def _resolve_reference(base: _URL, ref: _URL) -> _URL:
    """Resolve ref against base as described for URI references."""
    url = replace(ref)
    if not ref.scheme:
        url.scheme = base.scheme
    if ref.scheme or ref.host or ref.username is not None:
        _set_path(url, _resolve_path(ref.escaped_path(), ""))
        return url
    if ref.opaque:
        url.username = None
        url.password = None
        url.host = ""
        url.path = ""
        return url
    if not ref.path and not ref.force_query and not ref.raw_query:
        url.raw_query = base.raw_query
        if not ref.fragment:
            url.fragment = base.fragment
            url.raw_fragment = base.raw_fragment
    if not ref.path and base.opaque:
        url.opaque = base.opaque
        url.username = None
        url.password = None
        url.host = ""
        url.path = ""
        return url
    url.host = base.host
    url.username = base.username
    url.password = base.password
    _set_path(url, _resolve_path(base.escaped_path(), ref.escaped_path()))
    return url


def _follow_redirect(raw_url: str, location: str) -> str:
    """Return the redirect target, resolved against raw_url when it is relative."""
    try:
        target = _parse_url(location)
    except ValueError:
        if location.startswith(("http://", "https://")):
            return raw_url
        try:
            base = _parse_url(raw_url)
        except ValueError:
            return raw_url
        return str(_resolve_reference(base, _URL(path=location)))

    if target.scheme:
        return location
    try:
        base = _parse_url(raw_url)
    except ValueError:
        return location
    return str(_resolve_reference(base, target))


def process_ffuf_line(
    line: str,
    filter_codes: str | Iterable[str] | None = (),
    filter_types: str | Iterable[str] | None = (),
    filter_lengths: str | Iterable[str] | None = (),
    extract_redirect: bool = False,
    strip_components: bool = False,
) -> str | None:
    """Return the URL from one ffuf CSV result line, or None if it is skipped.

    Filters may be given as comma-separated strings or as iterables of values;
    a line whose status code, content type or content length matches any of
    them is dropped. Content types match when the filter is a substring.
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(("#", _HEADER_PREFIX)):
        return None

    parts = trimmed.split(",")
    if len(parts) < _MIN_COLUMNS:
        return None

    raw_url = parts[1]
    location = parts[2]
    status = parts[4]
    length = parts[5]
    content_type = parts[8].strip()

    if any(code.strip() == status for code in _filter_values(filter_codes)):
        return None
    if any(kind.strip() in content_type for kind in _filter_values(filter_types)):
        return None
    if any(size.strip() == length for size in _filter_values(filter_lengths)):
        return None

    output = raw_url
    if extract_redirect and location:
        output = _follow_redirect(raw_url, location)
    if strip_components:
        output = strip_url_components(output)

    if is_valid_url(output):
        return output
    if is_valid_url(raw_url):
        return strip_url_components(raw_url) if strip_components else raw_url
    return None
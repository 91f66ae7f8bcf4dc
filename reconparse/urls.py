"""URL helpers shared by the line parsers: validation, stripping and host extraction."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import unquote_to_bytes


class _Mode(Enum):
    PATH = "path"
    HOST = "host"
    ZONE = "zone"
    USERINFO = "userinfo"
    FRAGMENT = "fragment"


_ALNUM = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
_HOST_EXTRA = frozenset(b"!$&'()*+,;=:[]<>\"")
_UNRESERVED_MARK = frozenset(b"-_.~")
_RESERVED = frozenset(b"$&+,/:;=?@")
_ALWAYS_VALID_ENCODED = frozenset(b"!$&'()*+,;=:@[]%")

_CTL = re.compile(r"[\x00-\x1f\x7f]")
_SCHEME = re.compile(r"([A-Za-z][A-Za-z0-9+.\-]*):")
_PORT = re.compile(r"(?::[0-9]*)?")
_USERINFO = re.compile(r"[A-Za-z0-9\-._:~!$&'()*+,;=%@]*")
_ESCAPE = re.compile(rb"%([0-9A-Fa-f]{2})")
_BAD_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


def _should_escape(c: int, mode: _Mode) -> bool:
    if c in _ALNUM:
        return False
    if mode in (_Mode.HOST, _Mode.ZONE) and c in _HOST_EXTRA:
        return False
    if c in _UNRESERVED_MARK:
        return False
    if c in _RESERVED:
        if mode is _Mode.PATH:
            return c == ord("?")
        if mode is _Mode.USERINFO:
            return c in b"@/?:"
        if mode is _Mode.FRAGMENT:
            return False
    if mode is _Mode.FRAGMENT and c in b"!()*":
        return False
    return True


def _to_bytes(s: str) -> bytes:
    return s.encode("utf-8", "surrogateescape")


def _unescape(s: str, mode: _Mode) -> str:
    data = _to_bytes(s)
    if _BAD_ESCAPE.search(data):
        raise ValueError(f"invalid URL escape in {s!r}")
    if mode in (_Mode.HOST, _Mode.ZONE):
        for match in _ESCAPE.finditer(data):
            value = int(match.group(1), 16)
            if mode is _Mode.HOST and value < 0x80 and match.group(0) != b"%25":
                raise ValueError(f"invalid URL escape in host {s!r}")
            if (
                mode is _Mode.ZONE
                and match.group(0) != b"%25"
                and value != ord(" ")
                and _should_escape(value, _Mode.HOST)
            ):
                raise ValueError(f"invalid URL escape in zone {s!r}")
        remaining = _ESCAPE.sub(b"", data)
        if any(c < 0x80 and _should_escape(c, mode) for c in remaining):
            raise ValueError(f"invalid character in host name {s!r}")
    return unquote_to_bytes(data).decode("utf-8", "surrogateescape")


def _escape(s: str, mode: _Mode) -> str:
    return "".join(
        f"%{c:02X}" if _should_escape(c, mode) else chr(c) for c in _to_bytes(s)
    )


def _valid_encoded(s: str, mode: _Mode) -> bool:
    return all(
        c in _ALWAYS_VALID_ENCODED or not _should_escape(c, mode) for c in _to_bytes(s)
    )


def _valid_optional_port(port: str) -> bool:
    return _PORT.fullmatch(port) is not None


@dataclass
class _URL:
    """A parsed URL with the fields needed to rebuild its text form."""

    scheme: str = ""
    opaque: str = ""
    username: str | None = None
    password: str | None = None
    host: str = ""
    path: str = ""
    raw_path: str = ""
    omit_host: bool = False
    force_query: bool = False
    raw_query: str = ""
    fragment: str = ""
    raw_fragment: str = ""

    def hostname(self) -> str:
        host = self.host
        colon = host.rfind(":")
        if colon != -1 and _valid_optional_port(host[colon:]):
            host = host[:colon]
        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
        return host

    def escaped_path(self) -> str:
        if (
            self.raw_path
            and _valid_encoded(self.raw_path, _Mode.PATH)
            and _unescape(self.raw_path, _Mode.PATH) == self.path
        ):
            return self.raw_path
        if self.path == "*":
            return "*"
        return _escape(self.path, _Mode.PATH)

    def escaped_fragment(self) -> str:
        if (
            self.raw_fragment
            and _valid_encoded(self.raw_fragment, _Mode.FRAGMENT)
            and _unescape(self.raw_fragment, _Mode.FRAGMENT) == self.fragment
        ):
            return self.raw_fragment
        return _escape(self.fragment, _Mode.FRAGMENT)

    def _userinfo(self) -> str:
        text = _escape(self.username or "", _Mode.USERINFO)
        if self.password is not None:
            text += ":" + _escape(self.password, _Mode.USERINFO)
        return text

    def __str__(self) -> str:
        out: list[str] = []
        if self.scheme:
            out.append(self.scheme + ":")
        if self.opaque:
            out.append(self.opaque)
        else:
            has_user = self.username is not None
            if self.scheme or self.host or has_user:
                if not (self.omit_host and not self.host and not has_user):
                    if self.host or self.path or has_user:
                        out.append("//")
                    if has_user:
                        out.append(self._userinfo() + "@")
                    if self.host:
                        out.append(_escape(self.host, _Mode.HOST))
            path = self.escaped_path()
            if path and not path.startswith("/") and self.host:
                out.append("/")
            if not out and ":" in path.partition("/")[0]:
                out.append("./")
            out.append(path)
        if self.force_query or self.raw_query:
            out.append("?" + self.raw_query)
        if self.fragment:
            out.append("#" + self.escaped_fragment())
        return "".join(out)


def _parse_host(host: str) -> str:
    if host.startswith("["):
        close = host.rfind("]")
        if close < 0:
            raise ValueError("missing ']' in host")
        if not _valid_optional_port(host[close + 1 :]):
            raise ValueError(f"invalid port in {host!r}")
        zone = host[:close].find("%25")
        if zone >= 0:
            return (
                _unescape(host[:zone], _Mode.HOST)
                + _unescape(host[zone:close], _Mode.ZONE)
                + _unescape(host[close:], _Mode.HOST)
            )
    else:
        colon = host.rfind(":")
        if colon != -1 and not _valid_optional_port(host[colon:]):
            raise ValueError(f"invalid port in {host!r}")
    return _unescape(host, _Mode.HOST)


def _parse_authority(url: _URL, authority: str) -> None:
    userinfo, at, host = authority.rpartition("@")
    url.host = _parse_host(host)
    if not at:
        return
    if _USERINFO.fullmatch(userinfo) is None:
        raise ValueError("invalid userinfo")
    name, colon, secret_part = userinfo.partition(":")
    url.username = _unescape(name, _Mode.USERINFO)
    url.password = _unescape(secret_part, _Mode.USERINFO) if colon else None


def _parse(raw: str, via_request: bool) -> _URL:
    if _CTL.search(raw):
        raise ValueError("invalid control character in URL")
    if not raw and via_request:
        raise ValueError("empty url")
    url = _URL()
    if raw == "*":
        url.path = "*"
        return url

    match = _SCHEME.match(raw)
    if match:
        url.scheme = match.group(1).lower()
        rest = raw[match.end() :]
    elif raw.startswith(":"):
        raise ValueError("missing protocol scheme")
    else:
        rest = raw

    if rest.endswith("?") and rest.count("?") == 1:
        url.force_query = True
        rest = rest[:-1]
    else:
        rest, _, url.raw_query = rest.partition("?")

    if not rest.startswith("/"):
        if url.scheme:
            url.opaque = rest
            return url
        if via_request:
            raise ValueError("invalid URI for request")
        if ":" in rest.partition("/")[0]:
            raise ValueError("first path segment in URL cannot contain colon")

    if (url.scheme or (not via_request and not rest.startswith("///"))) and rest.startswith("//"):
        authority, slash, tail = rest[2:].partition("/")
        rest = slash + tail
        _parse_authority(url, authority)
    elif url.scheme and rest.startswith("/"):
        url.omit_host = True

    url.path = _unescape(rest, _Mode.PATH)
    url.raw_path = rest
    return url


def _parse_url(raw: str) -> _URL:
    """Parse a URL reference, fragment included; raise ValueError if malformed."""
    base, hash_mark, frag = raw.partition("#")
    url = _parse(base, via_request=False)
    if hash_mark:
        url.fragment = _unescape(frag, _Mode.FRAGMENT)
        url.raw_fragment = frag
    return url


def _parse_request_uri(raw: str) -> _URL:
    """Parse an absolute URI or absolute path as sent in a request line."""
    return _parse(raw, via_request=True)


def is_valid_url(value: str) -> bool:
    """Return True if value parses as an absolute http or https URL."""
    try:
        _parse_request_uri(value)
        url = _parse_url(value)
    except ValueError:
        return False
    return url.scheme in ("http", "https")


def strip_url_components(raw_url: str) -> str:
    """Drop the query and fragment of a URL; unparseable input is returned unchanged."""
    try:
        url = _parse_url(raw_url)
    except ValueError:
        return raw_url
    url.raw_query = ""
    url.fragment = ""
    url.raw_fragment = ""
    return str(url)


def get_domain(raw_url: str) -> str:
    """Return the host name or IP of a URL, assuming http:// when no scheme is given."""
    if not raw_url:
        return ""
    if not raw_url.startswith(("http://", "https://")):
        raw_url = "http://" + raw_url
    try:
        return _parse_url(raw_url).hostname()
    except ValueError:
        return ""


def is_ip(value: str) -> bool:
    """Return True if value is a plain IPv4 or IPv6 address literal."""
    if "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True
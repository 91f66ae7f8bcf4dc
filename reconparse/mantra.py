"""Secret and URL extraction from mantra output lines."""

from __future__ import annotations

import re

_ANSI = re.compile(r"\x1b\[[0-9;]*[mKHF]")
_LINE_NUMBER = re.compile(r"\s*\[Line: \d+\]\s*\Z", re.ASCII)
_PREFIX = "[+] "


def process_mantra_line(line: str) -> str | None:
    """Return ``"secret - URL"`` for a mantra finding line, or None for anything else."""
    clean = _ANSI.sub("", line)
    if not clean.startswith(_PREFIX):
        return None

    content = clean[len(_PREFIX) :].strip()
    content = _LINE_NUMBER.sub("", content).strip()

    open_at = content.rfind("[")
    close_at = content.rfind("]")
    if open_at == -1 or close_at == -1 or open_at >= close_at or close_at != len(content) - 1:
        url_part, separator, secret_part = content.partition("  [")
        if separator and secret_part.endswith("]"):
            url_part = url_part.strip()
            secret_value = secret_part[:-1].strip()
            if url_part and secret_value:
                return f"{secret_value} - {url_part}"
        return None

    url_part = content[:open_at].strip()
    secret_value = content[open_at + 1 : close_at].strip()
    if not url_part or not secret_value:
        return None
    return f"{secret_value} - {url_part}"
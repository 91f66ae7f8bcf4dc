"""Host name extraction from amass output lines."""

from __future__ import annotations

import re

_MX_RECORD = re.compile(r"(.*?) \(FQDN\) --> mx_record --> (.*?) \(FQDN\)")


def process_amass_line(line: str) -> list[str]:
    """Return the host names found on one amass line.

    MX record lines yield the source and target names; any other non-empty
    line is taken as a host name in full.
    """
    line = line.strip()
    if not line:
        return []
    match = _MX_RECORD.fullmatch(line)
    if match is None:
        return [line]
    return [name for name in (part.strip() for part in match.groups()) if name]
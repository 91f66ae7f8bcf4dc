"""Record extraction from comma-separated DNS record lines."""

from __future__ import annotations

from .urls import is_ip


def process_dns_line(
    line: str,
    extract_ip: bool = False,
    extract_cname: bool = False,
    extract_mx: bool = False,
) -> list[str]:
    """Return the values selected by the flags from a ``name,type,ttl,value`` line.

    IP extraction takes precedence: when it is on, only A and AAAA addresses
    are returned and the other flags are ignored.
    """
    parts = line.split(",")
    if len(parts) < 4:
        return []
    record_type = parts[1].strip()
    value = parts[3].strip()

    if extract_ip:
        if record_type in ("A", "AAAA") and is_ip(value):
            return [value]
        return []

    results: list[str] = []
    if extract_cname and record_type == "CNAME":
        results.append(value)
    if extract_mx and record_type == "MX" and not is_ip(value):
        results.append(value)
    return results
"""Port information extraction from nmap normal output."""

from __future__ import annotations

import re

from .urls import is_ip

_REPORT_PREFIX = "Nmap scan report for "
_CANDIDATE = re.compile(r"[a-zA-Z0-9.:%]+(?:\[[a-zA-Z0-9%]+\])?")
_WS = r"[\t\n\f\r ]"
_NON_WS = r"[^\t\n\f\r ]"
_PORT_LINE = re.compile(
    rf"(\d+)/(?:tcp|udp|sctp|icmp){_WS}+({_NON_WS}+){_WS}+({_NON_WS}+)(?:{_WS}+(.*))?",
    re.ASCII,
)


def process_nmap_line(
    line: str,
    current_ip: str = "",
    export_ip_port: bool = False,
    open_only: bool = False,
) -> tuple[list[str], str]:
    """Parse one nmap line given the IP of the host being reported.

    Returns the formatted port entries found on the line and the IP context
    to use for the following lines.
    """
    line = line.strip()

    if line.startswith(_REPORT_PREFIX):
        target = line[len(_REPORT_PREFIX) :].strip()
        found = ""
        for candidate in _CANDIDATE.findall(target):
            if is_ip(candidate):
                found = candidate
        return [], found or current_ip

    if not current_ip:
        return [], current_ip

    match = _PORT_LINE.fullmatch(line)
    if match is None:
        return [], current_ip

    port, status, service, version = match.groups()
    version = (version or "").strip() or "N/A"

    if open_only and status != "open":
        return [], current_ip
    if export_ip_port:
        return [f"{current_ip}:{port}"], current_ip
    return [f"[{current_ip}] - [{port}] - [{service}] - [{version}] - [{status}]"], current_ip


class NmapParser:
    """Stateful nmap parser that tracks the host being reported across lines."""

    def __init__(self, export_ip_port: bool = False, open_only: bool = False) -> None:
        self.export_ip_port = export_ip_port
        self.open_only = open_only
        self.current_ip = ""

    def feed(self, line: str) -> list[str]:
        """Parse one line and return the port entries it yields."""
        outputs, self.current_ip = process_nmap_line(
            line, self.current_ip, self.export_ip_port, self.open_only
        )
        return outputs
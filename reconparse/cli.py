"""Command line front end: pick a tool parser, read lines, print the results."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .amass import process_amass_line
from .dirsearch import process_dirsearch_line
from .dns import process_dns_line
from .domain import process_domain_line
from .ffuf import process_ffuf_line
from .httpx import process_httpx_line
from .mantra import process_mantra_line
from .nmap import NmapParser
from .urls import get_domain
from .wafw00f import WafKind, process_wafw00f_line

TOOLS = ("httpx", "ffuf", "dirsearch", "amass", "nmap", "dns", "wafw00f", "domain", "mantra")

USAGE = """\
Usage: reconparse <tool_name> [options] [input_file]

Available Tools:
  domain         Extracts domain/IP from a list of URLs.
  httpx          Processes httpx output. Expects URLs or lines containing URLs.
  ffuf           Processes ffuf CSV output. Parses URLs from results.
  dirsearch      Processes dirsearch output. Extracts found URLs.
  amass          Processes amass intel/enum output. Extracts hostnames.
  nmap           Processes nmap normal output. Extracts IP, port, service, version.
  dns            Processes structured DNS record output (comma-separated).
  wafw00f        Processes wafw00f output. Extracts URL and detected WAF.
  mantra         Processes mantra output. Extracts secret and URL from found leaks.

Common Options (generally not applicable to 'domain' tool directly):
  -r             Extract redirect URLs (httpx, ffuf, dirsearch).
  -s             Strip URL components (query parameters and fragments).
  -d             Extract only domain/IP from the final processed output.
  -t <threads>   Number of concurrent processing threads (default: 1).

Nmap Specific Options ('nmap' tool only):
  -p             Export IP and port pairs (e.g., 192.168.1.1:80).
  -o             Filter for open ports only. Applied before -p if both are used.

Dns Specific Options ('dns' tool only - must choose one):
  -ip            Extract IP addresses (A/AAAA records), sorted and unique.
  -cname         Extract CNAME domain records (the canonical name).
  -mx            Extract MX domain records (the mail exchange hostname).

Wafw00f Specific Options ('wafw00f' tool only):
  -k <kind>      WAF kind to extract: 'none', 'generic', or 'known' (default: 'none').

FFUF Specific Options ('ffuf' tool only):
  -f             Process all files in the current directory as ffuf input.
  -fc <codes>    Comma-separated list of status codes to filter out.
  -fcl <lengths> Comma-separated list of content lengths to filter out.
  -fct <types>   Comma-separated list of content types to filter out.

Input:
  [input_file]   Optional. File to read input from. If omitted or '-', reads from stdin.
"""


class UsageError(ValueError):
    """Raised when the command line cannot be accepted."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


@dataclass
class Options:
    """Settings chosen on the command line."""

    tool: str
    extract_redirect: bool = False
    strip_components: bool = False
    extract_domain_only: bool = False
    threads: int = 1
    export_ip_port: bool = False
    open_only: bool = False
    dns_ip: bool = False
    dns_cname: bool = False
    dns_mx: bool = False
    waf_kind: WafKind = WafKind.NONE
    ffuf_folder: bool = False
    filter_codes: str = ""
    filter_types: str = ""
    filter_lengths: str = ""
    input_file: str = ""


def _build_parser(tool: str) -> _Parser:
    parser = _Parser(prog=tool, add_help=False, allow_abbrev=False)
    flag = parser.add_argument
    flag("-r", "--r", dest="extract_redirect", action="store_true")
    flag("-s", "--s", dest="strip_components", action="store_true")
    flag("-d", "--d", dest="extract_domain_only", action="store_true")
    flag("-t", "--t", dest="threads", type=int, default=1)
    flag("-p", "--p", dest="export_ip_port", action="store_true")
    flag("-o", "--o", dest="open_only", action="store_true")
    flag("-ip", "--ip", dest="dns_ip", action="store_true")
    flag("-cname", "--cname", dest="dns_cname", action="store_true")
    flag("-mx", "--mx", dest="dns_mx", action="store_true")
    flag("-k", "--k", dest="waf_kind", default="none")
    flag("-f", "--f", dest="ffuf_folder", action="store_true")
    flag("-fc", "--fc", dest="filter_codes", default="")
    flag("-fct", "--fct", dest="filter_types", default="")
    flag("-fcl", "--fcl", dest="filter_lengths", default="")
    flag("inputs", nargs="*")
    return parser


def parse_args(argv: list[str]) -> Options:
    """Turn ``<tool> [options] [input_file]`` into Options; raise UsageError if invalid."""
    if not argv:
        raise UsageError("<tool_name> is mandatory.")
    tool, rest = argv[0], argv[1:]
    namespace = _build_parser(tool).parse_args(rest)

    if tool not in TOOLS:
        raise UsageError(
            f"Unsupported tool type '{tool}'. Supported tools are: {', '.join(TOOLS)}."
        )
    if tool == "dns" and not (namespace.dns_ip or namespace.dns_cname or namespace.dns_mx):
        raise UsageError("For 'dns' tool, you must specify one of -ip, -cname, or -mx options.")
    try:
        waf_kind = WafKind(namespace.waf_kind)
    except ValueError:
        if tool == "wafw00f":
            raise UsageError(
                f"Invalid value for -k option: '{namespace.waf_kind}'. "
                "Must be one of none, generic, or known."
            ) from None
        waf_kind = WafKind.NONE
    if namespace.threads < 1:
        raise UsageError("-t <threads> must be a positive integer.")

    return Options(
        tool=tool,
        extract_redirect=namespace.extract_redirect,
        strip_components=namespace.strip_components,
        extract_domain_only=namespace.extract_domain_only,
        threads=namespace.threads,
        export_ip_port=namespace.export_ip_port,
        open_only=namespace.open_only,
        dns_ip=namespace.dns_ip,
        dns_cname=namespace.dns_cname,
        dns_mx=namespace.dns_mx,
        waf_kind=waf_kind,
        ffuf_folder=namespace.ffuf_folder,
        filter_codes=namespace.filter_codes,
        filter_types=namespace.filter_types,
        filter_lengths=namespace.filter_lengths,
        input_file=namespace.inputs[0] if namespace.inputs else "",
    )


def _as_list(value: str | None) -> list[str]:
    return [value] if value else []


def _line_processor(options: Options):
    """Return a callable mapping one input line to the list of items it yields."""
    tool = options.tool
    if tool == "httpx":
        return lambda line: _as_list(
            process_httpx_line(line, options.extract_redirect, options.strip_components)
        )
    if tool == "ffuf":
        return lambda line: _as_list(
            process_ffuf_line(
                line,
                options.filter_codes,
                options.filter_types,
                options.filter_lengths,
                options.extract_redirect,
                options.strip_components,
            )
        )
    if tool == "dirsearch":
        return lambda line: _as_list(
            process_dirsearch_line(line, options.extract_redirect, options.strip_components)
        )
    if tool == "amass":
        return process_amass_line
    if tool == "nmap":
        return NmapParser(options.export_ip_port, options.open_only).feed
    if tool == "dns":
        return lambda line: process_dns_line(
            line, options.dns_ip, options.dns_cname, options.dns_mx
        )
    if tool == "wafw00f":
        return lambda line: _as_list(process_wafw00f_line(line, options.waf_kind))
    if tool == "domain":
        return lambda line: _as_list(process_domain_line(line))
    if tool == "mantra":
        return lambda line: _as_list(process_mantra_line(line))
    raise ValueError(f"unsupported tool {tool!r}")


def _domain_of(tool: str, item: str) -> str:
    if tool == "nmap":
        return item.partition(" - ")[0].strip("[]")
    if tool == "wafw00f":
        return get_domain(item.partition(" - ")[0])
    if tool == "mantra":
        _, separator, url = item.partition(" - ")
        return get_domain(url) if separator else ""
    return get_domain(item)


def _extract(lines: Iterable[str], options: Options) -> Iterator[str]:
    process = _line_processor(options)
    for line in lines:
        if not line:
            continue
        for item in process(line):
            if not item:
                continue
            if options.tool == "domain" or not options.extract_domain_only:
                yield item
            else:
                domain = _domain_of(options.tool, item)
                if domain:
                    yield domain


def process_lines(lines: Iterable[str], options: Options) -> Iterator[str]:
    """Yield the output lines for the given input lines, in input order.

    With the dns tool in IP mode the addresses are sorted and de-duplicated.
    """
    results = _extract(lines, options)
    if options.tool == "dns" and options.dns_ip:
        yield from sorted(set(results))
    else:
        yield from results


def _lines_of(stream) -> Iterator[str]:
    for line in stream:
        yield line.rstrip("\n").removesuffix("\r")


def _folder_lines() -> Iterator[str]:
    try:
        entries = sorted(os.scandir("."), key=lambda entry: entry.name)
    except OSError as exc:
        print(f"Error reading current directory for ffuf -f: {exc}", file=sys.stderr)
        return
    found = False
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            continue
        try:
            handle = open(entry.name, encoding="utf-8", errors="replace")
        except OSError as exc:
            print(f"Error opening file '{entry.name}' for ffuf: {exc}", file=sys.stderr)
            continue
        with handle:
            try:
                yield from _lines_of(handle)
            except OSError as exc:
                print(f"Error reading from file '{entry.name}' for ffuf: {exc}", file=sys.stderr)
        found = True
    if not found:
        print("Warning: ffuf -f: No regular files found in the current directory.", file=sys.stderr)


def _input_lines(options: Options) -> Iterator[str]:
    if options.tool == "ffuf" and options.ffuf_folder:
        yield from _folder_lines()
    elif options.input_file and options.input_file != "-":
        with open(options.input_file, encoding="utf-8", errors="replace") as handle:
            yield from _lines_of(handle)
    else:
        yield from _lines_of(sys.stdin)


def _usage_error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    print(USAGE, file=sys.stderr, end="")
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except UsageError as exc:
        return _usage_error(str(exc))

    if options.tool == "ffuf" and options.ffuf_folder:
        if options.input_file and options.input_file != "-":
            print(
                f"Warning: Input file argument '{options.input_file}' is ignored "
                "when -f (process folder) option is used with ffuf.",
                file=sys.stderr,
            )
    elif not options.input_file:
        if sys.stdin.isatty():
            return _usage_error("No input file specified and no data piped to stdin.")
    elif options.input_file != "-" and not os.path.exists(options.input_file):
        print(f"Error: Input file '{options.input_file}' not found.", file=sys.stderr)
        return 1

    try:
        for result in process_lines(_input_lines(options), options):
            print(result)
    except OSError as exc:
        print(f"Error reading input: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
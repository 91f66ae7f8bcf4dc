# reconparse

`reconparse` reads the text output of reconnaissance tools and turns it into
plain, one-item-per-line lists: URLs, host names, IP addresses, `ip:port`
pairs, WAF findings or leaked secrets. It is meant to sit between a scan and
whatever you feed its results into next.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no runtime dependencies.
The tests use pytest (`pip install .[test]`).

## Command line

```
reconparse <tool> [options] [input_file]
```

`input_file` is optional; when it is omitted or given as `-`, input is read
from standard input. If no file is named and standard input is a terminal,
the command stops with an error. Results are written to standard output, one
per line, in input order. Empty input lines are skipped.

On a bad command line (unknown tool, bad option value, missing dns mode) an
error and the usage text are printed to standard error and the exit status
is 1. A missing input file also gives exit status 1.

### Supported tools

| Tool        | Input                                    | Output                                   |
|-------------|------------------------------------------|------------------------------------------|
| `domain`    | a list of URLs                           | the host name or IP of each URL          |
| `httpx`     | httpx output                             | the URL at the start of each line        |
| `ffuf`      | ffuf CSV output                          | the URL of each result                   |
| `dirsearch` | dirsearch reports                        | the URL found on each line               |
| `amass`     | amass output                             | host names, including MX targets         |
| `nmap`      | nmap normal output                       | `[ip] - [port] - [service] - [version] - [state]` |
| `dns`       | comma-separated DNS records (`name,type,ttl,value`) | IPs, CNAME targets or MX hosts |
| `wafw00f`   | wafw00f output                           | `URL` or `URL - WAF name`                |
| `mantra`    | mantra output                            | `secret - URL`                           |

Lines that do not match a tool's expected format produce no output; they are
skipped rather than reported as errors.

### Common options

- `-r` — use the redirect target instead of the original URL, where the tool
  reports one (httpx, ffuf, dirsearch). For ffuf a relative redirect location
  is resolved against the result URL.
- `-s` — strip the query string and fragment from URLs.
- `-d` — print only the host name or IP of each result (for nmap, the IP; for
  wafw00f and mantra, the host of the URL part). The `domain` tool does this
  anyway.
- `-t <threads>` — must be a positive integer (default 1). It is checked but
  does not change how lines are processed.

### nmap options

- `-p` — print `ip:port` pairs instead of the full line.
- `-o` — keep open ports only.

A port line is attributed to the last IP address seen on a
`Nmap scan report for ...` line; port lines before any such line are ignored.
A missing version is shown as `N/A`.

### dns options (one is required)

- `-ip` — A and AAAA addresses, sorted and with duplicates removed. When given,
  `-cname` and `-mx` are ignored.
- `-cname` — canonical names from CNAME records.
- `-mx` — mail exchanger host names from MX records (IP values are skipped).

### wafw00f options

- `-k <kind>` — which results to keep: `none` (default), `generic` or `known`.
  `None` in the WAF column is kind `none`, `Generic` is `generic`, anything
  else is `known`. For `none` only the URL is printed. URLs lose their query
  and fragment.

### ffuf options

- `-f` — read every regular file in the current directory, in name order, as
  ffuf input. An input file argument is then ignored with a warning.
- `-fc <codes>` — comma-separated status codes to drop, e.g. `403,404`.
- `-fcl <lengths>` — comma-separated content lengths to drop.
- `-fct <types>` — comma-separated content types to drop; a filter matches when
  it is contained in the result's content type.

Comment lines, the CSV header and lines with fewer than ten columns are
skipped.

### Examples

```
reconparse domain urls.txt
reconparse httpx -r -s httpx.txt
reconparse ffuf -fc 403,404 -fcl 0 results.csv
reconparse nmap -o -p scan.txt
reconparse dns -ip records.csv
reconparse wafw00f -k known wafw00f.txt
reconparse mantra -d mantra.txt
```

## Library use

Each tool has a line parser that can be called directly:

- `reconparse.domain.process_domain_line(line)`
- `reconparse.httpx.process_httpx_line(line, extract_redirect, strip_components)`
- `reconparse.ffuf.process_ffuf_line(line, filter_codes, filter_types, filter_lengths, extract_redirect, strip_components)`
  — filters may be comma-separated strings or iterables of values
- `reconparse.dirsearch.process_dirsearch_line(line, extract_redirect, strip_components)`
- `reconparse.amass.process_amass_line(line)` — returns a list of host names
- `reconparse.nmap.process_nmap_line(line, current_ip, export_ip_port, open_only)`
  — returns the entries and the IP context for the next line;
  `reconparse.nmap.NmapParser` keeps that context for you
- `reconparse.dns.process_dns_line(line, extract_ip, extract_cname, extract_mx)` — returns a list
- `reconparse.wafw00f.process_wafw00f_line(line, kind)` — `kind` is a
  `WafKind` or its string value; an unknown kind raises `ValueError`
- `reconparse.mantra.process_mantra_line(line)`

The single-result parsers return `None` when a line yields nothing.
`reconparse.urls` provides `is_valid_url`, `strip_url_components`,
`get_domain` and `is_ip`. `reconparse.cli.parse_args` and
`reconparse.cli.process_lines` run the whole command pipeline over any
iterable of lines.

```python
from reconparse.httpx import process_httpx_line
from reconparse.nmap import NmapParser
from reconparse.urls import get_domain

process_httpx_line(
    "https://example.com [301] [https://www.example.com/]",
    extract_redirect=True,
    strip_components=False,
)
# 'https://www.example.com/'

parser = NmapParser(export_ip_port=True, open_only=True)
parser.feed("Nmap scan report for host.example.com (192.0.2.10)")
parser.feed("22/tcp open ssh OpenSSH 9.0")
# ['192.0.2.10:22']

get_domain("example.com/path")
# 'example.com'
```

## What it does not do

`reconparse` only reads text that the tools have already produced; it does
not run any scanner itself. Input is processed on a single thread, so `-t`
has no effect on speed. The nmap parser understands normal (`-oN`) output
only, not grepable or XML output.
import pytest

from reconparse.domain import process_domain_line


def test_full_url():
    assert process_domain_line("https://example.com/path?q=1") == "example.com"


def test_without_scheme():
    assert process_domain_line("sub.example.com/login") == "sub.example.com"


def test_ip_with_port():
    assert process_domain_line("192.0.2.10:8080") == "192.0.2.10"


def test_ipv6_literal():
    assert process_domain_line("http://[2001:db8::1]:443/") == "2001:db8::1"


@pytest.mark.parametrize("line", ["", "http://bad host/", "http://example.com:port/"])
def test_nothing_extracted(line):
    assert process_domain_line(line) is None
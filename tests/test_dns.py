import pytest

from reconparse.dns import process_dns_line


def test_a_record_ip():
    assert process_dns_line("example.com,A,300,192.0.2.1", extract_ip=True) == ["192.0.2.1"]


def test_aaaa_record_ip_trimmed():
    assert process_dns_line("example.com, AAAA ,300, 2001:db8::1 ", extract_ip=True) == [
        "2001:db8::1"
    ]


def test_a_record_with_invalid_ip():
    assert process_dns_line("example.com,A,300,not-an-ip", extract_ip=True) == []


def test_ip_mode_ignores_other_flags():
    line = "www.example.com,CNAME,300,example.com"
    assert process_dns_line(line, extract_ip=True, extract_cname=True, extract_mx=True) == []


def test_cname_record():
    line = "www.example.com,CNAME,300,edge.example.com"
    assert process_dns_line(line, extract_cname=True) == ["edge.example.com"]


def test_cname_not_requested():
    line = "www.example.com,CNAME,300,edge.example.com"
    assert process_dns_line(line, extract_mx=True) == []


def test_mx_record_hostname():
    line = "example.com,MX,300,mail.example.com"
    assert process_dns_line(line, extract_mx=True) == ["mail.example.com"]


def test_mx_record_ip_value_skipped():
    assert process_dns_line("example.com,MX,300,192.0.2.5", extract_mx=True) == []


@pytest.mark.parametrize("line", ["", "example.com,A,300", "just text"])
def test_short_lines(line):
    assert process_dns_line(line, extract_ip=True, extract_cname=True, extract_mx=True) == []


def test_results_are_values_from_line():
    line = "example.com,MX,300,mx1.example.com,extra"
    result = process_dns_line(line, extract_cname=True, extract_mx=True)
    assert result == [line.split(",")[3]]
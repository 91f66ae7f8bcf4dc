from reconparse.dirsearch import process_dirsearch_line

ORIGINAL = "https://example.com/old"
TARGET = "https://example.com/new"
REDIRECT_LINE = f"301   0B   {ORIGINAL}    -> REDIRECTS TO: {TARGET}"


def test_comment_line_is_ignored():
    assert process_dirsearch_line("# Dirsearch started at somewhen") is None


def test_basic_line_returns_url():
    url = "https://example.com/admin"
    assert process_dirsearch_line(f"200   1KB  {url}") == url


def test_too_few_fields():
    assert process_dirsearch_line("200 https://example.com/") is None


def test_redirect_ignored_without_flag():
    assert process_dirsearch_line(REDIRECT_LINE) == ORIGINAL


def test_redirect_used_with_flag():
    assert process_dirsearch_line(REDIRECT_LINE, extract_redirect=True) == TARGET


def test_relative_redirect_falls_back_to_original():
    line = f"302 0B {ORIGINAL} -> REDIRECTS TO: /login"
    assert process_dirsearch_line(line, extract_redirect=True) == ORIGINAL


def test_url_found_in_later_field():
    url = "https://example.com/b"
    assert process_dirsearch_line(f"200 1KB [x] {url}") == url


def test_no_url_anywhere():
    assert process_dirsearch_line("200 1KB nothing here") is None


def test_strip_components():
    base = "https://example.com/a"
    line = f"200 1KB {base}?x=1#top"
    assert process_dirsearch_line(line, strip_components=True) == base


def test_strip_applies_to_redirect():
    line = f"301 0B {ORIGINAL} -> REDIRECTS TO: {TARGET}?next=1"
    assert process_dirsearch_line(line, extract_redirect=True, strip_components=True) == TARGET
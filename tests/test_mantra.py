import pytest

from reconparse.mantra import process_mantra_line

URL = "https://example.com/static/app.js"
SECRET_VALUE = "placeholder"


def test_basic_finding():
    line = f"[+] {URL} [{SECRET_VALUE}]"
    assert process_mantra_line(line) == f"{SECRET_VALUE} - {URL}"


def test_ansi_codes_removed():
    line = f"\x1b[32m[+]\x1b[0m {URL} \x1b[33m[{SECRET_VALUE}]\x1b[0m"
    assert process_mantra_line(line) == f"{SECRET_VALUE} - {URL}"


def test_line_number_suffix_removed():
    line = f"[+] {URL}  [{SECRET_VALUE}] [Line: 42]  "
    assert process_mantra_line(line) == f"{SECRET_VALUE} - {URL}"


def test_secret_with_inner_spaces_is_trimmed():
    line = f"[+] {URL} [  {SECRET_VALUE}  ]"
    assert process_mantra_line(line) == f"{SECRET_VALUE} - {URL}"


@pytest.mark.parametrize(
    "line",
    [
        f"[-] {URL} [{SECRET_VALUE}]",
        f"{URL} [{SECRET_VALUE}]",
        f"[+] {URL} []",
        f"[+] [{SECRET_VALUE}]",
        f"[+] {URL} [{SECRET_VALUE}] trailing",
        f"[+] {URL} no brackets",
        "",
    ],
)
def test_not_a_finding(line):
    assert process_mantra_line(line) is None
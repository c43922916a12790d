import pytest

from gentest.text import escape_xml, gha_escape, wildcard_match


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("suite/a", "suite/*"),
        ("suite/a", "*"),
        ("", "*"),
        ("", ""),
        ("abc", "a?c"),
        ("abc", "*c"),
        ("abc", "a**"),
        ("aXbYc", "a*b*c"),
        ("abcabc", "*abc"),
    ],
)
def test_wildcard_matches(text, pattern):
    assert wildcard_match(text, pattern) is True


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("abc", ""),
        ("", "?"),
        ("abc", "ab"),
        ("abc", "a?"),
        ("abc", "*b"),
        ("suite/a", "other/*"),
    ],
)
def test_wildcard_rejects(text, pattern):
    assert wildcard_match(text, pattern) is False


def test_wildcard_exact_text_matches_itself():
    for name in ["unit/basic", "fixtures/x<int>(1, 2)", "a"]:
        assert wildcard_match(name, name)


def test_gha_escape_special_characters():
    assert gha_escape("%") == "%25"
    assert gha_escape("\r") == "%0D"
    assert gha_escape("\n") == "%0A"


def test_gha_escape_leaves_plain_text():
    assert gha_escape("plain text: ok") == "plain text: ok"


def test_gha_escape_removes_newlines():
    out = gha_escape("line1\nline2\r\n100%")
    assert "\n" not in out and "\r" not in out
    assert out.startswith("line1%0Aline2")


def test_escape_xml_entities():
    assert escape_xml("&") == "&amp;"
    assert escape_xml("<") == "&lt;"
    assert escape_xml(">") == "&gt;"


def test_escape_xml_keeps_quotes_and_text():
    assert escape_xml('say "hi"') == 'say "hi"'


def test_escape_xml_has_no_raw_markup():
    out = escape_xml("<a & b>")
    assert "<" not in out and ">" not in out
    assert out.count("&") == out.count(";")
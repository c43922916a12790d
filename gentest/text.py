"""Small text helpers used by the runner: wildcard matching and escaping."""

from __future__ import annotations

_GHA_ESCAPES = {"%": "%25", "\r": "%0D", "\n": "%0A"}
_XML_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}


def wildcard_match(text: str, pattern: str) -> bool:
    """Match ``text`` against ``pattern`` where ``*`` is any run and ``?`` any character."""
    ti = pi = 0
    star = -1
    mark = 0
    while ti < len(text):
        if pi < len(pattern) and (pattern[pi] == "?" or pattern[pi] == text[ti]):
            ti += 1
            pi += 1
        elif pi < len(pattern) and pattern[pi] == "*":
            star = pi
            pi += 1
            mark = ti
        elif star != -1:
            pi = star + 1
            mark += 1
            ti = mark
        else:
            return False
    while pi < len(pattern) and pattern[pi] == "*":
        pi += 1
    return pi == len(pattern)


def _escape(text: str, table: dict) -> str:
    return "".join(table.get(ch, ch) for ch in text)


def gha_escape(text: str) -> str:
    """Escape a value for a GitHub Actions workflow command."""
    return _escape(text, _GHA_ESCAPES)


def escape_xml(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for XML content and attribute values."""
    return _escape(text, _XML_ESCAPES)
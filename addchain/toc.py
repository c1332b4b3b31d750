"""Table of contents generation for markdown documents."""

from __future__ import annotations

import re
from typing import NamedTuple

TOC_MARKER = "<!--- TABLE OF CONTENTS --->"
"""Placeholder marking where the table of contents is inserted."""

_HEADING_RE = re.compile(r"^(#+)\s+(.+)$")
_ANCHOR_TABLE = str.maketrans({" ": "-", "(": None, ")": None, "/": None})


class _Heading(NamedTuple):
    level: int
    text: str


def anchor(heading: str) -> str:
    """Return the anchor a hosted markdown renderer gives a heading."""
    return heading.lower().translate(_ANCHOR_TABLE)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def headings(text: str) -> list[_Heading]:
    """Extract (level, text) headings from markdown text."""
    found = []
    for line in _lines(text):
        match = _HEADING_RE.match(line)
        if match:
            found.append(_Heading(len(match.group(1)), match.group(2)))
    return found


def generate_toc(body: str, minlevel: int, maxlevel: int) -> str:
    """Replace the marker in body with a table of contents of the given levels."""
    parts = ["## Table of Contents\n\n"]
    for level, text in headings(body):
        if minlevel <= level <= maxlevel:
            indent = "  " * (level - minlevel)
            parts.append(f"{indent}* [{text}](#{anchor(text)})\n")
    return body.replace(TOC_MARKER, "".join(parts))


def toc() -> str:
    """Return the marker to be replaced later by a table of contents."""
    return TOC_MARKER
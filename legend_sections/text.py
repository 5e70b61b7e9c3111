"""
Label cleaning and hyphenation for legend entries.
"""

from __future__ import annotations

import re
from xml.sax.saxutils import escape

from bs4 import BeautifulSoup
from pyphen import Pyphen

_ZERO_WIDTH = re.compile("[\u200b\u200c\u200d\u2060]")
_NON_BREAKING_SPACES = re.compile("[\u00a0\u202f]")
WORD_RE = re.compile(r"[A-Za-z]{7,}")
SOFT_HYPHEN = "\u00ad"


def normalize_whitespace(value: str) -> str:
    """Collapse unusual whitespace into single ASCII spaces.

    Example:
        >>> normalize_whitespace("a\\u00a0b\\u200bb")
        'a bb'
        >>> normalize_whitespace("  Water\\n  bodies ")
        'Water bodies'
    """

    clean = _NON_BREAKING_SPACES.sub(" ", value)
    clean = _ZERO_WIDTH.sub("", clean)
    clean = re.sub(r"\s+", " ", clean)
    return clean.strip()


def plain_label(html: str) -> str:
    """Strip markup from a label and normalize its whitespace.

    Example:
        >>> plain_label("<b>Major</b>&nbsp;roads")
        'Major roads'
    """

    soup = BeautifulSoup(html, "html.parser")
    return normalize_whitespace(soup.get_text())


def hyphenate_label(text: str, dic: Pyphen) -> str:
    """Insert soft hyphens into long words."""

    def repl(match: re.Match[str]) -> str:
        return dic.inserted(match.group(0), hyphen=SOFT_HYPHEN)

    return WORD_RE.sub(repl, text)


def label_markup(html: str, dic: Pyphen | None = None) -> str:
    """Return label text safe to hand to a ReportLab paragraph.

    Example:
        >>> label_markup("Roads & <i>trails</i>")
        'Roads &amp; trails'
    """

    text = escape(plain_label(html))
    if dic is not None:
        text = hyphenate_label(text, dic)
    return text

"""
Tests for legend label cleaning.
"""

from pyphen import Pyphen

from legend_sections.text import (
    SOFT_HYPHEN,
    hyphenate_label,
    label_markup,
    normalize_whitespace,
    plain_label,
)


def test_normalize_whitespace():
    assert normalize_whitespace("  Land\u202fuse \u200b\n zones ") == "Land use zones"


def test_plain_label_strips_markup():
    assert plain_label("<span class='x'>Census <b>tracts</b></span>") == "Census tracts"


def test_label_markup_escapes_reserved_characters():
    assert label_markup("a &lt; b &amp; c") == "a &lt; b &amp; c"


def test_hyphenate_label_inserts_soft_hyphens_in_long_words():
    dic = Pyphen(lang="en_US")
    result = hyphenate_label("Transportation network", dic)
    assert SOFT_HYPHEN in result
    assert result.replace(SOFT_HYPHEN, "") == "Transportation network"


def test_short_words_are_not_hyphenated():
    dic = Pyphen(lang="en_US")
    assert hyphenate_label("Big lake", dic) == "Big lake"

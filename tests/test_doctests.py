"""
Run the docstring examples of the package modules.
"""

import doctest

import pytest

from legend_sections import combinations, ingest, measure, models, partition, settings, text


@pytest.mark.parametrize(
    "module", [combinations, ingest, measure, models, partition, settings, text]
)
def test_docstring_examples(module):
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0

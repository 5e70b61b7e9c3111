"""
Tests for legend settings and config loading.
"""

import json

import pytest

from legend_sections.settings import LegendSettings, load_settings


def test_defaults():
    settings = LegendSettings()
    assert settings.max_layers_for_search == 12
    assert settings.search_deadline is None
    assert settings.label_width == pytest.approx(
        settings.section_width - settings.symbol_size - settings.symbol_gap
    )


def test_from_mapping_accepts_both_key_styles():
    settings = LegendSettings.from_mapping(
        {"maxLayersForSearch": 6, "search_deadline": 0.25, "labelFontSize": 7}
    )
    assert settings.max_layers_for_search == 6
    assert settings.search_deadline == 0.25
    assert settings.label_font_size == 7


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError):
        LegendSettings.from_mapping({"columns": 3})


@pytest.mark.parametrize(
    "values",
    [
        {"max_layers_for_search": -1},
        {"search_deadline": 0},
        {"max_layers_for_search": "8"},
        {"max_layers_for_search": True},
        {"search_deadline": "0.5"},
    ],
)
def test_invalid_values(values):
    with pytest.raises(ValueError):
        LegendSettings(**values)


def test_load_settings_from_file(tmp_path):
    path = tmp_path / "legend.json"
    path.write_text(json.dumps({"maxLayersForSearch": 9, "sectionWidth": 144}))
    settings = load_settings(path)
    assert settings.max_layers_for_search == 9
    assert settings.section_width == 144


def test_load_settings_defaults_without_path():
    assert load_settings(None) == LegendSettings()


def test_load_settings_rejects_non_object(tmp_path):
    path = tmp_path / "legend.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_settings(path)


def test_load_settings_rejects_string_numbers(tmp_path):
    path = tmp_path / "legend.json"
    path.write_text(json.dumps({"maxLayersForSearch": "8"}))
    with pytest.raises(ValueError):
        load_settings(path)

"""
Tests for the build_legend command-line script.
"""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "build_legend.py"


@pytest.fixture(scope="module")
def build_legend():
    spec = importlib.util.spec_from_file_location("build_legend", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def layer_file(tmp_path):
    path = tmp_path / "layers.json"
    records = [
        {"name": f"Layer {i}", "height": h, "visible": True}
        for i, h in enumerate([10, 10, 10, 10])
    ]
    path.write_text(json.dumps({"layers": records}))
    return path


def test_writes_layout_to_file(build_legend, layer_file, tmp_path):
    output = tmp_path / "out" / "layout.json"
    assert build_legend.main([str(layer_file), "-s", "2", "-o", str(output)]) == 0
    document = json.loads(output.read_text())
    assert document["sectionsUsed"] == 2
    assert document["search"] == "performed"
    assert document["bestHeight"] == 20
    assert document["sectionHeights"] == [20, 20]
    assert [layer["splitBefore"] for layer in document["layers"]] == [
        False,
        False,
        True,
        False,
    ]
    assert document["layers"][0]["visible"] is True


def test_prints_layout_to_stdout(build_legend, layer_file, capsys):
    assert build_legend.main([str(layer_file), "--sections", "4"]) == 0
    document = json.loads(capsys.readouterr().out)
    assert document["sectionsUsed"] == 1
    assert document["search"] == "too_few_layers"
    assert document["bestHeight"] is None


def test_max_layers_override(build_legend, layer_file, capsys):
    assert build_legend.main([str(layer_file), "--max-layers", "3"]) == 0
    document = json.loads(capsys.readouterr().out)
    assert document["search"] == "too_many_layers"


def test_config_file_and_measure(build_legend, tmp_path, capsys):
    layers = tmp_path / "layers.json"
    layers.write_text(
        json.dumps(
            [
                {"name": "Roads", "symbology": ["Highway", "Street", "Trail"]},
                {"name": "Rivers"},
                {"name": "Lakes"},
                {"name": "Parks", "symbology": ["City", "Provincial"]},
            ]
        )
    )
    config = tmp_path / "legend.json"
    config.write_text(json.dumps({"sectionWidth": 150, "maxLayersForSearch": 10}))
    code = build_legend.main([str(layers), "--config", str(config), "--measure"])
    assert code == 0
    document = json.loads(capsys.readouterr().out)
    assert document["search"] == "performed"
    assert all(layer["height"] > 0 for layer in document["layers"])
    assert max(document["sectionHeights"]) == pytest.approx(document["bestHeight"])

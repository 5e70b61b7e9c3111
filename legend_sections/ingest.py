"""
Load legend layers from JSON documents.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping

from .models import LegendLayer, SymbologyEntry, layer_height

logger = logging.getLogger(__name__)

_NAME_KEYS = ("name", "title", "layerName")
_LABEL_KEYS = ("label", "name")
_IMAGE_KEYS = ("image", "imageData", "svgcode")
_CONSUMED_KEYS = {*_NAME_KEYS, "height", "symbology", "id", "splitBefore"}


def _first_present(record: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    """Return the value of the first key present in ``record``, else None."""

    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def symbology_from_record(item: Any) -> SymbologyEntry:
    """Convert a symbology item (string or object) into a SymbologyEntry.

    Example:
        >>> symbology_from_record("Paved")
        SymbologyEntry(label='Paved', image=None)
        >>> symbology_from_record({"name": "Gravel", "svgcode": "<svg/>"})
        SymbologyEntry(label='Gravel', image='<svg/>')
    """

    if isinstance(item, str):
        return SymbologyEntry(label=item)
    if not isinstance(item, Mapping):
        raise ValueError(f"Symbology item must be a string or object, got {item!r}")
    label = _first_present(item, _LABEL_KEYS)
    return SymbologyEntry(
        label="" if label is None else str(label),
        image=_first_present(item, _IMAGE_KEYS),
    )


def layer_from_record(record: Mapping[str, Any]) -> LegendLayer:
    """Convert one JSON layer record into a LegendLayer.

    Unrecognized keys are carried in ``data`` untouched.

    Example:
        >>> layer = layer_from_record({"title": "Parks", "height": 20, "opacity": 0.5})
        >>> layer.name, layer.height, layer.data
        ('Parks', 20.0, {'opacity': 0.5})
    """

    if not isinstance(record, Mapping):
        raise ValueError(f"Layer record must be an object, got {record!r}")
    name = _first_present(record, _NAME_KEYS)
    height = layer_height(record) if "height" in record else 0.0
    symbology = record.get("symbology") or []
    if not isinstance(symbology, list):
        raise ValueError(f"Layer symbology must be a list, got {symbology!r}")
    layer_id = record.get("id")
    return LegendLayer(
        name="" if name is None else str(name),
        height=height,
        symbology=[symbology_from_record(item) for item in symbology],
        layer_id=None if layer_id is None else str(layer_id),
        data={key: value for key, value in record.items() if key not in _CONSUMED_KEYS},
    )


def load_layers(path: Path) -> List[LegendLayer]:
    """Read legend layers from a JSON file.

    The document is either a list of layer records or an object with a
    ``layers`` list.
    """

    document = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(document, Mapping):
        document = document.get("layers")
    if not isinstance(document, list):
        raise ValueError(f"{path} does not contain a list of layer records")
    layers = [layer_from_record(record) for record in document]
    logger.debug("Loaded %d legend layers from %s", len(layers), path)
    return layers

"""
Typed containers for legend layers and computed section layouts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple


@dataclass(slots=True)
class SymbologyEntry:
    """A single symbol row of a legend entry.

    Attributes:
        label: Display text for the symbol, possibly containing markup.
        image: Optional image reference (data URL or SVG source).
    """

    label: str
    image: str | None = None


@dataclass(slots=True)
class LegendLayer:
    """One legend entry to be placed into a section.

    Example:
        >>> layer = LegendLayer("Roads", height=12.0)
        >>> layer.with_height(30.0).height
        30.0
        >>> layer.height
        12.0
    """

    name: str
    height: float = 0.0
    symbology: List[SymbologyEntry] = field(default_factory=list)
    layer_id: str | None = None
    data: Dict[str, Any] = field(default_factory=dict)

    def with_height(self, height: float) -> "LegendLayer":
        """Return a copy of the layer carrying a new height."""

        return replace(self, height=height)

    def to_record(self) -> Dict[str, Any]:
        """Return a JSON-ready dict with opaque data merged back in.

        Example:
            >>> LegendLayer("Lakes", 4.0, data={"visible": True}).to_record()
            {'visible': True, 'name': 'Lakes', 'height': 4.0, 'symbology': []}
        """

        record: Dict[str, Any] = dict(self.data)
        record["name"] = self.name
        record["height"] = self.height
        record["symbology"] = [
            {"label": entry.label, "image": entry.image}
            if entry.image is not None
            else {"label": entry.label}
            for entry in self.symbology
        ]
        if self.layer_id is not None:
            record["id"] = self.layer_id
        return record


def layer_height(layer: Any) -> float:
    """Return the additive height of a layer object or mapping.

    Example:
        >>> layer_height({"height": 3})
        3.0
        >>> layer_height(LegendLayer("Rivers", 7.5))
        7.5
    """

    if isinstance(layer, Mapping):
        if "height" not in layer:
            raise ValueError("Layer mapping has no 'height' key")
        raw = layer["height"]
    else:
        if not hasattr(layer, "height"):
            raise ValueError(f"Layer {layer!r} has no height")
        raw = layer.height
    if isinstance(raw, bool):
        raise ValueError(f"Layer height must be numeric, got {raw!r}")
    try:
        height = float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Layer height must be numeric, got {raw!r}") from exc
    if not math.isfinite(height):
        raise ValueError(f"Layer height must be finite, got {raw!r}")
    if height < 0:
        raise ValueError(f"Layer height must be non-negative, got {height}")
    return height


class SearchOutcome(str, Enum):
    """How a layout was reached."""

    PERFORMED = "performed"
    TOO_MANY_LAYERS = "too_many_layers"
    TOO_FEW_LAYERS = "too_few_layers"
    DEADLINE = "deadline"


@dataclass(frozen=True, slots=True)
class SectionedLayer:
    """An input layer paired with its computed ``split_before`` flag."""

    layer: Any
    split_before: bool


@dataclass(frozen=True, slots=True)
class LegendLayout:
    """Result of sectioning a legend.

    Attributes:
        entries: Input layers, in order, each with its split flag.
        sections_used: 1 when no split was applied, otherwise the requested count.
        outcome: Whether the search ran, and why it was skipped when it did not.
        best_height: Tallest section of the chosen layout (None when skipped).
        candidates_scored: Number of candidates evaluated.
    """

    entries: Tuple[SectionedLayer, ...]
    sections_used: int
    outcome: SearchOutcome
    best_height: float | None = None
    candidates_scored: int = 0

    @property
    def split_flags(self) -> List[bool]:
        """Return the ``split_before`` flag of every entry."""

        return [entry.split_before for entry in self.entries]

    @property
    def search_performed(self) -> bool:
        """Return True when the section search ran to completion."""

        return self.outcome is SearchOutcome.PERFORMED

    def sections(self) -> List[List[Any]]:
        """Group the layers into contiguous sections.

        Example:
            >>> layout = LegendLayout(
            ...     entries=(SectionedLayer("a", False), SectionedLayer("b", True)),
            ...     sections_used=2,
            ...     outcome=SearchOutcome.PERFORMED,
            ... )
            >>> layout.sections()
            [['a'], ['b']]
        """

        groups: List[List[Any]] = []
        for entry in self.entries:
            if entry.split_before or not groups:
                groups.append([])
            groups[-1].append(entry.layer)
        return groups

    def section_heights(self) -> List[float]:
        """Return the summed height of each section."""

        return [
            sum(layer_height(layer) for layer in group) for group in self.sections()
        ]

    def to_records(self) -> List[Dict[str, Any]]:
        """Return JSON-ready layer records carrying ``splitBefore``."""

        records: List[Dict[str, Any]] = []
        for entry in self.entries:
            layer = entry.layer
            if isinstance(layer, LegendLayer):
                record = layer.to_record()
            elif isinstance(layer, Mapping):
                record = dict(layer)
            else:
                record = {"height": layer_height(layer)}
            record["splitBefore"] = entry.split_before
            records.append(record)
        return records

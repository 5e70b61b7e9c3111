"""Partitioner options and legend geometry."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from reportlab.lib.units import inch

from .constants import TOO_MANY_LAYERS

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(slots=True)
class LegendSettings:
    """Options for sectioning and measuring a legend.

    Example:
        >>> settings = LegendSettings()
        >>> settings.max_layers_for_search
        12
        >>> settings.label_width > 0
        True
    """

    max_layers_for_search: int = TOO_MANY_LAYERS
    search_deadline: float | None = None
    section_width: float = 2.5 * inch
    font_name: str = "Helvetica"
    font_bold_name: str = "Helvetica-Bold"
    title_font_size: float = 10.0
    label_font_size: float = 8.0
    symbol_size: float = 16.0
    symbol_gap: float = 4.0
    entry_spacing: float = 6.0
    hyphenation_lang: str = "en_US"

    def __post_init__(self) -> None:
        if isinstance(self.max_layers_for_search, bool) or not isinstance(
            self.max_layers_for_search, int
        ):
            raise ValueError(
                f"max_layers_for_search must be an integer, got {self.max_layers_for_search!r}"
            )
        if self.search_deadline is not None and (
            isinstance(self.search_deadline, bool)
            or not isinstance(self.search_deadline, (int, float))
        ):
            raise ValueError(
                f"search_deadline must be a number, got {self.search_deadline!r}"
            )
        if self.max_layers_for_search < 0:
            raise ValueError(
                f"max_layers_for_search must be >= 0, got {self.max_layers_for_search}"
            )
        if self.search_deadline is not None and self.search_deadline <= 0:
            raise ValueError(
                f"search_deadline must be positive, got {self.search_deadline}"
            )

    @property
    def label_width(self) -> float:
        """Return the width left for symbol labels beside the swatch.

        Returns:
            Width in points.
        """

        return self.section_width - self.symbol_size - self.symbol_gap

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "LegendSettings":
        """Build settings from snake_case or camelCase keys.

        Example:
            >>> LegendSettings.from_mapping({"maxLayersForSearch": 8}).max_layers_for_search
            8
        """

        known = {item.name for item in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = _snake_case(key)
            if name not in known:
                raise ValueError(f"Unknown legend setting: {key}")
            kwargs[name] = value
        return cls(**kwargs)


def _snake_case(key: str) -> str:
    """Return ``key`` converted from camelCase.

    Example:
        >>> _snake_case("searchDeadline")
        'search_deadline'
    """

    return _CAMEL_BOUNDARY.sub("_", key).lower()


def load_settings(path: Path | None) -> LegendSettings:
    """Read settings from a JSON file, or return defaults when ``path`` is None."""

    if path is None:
        return LegendSettings()
    values = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(values, dict):
        raise ValueError(f"Settings file {path} must hold a JSON object")
    return LegendSettings.from_mapping(values)

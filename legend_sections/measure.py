"""Measure legend entry heights with ReportLab."""

from __future__ import annotations

from typing import Dict, Iterable, List

from pyphen import Pyphen
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Flowable, KeepTogether, Paragraph, Spacer, Table
from reportlab.platypus.tables import TableStyle

from .models import LegendLayer
from .settings import LegendSettings
from .text import label_markup


def build_styles(settings: LegendSettings) -> Dict[str, ParagraphStyle]:
    """Create paragraph styles for legend titles and symbol labels.

    Args:
        settings: Legend geometry and fonts.
    Returns:
        Mapping with ``title`` and ``label`` styles.

    Example:
        >>> sorted(build_styles(LegendSettings()))
        ['label', 'title']
    """

    title = ParagraphStyle(
        "legend-title",
        fontName=settings.font_bold_name,
        fontSize=settings.title_font_size,
        leading=settings.title_font_size * 1.2,
        spaceAfter=settings.symbol_gap,
    )
    label = ParagraphStyle(
        "legend-label",
        fontName=settings.font_name,
        fontSize=settings.label_font_size,
        leading=settings.label_font_size * 1.2,
    )
    return {"title": title, "label": label}


def measure_height(flowable: Flowable, width: float) -> float:
    """Return the wrapped height for a flowable at the given width.

    Example:
        >>> measure_height(Spacer(10, 20), 100)
        20
    """

    if isinstance(flowable, KeepTogether):
        content = getattr(flowable, "_content", [])
        return sum(measure_height(child, width) for child in content)
    _, height = flowable.wrap(width, 10_000)
    return height


def _symbology_table(
    *,
    layer: LegendLayer,
    settings: LegendSettings,
    style: ParagraphStyle,
    hyphenator: Pyphen | None,
) -> Table:
    """Return a two-column table of symbol swatches and labels."""

    rows = [
        [
            Spacer(settings.symbol_size, settings.symbol_size),
            Paragraph(label_markup(entry.label, hyphenator), style),
        ]
        for entry in layer.symbology
    ]
    table = Table(
        rows,
        colWidths=[settings.symbol_size + settings.symbol_gap, settings.label_width],
    )
    table.setStyle(
        TableStyle(
            [
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ("LEFTPADDING", (0, 0), (-1, -1), 0),
                ("RIGHTPADDING", (0, 0), (-1, -1), 0),
                ("TOPPADDING", (0, 0), (-1, -1), 0),
                ("BOTTOMPADDING", (0, 0), (-1, -1), settings.symbol_gap / 2),
            ]
        )
    )
    return table


def legend_entry_flowable(
    layer: LegendLayer,
    *,
    settings: LegendSettings,
    styles: Dict[str, ParagraphStyle],
    hyphenator: Pyphen | None = None,
) -> KeepTogether:
    """Build the flowable that renders one legend entry.

    Args:
        layer: Layer to render.
        settings: Legend geometry.
        styles: Styles from :func:`build_styles`.
        hyphenator: Optional hyphenation dictionary for long words.
    Returns:
        KeepTogether holding the title and, when present, the symbol table.
    """

    parts: List[Flowable] = [
        Paragraph(label_markup(layer.name, hyphenator), styles["title"])
    ]
    if layer.symbology:
        parts.append(
            _symbology_table(
                layer=layer,
                settings=settings,
                style=styles["label"],
                hyphenator=hyphenator,
            )
        )
    return KeepTogether(parts)


def measure_layers(
    layers: Iterable[LegendLayer],
    *,
    settings: LegendSettings | None = None,
) -> List[LegendLayer]:
    """Return copies of ``layers`` whose heights are measured at section width.

    Each height includes ``settings.entry_spacing`` so that sections sum to
    the space they occupy on the page.
    """

    settings = settings or LegendSettings()
    styles = build_styles(settings)
    hyphenator = Pyphen(lang=settings.hyphenation_lang)
    measured: List[LegendLayer] = []
    for layer in layers:
        flowable = legend_entry_flowable(
            layer, settings=settings, styles=styles, hyphenator=hyphenator
        )
        height = measure_height(flowable, settings.section_width)
        measured.append(layer.with_height(height + settings.entry_spacing))
    return measured

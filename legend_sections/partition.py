"""
Distribute legend layers into sections of balanced height.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, List, Sequence

from .combinations import Candidate, all_comb
from .models import LegendLayout, SearchOutcome, SectionedLayer, layer_height
from .settings import LegendSettings

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def section_heights(
    heights: Sequence[float], candidate: Candidate, sections: int
) -> List[float]:
    """Return the summed height of each section for one candidate.

    ``candidate[i]`` marks a split between layer ``i`` and layer ``i + 1``.

    Example:
        >>> section_heights([1, 2, 3, 4], (False, True, False), 2)
        [3, 7]
    """

    totals = [0] * sections
    current = 0
    for idx, height in enumerate(heights):
        totals[current] += height
        if idx < len(candidate) and candidate[idx]:
            current += 1
    return totals


def _unsplit(layers: Sequence[Any], outcome: SearchOutcome) -> LegendLayout:
    """Return a single-section layout for ``layers``."""

    return LegendLayout(
        entries=tuple(SectionedLayer(layer, False) for layer in layers),
        sections_used=1,
        outcome=outcome,
    )


def pack_layers_into_sections(
    layers: Sequence[Any],
    sections: int,
    *,
    deadline: float | None = None,
    clock: Clock = time.monotonic,
) -> LegendLayout:
    """Search every split placement and keep the one with the shortest tallest section.

    Candidates are scored in :func:`all_comb` order; a candidate that ties the
    best height so far replaces it, so the last tied candidate wins.

    Args:
        layers: Layers in display order (objects or mappings with a height).
        sections: Number of sections to produce; ``1 <= sections <= len(layers)``.
        deadline: Optional time budget in seconds for scoring candidates.
        clock: Monotonic clock used to enforce ``deadline``.
    Returns:
        Layout using exactly ``sections`` sections, or a single section with
        outcome ``DEADLINE`` when the budget runs out.

    Example:
        >>> layout = pack_layers_into_sections([{"height": 10}] * 4, 2)
        >>> layout.split_flags
        [False, False, True, False]
    """

    if sections < 1 or sections > len(layers):
        raise ValueError(
            f"sections must be between 1 and {len(layers)}, got {sections}"
        )
    heights = [layer_height(layer) for layer in layers]
    candidates = all_comb(len(layers) - 1, sections - 1)
    started = clock()

    best_height = float("inf")
    best: Candidate | None = None
    scored = 0
    for candidate in candidates:
        if deadline is not None and clock() - started > deadline:
            logger.warning(
                "Legend search exceeded %.3fs after %d of %d candidates; using one section",
                deadline,
                scored,
                len(candidates),
            )
            return _unsplit(layers, SearchOutcome.DEADLINE)
        height = max(section_heights(heights, candidate, sections))
        scored += 1
        if height <= best_height:
            best_height = height
            best = candidate

    # all_comb always yields at least one candidate here
    assert best is not None
    flags = (False,) + best
    logger.debug(
        "Packed %d layers into %d sections (tallest %.2f, %d candidates)",
        len(layers),
        sections,
        best_height,
        scored,
    )
    return LegendLayout(
        entries=tuple(
            SectionedLayer(layer, flag) for layer, flag in zip(layers, flags)
        ),
        sections_used=sections,
        outcome=SearchOutcome.PERFORMED,
        best_height=best_height,
        candidates_scored=scored,
    )


def make_legend(
    layers: Sequence[Any],
    sections_available: int,
    *,
    settings: LegendSettings | None = None,
    clock: Clock = time.monotonic,
) -> LegendLayout:
    """Lay out legend layers across at most ``sections_available`` sections.

    Large legends (more than ``settings.max_layers_for_search`` layers) and
    legends with no more layers than sections are left as a single section.

    Args:
        layers: Non-empty sequence of layers in display order.
        sections_available: Number of sections the caller can display (>= 1).
        settings: Partitioner options; defaults to ``LegendSettings()``.
        clock: Monotonic clock used for the optional search deadline.
    Returns:
        LegendLayout for the layers. Input layers are not modified.

    Example:
        >>> layout = make_legend([{"height": h} for h in (1, 1, 1, 100)], 2)
        >>> layout.split_flags, layout.sections_used
        ([False, False, False, True], 2)
        >>> make_legend([{"height": 5}] * 3, 3).outcome.value
        'too_few_layers'
    """

    if sections_available < 1:
        raise ValueError(f"sections_available must be >= 1, got {sections_available}")
    if not layers:
        raise ValueError("Cannot build a legend from an empty layer list")
    settings = settings or LegendSettings()

    if len(layers) > settings.max_layers_for_search:
        logger.debug(
            "Skipping section search: %d layers exceeds limit of %d",
            len(layers),
            settings.max_layers_for_search,
        )
        return _unsplit(layers, SearchOutcome.TOO_MANY_LAYERS)
    if len(layers) <= sections_available:
        logger.debug(
            "Skipping section search: %d layers fit in %d sections",
            len(layers),
            sections_available,
        )
        return _unsplit(layers, SearchOutcome.TOO_FEW_LAYERS)
    return pack_layers_into_sections(
        layers,
        sections_available,
        deadline=settings.search_deadline,
        clock=clock,
    )

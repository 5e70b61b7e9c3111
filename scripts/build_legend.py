"""
Split a legend into balanced sections and write the layout as JSON.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Sequence

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from legend_sections.ingest import load_layers
from legend_sections.logging_config import setup_logging
from legend_sections.measure import measure_layers
from legend_sections.models import LegendLayout
from legend_sections.partition import make_legend
from legend_sections.settings import LegendSettings, load_settings

logger = logging.getLogger("legend_sections.build_legend")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return CLI arguments for the build script."""

    parser = argparse.ArgumentParser(
        description="Distribute legend layers into balanced sections."
    )
    parser.add_argument(
        "input",
        type=Path,
        help="JSON file holding a list of layer records (or {\"layers\": [...]}).",
    )
    parser.add_argument(
        "--sections",
        "-s",
        type=int,
        default=2,
        help="Number of sections available for the legend.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON settings file (snake_case or camelCase keys).",
    )
    parser.add_argument(
        "--measure",
        action="store_true",
        help="Measure layer heights with ReportLab instead of using the input heights.",
    )
    parser.add_argument(
        "--max-layers",
        type=int,
        default=None,
        help="Override the layer count above which no search is attempted.",
    )
    parser.add_argument(
        "--deadline",
        type=float,
        default=None,
        help="Time budget in seconds for the section search.",
    )
    parser.add_argument(
        "--output-file",
        "-o",
        type=Path,
        default=None,
        help="File to write the layout JSON to (defaults to stdout).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output.",
    )
    return parser.parse_args(argv)


def _resolve_settings(args: argparse.Namespace) -> LegendSettings:
    """Return settings from the config file with CLI overrides applied.

    Args:
        args: Parsed CLI arguments.
    Returns:
        LegendSettings for this run.
    """

    settings = load_settings(args.config)
    overrides: Dict[str, Any] = {}
    if args.max_layers is not None:
        overrides["max_layers_for_search"] = args.max_layers
    if args.deadline is not None:
        overrides["search_deadline"] = args.deadline
    return replace(settings, **overrides) if overrides else settings


def layout_document(layout: LegendLayout) -> Dict[str, Any]:
    """Return the JSON document describing a layout.

    Args:
        layout: Computed legend layout.
    Returns:
        Mapping ready for ``json.dumps``.
    """

    return {
        "sectionsUsed": layout.sections_used,
        "search": layout.outcome.value,
        "bestHeight": layout.best_height,
        "sectionHeights": layout.section_heights(),
        "layers": layout.to_records(),
    }


def main(argv: Sequence[str] | None = None) -> int:
    """Build a sectioned legend layout from a layer file.

    Example:
        >>> main(["layers.json", "--sections", "3"])  # doctest: +SKIP
        0
    """

    args = _parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else None)
    settings = _resolve_settings(args)
    layers = load_layers(args.input)
    if args.measure:
        layers = measure_layers(layers, settings=settings)
    layout = make_legend(layers, args.sections, settings=settings)
    logger.info(
        "Placed %d layers in %d section(s) (search: %s)",
        len(layers),
        layout.sections_used,
        layout.outcome.value,
    )
    text = json.dumps(layout_document(layout), indent=2)
    if args.output_file is None:
        print(text)
    else:
        args.output_file.parent.mkdir(parents=True, exist_ok=True)
        args.output_file.write_text(text + "\n", encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())

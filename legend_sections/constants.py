"""Shared constants for legend sectioning."""

from __future__ import annotations

import os

TOO_MANY_LAYERS = 12
DEBUG_LEGEND = os.getenv("DEBUG_LEGEND", "0") not in {
    "",
    "0",
    "false",
    "False",
}

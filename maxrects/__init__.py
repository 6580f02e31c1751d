"""
MaxRects - rectangle bin packing for texture atlases and sprite sheets

Packs rectangles into a single fixed-size bin with the MaxRects algorithm and
a choice of placement heuristics, optionally rotating pieces by 90 degrees.
"""

from .geometry import NULL_RECT, Rect, interval_overlap
from .heuristics import WORST_SCORE, FreeRectChoiceHeuristic
from .packer import MaxRectsBinPack, PackingReport
from .validation import validate_layout
from .preview import render_preview
from .logger import setup_logging, log_packing_report

__version__ = "1.0.0"
__author__ = "MaxRects Team"

__all__ = [
    "NULL_RECT",
    "Rect",
    "interval_overlap",
    "WORST_SCORE",
    "FreeRectChoiceHeuristic",
    "MaxRectsBinPack",
    "PackingReport",
    "validate_layout",
    "render_preview",
    "setup_logging",
    "log_packing_report",
]

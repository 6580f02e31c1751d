"""
Logging utilities for the MaxRects packer.

The library itself only emits records through module loggers; applications
call setup_logging() to see them.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .packer import PackingReport


def setup_logging(log_file: Optional[Union[str, Path]] = None, level: int = logging.DEBUG) -> None:
    """
    Setup logging to the console and optionally a debug log file.

    Args:
        log_file: Path of the detailed log file, or None for console only
        level: Root logger level
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    # Console handler - important messages only
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    # File handler - detailed logs
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'
        ))
        logger.addHandler(file_handler)
        logging.info(f"Logging initialized. Debug log: {log_file}")
    else:
        logging.info("Logging initialized")


def log_packing_report(report: PackingReport, label: str = "bin") -> None:
    """
    Log a packing summary.

    Args:
        report: PackingReport from MaxRectsBinPack.report()
        label: Name of the bin or atlas being packed
    """
    logger = logging.getLogger(__name__)

    logger.info(f"Packing summary for '{label}':")
    logger.info(f"  Bin: {report.bin_width}x{report.bin_height} pixels")
    logger.info(f"  Rotation: {'allowed' if report.allow_flip else 'disabled'}")
    logger.info(f"  Rectangles placed: {report.used_count}")
    logger.info(f"  Free rectangles: {report.free_count}")
    logger.info(f"  Used area: {report.used_area:,} pixels")
    logger.info(f"  Occupancy: {report.occupancy:.1%}")

"""
Layout consistency checks for a packed bin.

Uses shapely boxes so the checks are independent of the integer arithmetic
the packer itself relies on.
"""

from __future__ import annotations

import logging
from typing import List

from shapely.geometry import box

from .geometry import Rect, contains
from .packer import MaxRectsBinPack


def rect_to_box(rect: Rect):
    """Shapely polygon covering ``rect``."""
    return box(rect.x, rect.y, rect.right, rect.bottom)


def validate_layout(bin_pack: MaxRectsBinPack) -> List[str]:
    """
    Check the invariants of a bin's used and free rectangles.

    Args:
        bin_pack: Bin to check

    Returns:
        List of error messages, empty when the layout is consistent
    """
    errors = []
    bounds = box(0, 0, bin_pack.width, bin_pack.height)
    used = bin_pack.used_rectangles
    free = bin_pack.free_rectangles
    used_boxes = [rect_to_box(r) for r in used]
    free_boxes = [rect_to_box(r) for r in free]

    for rect, geom in zip(used, used_boxes):
        if not bounds.covers(geom):
            errors.append(f"Used rectangle outside bin: {rect}")

    for i in range(len(used)):
        for j in range(i + 1, len(used)):
            if used_boxes[i].intersection(used_boxes[j]).area > 0:
                errors.append(f"Used rectangles overlap: {used[i]} and {used[j]}")

    for rect, geom in zip(free, free_boxes):
        if not bounds.covers(geom):
            errors.append(f"Free rectangle outside bin: {rect}")
        for used_rect, used_geom in zip(used, used_boxes):
            if geom.intersection(used_geom).area > 0:
                errors.append(f"Free rectangle {rect} overlaps used rectangle {used_rect}")

    for i, inner in enumerate(free):
        for j, outer in enumerate(free):
            if i != j and contains(outer, inner):
                errors.append(f"Free rectangle {inner} is contained in {outer}")
                break

    if errors:
        logging.getLogger(__name__).warning(f"Layout validation found {len(errors)} problems")
    return errors

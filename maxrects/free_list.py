"""
Free-list maintenance for the MaxRects bin packer.

The free list holds maximal empty rectangles of the bin. They may overlap each
other; they are not a partition. Placing a piece splits every free rectangle it
touches into up to four residues, after which rectangles contained in another
are pruned.
"""

from __future__ import annotations

import logging
from typing import List

from .geometry import Rect, contains, intersects

logger = logging.getLogger(__name__)


def split_free_node(free_rect: Rect, placed: Rect, free_rects: List[Rect]) -> bool:
    """
    Split ``free_rect`` around ``placed``, appending the residues to ``free_rects``.

    Args:
        free_rect: Free rectangle to test
        placed: Rectangle that was just placed
        free_rects: Free list the residues are appended to

    Returns:
        False if the rectangles are disjoint (nothing changed). True otherwise,
        in which case the caller must remove ``free_rect`` from the free list,
        even when no residue was produced.
    """
    if not intersects(free_rect, placed):
        return False

    if placed.x < free_rect.right and placed.right > free_rect.x:
        # Above the placed rectangle
        if free_rect.y < placed.y < free_rect.bottom:
            free_rects.append(Rect(free_rect.x, free_rect.y,
                                   free_rect.width, placed.y - free_rect.y))

        # Below the placed rectangle
        if placed.bottom < free_rect.bottom:
            free_rects.append(Rect(free_rect.x, placed.bottom,
                                   free_rect.width, free_rect.bottom - placed.bottom))

    if placed.y < free_rect.bottom and placed.bottom > free_rect.y:
        # Left of the placed rectangle
        if free_rect.x < placed.x < free_rect.right:
            free_rects.append(Rect(free_rect.x, free_rect.y,
                                   placed.x - free_rect.x, free_rect.height))

        # Right of the placed rectangle
        if placed.right < free_rect.right:
            free_rects.append(Rect(placed.right, free_rect.y,
                                   free_rect.right - placed.right, free_rect.height))

    return True


def prune_free_list(free_rects: List[Rect]) -> None:
    """
    Remove every free rectangle contained in another one, in place.

    All pairs are compared, so this is quadratic in the free list size. Of two
    equal rectangles only the later one survives.
    """
    before = len(free_rects)
    i = 0
    while i < len(free_rects):
        j = i + 1
        removed_i = False
        while j < len(free_rects):
            if contains(free_rects[j], free_rects[i]):
                del free_rects[i]
                removed_i = True
                break
            if contains(free_rects[i], free_rects[j]):
                del free_rects[j]
                continue
            j += 1
        if not removed_i:
            i += 1

    if len(free_rects) != before:
        logger.debug(f"Pruned free list from {before} to {len(free_rects)} rectangles")

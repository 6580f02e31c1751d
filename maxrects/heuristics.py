"""
Placement heuristics for the MaxRects bin packer.

Every heuristic scans the free rectangles of a bin and places the piece at the
top-left corner of the free rectangle that scores best. Each free rectangle is
tried with the piece upright and, when rotation is allowed and the piece is
not square, turned by 90 degrees. The node finders are pure functions: they
read the bin state they are given and return a ``Placement`` value.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Iterator, NamedTuple, Sequence, Tuple, Union

from .geometry import NULL_RECT, Rect, interval_overlap

# Score reported for a piece that fits nowhere; never wins a comparison
WORST_SCORE = sys.maxsize


class FreeRectChoiceHeuristic(Enum):
    """Rules for choosing the free rectangle a new piece goes into."""
    BEST_SHORT_SIDE_FIT = "best_short_side_fit"  # BSSF
    BEST_LONG_SIDE_FIT = "best_long_side_fit"    # BLSF
    BEST_AREA_FIT = "best_area_fit"              # BAF
    BOTTOM_LEFT = "bottom_left"                  # BL, "Tetris" placement
    CONTACT_POINT = "contact_point"              # CP

    @classmethod
    def coerce(cls, value: Union["FreeRectChoiceHeuristic", str]) -> "FreeRectChoiceHeuristic":
        """Accept a member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unsupported placement heuristic: {value!r}") from None


class Placement(NamedTuple):
    """Where a piece would go and how well it scored there (lower is better, except raw CP)."""
    rect: Rect
    primary: int
    secondary: int


FAILED = Placement(NULL_RECT, WORST_SCORE, WORST_SCORE)

ScoreFn = Callable[[Rect, int, int], Tuple[int, int]]


def _orientations(width: int, height: int, allow_flip: bool) -> Iterator[Tuple[int, int]]:
    yield width, height
    if allow_flip and width != height:
        yield height, width


def _best_placement(free_rects: Sequence[Rect], width: int, height: int,
                    allow_flip: bool, score: ScoreFn) -> Placement:
    """
    Return the candidate with the lowest (primary, secondary) score.

    Only strict improvements replace the current best, so on a full tie the
    earlier free rectangle wins, and upright wins over rotated.
    """
    best = FAILED
    # Degenerate pieces never fit
    if width <= 0 or height <= 0:
        return best
    for free in free_rects:
        for w, h in _orientations(width, height, allow_flip):
            if free.width < w or free.height < h:
                continue
            primary, secondary = score(free, w, h)
            if (primary, secondary) < (best.primary, best.secondary):
                best = Placement(Rect(free.x, free.y, w, h), primary, secondary)
    return best


def find_position_best_short_side_fit(free_rects: Sequence[Rect], width: int, height: int,
                                      allow_flip: bool) -> Placement:
    """BSSF: minimise the shorter leftover side, then the longer one."""
    def score(free: Rect, w: int, h: int) -> Tuple[int, int]:
        leftover_horiz = abs(free.width - w)
        leftover_vert = abs(free.height - h)
        return min(leftover_horiz, leftover_vert), max(leftover_horiz, leftover_vert)

    return _best_placement(free_rects, width, height, allow_flip, score)


def find_position_best_long_side_fit(free_rects: Sequence[Rect], width: int, height: int,
                                     allow_flip: bool) -> Placement:
    """BLSF: minimise the longer leftover side, then the shorter one."""
    def score(free: Rect, w: int, h: int) -> Tuple[int, int]:
        leftover_horiz = abs(free.width - w)
        leftover_vert = abs(free.height - h)
        return max(leftover_horiz, leftover_vert), min(leftover_horiz, leftover_vert)

    return _best_placement(free_rects, width, height, allow_flip, score)


def find_position_best_area_fit(free_rects: Sequence[Rect], width: int, height: int,
                                allow_flip: bool) -> Placement:
    """BAF: smallest free rectangle that fits, ties broken by the shorter leftover side."""
    def score(free: Rect, w: int, h: int) -> Tuple[int, int]:
        area_fit = free.area - w * h
        return area_fit, min(abs(free.width - w), abs(free.height - h))

    return _best_placement(free_rects, width, height, allow_flip, score)


def find_position_bottom_left(free_rects: Sequence[Rect], width: int, height: int,
                              allow_flip: bool) -> Placement:
    """BL: lowest bottom edge of the placed piece (y + height), then leftmost x."""
    def score(free: Rect, w: int, h: int) -> Tuple[int, int]:
        return free.y + h, free.x

    return _best_placement(free_rects, width, height, allow_flip, score)


def contact_point_score(x: int, y: int, width: int, height: int,
                        used_rects: Sequence[Rect], bin_width: int, bin_height: int) -> int:
    """
    Total edge length a piece at (x, y) would share with the bin border and the used rectangles.

    Args:
        x, y: Candidate top-left corner
        width, height: Piece size in the candidate orientation
        used_rects: Rectangles already placed in the bin
        bin_width, bin_height: Bin size

    Returns:
        Contact length, bigger is better
    """
    score = 0

    if x == 0 or x + width == bin_width:
        score += height
    if y == 0 or y + height == bin_height:
        score += width

    for used in used_rects:
        if used.x == x + width or used.right == x:
            score += interval_overlap(used.y, used.bottom, y, y + height)
        if used.y == y + height or used.bottom == y:
            score += interval_overlap(used.x, used.right, x, x + width)

    return score


def find_position_contact_point(free_rects: Sequence[Rect], width: int, height: int,
                                allow_flip: bool, used_rects: Sequence[Rect],
                                bin_width: int, bin_height: int) -> Placement:
    """
    CP: maximise the contact length of the piece.

    The returned primary score is the raw contact length (bigger is better).
    On failure the usual ``FAILED`` placement is returned.
    """
    def score(free: Rect, w: int, h: int) -> Tuple[int, int]:
        return -contact_point_score(free.x, free.y, w, h, used_rects, bin_width, bin_height), 0

    best = _best_placement(free_rects, width, height, allow_flip, score)
    if best.rect.is_null:
        return FAILED
    return Placement(best.rect, -best.primary, 0)


def score_rect(width: int, height: int, heuristic: Union[FreeRectChoiceHeuristic, str],
               free_rects: Sequence[Rect], used_rects: Sequence[Rect],
               bin_width: int, bin_height: int, allow_flip: bool) -> Placement:
    """
    Score a piece against the bin state with the chosen heuristic.

    All scores come back in "minimise primary, then secondary" form: the
    contact point score is negated. A piece that fits nowhere gets
    ``FAILED`` (null rectangle, ``WORST_SCORE`` for both scores).

    Raises:
        ValueError: for an unknown heuristic
    """
    heuristic = FreeRectChoiceHeuristic.coerce(heuristic)

    if heuristic == FreeRectChoiceHeuristic.BEST_SHORT_SIDE_FIT:
        placement = find_position_best_short_side_fit(free_rects, width, height, allow_flip)
    elif heuristic == FreeRectChoiceHeuristic.BEST_LONG_SIDE_FIT:
        placement = find_position_best_long_side_fit(free_rects, width, height, allow_flip)
    elif heuristic == FreeRectChoiceHeuristic.BEST_AREA_FIT:
        placement = find_position_best_area_fit(free_rects, width, height, allow_flip)
    elif heuristic == FreeRectChoiceHeuristic.BOTTOM_LEFT:
        placement = find_position_bottom_left(free_rects, width, height, allow_flip)
    else:
        placement = find_position_contact_point(free_rects, width, height, allow_flip,
                                                used_rects, bin_width, bin_height)
        if not placement.rect.is_null:
            placement = Placement(placement.rect, -placement.primary, 0)

    if placement.rect.is_null:
        return FAILED
    return placement

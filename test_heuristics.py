#!/usr/bin/env python3
"""
Tests for the placement heuristics and the score_rect dispatcher.
"""

import pytest

from maxrects.geometry import NULL_RECT, Rect
from maxrects.heuristics import (
    WORST_SCORE,
    FreeRectChoiceHeuristic,
    contact_point_score,
    find_position_best_area_fit,
    find_position_best_long_side_fit,
    find_position_best_short_side_fit,
    find_position_bottom_left,
    find_position_contact_point,
    score_rect,
)

FREE = [Rect(0, 0, 10, 5), Rect(0, 0, 6, 8)]


def test_best_short_side_fit():
    placement = find_position_best_short_side_fit(FREE, 6, 5, allow_flip=True)
    assert placement.rect == Rect(0, 0, 6, 5)
    assert (placement.primary, placement.secondary) == (0, 3)


def test_best_long_side_fit_prefers_rotated():
    placement = find_position_best_long_side_fit(FREE, 6, 5, allow_flip=True)
    assert placement.rect == Rect(0, 0, 5, 6)
    assert (placement.primary, placement.secondary) == (2, 1)


def test_best_long_side_fit_without_flip():
    placement = find_position_best_long_side_fit(FREE, 6, 5, allow_flip=False)
    assert placement.rect == Rect(0, 0, 6, 5)
    assert (placement.primary, placement.secondary) == (3, 0)


def test_best_area_fit():
    placement = find_position_best_area_fit(FREE, 6, 5, allow_flip=True)
    assert placement.rect == Rect(0, 0, 6, 5)
    assert (placement.primary, placement.secondary) == (18, 0)


def test_bottom_left_lowest_top_edge():
    free = [Rect(0, 4, 10, 6), Rect(5, 0, 5, 10)]
    placement = find_position_bottom_left(free, 4, 2, allow_flip=True)
    assert placement.rect == Rect(5, 0, 4, 2)
    assert (placement.primary, placement.secondary) == (2, 5)


def test_bottom_left_tie_broken_by_x():
    free = [Rect(6, 0, 4, 4), Rect(2, 0, 4, 4)]
    placement = find_position_bottom_left(free, 2, 2, allow_flip=False)
    assert placement.rect == Rect(2, 0, 2, 2)


def test_full_tie_keeps_first_free_rect():
    free = [Rect(0, 0, 5, 5), Rect(5, 0, 5, 5)]
    placement = find_position_best_area_fit(free, 3, 3, allow_flip=True)
    assert placement.rect == Rect(0, 0, 3, 3)


@pytest.mark.parametrize("finder", [
    find_position_best_short_side_fit,
    find_position_best_long_side_fit,
    find_position_best_area_fit,
    find_position_bottom_left,
])
def test_no_fit_returns_sentinel(finder):
    placement = finder([Rect(0, 0, 4, 4)], 5, 2, True)
    assert placement.rect == NULL_RECT
    assert placement.primary == WORST_SCORE
    assert placement.secondary == WORST_SCORE


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (0, 0)])
def test_degenerate_piece_never_fits(width, height):
    placement = find_position_best_short_side_fit([Rect(0, 0, 10, 10)], width, height, True)
    assert placement.rect.is_null


def test_contact_point_score():
    used = [Rect(0, 0, 4, 4)]
    # Touches the top border (3) and the used rectangle's right edge (3)
    assert contact_point_score(4, 0, 3, 3, used, 10, 10) == 6
    # Touches the left border (3) and the used rectangle's bottom edge (3)
    assert contact_point_score(0, 4, 3, 3, used, 10, 10) == 6
    # Floating in the middle
    assert contact_point_score(5, 5, 2, 2, used, 10, 10) == 0
    # Bottom-right corner of the bin
    assert contact_point_score(8, 8, 2, 2, [], 10, 10) == 4


def test_contact_point_keeps_first_on_tie():
    free = [Rect(4, 0, 6, 10), Rect(0, 4, 10, 6)]
    placement = find_position_contact_point(free, 3, 3, True, [Rect(0, 0, 4, 4)], 10, 10)
    assert placement.rect == Rect(4, 0, 3, 3)
    assert placement.primary == 6


def test_contact_point_rotation_follows_allow_flip():
    used = [Rect(0, 0, 10, 2)]
    free = [Rect(0, 2, 10, 8)]
    rotated = find_position_contact_point(free, 8, 2, True, used, 10, 10)
    assert rotated.rect == Rect(0, 2, 2, 8)
    assert rotated.primary == 12

    upright = find_position_contact_point(free, 8, 2, False, used, 10, 10)
    assert upright.rect == Rect(0, 2, 8, 2)
    assert upright.primary == 10


def test_score_rect_negates_contact_point():
    placement = score_rect(3, 3, FreeRectChoiceHeuristic.CONTACT_POINT,
                           [Rect(4, 0, 6, 10)], [Rect(0, 0, 4, 4)], 10, 10, True)
    assert placement.rect == Rect(4, 0, 3, 3)
    assert placement.primary == -6
    assert placement.secondary == 0


def test_score_rect_failure_for_every_heuristic():
    for heuristic in FreeRectChoiceHeuristic:
        placement = score_rect(20, 20, heuristic, [Rect(0, 0, 10, 10)], [], 10, 10, True)
        assert placement.rect.is_null
        assert placement.primary == WORST_SCORE
        assert placement.secondary == WORST_SCORE


def test_score_rect_accepts_string_value():
    placement = score_rect(2, 2, "bottom_left", [Rect(0, 0, 10, 10)], [], 10, 10, True)
    assert placement.rect == Rect(0, 0, 2, 2)


def test_unknown_heuristic_raises():
    with pytest.raises(ValueError, match="Unsupported placement heuristic"):
        score_rect(2, 2, "guillotine", [Rect(0, 0, 10, 10)], [], 10, 10, True)

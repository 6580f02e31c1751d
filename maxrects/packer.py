"""
MaxRects bin packer.

Packs rectangles into one fixed-size bin using the MaxRects free-rectangle
structure and one of five placement heuristics. A piece that does not fit is
rejected; there is no bin growth and no second bin.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

from .geometry import Rect
from .heuristics import WORST_SCORE, FreeRectChoiceHeuristic, score_rect
from .free_list import prune_free_list, split_free_node

HeuristicArg = Union[FreeRectChoiceHeuristic, str]


@dataclass
class PackingReport:
    """Snapshot of a bin's packing state."""
    bin_width: int
    bin_height: int
    allow_flip: bool
    used_count: int
    free_count: int
    used_area: int
    occupancy: float


class MaxRectsBinPack:
    """
    A single bin packed with the MaxRects algorithm.

    Not safe for concurrent mutation; use one instance per thread.
    """

    def __init__(self, width: int = 0, height: int = 0, allow_flip: bool = True):
        """Create a bin. The default 0x0 bin accepts nothing until init() is called."""
        self.logger = logging.getLogger(__name__)
        self._used_rectangles: List[Rect] = []
        self._free_rectangles: List[Rect] = []
        self.init(width, height, allow_flip)

    def init(self, width: int, height: int, allow_flip: bool = True) -> None:
        """(Re)initialize to an empty bin of width x height."""
        self._width = width
        self._height = height
        self._allow_flip = allow_flip

        self._used_rectangles.clear()
        self._free_rectangles.clear()
        self._free_rectangles.append(Rect(0, 0, width, height))

        self.logger.info(f"Initialized bin {width}x{height}, rotation {'allowed' if allow_flip else 'disabled'}")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def allow_flip(self) -> bool:
        return self._allow_flip

    @property
    def used_rectangles(self) -> Tuple[Rect, ...]:
        return tuple(self._used_rectangles)

    @property
    def free_rectangles(self) -> Tuple[Rect, ...]:
        return tuple(self._free_rectangles)

    def _score(self, width: int, height: int, heuristic: HeuristicArg):
        return score_rect(width, height, heuristic,
                          self._free_rectangles, self._used_rectangles,
                          self._width, self._height, self._allow_flip)

    def _place_rect(self, node: Rect) -> None:
        """Split the free list around ``node``, prune it, and record ``node`` as used."""
        # Residues appended during the scan are not split again
        num_to_process = len(self._free_rectangles)
        i = 0
        while i < num_to_process:
            if split_free_node(self._free_rectangles[i], node, self._free_rectangles):
                del self._free_rectangles[i]
                num_to_process -= 1
            else:
                i += 1

        prune_free_list(self._free_rectangles)
        self._used_rectangles.append(node)

        self.logger.debug(f"Placed {node}, {len(self._free_rectangles)} free rectangles left")

    def insert(self, width: int, height: int, heuristic: HeuristicArg) -> Rect:
        """
        Insert a single rectangle, possibly rotated.

        Args:
            width: Requested width
            height: Requested height
            heuristic: Placement rule (member or string value)

        Returns:
            The placed rectangle (width and height swapped if it was rotated),
            or a null rectangle (height 0) if it does not fit. A failed
            insert leaves the bin unchanged.
        """
        placement = self._score(width, height, heuristic)
        if placement.rect.is_null:
            self.logger.debug(f"Cannot place {width}x{height} with {FreeRectChoiceHeuristic.coerce(heuristic).value}")
            return placement.rect

        self._place_rect(placement.rect)
        return placement.rect

    def insert_batch(self, pending: List[Rect], heuristic: HeuristicArg) -> List[Rect]:
        """
        Insert a list of rectangles in offline mode, best fit first.

        Each round scores every pending rectangle against the current bin and
        places the one with the lowest score. Stops when nothing more fits.

        Args:
            pending: Rectangles to insert; only width and height are used.
                Consumed in place: afterwards it holds the rectangles that
                could not be placed.
            heuristic: Placement rule (member or string value)

        Returns:
            Placed rectangles in placement order, which is not the input order
        """
        heuristic = FreeRectChoiceHeuristic.coerce(heuristic)
        requested = len(pending)
        placed: List[Rect] = []

        while pending:
            best_index = -1
            best_node = None
            best_score1 = WORST_SCORE
            best_score2 = WORST_SCORE

            for index, rect in enumerate(pending):
                node, score1, score2 = self._score(rect.width, rect.height, heuristic)
                if score1 < best_score1 or (score1 == best_score1 and score2 < best_score2):
                    best_index = index
                    best_node = node
                    best_score1 = score1
                    best_score2 = score2

            if best_index == -1:
                self.logger.warning(f"{len(pending)} of {requested} rectangles do not fit "
                                    f"in the {self._width}x{self._height} bin")
                break

            self._place_rect(best_node)
            placed.append(best_node)
            del pending[best_index]

        self.logger.info(f"Batch insert with {heuristic.value}: placed {len(placed)}/{requested}, "
                         f"occupancy {self.occupancy():.1%}")
        return placed

    def used_area(self) -> int:
        return sum(rect.area for rect in self._used_rectangles)

    def occupancy(self) -> float:
        """Ratio of used surface area to total bin area (0.0 for a zero-area bin)."""
        bin_area = self._width * self._height
        if bin_area <= 0:
            return 0.0
        return self.used_area() / bin_area

    def report(self) -> PackingReport:
        return PackingReport(
            bin_width=self._width,
            bin_height=self._height,
            allow_flip=self._allow_flip,
            used_count=len(self._used_rectangles),
            free_count=len(self._free_rectangles),
            used_area=self.used_area(),
            occupancy=self.occupancy(),
        )

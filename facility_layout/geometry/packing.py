"""
Packing engine - greedy placement of rectangles inside the interior

Three deterministic, single-pass strategies share the same inputs:

    (inner_width, inner_height, rectangles sorted by area desc, gap)

ROW-MAJOR
=========
A cursor walks left to right. An item that does not fit the remaining row
width wraps the cursor to a new row (advance by the tallest item in the row
plus the gap). Items that would overflow the interior height are skipped but
the loop continues, so later and smaller items may still land.

COLUMN-MAJOR
============
The transpose: the cursor walks top to bottom and wraps to a new column.

STAGGERED
=========
Row-major, then every odd row (by sorted distinct y) is nudged right by half
a gap, clamped to inner_width - width. Near the right edge the clamp can zero
out the shift; that is kept as is.

Items that cannot be placed are dropped without raising. The PackingResult
lists them in `unplaced` so callers can tell whether everything fit.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Sequence, Tuple

from .core_elements import PlacedRectangle, Rectangle
from .layout_modes import LayoutAlgorithm, STAGGER_FACTOR


@dataclass
class PackingResult:
    """Output of one packing pass"""
    algorithm: LayoutAlgorithm
    placed: List[PlacedRectangle] = field(default_factory=list)
    unplaced: List[Rectangle] = field(default_factory=list)

    @property
    def placed_count(self) -> int:
        return len(self.placed)

    @property
    def dropped_count(self) -> int:
        return len(self.unplaced)

    @property
    def requested_count(self) -> int:
        return len(self.placed) + len(self.unplaced)

    @property
    def all_fit(self) -> bool:
        return not self.unplaced


def _pack_rows(inner_w: float, inner_h: float, items: Sequence[Rectangle],
               gap: float) -> Tuple[List[PlacedRectangle], List[Rectangle]]:
    placed: List[PlacedRectangle] = []
    dropped: List[Rectangle] = []
    cursor_x, cursor_y, row_h = 0.0, 0.0, 0.0

    for item in items:
        w, h = item.width, item.height

        # Larger than the whole interior: never placeable
        if h > inner_h or w > inner_w:
            dropped.append(item)
            continue

        # New row
        if cursor_x > 0 and cursor_x + w > inner_w:
            cursor_x = 0.0
            cursor_y += row_h + gap
            row_h = 0.0

        # Row would overflow the height; skip but keep going
        if cursor_y + h > inner_h:
            dropped.append(item)
            continue

        placed.append(PlacedRectangle.at(item, cursor_x, cursor_y))
        cursor_x += w + gap
        row_h = max(row_h, h)

    return placed, dropped


def _pack_columns(inner_w: float, inner_h: float, items: Sequence[Rectangle],
                  gap: float) -> Tuple[List[PlacedRectangle], List[Rectangle]]:
    placed: List[PlacedRectangle] = []
    dropped: List[Rectangle] = []
    cursor_x, cursor_y, col_w = 0.0, 0.0, 0.0

    for item in items:
        w, h = item.width, item.height

        if h > inner_h or w > inner_w:
            dropped.append(item)
            continue

        # New column
        if cursor_y > 0 and cursor_y + h > inner_h:
            cursor_y = 0.0
            cursor_x += col_w + gap
            col_w = 0.0

        if cursor_x + w > inner_w:
            dropped.append(item)
            continue

        placed.append(PlacedRectangle.at(item, cursor_x, cursor_y))
        cursor_y += h + gap
        col_w = max(col_w, w)

    return placed, dropped


def _stagger_rows(inner_w: float, placed: List[PlacedRectangle],
                  gap: float) -> List[PlacedRectangle]:
    rows = sorted({p.y for p in placed})
    odd_rows = {y for index, y in enumerate(rows) if index % 2 == 1}
    offset = gap * STAGGER_FACTOR

    staggered = []
    for p in placed:
        if p.y in odd_rows:
            p = p.with_x(min(p.x + offset, inner_w - p.width))
        staggered.append(p)
    return staggered


def pack_rows(inner_w: float, inner_h: float, items: Sequence[Rectangle],
              gap: float) -> PackingResult:
    """Greedy row-major packing (simple, predictable, good for previews)"""
    placed, dropped = _pack_rows(inner_w, inner_h, items, gap)
    return PackingResult(LayoutAlgorithm.ROWS, placed, dropped)


def pack_columns(inner_w: float, inner_h: float, items: Sequence[Rectangle],
                 gap: float) -> PackingResult:
    """Greedy column-major packing"""
    placed, dropped = _pack_columns(inner_w, inner_h, items, gap)
    return PackingResult(LayoutAlgorithm.COLUMNS, placed, dropped)


def pack_staggered(inner_w: float, inner_h: float, items: Sequence[Rectangle],
                   gap: float) -> PackingResult:
    """Row-major packing with every other row offset by half a gap"""
    placed, dropped = _pack_rows(inner_w, inner_h, items, gap)
    return PackingResult(LayoutAlgorithm.STAGGERED, _stagger_rows(inner_w, placed, gap), dropped)


PACKERS: Dict[LayoutAlgorithm, Callable[..., PackingResult]] = {
    LayoutAlgorithm.ROWS: pack_rows,
    LayoutAlgorithm.COLUMNS: pack_columns,
    LayoutAlgorithm.STAGGERED: pack_staggered,
}


def pack_rectangles(algorithm, inner_w: float, inner_h: float,
                    items: Sequence[Rectangle], gap: float) -> PackingResult:
    """
    Pack rectangles with the selected algorithm

    Args:
        algorithm: LayoutAlgorithm or its string tag ('rows', 'columns', 'staggered')
        inner_w: Interior width (feet)
        inner_h: Interior height (feet)
        items: Rectangles, already sorted largest first
        gap: Spacing between units (feet)

    Returns:
        PackingResult with placed and unplaced rectangles
    """
    algo = LayoutAlgorithm.parse(algorithm)
    if not items:
        return PackingResult(algo)
    return PACKERS[algo](inner_w, inner_h, items, gap)

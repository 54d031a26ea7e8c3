"""
Column layout engine for lsgrid.

This module decides how many columns a listing can use and how wide each
column must be, given the display width of every item and the terminal width.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)

# Narrowest column the engine will ever produce
MIN_COL_SIZE = 3


class FillOrder(Enum):
    """Order in which items are placed into the grid."""

    DOWN_COLUMNS = "down-columns"
    ACROSS_ROWS = "across-rows"


@dataclass(frozen=True)
class LayoutInfo:
    """Number of columns and the width of each column."""

    num_cols: int
    col_widths: Tuple[int, ...]

    def __post_init__(self):
        if self.num_cols < 1:
            raise ValueError(f"num_cols must be at least 1, got {self.num_cols}")
        if len(self.col_widths) != self.num_cols:
            raise ValueError(
                f"expected {self.num_cols} column widths, got {len(self.col_widths)}"
            )

    @classmethod
    def fallback(cls, min_width: int = MIN_COL_SIZE) -> "LayoutInfo":
        """Single column layout used when nothing fits the terminal."""
        return cls(1, (min_width,))

    @property
    def total_width(self) -> int:
        return sum(self.col_widths)


def col_widths_by_cols(min_width: int, num_cols: int, lens: Sequence[int]) -> List[int]:
    """Column widths when items run down each column before moving right.

    The first ``len(lens) % num_cols`` columns hold one extra item, so only the
    last row can be short, and only on its right-hand side.

    Args:
        min_width: Smallest width any column may have.
        num_cols: Candidate column count, ``1 <= num_cols <= len(lens)``.
        lens: Display width of every item.

    Returns:
        list: One width per column.
    """
    num_rows, rem = divmod(len(lens), num_cols)
    widths = []
    start = 0
    for col in range(num_cols):
        height = num_rows + 1 if col < rem else num_rows
        widths.append(max([min_width, *lens[start:start + height]]))
        start += height
    return widths


def col_widths_by_lines(min_width: int, num_cols: int, lens: Sequence[int]) -> List[int]:
    """Column widths when items run across each row before moving down.

    Args:
        min_width: Smallest width any column may have.
        num_cols: Candidate column count, ``1 <= num_cols <= len(lens)``.
        lens: Display width of every item.

    Returns:
        list: One width per column.
    """
    return [max([min_width, *lens[offset::num_cols]]) for offset in range(num_cols)]


def compute_layout(
    fill_order: FillOrder,
    terminal_width: int,
    item_widths: Sequence[int],
    minimum_column_width: int = MIN_COL_SIZE,
) -> LayoutInfo:
    """Find the layout with the most columns that still fits the terminal.

    Every column count from 1 up to the largest plausible one is tried, and the
    last one whose total width fits is kept. Total width does not shrink
    steadily as columns are added, so the scan cannot stop at the first miss.

    Args:
        fill_order: Whether items fill down columns or across rows.
        terminal_width: Number of character cells available per line.
        item_widths: Display width of every item, separator included.
        minimum_column_width: Smallest width any column may have.

    Returns:
        LayoutInfo: The widest fitting layout, or a single column of
            ``minimum_column_width`` when no layout fits. That fallback may be
            wider than the terminal once the caller prints the items.
    """
    if minimum_column_width:
        max_cols = min(terminal_width // minimum_column_width, len(item_widths))
    else:
        max_cols = len(item_widths)

    if fill_order is FillOrder.ACROSS_ROWS:
        widths_for = col_widths_by_lines
    else:
        widths_for = col_widths_by_cols

    best = None
    for num_cols in range(1, max_cols + 1):
        col_widths = widths_for(minimum_column_width, num_cols, item_widths)
        total_width = sum(col_widths)
        logger.debug(
            "%s with %d columns: widths=%s total=%d/%d",
            fill_order.value, num_cols, col_widths, total_width, terminal_width,
        )
        if total_width <= terminal_width:
            best = LayoutInfo(num_cols, tuple(col_widths))

    if best is None:
        logger.debug("no layout fits %d columns, using a single column", terminal_width)
        return LayoutInfo.fallback(minimum_column_width)
    return best

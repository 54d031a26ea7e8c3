"""
Rendering of listings for lsgrid.

This module prints paths to a ``rich`` console as a grid, a single column or
the long listing format. Layout decisions are made by ``lsgrid.layout``; this
module only follows them.
"""

from typing import List, Sequence, Tuple, TypeVar

from rich.console import Console
from rich.text import Text

from lsgrid.layout import FillOrder, LayoutInfo
from lsgrid.pathinfo import LongPathInfo, PathInfo

T = TypeVar("T")

DIR_STYLE = "bold blue"
SYMLINK_STYLE = "bold cyan"
EXECUTABLE_STYLE = "bold green"
LINK_TARGET_STYLE = "bold green"


def style_for(path: PathInfo) -> str:
    """Pick the color style for a path based on its type."""
    if path.is_dir:
        return DIR_STYLE
    if path.is_symlink:
        return SYMLINK_STYLE
    if path.is_executable:
        return EXECUTABLE_STYLE
    return ""


def layout_rows(layout: LayoutInfo, items: Sequence[T],
                fill_order: FillOrder) -> List[List[Tuple[T, int]]]:
    """Split items into printable rows.

    Args:
        layout: Column count and widths to follow.
        items: Items in listing order.
        fill_order: Whether items fill down columns or across rows.

    Returns:
        list: Rows of ``(item, column_width)`` pairs.
    """
    num_cols = layout.num_cols
    if fill_order is FillOrder.ACROSS_ROWS:
        return [
            [(item, layout.col_widths[col]) for col, item in enumerate(items[start:start + num_cols])]
            for start in range(0, len(items), num_cols)
        ]

    # the first `rem` columns hold one extra item, which makes up the last row
    num_rows, rem = divmod(len(items), num_cols)
    columns = []
    start = 0
    for col in range(num_cols):
        height = num_rows + 1 if col < rem else num_rows
        columns.append(items[start:start + height])
        start += height

    rows = []
    for r in range(num_rows + (1 if rem else 0)):
        rows.append([
            (column[r], layout.col_widths[col])
            for col, column in enumerate(columns)
            if r < len(column)
        ])
    return rows


def render_label(path: PathInfo, width: int, pad: bool = True) -> Text:
    """Build the styled label of a path, padded with spaces to ``width``.

    A label wider than ``width`` is left as is; this happens when no layout
    fits the terminal.
    """
    label = Text(str(path), style=style_for(path))
    if pad:
        label.append(" " * max(0, width - len(label)))
    return label


def display_grid(console: Console, layout: LayoutInfo, paths: Sequence[PathInfo],
                 fill_order: FillOrder) -> None:
    for row in layout_rows(layout, paths, fill_order):
        line = Text()
        for index, (path, width) in enumerate(row):
            line.append_text(render_label(path, width, pad=index < len(row) - 1))
        console.print(line)


def display_single_column(console: Console, paths: Sequence[PathInfo]) -> None:
    for path in paths:
        console.print(render_label(path, 0, pad=False))


def display_long(console: Console, longpaths: Sequence[LongPathInfo]) -> None:
    """Print paths in the long listing format.

    The structure of each line is::

        filetype_and_mode num_links owner group size last_modified name [-> target]

    Counts and sizes are right-aligned, everything else left-aligned.
    """
    if not longpaths:
        return
    mode_width = max(len(p.filetype_mode) for p in longpaths)
    links_width = max(len(p.num_links) for p in longpaths)
    owner_width = max(len(p.owner) for p in longpaths)
    group_width = max(len(p.group) for p in longpaths)
    size_width = max(len(p.size) for p in longpaths)
    date_width = max(len(p.last_modified) for p in longpaths)

    for p in longpaths:
        line = Text(
            f"{p.filetype_mode:<{mode_width}} "
            f"{p.num_links:>{links_width}} "
            f"{p.owner:<{owner_width}} "
            f"{p.group:<{group_width}} "
            f"{p.size:>{size_width}} "
            f"{p.last_modified:<{date_width}} "
        )
        line.append_text(render_label(p.path, 0, pad=False))
        if p.link_target is not None:
            line.append(" -> ")
            line.append(p.link_target, style=LINK_TARGET_STYLE)
        console.print(line)

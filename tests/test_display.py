"""
Tests for listing rendering.
"""

import io
import stat
from pathlib import Path
from unittest.mock import MagicMock

from rich.console import Console

from lsgrid.display import (
    DIR_STYLE,
    EXECUTABLE_STYLE,
    SYMLINK_STYLE,
    display_grid,
    display_long,
    display_single_column,
    layout_rows,
    render_label,
    style_for,
)
from lsgrid.layout import FillOrder, LayoutInfo
from lsgrid.pathinfo import LongPathInfo, PathInfo


def make_path(name, mode=stat.S_IFREG | 0o644):
    st = MagicMock()
    st.st_mode = mode
    return PathInfo(Path(name), st)


def make_console(**kwargs):
    options = {"file": io.StringIO(), "color_system": None, "width": 200, "soft_wrap": True,
               "emoji": False, "highlight": False}
    options.update(kwargs)
    return Console(**options)


class TestLayoutRows:
    """Tests for splitting items into rows."""

    def test_down_columns(self):
        """Test that the leading columns take the extra items."""
        layout = LayoutInfo(3, (3, 7, 3))
        rows = layout_rows(layout, list("abcde"), FillOrder.DOWN_COLUMNS)
        assert rows == [
            [("a", 3), ("c", 7), ("e", 3)],
            [("b", 3), ("d", 7)],
        ]

    def test_down_columns_front_loaded_remainder(self):
        """Test a column count that leaves single-item columns."""
        layout = LayoutInfo(4, (3, 3, 3, 3))
        rows = layout_rows(layout, list("abcde"), FillOrder.DOWN_COLUMNS)
        assert [[item for item, _ in row] for row in rows] == [["a", "c", "d", "e"], ["b"]]

    def test_down_columns_even(self):
        """Test items dividing evenly between columns."""
        layout = LayoutInfo(2, (5, 4))
        rows = layout_rows(layout, list("abcd"), FillOrder.DOWN_COLUMNS)
        assert rows == [[("a", 5), ("c", 4)], [("b", 5), ("d", 4)]]

    def test_across_rows(self):
        """Test items filling each row before the next."""
        layout = LayoutInfo(2, (5, 5))
        rows = layout_rows(layout, list("abcde"), FillOrder.ACROSS_ROWS)
        assert rows == [
            [("a", 5), ("b", 5)],
            [("c", 5), ("d", 5)],
            [("e", 5)],
        ]

    def test_single_column(self):
        """Test that one column gives one item per row in both orders."""
        layout = LayoutInfo.fallback()
        for fill_order in FillOrder:
            rows = layout_rows(layout, list("abc"), fill_order)
            assert [[item for item, _ in row] for row in rows] == [["a"], ["b"], ["c"]]

    def test_empty(self):
        """Test that no items give no rows."""
        assert layout_rows(LayoutInfo.fallback(), [], FillOrder.DOWN_COLUMNS) == []
        assert layout_rows(LayoutInfo.fallback(), [], FillOrder.ACROSS_ROWS) == []


class TestStyles:
    """Tests for label styling."""

    def test_style_for(self):
        """Test the style picked for each file type."""
        assert style_for(make_path("d", stat.S_IFDIR | 0o755)) == DIR_STYLE
        assert style_for(make_path("l", stat.S_IFLNK | 0o777)) == SYMLINK_STYLE
        assert style_for(make_path("x", stat.S_IFREG | 0o755)) == EXECUTABLE_STYLE
        assert style_for(make_path("f")) == ""

    def test_render_label_pads(self):
        """Test that labels are padded to the column width."""
        label = render_label(make_path("src", stat.S_IFDIR | 0o755), 8)
        assert label.plain == "src/    "

    def test_render_label_too_wide(self):
        """Test that a label wider than its column is not truncated."""
        assert render_label(make_path("verylongname"), 3).plain == "verylongname"

    def test_render_label_unpadded(self):
        """Test that padding can be turned off."""
        assert render_label(make_path("a"), 10, pad=False).plain == "a"

    def test_colors_reach_terminal(self):
        """Test that directory labels are colored on a color terminal."""
        console = make_console(color_system="standard", force_terminal=True)
        display_single_column(console, [make_path("src", stat.S_IFDIR | 0o755)])
        output = console.file.getvalue()
        assert "\x1b[" in output
        assert "src/" in output


class TestDisplay:
    """Tests for the printing functions."""

    def test_display_grid_down_columns(self):
        """Test a two column grid filled down columns."""
        console = make_console()
        paths = [make_path(name) for name in ["aa", "bb", "cc", "dd"]]
        display_grid(console, LayoutInfo(2, (4, 4)), paths, FillOrder.DOWN_COLUMNS)
        assert console.file.getvalue() == "aa  cc\nbb  dd\n"

    def test_display_grid_across_rows(self):
        """Test a two column grid filled across rows."""
        console = make_console()
        paths = [make_path(name) for name in ["aa", "bb", "cc"]]
        display_grid(console, LayoutInfo(2, (4, 4)), paths, FillOrder.ACROSS_ROWS)
        assert console.file.getvalue() == "aa  bb\ncc\n"

    def test_display_grid_uneven_widths(self):
        """Test that each column is padded to its own width."""
        console = make_console()
        paths = [make_path(name) for name in ["a", "b", "long", "c"]]
        display_grid(console, LayoutInfo(3, (3, 6, 3)), paths, FillOrder.ACROSS_ROWS)
        assert console.file.getvalue() == "a  b     long\nc\n"

    def test_display_single_column(self):
        """Test one entry per line."""
        console = make_console()
        display_single_column(console, [make_path("a"), make_path("b", stat.S_IFDIR | 0o755)])
        assert console.file.getvalue() == "a\nb/\n"

    def test_display_long(self):
        """Test that long format fields are aligned."""
        console = make_console()
        longpaths = [
            LongPathInfo("-rw-r--r--", "1", "alice", "staff", "5", "Jun 01 09:30",
                         make_path("small.txt")),
            LongPathInfo("drwxr-xr-x", "12", "bob", "wheel", "4096", "Jan 02  2023",
                         make_path("docs", stat.S_IFDIR | 0o755)),
            LongPathInfo("lrwxrwxrwx", "1", "alice", "staff", "9", "Jun 01 09:30",
                         make_path("latest", stat.S_IFLNK | 0o777), link_target="small.txt"),
        ]
        display_long(console, longpaths)
        assert console.file.getvalue().splitlines() == [
            "-rw-r--r--  1 alice staff    5 Jun 01 09:30 small.txt",
            "drwxr-xr-x 12 bob   wheel 4096 Jan 02  2023 docs/",
            "lrwxrwxrwx  1 alice staff    9 Jun 01 09:30 latest -> small.txt",
        ]

    def test_display_long_empty(self):
        """Test that nothing is printed for no paths."""
        console = make_console()
        display_long(console, [])
        assert console.file.getvalue() == ""

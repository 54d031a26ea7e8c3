"""
Listing driver for lsgrid.

This module collects the paths named on the command line, reports the ones
that cannot be accessed, and prints files and directory contents in the
requested format.
"""

import errno
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from rich.console import Console

from lsgrid.display import display_grid, display_long, display_single_column
from lsgrid.layout import MIN_COL_SIZE, FillOrder, compute_layout
from lsgrid.pathinfo import LongPathInfo, PathInfo, read_dir, stat_operand

logger = logging.getLogger(__name__)

PROGRAM = "lsgrid"

EXIT_OK = 0
EXIT_MINOR = 1
EXIT_SERIOUS = 2

ERROR_MESSAGES = {
    errno.ENOENT: "No such file or directory",
    errno.EACCES: "Permission denied",
    errno.EPERM: "Operation not permitted",
    errno.ENOTDIR: "Not a directory",
}


@dataclass(frozen=True)
class DisplayOptions:
    """Options controlling what is listed and how."""

    show_hidden: bool = False
    long: bool = False
    fill_order: FillOrder = FillOrder.DOWN_COLUMNS
    single_column: bool = False
    reverse: bool = False
    numeric_ids: bool = False
    min_column_width: int = MIN_COL_SIZE
    separator_width: int = 2


def describe_error(err: OSError) -> str:
    """Short reason for an OS error, worded like ``ls``."""
    if err.errno in ERROR_MESSAGES:
        return ERROR_MESSAGES[err.errno]
    return err.strerror or str(err)


def print_error_msg(what: str, why: str, stream: Optional[TextIO] = None) -> None:
    """Format and print an error message."""
    print(f"{PROGRAM}: {what}: {why}", file=stream or sys.stderr)


class Lister:
    """Lists paths to a console and remembers the resulting exit status."""

    def __init__(self, options: DisplayOptions, console: Console, term_width: int):
        """Initialize the lister.

        Args:
            options: Display options.
            console: Console to print listings to.
            term_width: Width of the terminal in characters.
        """
        self.options = options
        self.console = console
        self.term_width = term_width
        self.exit_code = EXIT_OK

    def _fail(self, code: int) -> None:
        self.exit_code = max(self.exit_code, code)

    def _report_access_error(self, path, err: OSError) -> None:
        print_error_msg(f"cannot access '{path}'", describe_error(err))

    def _report_entry_error(self, path: Path, err: OSError) -> None:
        self._report_access_error(path, err)
        self._fail(EXIT_MINOR)

    def _sorted(self, paths: Sequence[PathInfo]) -> List[PathInfo]:
        return sorted(paths, reverse=self.options.reverse)

    def collect_operands(self, operands: Sequence[str]) -> List[PathInfo]:
        """Stat every operand, reporting the ones that cannot be accessed.

        Args:
            operands: Paths as given on the command line.

        Returns:
            list: Sorted ``PathInfo`` objects of the accessible operands.
        """
        infos = []
        for operand in operands:
            try:
                infos.append(stat_operand(operand))
            except OSError as e:
                self._report_access_error(operand, e)
                self._fail(EXIT_SERIOUS)
        return self._sorted(infos)

    def run(self, operands: Sequence[str]) -> int:
        """List every operand.

        Files are printed first as one group, then the contents of each
        directory. Directory groups get a ``PATH:`` header when more than one
        operand was given.

        Args:
            operands: Paths as given on the command line; ``.`` when empty.

        Returns:
            int: Exit status.
        """
        operands = list(operands) or ["."]
        infos = self.collect_operands(operands)
        files = [p for p in infos if not p.is_dir]
        dirs = [p for p in infos if p.is_dir]
        logger.info("listing %d files and %d directories", len(files), len(dirs))

        if files:
            self.display_paths(files)

        show_headers = len(operands) > 1
        for index, directory in enumerate(dirs):
            if files or index > 0:
                self.console.print()
            if show_headers:
                self.console.print(f"{directory.name}:", markup=False)
            self.display_dir_contents(directory)
        return self.exit_code

    def read_dir_contents(self, directory: PathInfo) -> Optional[List[PathInfo]]:
        """Read the sorted children of a directory, or None if it cannot be read."""
        try:
            children = read_dir(
                directory.path,
                ignore_hidden=not self.options.show_hidden,
                on_error=self._report_entry_error,
            )
        except OSError as e:
            print_error_msg(f"cannot open directory '{directory.name}'", describe_error(e))
            self._fail(EXIT_SERIOUS)
            return None
        return self._sorted(children)

    def display_dir_contents(self, directory: PathInfo) -> None:
        """Print the children of a directory, preceded by a block total in long format."""
        children = self.read_dir_contents(directory)
        if children is None:
            return
        if self.options.long:
            total = sum(child.blocks for child in children) // 2
            self.console.print(f"total {total}", markup=False)
        self.display_paths(children)

    def display_paths(self, paths: Sequence[PathInfo]) -> None:
        """Print paths in the configured format."""
        if not paths:
            return
        if self.options.long:
            longpaths = [
                LongPathInfo.from_pathinfo(p, numeric_ids=self.options.numeric_ids)
                for p in paths
            ]
            display_long(self.console, longpaths)
        elif self.options.single_column:
            display_single_column(self.console, paths)
        else:
            lens = [len(str(p)) + self.options.separator_width for p in paths]
            layout = compute_layout(
                self.options.fill_order,
                self.term_width,
                lens,
                self.options.min_column_width,
            )
            logger.debug("chose %d columns for %d paths", layout.num_cols, len(paths))
            display_grid(self.console, layout, paths, self.options.fill_order)

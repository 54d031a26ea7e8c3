"""
Path metadata for lsgrid.

This module stats paths, reads directory contents and assembles the fields
shown by the long listing format.
"""

import errno
import grp
import os
import pwd
import stat
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

from lsgrid.filemode import FileMode

# Timestamps older than this (or in the future) show the year instead of the time
RECENT_WINDOW = timedelta(days=365 / 2)


@dataclass(frozen=True, order=True)
class PathInfo:
    """A path together with its stat result.

    Two ``PathInfo`` objects compare by path only, so sorting a listing sorts
    it by name.
    """

    path: Path
    stat_result: os.stat_result = field(compare=False, repr=False)
    label: Optional[str] = field(default=None, compare=False)

    @property
    def name(self) -> str:
        if self.label is not None:
            return self.label
        return self.path.name or str(self.path)

    @property
    def mode(self) -> FileMode:
        return FileMode(self.stat_result.st_mode)

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.stat_result.st_mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.stat_result.st_mode)

    @property
    def is_executable(self) -> bool:
        return stat.S_ISREG(self.stat_result.st_mode) and self.mode.any_execute

    @property
    def blocks(self) -> int:
        """Allocated 512-byte blocks, 0 where the platform does not report them."""
        return getattr(self.stat_result, "st_blocks", None) or 0

    def __str__(self):
        if self.is_dir and not self.name.endswith("/"):
            return self.name + "/"
        return self.name


def is_hidden(path: Path) -> bool:
    """Check whether a path's final component starts with a dot."""
    return path.name.startswith(".")


def stat_operand(operand: str) -> PathInfo:
    """Stat a path given on the command line.

    Symlinks are followed; a dangling or looping symlink is reported as the
    link itself. The path is displayed exactly as it was typed.

    Raises:
        OSError: If the path cannot be accessed.
    """
    path = Path(operand)
    try:
        st = os.stat(path)
    except OSError as e:
        if e.errno not in (errno.ENOENT, errno.ELOOP):
            raise
        st = os.lstat(path)
    return PathInfo(path, st, label=operand)


def read_dir(directory: Path, ignore_hidden: bool = True, on_error=None) -> List[PathInfo]:
    """Collect a ``PathInfo`` for every entry of a directory.

    Entries are not followed when they are symlinks. Entries that vanish or
    cannot be stat-ed are skipped after being passed to ``on_error``.

    Args:
        directory: Directory to read.
        ignore_hidden: Skip entries whose name starts with a dot.
        on_error: Optional callable taking ``(path, exception)``.

    Returns:
        list: Unsorted entries.

    Raises:
        OSError: If the directory itself cannot be read.
    """
    entries = []
    with os.scandir(directory) as it:
        for entry in it:
            path = Path(entry.path)
            if ignore_hidden and is_hidden(path):
                continue
            try:
                st = entry.stat(follow_symlinks=False)
            except OSError as e:
                if on_error:
                    on_error(path, e)
                continue
            entries.append(PathInfo(path, st))
    return entries


def user_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def format_mtime(mtime: float, now: Optional[datetime] = None) -> str:
    """Format a modification time the way ``ls -l`` does.

    Recent files show ``Mon DD HH:MM``; files older than six months, or dated
    in the future, show ``Mon DD  YYYY``.
    """
    if now is None:
        now = datetime.now()
    when = datetime.fromtimestamp(mtime)
    if when > now or now - when > RECENT_WINDOW:
        return when.strftime("%b %d  %Y")
    return when.strftime("%b %d %H:%M")


@dataclass
class LongPathInfo:
    """Fields of one line of the long listing format, already rendered as text."""

    filetype_mode: str
    num_links: str
    owner: str
    group: str
    size: str
    last_modified: str
    path: PathInfo
    link_target: Optional[str] = None

    @classmethod
    def from_pathinfo(cls, p: PathInfo, numeric_ids: bool = False,
                      now: Optional[datetime] = None) -> "LongPathInfo":
        st = p.stat_result
        if numeric_ids:
            owner, group = str(st.st_uid), str(st.st_gid)
        else:
            owner, group = user_name(st.st_uid), group_name(st.st_gid)

        if stat.S_ISCHR(st.st_mode) or stat.S_ISBLK(st.st_mode):
            size = f"{os.major(st.st_rdev)}, {os.minor(st.st_rdev)}"
        else:
            size = str(st.st_size)

        link_target = None
        if p.is_symlink:
            try:
                link_target = os.readlink(p.path)
            except OSError:
                link_target = None

        return cls(
            filetype_mode=str(p.mode),
            num_links=str(st.st_nlink),
            owner=owner,
            group=group,
            size=size,
            last_modified=format_mtime(st.st_mtime, now),
            path=p,
            link_target=link_target,
        )

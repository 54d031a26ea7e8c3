"""
File mode formatting for lsgrid.

This module turns a raw ``st_mode`` value into the ``drwxr-xr-x`` notation
used by the long listing format.
"""

import stat

FILETYPE_CHARS = {
    stat.S_IFIFO: "p",
    stat.S_IFCHR: "c",
    stat.S_IFDIR: "d",
    stat.S_IFBLK: "b",
    stat.S_IFREG: "-",
    stat.S_IFLNK: "l",
    stat.S_IFSOCK: "s",
}


class FileMode:
    """Permission and file type bits of a single path."""

    def __init__(self, mode):
        """Initialize the file mode.

        Args:
            mode: Raw mode, as found in ``os.stat_result.st_mode``.
        """
        self.mode = mode

    @property
    def user_read(self):
        return bool(self.mode & stat.S_IRUSR)

    @property
    def user_write(self):
        return bool(self.mode & stat.S_IWUSR)

    @property
    def user_execute(self):
        return bool(self.mode & stat.S_IXUSR)

    @property
    def group_read(self):
        return bool(self.mode & stat.S_IRGRP)

    @property
    def group_write(self):
        return bool(self.mode & stat.S_IWGRP)

    @property
    def group_execute(self):
        return bool(self.mode & stat.S_IXGRP)

    @property
    def other_read(self):
        return bool(self.mode & stat.S_IROTH)

    @property
    def other_write(self):
        return bool(self.mode & stat.S_IWOTH)

    @property
    def other_execute(self):
        return bool(self.mode & stat.S_IXOTH)

    @property
    def suid_bit(self):
        return bool(self.mode & stat.S_ISUID)

    @property
    def sgid_bit(self):
        return bool(self.mode & stat.S_ISGID)

    @property
    def sticky_bit(self):
        return bool(self.mode & stat.S_ISVTX)

    @property
    def any_execute(self):
        """True when any of the user, group or other execute bits is set."""
        return self.user_execute or self.group_execute or self.other_execute

    @property
    def filetype(self):
        """Single character naming the file type, ``?`` when unknown."""
        return FILETYPE_CHARS.get(stat.S_IFMT(self.mode), "?")

    @property
    def permissions(self):
        """Nine character permission string, e.g. ``rwsr-x--T``.

        Lowercase ``s``/``t`` mean the special bit and the execute bit are both
        set; uppercase means only the special bit is.
        """
        return "".join([
            _bit(self.user_read, "r"),
            _bit(self.user_write, "w"),
            _special(self.user_execute, self.suid_bit, "s"),
            _bit(self.group_read, "r"),
            _bit(self.group_write, "w"),
            _special(self.group_execute, self.sgid_bit, "s"),
            _bit(self.other_read, "r"),
            _bit(self.other_write, "w"),
            _special(self.other_execute, self.sticky_bit, "t"),
        ])

    def __str__(self):
        return self.filetype + self.permissions


def _bit(is_set, char):
    return char if is_set else "-"


def _special(execute, special, char):
    if special:
        return char if execute else char.upper()
    return "x" if execute else "-"

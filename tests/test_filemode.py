"""
Tests for file mode formatting.
"""

import stat

import pytest

from lsgrid.filemode import FileMode


class TestFileMode:
    """Tests for the FileMode class."""

    @pytest.mark.parametrize("mode,expected", [
        (stat.S_IFREG | 0o644, "-rw-r--r--"),
        (stat.S_IFREG | 0o755, "-rwxr-xr-x"),
        (stat.S_IFDIR | 0o755, "drwxr-xr-x"),
        (stat.S_IFLNK | 0o777, "lrwxrwxrwx"),
        (stat.S_IFREG | 0o000, "----------"),
        (stat.S_IFIFO | 0o600, "prw-------"),
        (stat.S_IFCHR | 0o620, "crw--w----"),
        (stat.S_IFBLK | 0o660, "brw-rw----"),
        (stat.S_IFSOCK | 0o777, "srwxrwxrwx"),
    ])
    def test_str(self, mode, expected):
        """Test the full ls-style mode string."""
        assert str(FileMode(mode)) == expected

    def test_setuid(self):
        """Test setuid with and without the user execute bit."""
        assert FileMode(stat.S_IFREG | 0o4755).permissions == "rwsr-xr-x"
        assert FileMode(stat.S_IFREG | 0o4644).permissions == "rwSr--r--"

    def test_setgid(self):
        """Test setgid with and without the group execute bit."""
        assert FileMode(stat.S_IFREG | 0o2755).permissions == "rwxr-sr-x"
        assert FileMode(stat.S_IFREG | 0o2644).permissions == "rw-r-Sr--"

    def test_sticky(self):
        """Test the sticky bit with and without the other execute bit."""
        assert str(FileMode(stat.S_IFDIR | 0o1777)) == "drwxrwxrwt"
        assert str(FileMode(stat.S_IFDIR | 0o1770)) == "drwxrwx--T"

    def test_unknown_type(self):
        """Test that an unknown file type shows a question mark."""
        assert FileMode(0o644).filetype == "?"

    def test_bit_properties(self):
        """Test the individual bit accessors."""
        mode = FileMode(0o754)
        assert mode.user_read and mode.user_write and mode.user_execute
        assert mode.group_read and not mode.group_write and mode.group_execute
        assert mode.other_read and not mode.other_write and not mode.other_execute
        assert not (mode.suid_bit or mode.sgid_bit or mode.sticky_bit)

    def test_any_execute(self):
        """Test that any execute bit counts."""
        assert FileMode(0o001).any_execute
        assert FileMode(0o010).any_execute
        assert FileMode(0o100).any_execute
        assert not FileMode(0o666).any_execute

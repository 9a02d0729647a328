"""Device and inode identity of directories, for loop detection while scanning."""

from pathlib import Path
from typing import NamedTuple


class FileIdentifier(NamedTuple):
    """Identity of a directory on disk.

    Two paths with the same identifier are the same directory, for example a folder and
    a symbolic link that points back to it. The suite tree keeps the identifiers of the
    folders on the branch being scanned so that such links are not followed forever.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    device_id: int
    inode_number: int

    @classmethod
    def of(cls, path: Path) -> "FileIdentifier":
        """Get the identifier of the directory a path resolves to.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        stat_info = path.stat()
        return cls(stat_info.st_dev, stat_info.st_ino)

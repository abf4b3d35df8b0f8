"""Filesystem access for file-backed cluster specs.

FileSpec never touches the disk directly; it reads through an object
implementing the FileSystem protocol so tests can substitute an
in-memory tree.
"""

import errno
import os
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Read-only filesystem capability used by FileSpec."""

    def read_bytes(self, path: str) -> bytes:
        """Return the full content of ``path``.

        Raises:
            OSError: If the file cannot be read.

        """
        ...


class OsFileSystem:
    """FileSystem backed by the local disk."""

    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def __repr__(self) -> str:
        return "OsFileSystem()"


class MemoryFileSystem:
    """FileSystem backed by a dictionary of absolute paths to contents.

    Attributes:
        files: Mapping of normalized absolute path to file content.

    """

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files: dict[str, bytes] = {}
        for path, content in (files or {}).items():
            self.write_bytes(path, content)

    @staticmethod
    def _key(path: str) -> str:
        return os.path.normpath(path)

    def write_bytes(self, path: str, content: bytes) -> None:
        """Store ``content`` at ``path``, replacing any previous content."""
        self.files[self._key(path)] = content

    def read_bytes(self, path: str) -> bytes:
        try:
            return self.files[self._key(path)]
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path) from None

    def __repr__(self) -> str:
        return f"MemoryFileSystem(files={sorted(self.files)!r})"

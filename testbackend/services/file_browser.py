# -*- coding: utf-8 -*-
"""Location: ./testbackend/services/file_browser.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Root-confined file browser.

Resolves a relative path under a configured root and returns either a
directory listing or the (size-capped) content of a file. Any path that
normalizes to a location outside the root is rejected before the filesystem
is touched.

Examples:
    >>> import tempfile, pathlib
    >>> root = tempfile.mkdtemp()
    >>> _ = (pathlib.Path(root) / "a.txt").write_text("hi")
    >>> browser = FileBrowser(root)
    >>> [e.name for e in browser.browse().entries]
    ['a.txt']
    >>> browser.browse("a.txt").content
    'hi'
    >>> try:
    ...     browser.browse("../etc/passwd")
    ... except PathOutsideRootError as e:
    ...     str(e)
    'Path is outside of allowed root'
"""

# Standard
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

# First-Party
from testbackend.schemas import DirectoryListing, FileContent, FileEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONTENT_CHARS = 16_000
TRUNCATION_MARKER = "..."

# Characters no supported filesystem accepts in a path component
FORBIDDEN_PATH_CHARS = ("\x00",)


class FileBrowserError(Exception):
    """Base class for file browser errors.

    Args:
        message: Human readable description.
        root: Absolute root directory.
        target: Absolute target path (may be empty when it was never resolved).
    """

    def __init__(self, message: str, root: str = "", target: str = "") -> None:
        super().__init__(message)
        self.root = root
        self.target = target


class InvalidPathError(FileBrowserError):
    """Raised when the requested path contains forbidden characters."""


class PathOutsideRootError(FileBrowserError):
    """Raised when the requested path resolves outside the root."""


class PathNotFoundError(FileBrowserError):
    """Raised when the resolved path is neither a file nor a directory."""


class FileBrowser:
    """List and read files below a root directory.

    Args:
        root: Root directory; relative roots resolve against the working directory.
        max_content_chars: Maximum number of characters of file content returned.
    """

    def __init__(self, root: Union[str, Path], max_content_chars: int = DEFAULT_MAX_CONTENT_CHARS) -> None:
        self.root = os.path.realpath(os.fspath(root))
        self.max_content_chars = max_content_chars

    def is_within_root(self, target: str) -> bool:
        """Check that a canonical path lies under the root.

        Both paths go through ``os.path.normcase``, so the comparison follows
        the platform: case-sensitive on POSIX, case-insensitive on Windows.
        Path component boundaries are respected, so a sibling such as
        ``<root>-other`` is not considered inside.

        Args:
            target: Canonical absolute path (see ``resolve``).

        Returns:
            True when target is the root or a descendant of it.

        Examples:
            >>> b = FileBrowser("/srv/data")
            >>> b.is_within_root("/srv/data/x/y")
            True
            >>> b.is_within_root("/srv/DATA") == (os.path.normcase("/srv/DATA") == os.path.normcase("/srv/data"))
            True
            >>> b.is_within_root("/srv/data-other")
            False
        """
        root = os.path.normcase(self.root)
        candidate = os.path.normcase(target)
        if candidate == root:
            return True
        prefix = root if root.endswith(os.sep) else root + os.sep
        return candidate.startswith(prefix)

    def resolve(self, path: Optional[str] = None) -> str:
        """Resolve a request path to an absolute path under the root.

        Args:
            path: Path relative to the root; empty or ``None`` means the root itself.

        Returns:
            Canonical absolute target path with symlinks resolved.

        Raises:
            InvalidPathError: If the path contains forbidden characters.
            PathOutsideRootError: If the path escapes the root.
        """
        if not path:
            return self.root

        if any(ch in path for ch in FORBIDDEN_PATH_CHARS):
            raise InvalidPathError("Path contains invalid characters", root=self.root)

        # Symlinks are resolved before the root check
        target = os.path.realpath(os.path.join(self.root, path))
        if not self.is_within_root(target):
            logger.warning("Rejected path outside of root: %r", path)
            raise PathOutsideRootError("Path is outside of allowed root", root=self.root, target=target)
        return target

    def list_directory(self, target: str) -> DirectoryListing:
        """List the immediate entries of a directory.

        Args:
            target: Absolute directory path under the root.

        Returns:
            DirectoryListing sorted by entry name.
        """
        entries: List[FileEntry] = []
        with os.scandir(target) as it:
            for entry in sorted(it, key=lambda e: e.name):
                is_file = entry.is_file()
                entries.append(
                    FileEntry(
                        name=entry.name,
                        path=os.path.relpath(entry.path, self.root),
                        type="file" if is_file else "dir",
                        size=entry.stat().st_size if is_file else None,
                    )
                )
        return DirectoryListing(root=self.root, target=target, entries=entries)

    def read_file(self, target: str) -> FileContent:
        """Read a file as UTF-8 text, capped at ``max_content_chars`` characters.

        Args:
            target: Absolute file path under the root.

        Returns:
            FileContent with the byte size and (possibly truncated) text.
        """
        size = os.path.getsize(target)
        with open(target, "r", encoding="utf-8", errors="replace", newline="") as fh:
            content = fh.read(self.max_content_chars + 1)
        if len(content) > self.max_content_chars:
            content = content[: self.max_content_chars] + TRUNCATION_MARKER
        return FileContent(root=self.root, target=target, size=size, content=content)

    def browse(self, path: Optional[str] = None) -> Union[DirectoryListing, FileContent]:
        """Resolve a path and return a listing or file content.

        Args:
            path: Path relative to the root.

        Returns:
            DirectoryListing for directories, FileContent for files.

        Raises:
            PathNotFoundError: If nothing exists at the resolved path.
        """
        target = self.resolve(path)
        if os.path.isdir(target):
            return self.list_directory(target)
        if os.path.isfile(target):
            return self.read_file(target)
        raise PathNotFoundError("Path not found", root=self.root, target=target)

"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from matlab_style_linter.domain.protocols import FileSystemProtocol

logger = logging.getLogger(__name__)


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib and os."""

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def is_file(self, path: str) -> bool:
        """Check if path is a regular file."""
        return Path(path).is_file()

    def suffix(self, path: str) -> str:
        """Return the final extension, e.g. '.m'."""
        return Path(path).suffix

    def list_entries(self, path: str) -> List[str]:
        """Entries in directory-listing order (no sorting, no '.'/'..')."""
        with os.scandir(path) as it:
            return [entry.path for entry in it]

    def identity(self, path: str) -> tuple[int, int]:
        """(st_dev, st_ino) after following symlinks."""
        st = os.stat(path)
        return (st.st_dev, st.st_ino)

    def get_name(self, path: str, root: Optional[str] = None) -> str:
        """Display name: path relative to root when it lies inside it."""
        if root is None:
            return str(Path(path))
        try:
            relative = Path(os.path.abspath(path)).relative_to(os.path.abspath(root))
        except ValueError:
            return str(Path(path))
        return str(relative) if str(relative) != "." else str(Path(path))

    @contextmanager
    def open_lines(self, path: str, encoding: str = "utf-8") -> Iterator[Iterator[str]]:
        """Open for line-based reading. newline='' keeps each line's terminator."""
        with open(path, "r", encoding=encoding, newline="") as f:
            yield iter(f)

    @contextmanager
    def temp_sibling(self, path: str, encoding: str = "utf-8") -> Iterator[tuple[TextIO, str]]:
        """Temporary file in the same directory as path, so os.replace stays atomic."""
        target = Path(path)
        fd, temp_path = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
                yield (handle, temp_path)
        except BaseException:
            self.discard(temp_path)
            raise

    def replace(self, source: str, destination: str) -> None:
        """Atomically move source over destination, keeping destination's permissions."""
        try:
            os.chmod(source, Path(destination).stat().st_mode & 0o7777)
        except OSError as e:
            logger.debug("Could not copy permissions to %s: %s", source, e)
        os.replace(source, destination)

    def discard(self, path: str) -> None:
        """Remove path if it exists."""
        try:
            os.remove(path)
        except FileNotFoundError:
            pass

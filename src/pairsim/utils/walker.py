import functools
import logging
import os
import stat
from pathlib import Path
from typing import Callable, Iterator

logger = logging.getLogger(__name__)


class FileContext:
    """Context object for a file or directory during traversal.

    The stat information is gathered lazily without following symlinks. Use
    is_dir() to ask whether the entry resolves to a directory (following
    symlinks), and is_real_dir() to ask whether the walker descends into it.
    """
    def __init__(self, parent, name: str | None, path: Path | None = None):
        self._parent: FileContext | None = parent
        self._name: str | None = name
        self._stat: os.stat_result | None = None
        self._path: Path | None = path

    @property
    def stat(self) -> os.stat_result:
        if self._stat is None:
            if self._path is None:
                raise LookupError("stat not available and path not provided")
            self._stat = self._path.stat(follow_symlinks=False)
        return self._stat

    @functools.cached_property
    def relative_path(self) -> Path | None:
        """Path below the scan root, built from the cached parent paths."""
        if self._name is None:
            return None

        if self._parent is None:
            return Path(self._name)

        parent_path = self._parent.relative_path
        if parent_path is None:
            return Path(self._name)

        return parent_path / self._name

    def is_real_dir(self) -> bool:
        return stat.S_ISDIR(self.stat.st_mode)

    def is_dir(self) -> bool:
        if self.is_real_dir():
            return True
        if stat.S_ISLNK(self.stat.st_mode) and self._path is not None:
            return self._path.is_dir()
        return False


def walk(path: Path, parent: FileContext) -> Iterator[tuple[Path, FileContext]]:
    """Recursively traverse a directory without descending into symlinked directories."""
    child: Path
    for child in path.iterdir():
        context = FileContext(parent, child.name, path=child)
        yield child, context

        if context.is_real_dir():
            yield from walk(child, context)


def discover_files(root: Path, predicate: Callable[[str], bool] | None = None) -> list[Path]:
    """Collect the files under root whose name satisfies predicate.

    Directories, including symlinks to directories, are never returned. The
    result holds absolute paths, without duplicates, sorted by their textual
    representation.

    Args:
        root: Directory to scan recursively
        predicate: Called with each file name; None accepts every file

    Raises:
        NotADirectoryError: root is not a directory
    """
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")

    found: set[Path] = set()
    for file_path, context in walk(root, FileContext(None, None, root)):
        if context.is_dir():
            continue
        if predicate is not None and not predicate(file_path.name):
            logger.debug(f"Not selected: {context.relative_path}")
            continue
        found.add(file_path.absolute())

    files = sorted(found, key=str)
    logger.info(f"Discovered {len(files)} file(s) under {root}")
    return files

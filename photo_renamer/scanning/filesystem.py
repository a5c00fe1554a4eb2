import os
import logging
from pathlib import Path
from typing import Iterator, List, Optional


class FileScanner:
    """
    Enumerates the files a run should rename.
    """

    def __init__(self, skip_dir: Optional[Path] = None):
        # Output directory; never descended into when recursing
        self.skip_dir = skip_dir.resolve() if skip_dir else None

    def scan(self, root: Path, recursive: bool = False) -> List[Path]:
        """Returns candidate files up front so the batch knows its size."""
        if recursive:
            return list(self._iter_files(root))
        return list(self._iter_flat(root))

    def _iter_flat(self, root: Path) -> Iterator[Path]:
        """Regular files directly inside root, in stable order."""
        for e in self._sorted_entries(root):
            if e.is_file(follow_symlinks=False):
                yield Path(e.path)

    def _iter_files(self, root: Path) -> Iterator[Path]:
        """Depth-first walker using os.scandir for speed."""
        stack = [root]
        while stack:
            current = stack.pop()
            if current != root and self._is_skipped(current):
                logging.debug(f"Skipping output directory: {current}")
                continue

            dirs = []
            files = []
            for e in self._sorted_entries(current):
                if e.is_dir(follow_symlinks=False):
                    dirs.append(Path(e.path))
                elif e.is_file(follow_symlinks=False):
                    files.append(Path(e.path))

            # Push dirs to stack (reversed so we process A before Z)
            for d in reversed(dirs):
                stack.append(d)

            for f in files:
                yield f

    def _sorted_entries(self, directory: Path) -> List[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except (OSError, PermissionError):
            logging.warning(f"Permission denied: {directory}")
            return []

        # Sort for stable traversal order
        entries.sort(key=lambda e: e.name.lower())
        return entries

    def _is_skipped(self, directory: Path) -> bool:
        if self.skip_dir is None:
            return False
        # Not descending into it skips its whole subtree
        return directory.resolve() == self.skip_dir

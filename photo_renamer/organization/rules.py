from collections import defaultdict
from pathlib import Path
from typing import Optional

from ..models import CandidateName


class DestinationPlanner:
    def __init__(self, output_root: Path, source_root: Optional[Path] = None, preserve_tree: bool = False):
        self.output_root = output_root
        self.source_root = source_root
        self.preserve_tree = preserve_tree
        # Names handed out during this run, keyed by folder
        self.used_names = defaultdict(set)

    def plan(self, source: Path, name: CandidateName) -> Path:
        """
        Calculates the destination path for a renamed file.
        Tree preservation mirrors the file's folder below the source root.
        """
        folder = self.output_root
        if self.preserve_tree and self.source_root is not None:
            folder = folder / self._relative_parent(source)
        return folder / name.filename

    def claim(self, dest: Path) -> bool:
        """
        Reserves dest for this run. False if another file already took it.
        """
        key = dest.parent.resolve()
        if dest.name in self.used_names[key]:
            return False
        self.used_names[key].add(dest.name)
        return True

    def _relative_parent(self, source: Path) -> Path:
        try:
            return source.parent.relative_to(self.source_root)
        except ValueError:
            return source.resolve().parent.relative_to(self.source_root.resolve())

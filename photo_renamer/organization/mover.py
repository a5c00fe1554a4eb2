import os
import shutil
import logging
from pathlib import Path

from ..exceptions import FileOperationError

MOVE = 'move'
COPY = 'copy'
SYMLINK = 'symlink'
OPERATIONS = (MOVE, COPY, SYMLINK)


class FileOperator:
    """
    Places a source file at its destination by moving, copying or symlinking.
    Existing destinations are never overwritten.
    """

    def __init__(self, operation: str = MOVE, dry_run: bool = False):
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation: {operation}")
        self.operation = operation
        self.dry_run = dry_run

    def execute(self, src: Path, dest: Path) -> bool:
        """
        Returns True if the operation ran (or would run, in dry-run mode),
        False if it was skipped because dest already exists.

        Raises:
            FileOperationError: the filesystem refused the operation.
        """
        if dest.exists() or dest.is_symlink():
            logging.warning(f"Not overwriting existing {dest} (source {src})")
            return False

        if self.dry_run:
            logging.info(f"[DRY RUN] '{src}' -> '{dest}'")
            return True

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)

            if self.operation == MOVE:
                shutil.move(str(src), str(dest))
            elif self.operation == COPY:
                shutil.copy2(str(src), str(dest))
            else:
                os.symlink(src.resolve(), dest)
        except OSError as e:
            raise FileOperationError(f"Failed to {self.operation} {src} -> {dest}: {e}") from e

        logging.info(f"{self.operation.capitalize()} '{src}' -> '{dest}'")
        return True

import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .exceptions import ConfigurationError, FileOperationError, MetadataExtractionError, NamingError
from .metadata.extract import MetadataReader
from .models import BatchResult, FailureRecord, RenameOutcome
from .naming.deriver import derive_name
from .organization.mover import FileOperator, MOVE
from .organization.rules import DestinationPlanner
from .scanning.filesystem import FileScanner


class PhotoRenamerApp:
    def __init__(self, reader: Optional[MetadataReader] = None):
        self.reader = reader or MetadataReader()

    def rename(self,
               src_root: Path,
               output_root: Path,
               recursive: bool = False,
               single_file: Optional[Path] = None,
               preserve_tree: bool = False,
               operation: str = MOVE,
               dry_run: bool = False) -> BatchResult:
        """
        Renames every candidate file, one at a time.
        1. Enumerate
        2. Read metadata (exiftool)
        3. Derive name
        4. Plan destination & execute

        Files that cannot be named are collected in the returned
        BatchResult; earlier operations are never undone.
        """
        if preserve_tree and not recursive:
            raise ConfigurationError("--preserve-tree is only valid with --recursive")

        self.reader.ensure_available()

        if dry_run:
            logging.info("Performing DRY RUN! No files will be modified!")

        files = self._collect(src_root, output_root, recursive, single_file)
        result = BatchResult(total=len(files))
        logging.info(f"Processing {result.total} files")

        planner = DestinationPlanner(output_root, src_root, preserve_tree)
        operator = FileOperator(operation, dry_run=dry_run)

        for path in tqdm(files, desc="Renaming", unit="file"):
            self._process_file(path, planner, operator, result)

        logging.info(
            f"Done. {len(result.outcomes)} handled, {len(result.failures)} unnamed, "
            f"{len(result.errors)} errors."
        )
        return result

    def _collect(self,
                 src_root: Path,
                 output_root: Path,
                 recursive: bool,
                 single_file: Optional[Path]) -> List[Path]:
        if single_file is not None:
            if not single_file.is_file():
                raise ConfigurationError(f"File specified: '{single_file}' does not exist")
            return [single_file]

        if not src_root.is_dir():
            raise ConfigurationError(f"Directory specified: '{src_root}' does not exist")

        scanner = FileScanner(skip_dir=output_root)
        return scanner.scan(src_root, recursive=recursive)

    def _process_file(self,
                      path: Path,
                      planner: DestinationPlanner,
                      operator: FileOperator,
                      result: BatchResult):
        try:
            fields = self.reader.read_fields(path)
            name = derive_name(fields)
        except (MetadataExtractionError, NamingError) as e:
            logging.debug(f"Cannot name {path}: {e}")
            result.failures.append(FailureRecord(path=path, reason=str(e)))
            return

        dest = planner.plan(path, name)

        if dest.resolve() == path.resolve():
            logging.debug(f"Already named: {path}")
            result.outcomes.append(RenameOutcome(path, dest, 'skipped', "already named"))
            return

        if not planner.claim(dest):
            logging.warning(f"{path} derives the same name as an earlier file: {dest}")
            result.outcomes.append(RenameOutcome(path, dest, 'skipped', "name taken in this run"))
            return

        try:
            done = operator.execute(path, dest)
        except FileOperationError as e:
            logging.error(str(e))
            result.outcomes.append(RenameOutcome(path, dest, 'error', str(e)))
            return

        if not done:
            result.outcomes.append(RenameOutcome(path, dest, 'skipped', "destination exists"))
        elif operator.dry_run:
            result.outcomes.append(RenameOutcome(path, dest, 'dry_run'))
        else:
            result.outcomes.append(RenameOutcome(path, dest, 'renamed'))

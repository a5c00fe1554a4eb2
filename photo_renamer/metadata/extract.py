import logging
import shutil
import subprocess
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .. import config
from ..exceptions import ExifToolNotFoundError, MetadataExtractionError
from ..models import MetadataLine, RecognizedField


class MetadataReader:
    """
    Wraps the 'exiftool' command line utility.

    Only the recognized tags are requested, so the output is at most one
    'Tag: value' line per tag.
    """

    def __init__(self, executable: Optional[str] = None):
        self.executable = executable or config.EXIFTOOL

    def ensure_available(self) -> str:
        """Returns the resolved executable path or raises if it is not installed."""
        resolved = shutil.which(self.executable)
        if resolved is None:
            raise ExifToolNotFoundError(
                f"'{self.executable}' not found on PATH. Install exiftool or set EXIFTOOL."
            )
        return resolved

    def build_command(self, path: Path) -> List[str]:
        # Absolute so a name starting with "-" is never read as an option
        return [self.executable, *config.EXIFTOOL_ARGS, str(path.absolute())]

    def read_lines(self, path: Path) -> List[str]:
        """Runs exiftool against a single file and returns its output lines."""
        cmd = self.build_command(path)
        try:
            proc = subprocess.run(
                cmd, capture_output=True, encoding="utf-8", errors="replace", check=False,
            )
        except FileNotFoundError as e:
            raise ExifToolNotFoundError(f"'{self.executable}' could not be executed: {e}") from e

        if proc.returncode != 0:
            logging.debug(f"exiftool exited {proc.returncode} for {path}: {proc.stderr.strip()}")
            raise MetadataExtractionError(f"exiftool could not read {path}")

        return proc.stdout.splitlines()

    def read_fields(self, path: Path) -> Dict[RecognizedField, str]:
        return collect_fields(self.read_lines(path))


def parse_metadata_lines(lines: Iterable[str]) -> List[MetadataLine]:
    """
    Splits raw 'Tag: value' lines. Lines without a separator are ignored.
    """
    parsed = []
    for raw in lines:
        tag, sep, value = raw.partition(":")
        if not sep:
            continue
        tag = tag.strip()
        if not tag:
            continue
        parsed.append(MetadataLine(tag=tag, value=value.strip()))
    return parsed


def collect_fields(lines: Iterable[str]) -> Dict[RecognizedField, str]:
    """
    Maps recognized tags to their raw values.
    First occurrence wins; empty values and unknown tags are dropped.
    """
    fields: Dict[RecognizedField, str] = {}
    for line in parse_metadata_lines(lines):
        recognized = RecognizedField.from_tag(line.tag)
        if recognized is None or not line.value:
            continue
        fields.setdefault(recognized, line.value)
    return fields

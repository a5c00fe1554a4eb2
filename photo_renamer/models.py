from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from . import config


class RecognizedField(Enum):
    MODEL = 'Model'
    DATE_TIME_ORIGINAL = 'DateTimeOriginal'
    SHUTTER_COUNT = 'ShutterCount'
    FOCAL_LENGTH = 'FocalLength'
    SHUTTER_SPEED = 'ShutterSpeed'
    APERTURE = 'Aperture'
    FILE_TYPE_EXTENSION = 'FileTypeExtension'

    @classmethod
    def from_tag(cls, tag: str) -> Optional["RecognizedField"]:
        try:
            return cls(tag)
        except ValueError:
            return None


# Enum definition order is the filename token order
FIELD_ORDER = list(RecognizedField)


@dataclass(frozen=True)
class MetadataLine:
    """One 'Tag: value' line of exiftool output."""
    tag: str
    value: str


@dataclass
class CandidateName:
    """
    Ordered filename tokens plus an optional extension.
    """
    tokens: List[str]
    extension: Optional[str] = None

    @property
    def filename(self) -> str:
        name = config.TOKEN_SEPARATOR.join(self.tokens)
        if self.extension:
            name = f"{name}.{self.extension}"
        return name

    def __str__(self) -> str:
        return self.filename


@dataclass(frozen=True)
class FailureRecord:
    path: Path
    reason: str


@dataclass
class RenameOutcome:
    source: Path
    destination: Optional[Path]
    status: str             # renamed/dry_run/skipped/error
    message: str = ""


@dataclass
class BatchResult:
    """
    Everything a batch run produced. Replaces any global failure list.
    """
    total: int = 0
    outcomes: List[RenameOutcome] = field(default_factory=list)
    failures: List[FailureRecord] = field(default_factory=list)

    @property
    def errors(self) -> List[RenameOutcome]:
        return [o for o in self.outcomes if o.status == 'error']

    @property
    def ok(self) -> bool:
        return not self.failures and not self.errors

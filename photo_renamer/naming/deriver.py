"""
Filename derivation from exiftool metadata.

Each recognized field has a small transformation turning its raw value
into a filename-safe token. Whether a name may be built at all depends on
the two anchor fields:

  - ShutterCount present: always unique enough, DateTimeOriginal is dropped.
  - Otherwise DateTimeOriginal must transform to a 19 character
    "YYYY.MM.DD-HH.MM.SS" token.
  - Neither present: no name.
"""
import os
from typing import Callable, Dict, Iterable, Mapping, Optional

from .. import config
from ..exceptions import NamingError
from ..models import CandidateName, FIELD_ORDER, RecognizedField
from ..metadata.extract import collect_fields


def _model(value: str) -> str:
    # "Canon EOS 90D" -> "Canon_EOS"
    return "_".join(value.split()[:2])


def _date_time_original(value: str) -> str:
    # "2024:01:04 12:30:00" -> "2024.01.04-12.30.00"
    return "-".join(value.replace(":", ".").split()[:2])


def _first_token(value: str) -> str:
    return value.split()[0]


def _focal_length(value: str) -> str:
    # "50.0 mm" -> "50.0mm"
    return "".join(value.split()[:2])


def _shutter_speed(value: str) -> str:
    # "1/250" -> "1-250s"
    return value.replace("/", "-").split()[0] + "s"


def _aperture(value: str) -> str:
    return "f-" + value.split()[0]


TRANSFORMS: Dict[RecognizedField, Callable[[str], str]] = {
    RecognizedField.MODEL: _model,
    RecognizedField.DATE_TIME_ORIGINAL: _date_time_original,
    RecognizedField.SHUTTER_COUNT: _first_token,
    RecognizedField.FOCAL_LENGTH: _focal_length,
    RecognizedField.SHUTTER_SPEED: _shutter_speed,
    RecognizedField.APERTURE: _aperture,
    RecognizedField.FILE_TYPE_EXTENSION: _first_token,
}


def _path_safe(token: str) -> str:
    token = token.replace("/", "-")
    if os.sep != "/":
        token = token.replace(os.sep, "-")
    return token


def transform_field(recognized: RecognizedField, value: str) -> Optional[str]:
    """Applies a field's rule. Returns None for blank values."""
    if not value or not value.strip():
        return None
    return _path_safe(TRANSFORMS[recognized](value))


def derive_name(fields: Mapping[RecognizedField, str]) -> CandidateName:
    """
    Builds a CandidateName from a field -> raw value mapping.

    Raises:
        NamingError: when neither anchor field yields a usable token.
    """
    tokens: Dict[RecognizedField, str] = {}
    for recognized in FIELD_ORDER:
        if recognized not in fields:
            continue
        token = transform_field(recognized, fields[recognized])
        if token:
            tokens[recognized] = token

    if RecognizedField.SHUTTER_COUNT in tokens:
        tokens.pop(RecognizedField.DATE_TIME_ORIGINAL, None)
    elif RecognizedField.DATE_TIME_ORIGINAL in tokens:
        if len(tokens[RecognizedField.DATE_TIME_ORIGINAL]) != config.DATETIME_TOKEN_LENGTH:
            raise NamingError("malformed DateTimeOriginal")
    else:
        raise NamingError("no ShutterCount or DateTimeOriginal")

    extension = tokens.pop(RecognizedField.FILE_TYPE_EXTENSION, None)
    return CandidateName(tokens=list(tokens.values()), extension=extension)


def derive_name_from_lines(lines: Iterable[str]) -> CandidateName:
    """Convenience wrapper taking raw exiftool output lines."""
    return derive_name(collect_fields(lines))

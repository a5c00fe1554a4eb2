"""
Configuration constants for the photo renamer.
"""
import os

__version__ = "0.2.0"

# --- Metadata Reader ---
EXIFTOOL = os.environ.get("EXIFTOOL", "exiftool")

# Tags requested from exiftool. Order here is the order of tokens in the
# derived filename (FileTypeExtension always ends up as the suffix).
RECOGNIZED_TAGS = [
    'Model',
    'DateTimeOriginal',
    'ShutterCount',
    'FocalLength',
    'ShutterSpeed',
    'Aperture',
    'FileTypeExtension',
]

# -Q = quiet, -S = very short output ("Tag: value")
EXIFTOOL_ARGS = ["-Q", "-S"] + [f"-{tag}" for tag in RECOGNIZED_TAGS]

# --- Naming ---
TOKEN_SEPARATOR = "_"
# Length of a transformed "YYYY.MM.DD-HH.MM.SS" timestamp
DATETIME_TOKEN_LENGTH = 19

# --- Logging ---
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

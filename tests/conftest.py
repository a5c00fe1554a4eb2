import pytest
from pathlib import Path
from photo_renamer.metadata.extract import MetadataReader


class FakeReader(MetadataReader):
    """MetadataReader that serves canned exiftool output keyed by file name."""

    def __init__(self, outputs=None):
        super().__init__(executable="exiftool")
        self.outputs = outputs or {}
        self.calls = []

    def ensure_available(self) -> str:
        return "/usr/bin/exiftool"

    def read_lines(self, path: Path):
        self.calls.append(path)
        return self.outputs.get(path.name, [])


@pytest.fixture
def fake_reader():
    return FakeReader()


@pytest.fixture
def photo_dir(tmp_path):
    """A source directory with two nameable files and one that is not."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "IMG_0001.JPG").write_bytes(b"one")
    (src / "IMG_0002.JPG").write_bytes(b"two")
    (src / "notes.txt").write_text("no exif here")
    return src

import pytest
from pathlib import Path
from photo_renamer.core import PhotoRenamerApp
from photo_renamer.exceptions import ConfigurationError, ExifToolNotFoundError
from photo_renamer.organization.mover import COPY, MOVE

CANON = ["Model: Canon EOS90D", "ShutterCount: 4821", "FileTypeExtension: jpg"]
SONY = ["Model: Sony ILCE-7M3", "DateTimeOriginal: 2024:01:04 12:30:00", "FileTypeExtension: jpg"]


def test_rename_moves_named_and_reports_failures(fake_reader, photo_dir, tmp_path):
    fake_reader.outputs = {"IMG_0001.JPG": CANON, "IMG_0002.JPG": SONY}
    out = tmp_path / "out"
    out.mkdir()

    result = PhotoRenamerApp(fake_reader).rename(photo_dir, out, operation=MOVE)

    assert result.total == 3
    assert (out / "Canon_EOS90D_4821.jpg").read_bytes() == b"one"
    assert (out / "Sony_ILCE-7M3_2024.01.04-12.30.00.jpg").read_bytes() == b"two"
    assert not (photo_dir / "IMG_0001.JPG").exists()

    assert [f.path for f in result.failures] == [photo_dir / "notes.txt"]
    assert not result.ok


def test_all_named_is_ok(fake_reader, photo_dir, tmp_path):
    (photo_dir / "notes.txt").unlink()
    fake_reader.outputs = {"IMG_0001.JPG": CANON, "IMG_0002.JPG": SONY}

    result = PhotoRenamerApp(fake_reader).rename(photo_dir, tmp_path, operation=COPY)

    assert result.ok
    assert [o.status for o in result.outcomes] == ["renamed", "renamed"]
    assert (photo_dir / "IMG_0001.JPG").exists()


def test_dry_run_changes_nothing(fake_reader, photo_dir, tmp_path):
    fake_reader.outputs = {"IMG_0001.JPG": CANON}
    out = tmp_path / "out"

    result = PhotoRenamerApp(fake_reader).rename(photo_dir, out, dry_run=True)

    assert not out.exists()
    assert (photo_dir / "IMG_0001.JPG").exists()
    assert result.outcomes[0].status == "dry_run"
    assert result.outcomes[0].destination == out / "Canon_EOS90D_4821.jpg"


def test_same_name_twice_is_skipped(fake_reader, photo_dir, tmp_path):
    fake_reader.outputs = {"IMG_0001.JPG": CANON, "IMG_0002.JPG": CANON}

    result = PhotoRenamerApp(fake_reader).rename(photo_dir, tmp_path / "out", dry_run=True)

    statuses = [o.status for o in result.outcomes]
    assert statuses == ["dry_run", "skipped"]
    assert result.outcomes[1].message == "name taken in this run"


def test_already_named_file_is_left_alone(fake_reader, tmp_path):
    named = tmp_path / "Canon_EOS90D_4821.jpg"
    named.write_bytes(b"x")
    fake_reader.outputs = {named.name: CANON}

    result = PhotoRenamerApp(fake_reader).rename(tmp_path, tmp_path)

    assert result.ok
    assert result.outcomes[0].status == "skipped"
    assert named.read_bytes() == b"x"


def test_single_file_mode(fake_reader, photo_dir, tmp_path):
    fake_reader.outputs = {"IMG_0002.JPG": SONY}

    result = PhotoRenamerApp(fake_reader).rename(
        photo_dir, tmp_path, single_file=photo_dir / "IMG_0002.JPG", dry_run=True
    )

    assert result.total == 1
    assert fake_reader.calls == [photo_dir / "IMG_0002.JPG"]


def test_recursive_preserve_tree(fake_reader, tmp_path):
    src = tmp_path / "src"
    (src / "day1").mkdir(parents=True)
    (src / "day1" / "DSC_1.JPG").write_bytes(b"1")
    fake_reader.outputs = {"DSC_1.JPG": CANON}
    out = tmp_path / "out"

    result = PhotoRenamerApp(fake_reader).rename(src, out, recursive=True, preserve_tree=True, operation=COPY)

    assert result.ok
    assert (out / "day1" / "Canon_EOS90D_4821.jpg").read_bytes() == b"1"


def test_recursive_does_not_revisit_output(fake_reader, tmp_path):
    (tmp_path / "DSC_1.JPG").write_bytes(b"1")
    out = tmp_path / "renamed"
    out.mkdir()
    (out / "old.jpg").write_bytes(b"old")
    fake_reader.outputs = {"DSC_1.JPG": CANON}

    result = PhotoRenamerApp(fake_reader).rename(tmp_path, out, recursive=True)

    assert result.ok
    assert fake_reader.calls == [tmp_path / "DSC_1.JPG"]


def test_preserve_tree_requires_recursive(fake_reader, tmp_path):
    with pytest.raises(ConfigurationError):
        PhotoRenamerApp(fake_reader).rename(tmp_path, tmp_path, preserve_tree=True)


def test_missing_source_directory(fake_reader, tmp_path):
    with pytest.raises(ConfigurationError):
        PhotoRenamerApp(fake_reader).rename(tmp_path / "nope", tmp_path)


def test_missing_exiftool_aborts_before_processing(monkeypatch, fake_reader, photo_dir, tmp_path):
    def missing(self):
        raise ExifToolNotFoundError("exiftool not found")

    monkeypatch.setattr(type(fake_reader), "ensure_available", missing)
    with pytest.raises(ExifToolNotFoundError):
        PhotoRenamerApp(fake_reader).rename(photo_dir, tmp_path)
    assert fake_reader.calls == []

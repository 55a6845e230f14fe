from pathlib import Path

import pytest

from tcs_instance.core.errors import AmbiguousDocument, InstanceError, IoFailure, MissingDocument
from tcs_instance.io import locate_document


def test_unique_match_is_returned(tmp_path: Path):
    (tmp_path / "TCSIN_1_status.json").write_text("{}")
    (tmp_path / "TCSIN_1_TrainInfo.json").write_text("{}")

    assert locate_document(tmp_path, "status.json") == tmp_path / "TCSIN_1_status.json"


def test_zero_matches_raise_missing_document(tmp_path: Path):
    (tmp_path / "TCSIN_1_status.json").write_text("{}")

    with pytest.raises(MissingDocument) as ei:
        locate_document(tmp_path, "StationMovements.json")

    err = ei.value
    assert isinstance(err, FileNotFoundError)
    assert isinstance(err, InstanceError)
    assert err.suffix == "StationMovements.json"
    assert err.document == "StationMovements.json"
    assert "StationMovements.json" in str(err)


def test_several_matches_raise_ambiguous_document(tmp_path: Path):
    (tmp_path / "b_status.json").write_text("{}")
    (tmp_path / "a_status.json").write_text("{}")

    with pytest.raises(AmbiguousDocument) as ei:
        locate_document(tmp_path, "status.json")

    assert [p.name for p in ei.value.candidates] == ["a_status.json", "b_status.json"]


def test_suffix_must_end_the_file_name(tmp_path: Path):
    (tmp_path / "x_status.json.bak").write_text("{}")
    (tmp_path / "x_status.json").write_text("{}")

    assert locate_document(tmp_path, "status.json").name == "x_status.json"


def test_directories_are_not_candidates(tmp_path: Path):
    (tmp_path / "nested_status.json").mkdir()

    with pytest.raises(MissingDocument):
        locate_document(tmp_path, "status.json")


def test_missing_directory_raises_missing_document(tmp_path: Path):
    with pytest.raises(MissingDocument):
        locate_document(tmp_path / "nope", "status.json")


def test_unlistable_directory_raises_io_failure(tmp_path: Path, monkeypatch):
    (tmp_path / "x_status.json").write_text("{}")

    def iterdir(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", iterdir)

    with pytest.raises(IoFailure) as ei:
        locate_document(tmp_path, "status.json")

    assert isinstance(ei.value, OSError)
    assert ei.value.document == str(tmp_path)

import os
import stat

import pytest

from face_shape_landmarks.core.normalizer import normalize_landmarks
from face_shape_landmarks.models import DatasetRow, LandmarkPoint, SplitTable
from face_shape_landmarks.utils.csv_exporter import build_header, write_rows, write_split_csv
from face_shape_landmarks.utils.exceptions import WriteError


def make_row(name="a.jpg", label="Heart"):
    face = normalize_landmarks({'contour': [LandmarkPoint(0.123456789, 0.5)]})
    return DatasetRow(image_name=name, label=label, coordinates=face)


def test_header_has_138_documented_fields():
    header = build_header()
    assert len(header) == 138
    assert header[:4] == ["image_name", "label", "landmark_0_x", "landmark_0_y"]
    assert header[-2:] == ["landmark_67_x", "landmark_67_y"]


def test_writes_header_and_rows(tmp_path):
    table = SplitTable("training_set", [make_row()])

    path = write_split_csv(table, tmp_path / "out")

    assert path == tmp_path / "out" / "training_set_landmarks.csv"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == ",".join(build_header())
    fields = lines[1].split(",")
    assert len(fields) == 138
    assert fields[:4] == ["a.jpg", "Heart", "0.123457", "0.500000"]
    assert fields[4:6] == ["0.000000", "0.000000"]


def test_empty_table_writes_header_only(tmp_path):
    path = write_split_csv(SplitTable("testing_set"), tmp_path)
    assert path.read_text(encoding="utf-8").splitlines() == [",".join(build_header())]


def test_fields_containing_delimiter_are_quoted(tmp_path):
    table = SplitTable("training_set", [make_row(name="smith, john.jpg")])
    path = write_split_csv(table, tmp_path)
    data_line = path.read_text(encoding="utf-8").splitlines()[1]
    assert data_line.startswith('"smith, john.jpg",Heart,')


def test_no_temporary_files_left_behind(tmp_path):
    write_split_csv(SplitTable("training_set", [make_row()]), tmp_path)
    assert sorted(os.listdir(tmp_path)) == ["training_set_landmarks.csv"]


def test_existing_file_is_replaced_whole(tmp_path):
    target = tmp_path / "training_set_landmarks.csv"
    target.write_text("stale\n", encoding="utf-8")

    write_split_csv(SplitTable("training_set", [make_row()]), tmp_path)

    assert "stale" not in target.read_text(encoding="utf-8")


def test_write_failure_raises_write_error(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("file", encoding="utf-8")

    with pytest.raises(WriteError):
        write_split_csv(SplitTable("training_set", [make_row()]), blocker)


def test_failed_replace_keeps_previous_file(tmp_path, monkeypatch):
    target = tmp_path / "training_set_landmarks.csv"
    target.write_text("previous\n", encoding="utf-8")

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", failing_replace)

    with pytest.raises(WriteError):
        write_split_csv(SplitTable("training_set", [make_row()]), tmp_path)

    assert target.read_text(encoding="utf-8") == "previous\n"
    assert sorted(os.listdir(tmp_path)) == ["training_set_landmarks.csv"]


def test_write_rows_reports_success_flag(tmp_path):
    assert write_rows("training_set", [make_row()], tmp_path) is True
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    assert write_rows("training_set", [make_row()], blocker) is False


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_written_file_uses_umask_permissions(tmp_path):
    umask = os.umask(0o022)
    try:
        path = write_split_csv(SplitTable("training_set", [make_row()]), tmp_path)
    finally:
        os.umask(umask)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644

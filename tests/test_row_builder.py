import re

from face_shape_landmarks.models import FaceDetection, LandmarkPoint
from face_shape_landmarks.processing.row_builder import RowBuilder
from face_shape_landmarks.utils.exceptions import DetectionError, ImageLoadError

from .conftest import FACE_BYTES, NO_FACE_BYTES, FakeDetector

SIX_DECIMALS = re.compile(r"^-?\d+\.\d{6}$")


def test_row_has_name_label_and_136_formatted_values(tmp_path, write_file, fake_detector):
    image = write_file(tmp_path / "Heart" / "a.jpg")
    row = RowBuilder(fake_detector).build_row("a.jpg", "Heart", image)

    fields = row.to_fields()
    assert fields[:2] == ["a.jpg", "Heart"]
    assert len(fields) == 138
    assert all(SIX_DECIMALS.match(value) for value in fields[2:])
    assert fields[2:4] == ["0.010000", "0.005000"]


def test_no_face_returns_none(tmp_path, write_file, fake_detector):
    image = write_file(tmp_path / "Heart" / "b.jpg", NO_FACE_BYTES)
    builder = RowBuilder(fake_detector)
    assert builder.build_row("b.jpg", "Heart", image) is None
    assert builder.processed_count == 0


def test_face_without_landmarks_returns_none(tmp_path, write_file):
    detector = FakeDetector({FACE_BYTES: [FaceDetection(landmark_regions={'contour': None})]})
    image = write_file(tmp_path / "x.png")
    assert RowBuilder(detector).build_row("x.png", "Oval", image) is None


def test_detection_error_is_skipped(tmp_path, write_file):
    detector = FakeDetector({FACE_BYTES: DetectionError("boom")})
    image = write_file(tmp_path / "x.png")
    assert RowBuilder(detector).build_row("x.png", "Oval", image) is None


def test_image_load_error_is_skipped(tmp_path, write_file):
    detector = FakeDetector({FACE_BYTES: ImageLoadError("corrupt")})
    image = write_file(tmp_path / "x.png")
    assert RowBuilder(detector).build_row("x.png", "Oval", image) is None


def test_missing_file_is_skipped(tmp_path, fake_detector):
    builder = RowBuilder(fake_detector)
    assert builder.build_row("gone.jpg", "Oval", tmp_path / "gone.jpg") is None
    assert fake_detector.calls == []


def test_only_first_face_is_used(tmp_path, write_file):
    first = FaceDetection(landmark_regions={'contour': [LandmarkPoint(0.1, 0.2)]})
    second = FaceDetection(landmark_regions={'contour': [LandmarkPoint(0.7, 0.8)]})
    detector = FakeDetector({FACE_BYTES: [first, second]})
    image = write_file(tmp_path / "two.jpg")

    row = RowBuilder(detector).build_row("two.jpg", "Round", image)
    assert row.to_fields()[2:4] == ["0.100000", "0.200000"]


def test_progress_is_logged_every_interval(tmp_path, write_file, fake_detector, caplog):
    image = write_file(tmp_path / "a.jpg")
    builder = RowBuilder(fake_detector, progress_interval=2)

    with caplog.at_level("INFO", logger="face_shape_landmarks.processing.row_builder"):
        for _ in range(4):
            builder.build_row("a.jpg", "Heart", image, total=4)

    assert builder.processed_count == 4
    progress = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Processed")]
    assert progress == ["Processed 2/4 images...", "Processed 4/4 images..."]

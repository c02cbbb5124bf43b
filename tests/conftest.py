from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import pytest

from face_shape_landmarks.config.constants import REGION_ORDER
from face_shape_landmarks.config.settings import ExtractionSettings
from face_shape_landmarks.models import FaceDetection, LandmarkPoint

# 12개 영역, 합계 76점
FULL_REGION_COUNTS = {
    'contour': 11,
    'left_eyebrow': 6,
    'right_eyebrow': 6,
    'nose': 8,
    'nose_crest': 6,
    'left_eye': 8,
    'right_eye': 8,
    'outer_lips': 10,
    'inner_lips': 6,
    'left_pupil': 1,
    'right_pupil': 1,
    'median_line': 5,
}

FACE_BYTES = b"face-image"
NO_FACE_BYTES = b"empty-image"


def make_point(index: int) -> LandmarkPoint:
    return LandmarkPoint(x=(index + 1) * 0.01, y=(index + 1) * 0.005)


def make_regions(counts: Dict[str, int]) -> Dict[str, List[LandmarkPoint]]:
    """REGION_ORDER 순서로 연속 번호 포인트를 채운 영역 dict"""
    regions = {}
    index = 0
    for name in REGION_ORDER:
        if name not in counts:
            continue
        regions[name] = [make_point(index + i) for i in range(counts[name])]
        index += counts[name]
    return regions


class FakeDetector:
    """image bytes → 미리 정한 검출 결과"""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls: List[bytes] = []
        self.released = False

    def detect(self, image_bytes: bytes) -> List[FaceDetection]:
        self.calls.append(image_bytes)
        response = self.responses.get(image_bytes, [])
        if isinstance(response, Exception):
            raise response
        return response

    def release(self):
        self.released = True


@pytest.fixture
def full_detection() -> FaceDetection:
    return FaceDetection(landmark_regions=make_regions(FULL_REGION_COUNTS))


@pytest.fixture
def fake_detector(full_detection) -> FakeDetector:
    return FakeDetector({FACE_BYTES: [full_detection], NO_FACE_BYTES: []})


@pytest.fixture
def write_file():
    def _write(path: Path, data: bytes = FACE_BYTES) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides) -> ExtractionSettings:
        values = {
            'dataset_path': tmp_path / "dataset",
            'output_path': tmp_path / "output",
            'splits': ('training_set',),
        }
        values.update(overrides)
        return ExtractionSettings(**values)
    return _make


@pytest.fixture(autouse=True)
def isolate_package_logging():
    """setup_logging()이 바꾼 패키지 로거 상태 복원"""
    logger = logging.getLogger("face_shape_landmarks")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(saved_level)

"""데이터 모델 정의"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np

from .config.constants import (
    NUM_LANDMARKS,
    COORDINATE_PRECISION,
    ID_COLUMNS,
    OUTPUT_FILENAME_SUFFIX,
)


@dataclass(frozen=True)
class LandmarkPoint:
    """단일 랜드마크 포인트 (정규화 좌표)"""

    x: float  # 정규화 x 좌표 (0-1)
    y: float  # 정규화 y 좌표 (0-1)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


# 영역 이름 → 포인트 목록 (없는 영역은 None)
LandmarkRegions = Dict[str, Optional[List[LandmarkPoint]]]


@dataclass
class FaceDetection:
    """검출된 얼굴 하나 (영역별 랜드마크)"""

    landmark_regions: LandmarkRegions = field(default_factory=dict)
    bounding_box: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)  # (x, y, w, h) 정규화

    def has_landmarks(self) -> bool:
        """포인트가 하나라도 있는 영역이 있는지"""
        return any(points for points in self.landmark_regions.values())


@dataclass
class NormalizedFace:
    """
    고정 길이 68점 얼굴 랜드마크

    detected_count 이후의 포인트는 패딩 (0.0, 0.0)
    """

    points: List[LandmarkPoint]
    detected_count: int = NUM_LANDMARKS

    def __post_init__(self):
        """포인트 개수 검증"""
        if len(self.points) != NUM_LANDMARKS:
            raise ValueError(
                f"NormalizedFace requires exactly {NUM_LANDMARKS} points, got {len(self.points)}"
            )
        if not 0 <= self.detected_count <= NUM_LANDMARKS:
            raise ValueError(f"detected_count out of range: {self.detected_count}")

    def __len__(self) -> int:
        return len(self.points)

    def flatten(self) -> List[float]:
        """[x0, y0, x1, y1, ..., x67, y67]"""
        values = []
        for point in self.points:
            values.append(point.x)
            values.append(point.y)
        return values

    def to_array(self) -> np.ndarray:
        """(68, 2) float 배열"""
        return np.array([point.to_tuple() for point in self.points], dtype=np.float64)

    def missing_mask(self) -> np.ndarray:
        """패딩된 포인트 위치 True"""
        mask = np.zeros(NUM_LANDMARKS, dtype=bool)
        mask[self.detected_count:] = True
        return mask


def format_coordinate(value: float) -> str:
    """소수점 6자리 고정 포맷"""
    return f"{value:.{COORDINATE_PRECISION}f}"


def landmark_columns() -> List[str]:
    """landmark_0_x, landmark_0_y, ..., landmark_67_y"""
    columns = []
    for i in range(NUM_LANDMARKS):
        columns.append(f"landmark_{i}_x")
        columns.append(f"landmark_{i}_y")
    return columns


def header_columns() -> List[str]:
    """고정 CSV 헤더 (138 컬럼)"""
    return list(ID_COLUMNS) + landmark_columns()


@dataclass
class DatasetRow:
    """CSV 데이터 한 줄"""

    image_name: str
    label: str
    coordinates: NormalizedFace

    def to_fields(self) -> List[str]:
        """image_name, label + 136개 좌표 문자열"""
        return [self.image_name, self.label] + [
            format_coordinate(value) for value in self.coordinates.flatten()
        ]


@dataclass
class SplitTable:
    """split 하나의 전체 테이블 (헤더 고정)"""

    split_name: str
    rows: List[DatasetRow] = field(default_factory=list)

    @property
    def header(self) -> List[str]:
        return header_columns()

    @property
    def filename(self) -> str:
        return f"{self.split_name}{OUTPUT_FILENAME_SUFFIX}"

    def append(self, row: DatasetRow) -> None:
        self.rows.append(row)

    def to_records(self) -> List[List[str]]:
        return [row.to_fields() for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class ImageEntry:
    """데이터셋 이미지 하나 (label, 경로)"""

    label: str
    path: Path

    @property
    def image_name(self) -> str:
        return self.path.name


@dataclass
class SplitResult:
    """split 처리 결과 요약"""

    split_name: str
    total_images: int = 0
    processed: int = 0
    output_path: Optional[Path] = None
    status: str = 'pending'  # written / write_failed / unreadable
    error: Optional[str] = None

    @property
    def skipped(self) -> int:
        return self.total_images - self.processed

    @property
    def success(self) -> bool:
        return self.status == 'written'


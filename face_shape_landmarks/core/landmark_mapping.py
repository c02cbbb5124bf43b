"""
MediaPipe Face Mesh landmark → named region mapping.

Converts the flat 468/478-point Face Mesh output into the named
landmark regions consumed by the normalizer.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from ..config.constants import REGION_ORDER, MEDIAPIPE_REGION_INDICES
from ..models import LandmarkPoint, LandmarkRegions


def convert_mediapipe_to_regions(
    mediapipe_landmarks: Sequence,
    region_indices: Mapping[str, List[int]] = MEDIAPIPE_REGION_INDICES,
) -> LandmarkRegions:
    """
    MediaPipe 랜드마크를 영역별 정규화 좌표로 변환.

    Args:
        mediapipe_landmarks: face_landmarks.landmark (정규화 좌표 0.0-1.0)
        region_indices: 영역 이름 → FaceMesh 인덱스 리스트

    Returns:
        REGION_ORDER 순서의 dict. 인덱스가 범위를 벗어나는 영역
        (refine_landmarks=False 일 때의 pupil 등)은 None.
    """
    num_points = len(mediapipe_landmarks)
    regions: Dict[str, Optional[List[LandmarkPoint]]] = {}

    for region_name in REGION_ORDER:
        indices = region_indices.get(region_name)
        if not indices or max(indices) >= num_points:
            regions[region_name] = None
            continue

        regions[region_name] = [
            LandmarkPoint(float(mediapipe_landmarks[idx].x), float(mediapipe_landmarks[idx].y))
            for idx in indices
        ]

    return regions


def get_face_bbox(mediapipe_landmarks: Sequence) -> tuple:
    """
    MediaPipe 랜드마크에서 정규화 바운딩 박스 계산.

    Returns:
        (x, y, width, height) 정규화 좌표
    """
    if len(mediapipe_landmarks) == 0:
        return (0.0, 0.0, 0.0, 0.0)

    x_coords = [lm.x for lm in mediapipe_landmarks]
    y_coords = [lm.y for lm in mediapipe_landmarks]

    x_min, x_max = min(x_coords), max(x_coords)
    y_min, y_max = min(y_coords), max(y_coords)

    return (float(x_min), float(y_min), float(x_max - x_min), float(y_max - y_min))

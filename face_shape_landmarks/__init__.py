"""
Face Shape Landmarks
얼굴형 분류기 학습용 랜드마크 데이터셋 생성 도구
"""

__version__ = "0.1.0"
__author__ = "Hyundai Mobis"

from .models import (
    LandmarkPoint,
    FaceDetection,
    NormalizedFace,
    DatasetRow,
    SplitTable,
    ImageEntry,
    SplitResult,
)
from .core.normalizer import LandmarkNormalizer, normalize_landmarks

# FaceDetector는 mediapipe 의존성 때문에 lazy import
# from .core.face_detector import FaceDetector

__all__ = [
    'LandmarkPoint',
    'FaceDetection',
    'NormalizedFace',
    'DatasetRow',
    'SplitTable',
    'ImageEntry',
    'SplitResult',
    'LandmarkNormalizer',
    'normalize_landmarks',
]

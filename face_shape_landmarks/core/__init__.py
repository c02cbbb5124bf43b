"""
Core landmark package.
"""
# FaceDetector는 mediapipe/cv2 의존성이 있으므로 직접 import 해서 사용
# from .face_detector import FaceDetector

from .normalizer import LandmarkNormalizer, normalize_landmarks
from .landmark_mapping import convert_mediapipe_to_regions, get_face_bbox

__all__ = [
    'LandmarkNormalizer',
    'normalize_landmarks',
    'convert_mediapipe_to_regions',
    'get_face_bbox',
]

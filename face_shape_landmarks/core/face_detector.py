"""MediaPipe FaceMesh 기반 얼굴/랜드마크 검출기"""

import time
from typing import List

import numpy as np
import mediapipe as mp

from ..config.settings import DetectionConfig
from ..models import FaceDetection
from ..utils import get_logger
from ..utils.exceptions import DetectionError, ConfigurationError
from ..utils.image_utils import decode_image, to_rgb
from ..utils.validators import validate_image
from .landmark_mapping import convert_mediapipe_to_regions, get_face_bbox

logger = get_logger(__name__)


class FaceDetector:
    """
    MediaPipe FaceMesh 기반 얼굴 검출기

    detect()는 동기 호출이며 한 번에 하나의 이미지만 처리한다.

    Usage:
        with FaceDetector(DetectionConfig()) as detector:
            faces = detector.detect(image_bytes)
    """

    def __init__(self, config: DetectionConfig = None):
        """
        초기화

        Args:
            config: 검출 설정

        Raises:
            ConfigurationError: MediaPipe 초기화 실패
        """
        self.config = config or DetectionConfig()

        # FaceMesh(solutions) API는 mediapipe 0.10.30 부터 제거됨
        if not hasattr(mp, 'solutions'):
            raise ConfigurationError(
                f"mediapipe {getattr(mp, '__version__', '?')} has no legacy FaceMesh API; "
                "install mediapipe>=0.10,<0.10.30"
            )

        try:
            self.face_mesh = mp.solutions.face_mesh.FaceMesh(
                static_image_mode=self.config.static_image_mode,
                max_num_faces=self.config.max_num_faces,
                refine_landmarks=self.config.refine_landmarks,
                min_detection_confidence=self.config.min_detection_confidence,
                min_tracking_confidence=self.config.min_tracking_confidence
            )
            logger.info("MediaPipe FaceMesh initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize MediaPipe FaceMesh: {e}")
            raise ConfigurationError(f"Failed to initialize MediaPipe FaceMesh: {e}")

    def detect(self, image_bytes: bytes) -> List[FaceDetection]:
        """
        인코딩된 이미지에서 얼굴 검출

        Args:
            image_bytes: jpg/png 파일 내용

        Returns:
            FaceDetection 리스트 (검출 순서), 얼굴이 없으면 빈 리스트

        Raises:
            ImageLoadError: 디코딩 실패
            DetectionError: MediaPipe 처리 실패
        """
        image = decode_image(image_bytes)
        try:
            return self.detect_image(image)
        finally:
            # 디코딩된 이미지는 검출 직후 해제
            del image

    def detect_image(self, image: np.ndarray) -> List[FaceDetection]:
        """
        디코딩된 BGR 이미지에서 얼굴 검출

        Args:
            image: BGR 형식 이미지 (H, W, 3)

        Returns:
            FaceDetection 리스트
        """
        validate_image(image)

        start_time = time.time()
        image_rgb = to_rgb(image)

        try:
            results = self.face_mesh.process(image_rgb)
        except Exception as e:
            raise DetectionError(f"Error performing MediaPipe request: {e}")
        finally:
            del image_rgb

        processing_time = (time.time() - start_time) * 1000  # ms

        if not results or not results.multi_face_landmarks:
            logger.debug(f"No face detected ({processing_time:.1f}ms)")
            return []

        detections = []
        for face_landmarks in results.multi_face_landmarks:
            landmarks = face_landmarks.landmark
            detections.append(FaceDetection(
                landmark_regions=convert_mediapipe_to_regions(landmarks),
                bounding_box=get_face_bbox(landmarks)
            ))

        logger.debug(
            f"Detected {len(detections)} face(s), "
            f"{len(results.multi_face_landmarks[0].landmark)} landmarks ({processing_time:.1f}ms)"
        )
        return detections

    def release(self):
        """리소스 해제"""
        if getattr(self, 'face_mesh', None) is not None:
            self.face_mesh.close()
            self.face_mesh = None
            logger.debug("MediaPipe FaceMesh closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()
        return False

    def __del__(self):
        """소멸자"""
        self.release()

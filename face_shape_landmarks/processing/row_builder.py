"""이미지 한 장 → CSV 데이터 행"""

from pathlib import Path
from typing import List, Optional, Union

from ..core.normalizer import LandmarkNormalizer
from ..config.constants import DEFAULT_PROGRESS_INTERVAL
from ..models import DatasetRow, FaceDetection
from ..utils import get_logger
from ..utils.exceptions import DetectionError, ImageLoadError
from ..utils.image_utils import read_image_bytes

logger = get_logger(__name__)


class RowBuilder:
    """
    검출기 + 정규화기로 DatasetRow 생성

    detector는 detect(image_bytes) -> List[FaceDetection] 인터페이스만 있으면 된다.
    """

    def __init__(
        self,
        detector,
        normalizer: LandmarkNormalizer = None,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
    ):
        self.detector = detector
        self.normalizer = normalizer or LandmarkNormalizer()
        self.progress_interval = progress_interval
        self.processed_count = 0

    def detect_first_face(self, image_path: Union[str, Path]) -> Optional[FaceDetection]:
        """
        첫 번째로 검출된 얼굴 반환

        Raises:
            ImageLoadError: 이미지를 읽거나 디코딩할 수 없는 경우
            DetectionError: 검출기 오류
        """
        image_bytes = read_image_bytes(image_path)
        try:
            faces: List[FaceDetection] = self.detector.detect(image_bytes)
        finally:
            del image_bytes

        if not faces:
            return None
        if len(faces) > 1:
            logger.debug(f"{len(faces)} faces detected in {image_path}, using the first one")
        return faces[0]

    def build_row(
        self,
        image_name: str,
        label: str,
        image_path: Union[str, Path],
        total: Optional[int] = None,
    ) -> Optional[DatasetRow]:
        """
        이미지 하나 처리

        Args:
            image_name: CSV image_name 컬럼 값
            label: 클래스 label
            image_path: 이미지 경로
            total: 진행 상황 출력용 전체 이미지 수

        Returns:
            DatasetRow, 얼굴/랜드마크가 없거나 실패하면 None
        """
        try:
            face = self.detect_first_face(image_path)
        except ImageLoadError as e:
            logger.warning(f"Failed to load image {image_name}: {e}")
            return None
        except DetectionError as e:
            logger.warning(f"Error detecting faces in {image_name}: {e}")
            return None

        if face is None or not face.has_landmarks():
            logger.warning(f"Failed to extract landmarks from {image_name}")
            return None

        row = DatasetRow(
            image_name=image_name,
            label=label,
            coordinates=self.normalizer.normalize(face.landmark_regions)
        )

        self.processed_count += 1
        if self.processed_count % self.progress_interval == 0:
            if total is not None:
                logger.info(f"Processed {self.processed_count}/{total} images...")
            else:
                logger.info(f"Processed {self.processed_count} images...")

        return row

    def reset(self):
        """split 단위 카운터 초기화"""
        self.processed_count = 0

"""데이터셋 전체 처리 파이프라인 (walk → detect → normalize → CSV)"""

from typing import Dict, Iterable, Optional

from ..config.settings import ExtractionSettings
from ..core.normalizer import LandmarkNormalizer
from ..models import SplitResult, SplitTable
from ..utils import get_logger
from ..utils.csv_exporter import write_split_csv
from ..utils.exceptions import DirectoryReadError, WriteError
from .dataset_walker import DatasetWalker
from .row_builder import RowBuilder

logger = get_logger(__name__)


class LandmarkExtractionPipeline:
    """
    split 별 랜드마크 CSV 생성

    이미지는 한 장씩 순차 처리하고, split 테이블은 모든 이미지 처리 후 한 번에 저장한다.
    """

    def __init__(self, settings: ExtractionSettings, detector=None):
        """
        초기화

        Args:
            settings: 경로/split/검출 설정
            detector: detect(image_bytes) 인터페이스 검출기 (None이면 MediaPipe FaceDetector 생성)
        """
        self.settings = settings
        self._owns_detector = detector is None

        if detector is None:
            # mediapipe는 실제 검출이 필요할 때만 import
            from ..core.face_detector import FaceDetector
            detector = FaceDetector(settings.detection)

        self.detector = detector
        self.walker = DatasetWalker(settings.image_extensions)
        self.row_builder = RowBuilder(
            detector,
            normalizer=LandmarkNormalizer(),
            progress_interval=settings.progress_interval
        )

    def process_dataset(self, splits: Optional[Iterable[str]] = None) -> Dict[str, SplitResult]:
        """
        전체 split 처리

        Args:
            splits: 처리할 split 이름 (None이면 설정값)

        Returns:
            split 이름 → SplitResult
        """
        splits = tuple(splits) if splits is not None else self.settings.splits

        logger.info("Starting dataset processing...")
        logger.info(f"Dataset: {self.settings.dataset_path}")
        logger.info(f"Output: {self.settings.output_path}")

        try:
            self.settings.output_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create output directory {self.settings.output_path}: {e}")

        results: Dict[str, SplitResult] = {}
        for split_name in splits:
            logger.info(f"Processing {split_name}...")
            results[split_name] = self.process_split(split_name)

        logger.info("Dataset processing completed!")
        return results

    def process_split(self, split_name: str) -> SplitResult:
        """
        split 하나 처리 후 CSV 저장

        Args:
            split_name: 예) 'training_set'

        Returns:
            SplitResult (status: written / write_failed / unreadable)
        """
        split_root = self.settings.dataset_path / split_name
        result = SplitResult(split_name=split_name)

        try:
            entries = self.walker.enumerate(split_root)
        except DirectoryReadError as e:
            logger.error(f"Failed to read subdirectories from {split_root}: {e}")
            result.status = 'unreadable'
            result.error = str(e)
            return result

        result.total_images = len(entries)
        table = SplitTable(split_name=split_name)
        self.row_builder.reset()

        for entry in entries:
            row = self.row_builder.build_row(
                entry.image_name,
                entry.label,
                entry.path,
                total=len(entries)
            )
            if row is not None:
                table.append(row)

        result.processed = self.row_builder.processed_count

        try:
            result.output_path = write_split_csv(table, self.settings.output_path)
        except WriteError as e:
            logger.error(f"Failed to save CSV: {e}")
            result.status = 'write_failed'
            result.error = str(e)
            return result

        result.status = 'written'
        logger.info(f"Saved {split_name} landmarks to {result.output_path}")
        logger.info(f"Successfully processed {result.processed} images")
        return result

    def close(self):
        """직접 생성한 검출기 해제"""
        if self._owns_detector and hasattr(self.detector, 'release'):
            self.detector.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

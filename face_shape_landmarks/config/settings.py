"""시스템 설정 클래스 정의"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Tuple

from .constants import (
    DEFAULT_IMAGE_EXTENSIONS,
    DEFAULT_SPLITS,
    DEFAULT_PROGRESS_INTERVAL,
    DATASET_PATH_ENV,
    OUTPUT_PATH_ENV,
)
from ..utils.exceptions import ConfigurationError
from ..utils.validators import validate_confidence, validate_extension


@dataclass
class DetectionConfig:
    """얼굴 검출 설정"""

    # MediaPipe FaceMesh 설정
    static_image_mode: bool = True  # 데이터셋 처리이므로 이미지 모드
    max_num_faces: int = 1
    refine_landmarks: bool = True  # 홍채(pupil) 포함
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5

    def __post_init__(self):
        """설정 값 검증"""
        try:
            validate_confidence(self.min_detection_confidence, "min_detection_confidence")
            validate_confidence(self.min_tracking_confidence, "min_tracking_confidence")
        except ValueError as e:
            raise ConfigurationError(str(e))
        if self.max_num_faces < 1:
            raise ConfigurationError("max_num_faces must be >= 1")

    @classmethod
    def from_config(cls, config) -> 'DetectionConfig':
        """config.yaml의 mediapipe.detection 섹션으로 생성"""
        section = config.get('mediapipe.detection', {}) or {}
        return cls(**{
            f.name: section.get(f.name, f.default)
            for f in fields(cls)
        })


@dataclass
class ExtractionSettings:
    """데이터셋 처리 설정"""

    dataset_path: Path
    output_path: Path
    splits: Tuple[str, ...] = DEFAULT_SPLITS
    image_extensions: Tuple[str, ...] = DEFAULT_IMAGE_EXTENSIONS
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    detection: DetectionConfig = field(default_factory=DetectionConfig)

    def __post_init__(self):
        self.dataset_path = Path(self.dataset_path)
        self.output_path = Path(self.output_path)
        self.splits = tuple(self.splits)
        if not self.splits:
            raise ConfigurationError("At least one split must be configured")
        try:
            self.image_extensions = tuple(validate_extension(ext) for ext in self.image_extensions)
        except ValueError as e:
            raise ConfigurationError(str(e))
        if self.progress_interval < 1:
            raise ConfigurationError("progress_interval must be >= 1")

    @classmethod
    def from_config(
        cls,
        config,
        dataset_path: Optional[str] = None,
        output_path: Optional[str] = None,
        splits: Optional[Tuple[str, ...]] = None,
    ) -> 'ExtractionSettings':
        """
        Config + 환경 변수 + CLI 인자로 설정 생성

        우선순위: 인자 > 환경 변수 > config.yaml

        Args:
            config: Config 인스턴스
            dataset_path: --dataset-path 값
            output_path: --output-path 값
            splits: --splits 값

        Returns:
            ExtractionSettings
        """
        dataset_path = (
            dataset_path
            or os.environ.get(DATASET_PATH_ENV)
            or config.get('dataset.path')
        )
        output_path = (
            output_path
            or os.environ.get(OUTPUT_PATH_ENV)
            or config.get('output.path')
        )
        if not dataset_path:
            raise ConfigurationError("Dataset path is not configured")
        if not output_path:
            raise ConfigurationError("Output path is not configured")

        interval = config.get('progress.interval', DEFAULT_PROGRESS_INTERVAL)
        try:
            progress_interval = int(interval)
        except (TypeError, ValueError):
            raise ConfigurationError(f"progress.interval must be an integer, got {interval!r}")

        return cls(
            dataset_path=Path(dataset_path),
            output_path=Path(output_path),
            splits=tuple(splits or config.get('dataset.splits') or DEFAULT_SPLITS),
            image_extensions=tuple(
                config.get('dataset.image_extensions') or DEFAULT_IMAGE_EXTENSIONS
            ),
            progress_interval=progress_interval,
            detection=DetectionConfig.from_config(config),
        )

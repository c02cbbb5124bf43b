"""Configuration layer"""

from .constants import (
    REGION_ORDER,
    NUM_LANDMARKS,
    PADDING_POINT,
    COORDINATE_PRECISION,
    CSV_DELIMITER,
    OUTPUT_FILENAME_SUFFIX,
    DEFAULT_IMAGE_EXTENSIONS,
    DEFAULT_SPLITS,
)
from .settings import DetectionConfig, ExtractionSettings

__all__ = [
    'REGION_ORDER',
    'NUM_LANDMARKS',
    'PADDING_POINT',
    'COORDINATE_PRECISION',
    'CSV_DELIMITER',
    'OUTPUT_FILENAME_SUFFIX',
    'DEFAULT_IMAGE_EXTENSIONS',
    'DEFAULT_SPLITS',
    'DetectionConfig',
    'ExtractionSettings',
]

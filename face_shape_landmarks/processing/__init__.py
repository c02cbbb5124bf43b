"""Processing layer components"""

from .dataset_walker import DatasetWalker
from .row_builder import RowBuilder
from .pipeline import LandmarkExtractionPipeline

__all__ = [
    'DatasetWalker',
    'RowBuilder',
    'LandmarkExtractionPipeline',
]

"""데이터셋 디렉토리 탐색 (split → label → image)"""

from pathlib import Path
from typing import Iterable, List, Union

from ..config.constants import DEFAULT_IMAGE_EXTENSIONS
from ..models import ImageEntry
from ..utils import get_logger
from ..utils.exceptions import DirectoryReadError
from ..utils.validators import validate_extension

logger = get_logger(__name__)


class DatasetWalker:
    """
    <split_root>/<label>/<image> 구조 탐색

    label 디렉토리와 이미지 파일은 이름순으로 정렬해서 반환한다.
    """

    def __init__(self, image_extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS):
        self.image_extensions = frozenset(validate_extension(ext) for ext in image_extensions)

    def is_image_file(self, path: Path) -> bool:
        """확장자 검사 (대소문자 무시)"""
        return path.suffix.lower().lstrip('.') in self.image_extensions

    @staticmethod
    def _list_directory(path: Path) -> List[Path]:
        """
        디렉토리 내용 (숨김 파일 제외, 이름순)

        Raises:
            DirectoryReadError: 디렉토리를 읽을 수 없는 경우
        """
        try:
            entries = list(path.iterdir())
        except OSError as e:
            raise DirectoryReadError(path, e)
        return sorted(
            (entry for entry in entries if not entry.name.startswith('.')),
            key=lambda entry: entry.name
        )

    def list_labels(self, split_root: Union[str, Path]) -> List[str]:
        """
        split 디렉토리의 label(하위 디렉토리) 목록

        Raises:
            DirectoryReadError: split 디렉토리를 읽을 수 없는 경우
        """
        split_root = Path(split_root)
        return [entry.name for entry in self._list_directory(split_root) if entry.is_dir()]

    def list_images(self, label_dir: Union[str, Path]) -> List[Path]:
        """
        label 디렉토리의 이미지 파일 목록

        Raises:
            DirectoryReadError: 디렉토리를 읽을 수 없는 경우
        """
        return [
            entry for entry in self._list_directory(Path(label_dir))
            if entry.is_file() and self.is_image_file(entry)
        ]

    def enumerate(self, split_root: Union[str, Path]) -> List[ImageEntry]:
        """
        split 내 모든 (label, 이미지 경로)

        읽을 수 없는 label 디렉토리는 로그만 남기고 건너뛴다.

        Args:
            split_root: split 디렉토리 (예: dataset/training_set)

        Returns:
            ImageEntry 리스트 (label 순 → 파일명 순)

        Raises:
            DirectoryReadError: split 디렉토리 자체를 읽을 수 없는 경우
        """
        split_root = Path(split_root)
        entries: List[ImageEntry] = []

        for label in self.list_labels(split_root):
            try:
                images = self.list_images(split_root / label)
            except DirectoryReadError as e:
                logger.error(f"Failed to read images from {split_root / label}: {e}")
                continue

            logger.info(f"Found {len(images)} images in {label} folder")
            entries.extend(ImageEntry(label=label, path=image) for image in images)

        return entries

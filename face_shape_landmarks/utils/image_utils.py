# -*- coding: utf-8 -*-
"""
Image loading utilities
"""

from pathlib import Path
from typing import Union

import cv2
import numpy as np

from .exceptions import ImageLoadError


def read_image_bytes(image_path: Union[str, Path]) -> bytes:
    """
    이미지 파일을 raw bytes로 읽기

    Args:
        image_path: 이미지 경로

    Returns:
        파일 내용

    Raises:
        ImageLoadError: 파일을 읽을 수 없는 경우
    """
    try:
        return Path(image_path).read_bytes()
    except OSError as e:
        raise ImageLoadError(f"Failed to load image at path: {image_path} ({e})")


def decode_image(data: bytes) -> np.ndarray:
    """
    인코딩된 이미지 bytes(jpg/png)를 BGR 배열로 디코딩

    cv2.imread 대신 imdecode를 사용하므로 비 ASCII 경로에서도 동작

    Args:
        data: 인코딩된 이미지 데이터

    Returns:
        numpy array (BGR 포맷)

    Raises:
        ImageLoadError: 디코딩 실패
    """
    if not data:
        raise ImageLoadError("Image data is empty")

    buffer = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)

    if image is None:
        raise ImageLoadError(f"Failed to decode image ({len(data)} bytes)")

    return image


def to_rgb(image: np.ndarray) -> np.ndarray:
    """BGR/Grayscale/BGRA → RGB (MediaPipe 요구사항)"""
    if len(image.shape) == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)
    if image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2RGB)
    if image.shape[2] == 1:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)
    return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

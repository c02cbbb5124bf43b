"""커스텀 예외 클래스 정의"""


class FaceShapeLandmarkException(Exception):
    """기본 예외 클래스"""
    pass


class DirectoryReadError(FaceShapeLandmarkException):
    """split 또는 label 디렉토리 읽기 실패 예외"""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Error reading directory {path}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)


class ImageLoadError(FaceShapeLandmarkException):
    """이미지 로드/디코딩 실패 예외"""
    pass


class InvalidImageError(ImageLoadError):
    """잘못된 이미지 입력 예외"""
    pass


class DetectionError(FaceShapeLandmarkException):
    """얼굴 검출 실패 예외"""
    pass


class WriteError(FaceShapeLandmarkException):
    """CSV 저장 실패 예외"""
    pass


class ConfigurationError(FaceShapeLandmarkException):
    """설정 오류 예외"""
    pass

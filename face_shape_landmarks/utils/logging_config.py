"""
Logging configuration module.
Provides centralized logging setup with file and console handlers.

모듈은 get_logger(__name__)로 로거만 가져오고, 핸들러는 설정 파일이
확정된 뒤 setup_logging()이 패키지 로거에 한 번만 붙인다.
"""
import logging
import logging.handlers
from pathlib import Path

from .config_loader import Config, get_config

PACKAGE_LOGGER = 'face_shape_landmarks'

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name, default: int) -> int:
    return getattr(logging, str(name).upper(), default)


def setup_logging(config: Config = None) -> logging.Logger:
    """
    패키지 로거에 콘솔/파일 핸들러 설정

    다시 호출하면 기존 핸들러를 닫고 새 설정으로 교체한다.

    Args:
        config: Config 인스턴스 (None이면 전역 Config)

    Returns:
        logging.Logger: 설정된 패키지 로거
    """
    config = config or get_config()
    section = config.get('logging', {}) or {}
    console = section.get('console', {}) or {}
    file_section = section.get('file', {}) or {}

    logger = logging.getLogger(PACKAGE_LOGGER)

    # 이전 핸들러 제거
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(_level(section.get('level', 'INFO'), logging.INFO))

    formatter = logging.Formatter(
        section.get('format', DEFAULT_FORMAT),
        datefmt=section.get('date_format', DEFAULT_DATE_FORMAT)
    )

    # 콘솔 핸들러
    if console.get('enabled', True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(console.get('level', 'INFO'), logging.INFO))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # 파일 핸들러 (RotatingFileHandler)
    if file_section.get('enabled', False):
        log_dir = Path(file_section.get('directory', './logs'))
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / file_section.get('filename', 'face_shape_landmarks.log'),
            maxBytes=file_section.get('max_bytes', 10 * 1024 * 1024),
            backupCount=file_section.get('backup_count', 5),
            encoding='utf-8'
        )
        file_handler.setLevel(_level(file_section.get('level', 'DEBUG'), logging.DEBUG))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    로거 가져오기 (간편 함수, 설정 파일은 읽지 않음)

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)

    Returns:
        logging.Logger
    """
    return logging.getLogger(name or PACKAGE_LOGGER)


def set_log_level(level: str) -> None:
    """
    패키지 로거와 핸들러 레벨 변경 (--log-level 옵션)

    Args:
        level: 'DEBUG', 'INFO', 'WARNING', ...
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)

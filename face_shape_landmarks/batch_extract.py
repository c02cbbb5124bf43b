"""배치 랜드마크 추출 스크립트"""

import argparse
import sys
from typing import Dict, List, Optional

from .config.settings import ExtractionSettings
from .models import SplitResult
from .processing.pipeline import LandmarkExtractionPipeline
from .utils import Config, get_config, get_logger, set_config, set_log_level, setup_logging
from .utils.exceptions import ConfigurationError

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_WRITE_FAILED = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """CLI 인자 정의"""
    parser = argparse.ArgumentParser(
        description='얼굴형 데이터셋에서 68점 랜드마크 CSV 생성'
    )
    parser.add_argument(
        '--dataset-path',
        default=None,
        help='데이터셋 루트 (<path>/<split>/<label>/<image>, 기본: config.yaml 또는 FACE_SHAPE_DATASET_PATH)'
    )
    parser.add_argument(
        '--output-path',
        default=None,
        help='CSV 저장 디렉토리 (기본: config.yaml 또는 FACE_SHAPE_OUTPUT_PATH)'
    )
    parser.add_argument(
        '--splits',
        nargs='+',
        default=None,
        help='처리할 split 이름 (기본: training_set testing_set)'
    )
    parser.add_argument(
        '--config',
        default=None,
        help='config.yaml 경로'
    )
    parser.add_argument(
        '--log-level',
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='로그 레벨'
    )
    return parser


def print_summary(results: Dict[str, SplitResult]):
    """결과 요약 출력"""
    print("=" * 80)
    print("📊 처리 결과 요약")
    print("=" * 80)

    for split_name, result in results.items():
        if result.status == 'written':
            print(f"✅ {split_name}: {result.processed}/{result.total_images} images → {result.output_path}")
        elif result.status == 'write_failed':
            print(f"❌ {split_name}: CSV 저장 실패 ({result.error})")
        else:
            print(f"⚠️  {split_name}: 디렉토리를 읽을 수 없음 ({result.error})")
    print()


def exit_code_for(results: Dict[str, SplitResult]) -> int:
    """CSV 저장에 실패한 split이 있으면 1"""
    if any(result.status == 'write_failed' for result in results.values()):
        return EXIT_WRITE_FAILED
    return EXIT_OK


def main(argv: Optional[List[str]] = None, detector=None) -> int:
    """
    메인 함수

    Args:
        argv: CLI 인자 (None이면 sys.argv)
        detector: 테스트용 검출기 주입

    Returns:
        프로세스 종료 코드
    """
    args = build_parser().parse_args(argv)

    try:
        config = set_config(Config(args.config)) if args.config else get_config()
        setup_logging(config)
        if args.log_level:
            set_log_level(args.log_level)
        settings = ExtractionSettings.from_config(
            config,
            dataset_path=args.dataset_path,
            output_path=args.output_path,
            splits=args.splits
        )
        pipeline = LandmarkExtractionPipeline(settings, detector=detector)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    with pipeline:
        results = pipeline.process_dataset()

    print_summary(results)
    return exit_code_for(results)


if __name__ == "__main__":
    sys.exit(main())

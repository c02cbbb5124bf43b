"""
Split 테이블을 CSV 파일로 저장
"""
import csv
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Union

import pandas as pd

from ..config.constants import CSV_DELIMITER
from ..models import DatasetRow, SplitTable, header_columns
from .exceptions import WriteError
from .logging_config import get_logger

logger = get_logger(__name__)


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def build_header() -> List[str]:
    """
    고정 CSV 헤더

    Returns:
        ['image_name', 'label', 'landmark_0_x', 'landmark_0_y', ..., 'landmark_67_y']
    """
    return header_columns()


def to_dataframe(table: SplitTable) -> pd.DataFrame:
    """
    SplitTable → 문자열 DataFrame

    좌표는 DatasetRow에서 이미 소수점 6자리 문자열로 포맷되어 있으므로
    dtype=str 로 유지해서 그대로 기록한다.
    """
    return pd.DataFrame(table.to_records(), columns=table.header, dtype=str)


def write_split_csv(table: SplitTable, output_dir: Union[str, Path]) -> Path:
    """
    split 테이블 전체를 <output_dir>/<split>_landmarks.csv 로 저장

    같은 디렉토리의 임시 파일에 먼저 쓰고 os.replace 로 교체하므로
    쓰다 만 파일이 최종 경로에 남지 않는다.

    Args:
        table: 저장할 SplitTable
        output_dir: 출력 디렉토리 (없으면 생성)

    Returns:
        저장된 CSV 경로

    Raises:
        WriteError: 디렉토리 생성/파일 쓰기 실패
    """
    output_dir = Path(output_dir)
    csv_path = output_dir / table.filename
    frame = to_dataframe(table)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"Failed to create output directory {output_dir}: {e}")

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            'w',
            encoding='utf-8',
            newline='',
            dir=output_dir,
            prefix=f".{table.split_name}.",
            suffix='.tmp',
            delete=False
        ) as handle:
            tmp_path = handle.name
            frame.to_csv(
                handle,
                sep=CSV_DELIMITER,
                index=False,
                lineterminator='\n',
                quoting=csv.QUOTE_MINIMAL
            )
        # NamedTemporaryFile은 0600으로 생성되므로 일반 파일 권한으로 맞춤
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, csv_path)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise WriteError(f"Failed to save CSV {csv_path}: {e}")

    return csv_path


def write_rows(split_name: str, rows: Iterable[DatasetRow], output_dir: Union[str, Path]) -> bool:
    """
    (split_name, rows) 저장 후 성공 여부 반환 (간편 함수)
    """
    table = SplitTable(split_name=split_name, rows=list(rows))
    try:
        write_split_csv(table, output_dir)
    except WriteError as e:
        logger.error(str(e))
        return False
    return True

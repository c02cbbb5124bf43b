"""얼굴 랜드마크 영역 및 데이터셋 포맷 상수 정의"""

from typing import Dict, List, Tuple

# 랜드마크 영역 연결 순서 (출력 컬럼 순서를 결정하므로 변경 금지)
REGION_ORDER: Tuple[str, ...] = (
    'contour',
    'left_eyebrow',
    'right_eyebrow',
    'nose',
    'nose_crest',
    'left_eye',
    'right_eye',
    'outer_lips',
    'inner_lips',
    'left_pupil',
    'right_pupil',
    'median_line',
)

# MediaPipe FaceMesh 인덱스 → 영역 매핑
# 합계 87점, 정규화 단계에서 앞의 68점만 사용됨
MEDIAPIPE_REGION_INDICES: Dict[str, List[int]] = {
    # 얼굴 윤곽 (오른쪽 귀 → 턱 → 왼쪽 귀)
    'contour': [234, 93, 132, 58, 172, 136, 150, 176, 152,
                400, 379, 365, 397, 288, 361, 323, 454],

    # 눈썹
    'left_eyebrow': [70, 63, 105, 66, 107, 55],
    'right_eyebrow': [300, 293, 334, 296, 336, 285],

    # 코
    'nose': [64, 98, 97, 2, 326, 327, 294, 4],
    'nose_crest': [168, 6, 197, 195, 5, 1],

    # 눈
    'left_eye': [33, 160, 159, 158, 133, 153, 145, 144],
    'right_eye': [362, 385, 386, 387, 263, 373, 374, 380],

    # 입
    'outer_lips': [61, 39, 37, 0, 267, 269, 291, 405, 17, 181],
    'inner_lips': [78, 81, 13, 311, 308, 14],

    # 홍채 중심 (refine_landmarks=True 일 때만 존재, 478점)
    'left_pupil': [468],
    'right_pupil': [473],

    # 정중선 (이마 → 턱)
    'median_line': [10, 151, 9, 8, 168, 1, 0, 17, 199, 152],
}

# 정규화 결과 포맷
NUM_LANDMARKS = 68
PADDING_POINT: Tuple[float, float] = (0.0, 0.0)  # 미검출 표시 (원점과 구분 불가)
COORDINATE_PRECISION = 6

# CSV 포맷
CSV_DELIMITER = ','
OUTPUT_FILENAME_SUFFIX = '_landmarks.csv'
ID_COLUMNS: Tuple[str, ...] = ('image_name', 'label')

# 데이터셋 기본값
DEFAULT_IMAGE_EXTENSIONS: Tuple[str, ...] = ('jpg', 'jpeg', 'png')
DEFAULT_SPLITS: Tuple[str, ...] = ('training_set', 'testing_set')
DEFAULT_PROGRESS_INTERVAL = 100

# 환경 변수
DATASET_PATH_ENV = 'FACE_SHAPE_DATASET_PATH'
OUTPUT_PATH_ENV = 'FACE_SHAPE_OUTPUT_PATH'

"""영역별 랜드마크 → 고정 길이 68점 정규화"""

from typing import Iterable, List, Mapping, Optional, Sequence

from ..config.constants import REGION_ORDER, NUM_LANDMARKS, PADDING_POINT
from ..models import LandmarkPoint, NormalizedFace


class LandmarkNormalizer:
    """
    검출기의 영역별 랜드마크를 68점 고정 순서 리스트로 변환

    - REGION_ORDER 순서로 영역을 이어 붙임 (없는 영역은 0점)
    - 68점 미만이면 (0.0, 0.0)으로 패딩
    - 68점 초과면 앞의 68점만 사용
    """

    def __init__(
        self,
        region_order: Sequence[str] = REGION_ORDER,
        num_landmarks: int = NUM_LANDMARKS,
    ):
        self.region_order = tuple(region_order)
        self.num_landmarks = num_landmarks

    @staticmethod
    def to_point(point) -> LandmarkPoint:
        """LandmarkPoint, (x, y) 튜플, .x/.y 속성 객체를 LandmarkPoint로 변환"""
        if isinstance(point, LandmarkPoint):
            return point
        if hasattr(point, 'x') and hasattr(point, 'y'):
            return LandmarkPoint(float(point.x), float(point.y))
        x, y = point[0], point[1]
        return LandmarkPoint(float(x), float(y))

    def concatenate(self, regions: Mapping[str, Optional[Iterable]]) -> List[LandmarkPoint]:
        """
        고정 영역 순서로 포인트 연결

        Args:
            regions: 영역 이름 → 포인트 시퀀스 (None 허용)

        Returns:
            연결된 LandmarkPoint 리스트 (길이 제한 없음)
        """
        coordinates: List[LandmarkPoint] = []
        for region_name in self.region_order:
            points = regions.get(region_name)
            if points is None or len(points) == 0:
                continue
            coordinates.extend(self.to_point(point) for point in points)
        return coordinates

    def normalize(self, regions: Mapping[str, Optional[Iterable]]) -> NormalizedFace:
        """
        68점 NormalizedFace 생성 (예외 없음)

        Args:
            regions: 영역 이름 → 포인트 시퀀스

        Returns:
            NormalizedFace (항상 68점)
        """
        coordinates = self.concatenate(regions or {})
        detected_count = min(len(coordinates), self.num_landmarks)

        # 패딩 또는 자르기
        if len(coordinates) < self.num_landmarks:
            padding = LandmarkPoint(*PADDING_POINT)
            coordinates.extend([padding] * (self.num_landmarks - len(coordinates)))
        elif len(coordinates) > self.num_landmarks:
            coordinates = coordinates[:self.num_landmarks]

        return NormalizedFace(points=coordinates, detected_count=detected_count)


_default_normalizer = LandmarkNormalizer()


def normalize_landmarks(regions: Mapping[str, Optional[Iterable]]) -> NormalizedFace:
    """기본 영역 순서로 정규화 (간편 함수)"""
    return _default_normalizer.normalize(regions)

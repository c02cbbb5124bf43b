from types import SimpleNamespace

from face_shape_landmarks.config.constants import MEDIAPIPE_REGION_INDICES, REGION_ORDER
from face_shape_landmarks.core.landmark_mapping import convert_mediapipe_to_regions, get_face_bbox
from face_shape_landmarks.core.normalizer import normalize_landmarks


def fake_mesh(count):
    """FaceMesh landmark 목록 흉내 (index i → x=i/1000)"""
    return [SimpleNamespace(x=i / 1000.0, y=1.0 - i / 1000.0, z=0.0) for i in range(count)]


def test_regions_are_returned_in_fixed_order():
    regions = convert_mediapipe_to_regions(fake_mesh(478))
    assert tuple(regions) == REGION_ORDER


def test_region_points_come_from_mapped_indices():
    regions = convert_mediapipe_to_regions(fake_mesh(478))
    first_contour = MEDIAPIPE_REGION_INDICES['contour'][0]
    assert regions['contour'][0].x == first_contour / 1000.0
    assert len(regions['left_pupil']) == 1


def test_pupils_absent_without_iris_refinement():
    regions = convert_mediapipe_to_regions(fake_mesh(468))
    assert regions['left_pupil'] is None
    assert regions['right_pupil'] is None
    assert regions['median_line'] is not None


def test_mediapipe_output_normalizes_to_68_points():
    regions = convert_mediapipe_to_regions(fake_mesh(478))
    total = sum(len(points) for points in regions.values())
    assert total > 68

    face = normalize_landmarks(regions)
    assert len(face.points) == 68
    assert face.detected_count == 68


def test_face_bbox_is_normalized():
    mesh = [SimpleNamespace(x=0.2, y=0.3), SimpleNamespace(x=0.6, y=0.9)]
    x, y, w, h = get_face_bbox(mesh)
    assert (x, y) == (0.2, 0.3)
    assert abs(w - 0.4) < 1e-9
    assert abs(h - 0.6) < 1e-9


def test_face_bbox_empty():
    assert get_face_bbox([]) == (0.0, 0.0, 0.0, 0.0)

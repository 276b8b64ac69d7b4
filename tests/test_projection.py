import math

import pytest

from sketchcity.citygen.scene import Scene
from sketchcity.render.camera import Camera
from sketchcity.render.projection import CULLED, Projected, Projector
from sketchcity.utils.vector import Vector

WIDTH, HEIGHT = 1280, 800


@pytest.fixture
def camera(config):
    return Camera.from_config(config)


@pytest.fixture
def projector(camera):
    return Projector(camera, Scene(WIDTH, HEIGHT))


def _on_axis(camera, depth):
    """World point that lands on the optical axis at the given view depth."""
    s, c = math.sin(camera.pitch), math.cos(camera.pitch)
    return Vector(0, -depth * s, depth * c) - camera.position


def test_camera_from_config(camera):
    assert camera.position == Vector(0, -8, 2)
    assert camera.eye == Vector(0, 8, -2)
    assert camera.pitch == pytest.approx(math.pi * 0.15)
    assert camera.fov == pytest.approx(math.radians(60))


def test_point_on_axis_projects_to_center(camera, projector):
    result = projector.project(_on_axis(camera, 10))
    assert isinstance(result, Projected)
    assert result.x == pytest.approx(WIDTH / 2)
    assert result.y == pytest.approx(HEIGHT / 2)


def test_clip_matrix_uses_scene_aspect_ratio(camera):
    square = Projector(camera, Scene(600, 600))
    wide = Projector(camera, Scene(1200, 600))
    assert square.clip[0] == pytest.approx(square.clip[5])
    assert wide.clip[0] == pytest.approx(square.clip[0] / 2)


def test_w_is_view_depth(camera, projector):
    assert projector.to_clip_space(_on_axis(camera, 7.5)).w == pytest.approx(7.5)


def test_point_behind_camera_is_culled(camera, projector):
    behind = _on_axis(camera, -5)
    assert projector.to_clip_space(behind).w < 0
    assert projector.project(behind) is CULLED


def test_culled_is_distinct_from_origin():
    assert Projected(0, 0) != CULLED
    assert isinstance(Projected(0, 0), Projected)


def test_higher_points_project_higher_on_screen(camera, projector):
    base = _on_axis(camera, 10)
    low = projector.project(base)
    high = projector.project(base + Vector(0, 1, 0))
    assert high.y < low.y


def test_project_all_preserves_order(camera, projector):
    vertices = [_on_axis(camera, 10), _on_axis(camera, -3)]
    results = projector.project_all(vertices)
    assert isinstance(results[0], Projected)
    assert results[1] is CULLED

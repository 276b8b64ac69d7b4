import random

import pytest

from sketchcity.citygen.building import BuildingGenerator
from sketchcity.citygen.dataclass import FacadeType
from sketchcity.citygen.scene import Scene
from sketchcity.utils.vector import Vector

MAX_HEIGHT = 2 + 1.3 ** 5


def _generator(config, seed=0):
    scene = Scene.from_config(config)
    return BuildingGenerator(config, scene, rng=random.Random(seed)), scene


def test_cuboid_emits_four_faces_and_shadow(generator, scene):
    corners = generator.cuboid(Vector(0, 0, 0), Vector(1, 2, 3))
    assert len(corners) == 8
    assert corners[0] == Vector(0, 0, 0)
    assert corners[6] == Vector(1, 2, 3)

    assert len(scene) == 5
    faces, shadow = scene.shapes[:4], scene.shapes[4]
    assert all(len(face.vertices) == 4 for face in faces)
    assert [face.fill for face in faces].count(generator.palette.dark) == 1
    assert [face.fill for face in faces].count(generator.palette.light) == 3

    assert shadow.fill == generator.palette.shadow
    assert shadow.stroke is False
    xs = sorted({v.x for v in shadow.vertices})
    assert xs == [1, pytest.approx(1 + 2 * 0.7)]
    assert all(v.y == 0 for v in shadow.vertices)


def test_height_bounds(config):
    generator, _ = _generator(config, seed=42)
    for i in range(300):
        record = generator.generate_building(Vector(i % 10, 0, i % 7), 2, 2)
        assert 2 <= record.height <= MAX_HEIGHT


def test_height_distribution_is_right_skewed(config):
    generator, _ = _generator(config, seed=7)
    heights = [generator.sample_height() for _ in range(2000)]
    below_three = sum(1 for h in heights if h < 3)
    assert below_three > len(heights) / 2


def test_chimney_count_bounds(config):
    generator, _ = _generator(config, seed=3)
    counts = {generator.generate_building(Vector(0, 0, 0), 3, 3).chimneys for _ in range(300)}
    assert counts <= {0, 1, 2}
    assert 2 in counts


def test_footprint_padding(config):
    generator, scene = _generator(config)
    record = generator.generate_building(Vector(4, 0, 6), 3, 2)
    a, b = record.corners[0], record.corners[1]
    g = record.corners[6]
    assert a.x == pytest.approx(4.1)
    assert a.z == pytest.approx(6.1)
    assert b.x == pytest.approx(6.9)
    assert g.z == pytest.approx(7.9)
    assert g.y == pytest.approx(record.height)


def test_window_layout_tiles_facade(config):
    generator, _ = _generator(config, seed=9)
    padding = config['citygen.building.padding']
    for width in (1, 2, 3):
        for height in (2.0, 3.7, 7.7):
            for _ in range(20):
                layout = generator.solve_window_layout(width, height)
                assert layout.num_x >= 1 and layout.num_y >= 1
                assert layout.spacing_x > 0 and layout.spacing_y > 0
                used_x = layout.num_x * layout.window_width + (layout.num_x + 1) * layout.spacing_x
                used_y = layout.num_y * layout.window_height + (layout.num_y + 1) * layout.spacing_y
                assert used_x == pytest.approx(width - 2 * padding)
                assert used_y == pytest.approx(height - 2 * padding)


@pytest.mark.parametrize('z, vertex_count', [(5, 5), (25, 2)])
def test_window_level_of_detail(config, z, vertex_count):
    config['citygen.building.window_probability'] = 1.0
    generator, scene = _generator(config, seed=21)
    record = generator.generate_building(Vector(0, 0, z), 2, 2)
    assert record.facade == FacadeType.WINDOWS

    windows = [s for s in scene.shapes if not s.is_filled]
    layout = record.window_layout
    assert len(windows) == layout.num_x * layout.num_y
    assert all(len(w.vertices) == vertex_count for w in windows)
    front_z = z - config['citygen.building.facade_offset']
    assert all(v.z == pytest.approx(front_z) for w in windows for v in w.vertices)
    if vertex_count == 5:
        assert all(w.vertices[0] == w.vertices[-1] for w in windows)


def test_panel_facade(config):
    config['citygen.building.window_probability'] = 0.0
    generator, scene = _generator(config, seed=5)
    for i in range(30):
        record = generator.generate_building(Vector(i, 0, 0), 2, 2)
        assert record.facade == FacadeType.PANELS
        num_x, num_y = record.panel_counts
        assert 5 <= num_x <= 10 and 5 <= num_y <= 10
    lines = [s for s in scene.shapes if not s.is_filled]
    assert all(len(line.vertices) == 2 for line in lines)


@pytest.mark.parametrize('window_probability, facade', [(1.0, FacadeType.WINDOWS), (0.0, FacadeType.PANELS)])
def test_facade_lines_sort_after_their_walls(config, pipeline, window_probability, facade):
    config['citygen.building.window_probability'] = window_probability
    for seed in range(20):
        generator, scene = _generator(config, seed=seed)
        record = generator.generate_building(Vector(seed % 10 - 5, 0, 3), 1 + seed % 4, 1 + seed % 3)
        assert record.facade == facade

        front_wall = scene.shapes[0]
        order = pipeline.sort_shapes(scene)
        lines = [i for i, shape in enumerate(order) if not shape.is_filled]
        filled = [i for i, shape in enumerate(order) if shape.is_filled]
        assert lines
        assert min(lines) > next(i for i, shape in enumerate(order) if shape is front_wall)
        assert min(lines) > max(filled)


def test_roof_highlight_adds_one_filled_quad(config):
    config['citygen.building.roof_probability'] = 1.0
    config['citygen.building.max_chimneys'] = 0
    generator, scene = _generator(config, seed=1)
    record = generator.generate_building(Vector(0, 0, 0), 2, 2)
    assert record.has_roof
    assert record.chimneys == 0
    filled = [s for s in scene.shapes if s.is_filled]
    assert len(filled) == 6
    roof = filled[5]
    assert all(v.y == pytest.approx(record.height) for v in roof.vertices)
    xs = [v.x for v in roof.vertices]
    assert min(xs) > 0.1 and max(xs) < 1.9


def test_same_seed_same_geometry(config):
    first, scene_a = _generator(config, seed=99)
    second, scene_b = _generator(config, seed=99)
    first.generate_building(Vector(0, 0, 0), 3, 2)
    second.generate_building(Vector(0, 0, 0), 3, 2)
    assert [s.vertices for s in scene_a.shapes] == [s.vertices for s in scene_b.shapes]

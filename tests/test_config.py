import pytest

from sketchcity.config import Config


def test_default_values(config):
    assert config['citygen.layout.building_count'] == 200
    assert config['citygen.building.padding'] == pytest.approx(0.1)
    assert config['render.camera.position'] == [0, -8, 2]
    assert config.get('sketchcity.seed') is None


def test_missing_key(config):
    with pytest.raises(ValueError):
        config['citygen.nope']
    assert config.get('citygen.nope', 3) == 3
    assert config.get('citygen.nope', None) is None


def test_user_config_merges_over_defaults(tmp_path):
    user = tmp_path / 'user.yaml'
    user.write_text('citygen:\n  layout:\n    building_count: 12\n')
    config = Config(str(user))
    assert config['citygen.layout.building_count'] == 12
    assert config['citygen.layout.x_min'] == -20


def test_missing_user_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / 'missing.yaml'))


def test_set_override(config):
    config['render.viewport.width'] = 640
    config.set('extra.section.value', 1)
    assert config['render.viewport.width'] == 640
    assert config['extra.section.value'] == 1

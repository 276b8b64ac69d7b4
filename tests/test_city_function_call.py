import json

from sketchcity import CityFunctionCall
from sketchcity.render.canvas import RecordingCanvas


def test_generate_render_export(config, tmp_path):
    cfc = CityFunctionCall(config, seed=4, building_count=10)
    scene = cfc.generate_city()
    assert len(cfc.city_generator.buildings) == 10

    canvas = RecordingCanvas()
    commands = cfc.render(canvas)
    assert commands == canvas.commands
    assert len(commands) <= len(scene)

    cfc.export_city(str(tmp_path / 'out'))
    buildings = json.loads((tmp_path / 'out' / 'buildings.json').read_text())
    drawing = json.loads((tmp_path / 'out' / 'drawing.json').read_text())
    meta = json.loads((tmp_path / 'out' / 'scene.json').read_text())

    assert len(buildings['buildings']) == 10
    assert {'footprint', 'height', 'chimneys', 'facade'} <= set(buildings['buildings'][0])
    assert len(drawing['commands']) == len(commands)
    assert meta['shape_count'] == len(scene)
    assert meta['palette']['background'] == config['render.colors.background']
    assert meta['palette']['shadow'] == config['render.colors.shadow']


def test_render_to_png(config, tmp_path):
    config['render.viewport.width'] = 320
    config['render.viewport.height'] = 200
    cfc = CityFunctionCall(config, seed=8, building_count=5)
    cfc.generate_city()
    canvas = cfc.create_canvas()
    cfc.render(canvas)
    path = tmp_path / 'city.png'
    canvas.save(str(path))
    assert path.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'

import random

import pytest

from sketchcity.citygen.building import BuildingGenerator
from sketchcity.citygen.scene import Scene
from sketchcity.config import Config
from sketchcity.render.pipeline import RenderPipeline


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def scene(config):
    return Scene.from_config(config)


@pytest.fixture
def generator(config, scene):
    return BuildingGenerator(config, scene, rng=random.Random(1234))


@pytest.fixture
def pipeline(config):
    return RenderPipeline(config)

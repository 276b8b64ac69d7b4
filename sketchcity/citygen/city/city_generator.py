"""City generator module for laying out buildings on an occupancy grid."""
import math
import random
from enum import Enum, auto
from typing import List, Optional

from sketchcity.citygen.building import BuildingGenerator, BuildingManager
from sketchcity.citygen.dataclass import BuildingRecord, Footprint, Palette
from sketchcity.citygen.scene import Scene
from sketchcity.utils.logger import Logger
from sketchcity.utils.vector import Vector


class LayoutExhaustedError(RuntimeError):
    """Raised when the retry budget runs out before the target building count is reached."""

    def __init__(self, placed: int, target: int, attempts: int):
        """Initialize the error.

        Args:
            placed: Buildings placed before giving up.
            target: Requested building count.
            attempts: Rejected samples drawn.
        """
        super().__init__(f'Placed {placed}/{target} buildings before exhausting {attempts} rejected samples')
        self.placed = placed
        self.target = target
        self.attempts = attempts


class GenerationState(Enum):
    """Enum to track the layout state."""
    PLACING_BUILDINGS = auto()
    COMPLETED = auto()
    EXHAUSTED = auto()


class CityGenerator:
    """Manages one layout pass: sample footprints, reject overlaps, generate buildings."""

    def __init__(self, config, seed: int = None, scene: Optional[Scene] = None,
                 building_manager: Optional[BuildingManager] = None, building_count: int = None):
        """Initialize the city generator with configuration.

        Args:
            config: Configuration for generation.
            seed: Seed for the random number generator; falls back to ``sketchcity.seed``.
            scene: Scene to populate; a fresh one sized from config when omitted.
            building_manager: Occupancy grid, possibly pre-marked; fresh when omitted.
            building_count: Target number of buildings; falls back to config.
        """
        self.config = config
        self.rng = random.Random(self.config.get('sketchcity.seed', None) if seed is None else seed)

        self.building_count = building_count if building_count is not None else self.config['citygen.layout.building_count']
        self.max_attempts = self.config['citygen.layout.max_attempts']
        self.on_exhausted = self.config['citygen.layout.on_exhausted']
        if self.on_exhausted not in ('raise', 'truncate'):
            raise ValueError(f'Unknown exhaustion policy: {self.on_exhausted}')

        self.scene = scene if scene is not None else Scene.from_config(self.config)
        self.building_manager = building_manager if building_manager is not None else BuildingManager()
        self.building_generator = BuildingGenerator(self.config, self.scene, Palette.from_config(self.config), self.rng)

        self.generation_state = GenerationState.PLACING_BUILDINGS
        self.rejected_attempts = 0

        self.logger = Logger.get_logger('CityGenerator')

    def generate(self) -> Scene:
        """Run the layout pass to completion.

        Returns:
            The populated scene.

        Raises:
            LayoutExhaustedError: If the retry budget runs out and the policy is ``raise``.
        """
        self.logger.info(f'Placing {self.building_count} buildings')
        while not self.is_generation_complete():
            self.generate_step()

        if self.generation_state == GenerationState.EXHAUSTED:
            if self.on_exhausted == 'raise':
                raise LayoutExhaustedError(len(self.buildings), self.building_count, self.rejected_attempts)
            self.logger.warning(
                f'Layout exhausted after {self.rejected_attempts} rejected samples, '
                f'keeping {len(self.buildings)}/{self.building_count} buildings'
            )
        else:
            self.logger.info(
                f'Placed {len(self.buildings)} buildings ({self.rejected_attempts} rejected samples, '
                f'{len(self.scene)} shapes)'
            )
        return self.scene

    def generate_step(self) -> bool:
        """Draw one footprint sample and place it if its cells are free.

        Returns:
            bool: True if generation is complete.
        """
        if self.generation_state != GenerationState.PLACING_BUILDINGS:
            return True

        if len(self.buildings) >= self.building_count:
            self.generation_state = GenerationState.COMPLETED
            return True

        footprint = self.sample_footprint()
        if not self.building_manager.can_place_building(footprint):
            self.rejected_attempts += 1
            if self.rejected_attempts >= self.max_attempts:
                self.generation_state = GenerationState.EXHAUSTED
                return True
            return False

        self.building_manager.claim(footprint)
        building = self.building_generator.generate_building(
            Vector(footprint.x, 0, footprint.z), footprint.width, footprint.length
        )
        self.building_manager.add_building(building)

        if len(self.buildings) >= self.building_count:
            self.generation_state = GenerationState.COMPLETED
            return True
        return False

    def sample_footprint(self) -> Footprint:
        """Sample an integer origin and footprint from the configured ranges."""
        x_min = self.config['citygen.layout.x_min']
        x_max = self.config['citygen.layout.x_max']
        z_min = self.config['citygen.layout.z_min']
        z_max = self.config['citygen.layout.z_max']
        size_min = self.config['citygen.layout.footprint_min']
        size_max = self.config['citygen.layout.footprint_max']

        x = math.floor(self.rng.random() * (x_max - x_min) + x_min)
        z = math.floor(self.rng.random() * (z_max - z_min) + z_min)
        width = math.floor(self.rng.random() * (size_max - size_min) + size_min)
        length = math.floor(self.rng.random() * (size_max - size_min) + size_min)
        return Footprint(x, z, width, length)

    def is_generation_complete(self) -> bool:
        """Check if the layout pass has ended, successfully or not.

        Returns:
            bool: True if no more samples will be drawn.
        """
        return self.generation_state != GenerationState.PLACING_BUILDINGS

    @property
    def buildings(self) -> List[BuildingRecord]:
        """Get all placed buildings.

        Returns:
            list: Generated building records in placement order.
        """
        return self.building_manager.buildings

"""Building manager module for tracking claimed occupancy-grid cells.

This module provides functionality to check footprints against the cells already
claimed during one layout pass and to record placed buildings.
"""
from typing import Iterable, List, Set, Tuple

from sketchcity.citygen.dataclass import BuildingRecord, Footprint

Cell = Tuple[int, int]


class BuildingManager:
    """Owns the occupancy grid for one layout pass.

    The grid only grows; no two placed footprints ever share a cell.
    """
    def __init__(self):
        """Initialize an empty occupancy grid."""
        self.occupied: Set[Cell] = set()
        self.footprints: List[Footprint] = []
        self.buildings: List[BuildingRecord] = []

    def can_place_building(self, footprint: Footprint) -> bool:
        """Check if every cell of the footprint is still free.

        Args:
            footprint: Candidate footprint.

        Returns:
            True if the building can be placed, False otherwise.
        """
        return all(cell not in self.occupied for cell in footprint.cells())

    def claim(self, footprint: Footprint):
        """Mark every cell of a free footprint as occupied.

        Raises:
            ValueError: If any cell is already claimed.
        """
        if not self.can_place_building(footprint):
            raise ValueError(f'Footprint {footprint} overlaps claimed cells')
        self.occupied.update(footprint.cells())
        self.footprints.append(footprint)

    def mark_occupied(self, cells: Iterable[Cell]):
        """Claim cells without a building, e.g. to reserve parts of the grid."""
        self.occupied.update(cells)

    def add_building(self, building: BuildingRecord):
        """Record a generated building.

        Args:
            building: Building to add.
        """
        self.buildings.append(building)

    def __len__(self) -> int:
        return len(self.buildings)

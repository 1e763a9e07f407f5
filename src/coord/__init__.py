"""
Coordinate systems of the hexagonal lattice.

Contains the canonical IJK lattice coordinate, the cube coordinate used for
interpolation, the mappings between them and lattice paths.
"""

from src.coord.cube import (
    Axis,
    CoordCube,
    cube_to_ijk,
    ijk_to_cube,
    select_repair_axis,
)
from src.coord.ijk import CoordIJK
from src.coord.path import cube_path, lattice_path

__all__ = [
    # Types
    "Axis",
    "CoordCube",
    "CoordIJK",
    # Rounding
    "select_repair_axis",
    # Mappings
    "cube_to_ijk",
    "ijk_to_cube",
    # Paths
    "cube_path",
    "lattice_path",
]

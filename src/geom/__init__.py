"""
Geometries projected onto the grid.
"""

from src.geom.point import Point
from src.geom.to_cells import ToCells

__all__ = [
    "Point",
    "ToCells",
]

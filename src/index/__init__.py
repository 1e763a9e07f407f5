"""
Index collaborators: resolutions, cell indexes and angular coordinates.
"""

from src.index.cell_index import CellIndex
from src.index.latlng import LatLng
from src.index.resolution import (
    DEFAULT_RESOLUTION,
    MAX_RESOLUTION,
    MIN_RESOLUTION,
    Resolution,
)

__all__ = [
    # Constants
    "DEFAULT_RESOLUTION",
    "MAX_RESOLUTION",
    "MIN_RESOLUTION",
    # Types
    "CellIndex",
    "LatLng",
    "Resolution",
]

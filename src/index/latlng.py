"""
LatLng: угловые координаты на сфере

Широта и долгота в радианах, обе конечны. Проекция на икосаэдрическую
сетку выполняется библиотекой h3 (которая принимает градусы).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import h3

from src.core.errors import InvalidLatLng
from src.core.math.numerical_safeguards import is_valid_float
from src.index.cell_index import CellIndex
from src.index.resolution import Resolution

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatLng:
    """
    Координата (широта, долгота) в радианах.

    Создавать через from_radians / from_degrees: прямой конструктор
    не проверяет конечность.
    """

    lat: float
    lng: float

    @classmethod
    def from_radians(cls, lat: float, lng: float) -> LatLng:
        """
        Координата из радиан.

        Диапазон не проверяется, только конечность.

        Raises:
            InvalidLatLng: Если lat или lng NaN/Inf
        """
        if not is_valid_float(lat):
            LOGGER.debug("rejected latitude %r", lat)
            raise InvalidLatLng(lat, "non-finite latitude")
        if not is_valid_float(lng):
            LOGGER.debug("rejected longitude %r", lng)
            raise InvalidLatLng(lng, "non-finite longitude")
        return cls(lat, lng)

    @classmethod
    def from_degrees(cls, lat: float, lng: float) -> LatLng:
        """Координата из градусов."""
        return cls.from_radians(math.radians(lat), math.radians(lng))

    @property
    def lat_degrees(self) -> float:
        return math.degrees(self.lat)

    @property
    def lng_degrees(self) -> float:
        return math.degrees(self.lng)

    def to_cell(self, resolution: int) -> CellIndex:
        """
        Ячейка, содержащая координату, на заданном разрешении.

        Args:
            resolution: Resolution или целое в [0, 15]

        Returns:
            CellIndex

        Raises:
            InvalidResolution: Если разрешение вне диапазона
        """
        res = Resolution.parse(resolution)
        cell = h3.latlng_to_cell(self.lat_degrees, self.lng_degrees, int(res))
        return CellIndex(h3.str_to_int(cell))

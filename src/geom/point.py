"""
Point: одиночная точка в 2D

Immutable Pydantic модель пары (x, y) = (долгота, широта) в радианах.
Точка всегда даёт ровно одну ячейку на любом разрешении.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. x и y конечны (NaN/Inf отвергаются при создании -> InvalidGeometry)
2. max_cells_count() == 1 для любого разрешения
3. to_cells() детерминирован: повторный вызов даёт ту же ячейку
"""

from __future__ import annotations

import logging
import math
from typing import Iterator

from pydantic import BaseModel, Field, ValidationError

from src.core.errors import InvalidGeometry, InvalidLatLng
from src.index.cell_index import CellIndex
from src.index.latlng import LatLng
from src.index.resolution import Resolution

LOGGER = logging.getLogger(__name__)


class Point(BaseModel):
    """
    Точка в радианах.

    Создавать через from_radians / from_degrees: они переводят ошибку
    валидации модели в InvalidGeometry.
    """

    x: float = Field(..., allow_inf_nan=False, description="Долгота (радианы)")
    y: float = Field(..., allow_inf_nan=False, description="Широта (радианы)")

    # strict: str и bool не приводятся к float
    model_config = {"frozen": True, "strict": True}

    @classmethod
    def from_radians(cls, x: float, y: float) -> Point:
        """
        Точка из координат в радианах.

        Диапазон углов не проверяется: это задача конверсии в LatLng.

        Args:
            x: Долгота (радианы)
            y: Широта (радианы)

        Returns:
            Point

        Raises:
            InvalidGeometry: Если x или y NaN/Inf или не число
        """
        try:
            return cls(x=x, y=y)
        except ValidationError as err:
            LOGGER.debug("rejected point (%r, %r): %s", x, y, err)
            raise InvalidGeometry("x and y must be valid") from err

    @classmethod
    def from_degrees(cls, x: float, y: float) -> Point:
        """
        Точка из координат в градусах.

        Raises:
            InvalidGeometry: Если x или y NaN/Inf или не число
        """
        # Типы проверяются до math.radians: он принимает bool
        raw = cls.from_radians(x, y)
        return cls.from_radians(math.radians(raw.x), math.radians(raw.y))

    def to_latlng(self) -> LatLng:
        """
        Угловая координата точки.

        Raises:
            InvalidLatLng: Не должно происходить для созданной точки
        """
        return LatLng.from_radians(lat=self.y, lng=self.x)

    def max_cells_count(self, resolution: Resolution) -> int:
        """Точка всегда даёт ровно одну ячейку."""
        return 1

    def to_cell(self, resolution: Resolution) -> CellIndex:
        """
        Ячейка, содержащая точку.

        Args:
            resolution: Разрешение

        Returns:
            CellIndex

        Raises:
            InvalidResolution: Если разрешение вне диапазона
            RuntimeError: Если провалидированная точка не конвертируется в LatLng
        """
        try:
            latlng = self.to_latlng()
        except InvalidLatLng as err:
            LOGGER.error("validated point (%r, %r) failed LatLng conversion", self.x, self.y)
            raise RuntimeError("valid coordinate") from err

        return latlng.to_cell(resolution)

    def to_cells(self, resolution: Resolution) -> Iterator[CellIndex]:
        """
        Ячейки, покрывающие точку: ровно одна.

        Каждый вызов возвращает новый итератор.
        """
        return iter((self.to_cell(resolution),))

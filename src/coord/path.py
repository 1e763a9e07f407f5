"""
Lattice paths: линейная интерполяция между позициями решётки

Путь строится в кубических координатах: на шаге n точка
start + n * (end - start) / distance округляется через CoordCube.translate
и переводится обратно в IJK.
"""

import logging
from typing import Iterator

from src.coord.cube import CoordCube, cube_to_ijk, ijk_to_cube
from src.coord.ijk import CoordIJK

LOGGER = logging.getLogger(__name__)


def cube_path(start: CoordCube, end: CoordCube, distance: int) -> Iterator[CoordCube]:
    """
    Кубические координаты вдоль отрезка start -> end.

    Args:
        start: Начальная координата
        end: Конечная координата
        distance: Число шагов (решёточное расстояние между концами)

    Returns:
        Итератор из distance + 1 координат, первая равна start, последняя end

    Raises:
        ValueError: Если distance < 0 (сразу при вызове)
    """
    if distance < 0:
        raise ValueError(f"distance must be non-negative, got {distance}")

    return _iter_cube_path(start, end, distance)


def _iter_cube_path(start: CoordCube, end: CoordCube, distance: int) -> Iterator[CoordCube]:
    if distance == 0:
        i_step = j_step = k_step = 0.0
    else:
        i_step = (end.i - start.i) / distance
        j_step = (end.j - start.j) / distance
        k_step = (end.k - start.k) / distance

    for n in range(distance + 1):
        yield start.translate((i_step * n, j_step * n, k_step * n))


def lattice_path(start: CoordIJK, end: CoordIJK) -> list[CoordIJK]:
    """
    Ячейки решётки на прямой между start и end включительно.

    Args:
        start: Начальная IJK координата
        end: Конечная IJK координата

    Returns:
        Список нормализованных IJK, соседние элементы на расстоянии 1
    """
    distance = start.distance(end)
    LOGGER.debug("lattice path %s -> %s: %d steps", start, end, distance)

    return [
        cube_to_ijk(cube)
        for cube in cube_path(ijk_to_cube(start), ijk_to_cube(end), distance)
    ]

"""
CoordCube: кубические координаты и округление на решётку

Кубические координаты (i, j, k) с инвариантом i + j + k == 0 удобнее IJK
для линейной интерполяции: все три оси симметричны, поэтому геометрическое
округление определено однозначно.

Алгоритм округления: https://www.redblobgames.com/grids/hexagons/#rounding

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат translate() всегда удовлетворяет i + j + k == 0
2. Порядок выбора оси для починки фиксирован: i, затем j, затем k;
   сравнения строгие, при равенстве ошибок чинится более поздняя ось
3. Знак оси, меняющийся при переходе CoordCube <-> CoordIJK, задан только
   в cube_to_ijk / ijk_to_cube
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.coord.ijk import CoordIJK
from src.core.math.numerical_safeguards import round_half_away_from_zero


# =============================================================================
# ТИПЫ
# =============================================================================


class Axis(str, Enum):
    """Ось кубической координаты"""

    I = "i"  # noqa: E741
    J = "j"
    K = "k"


@dataclass(frozen=True)
class CoordCube:
    """
    Кубическая координата.

    Конструктор не валидирует сумму: вызывающий код передаёт тройку с
    нулевой суммой или сразу вызывает translate(), который инвариант
    восстанавливает.
    """

    i: int
    j: int
    k: int

    def translate(self, offsets: tuple[float, float, float]) -> CoordCube:
        """
        Сдвиг на непрерывное смещение с округлением на решётку.

        Каждая ось округляется независимо (half away from zero), поэтому
        сумма может отличаться от нуля на ±1 или ±2. Ось с наибольшей
        ошибкой округления пересчитывается как минус сумма двух других.

        Args:
            offsets: Смещение (di, dj, dk), только конечные значения

        Returns:
            Новая координата с i + j + k == 0

        Examples:
            >>> CoordCube(0, 0, 0).translate((1.2, -0.7, -0.5))
            CoordCube(i=1, j=-1, k=0)
            >>> CoordCube(0, 0, 0).translate((0.6, 0.6, -1.2))
            CoordCube(i=1, j=0, k=-1)
        """
        i = self.i + offsets[0]
        j = self.j + offsets[1]
        k = self.k + offsets[2]

        ri = round_half_away_from_zero(i)
        rj = round_half_away_from_zero(j)
        rk = round_half_away_from_zero(k)

        i_diff = abs(ri - i)
        j_diff = abs(rj - j)
        k_diff = abs(rk - k)

        axis = select_repair_axis(i_diff, j_diff, k_diff)
        if axis is Axis.I:
            ri = -rj - rk
        elif axis is Axis.J:
            rj = -ri - rk
        else:
            rk = -ri - rj

        return CoordCube(ri, rj, rk)

    def to_ijk(self) -> CoordIJK:
        """Конверсия в IJK, см. cube_to_ijk."""
        return cube_to_ijk(self)

    def is_valid(self) -> bool:
        """Выполняется ли инвариант i + j + k == 0."""
        return self.i + self.j + self.k == 0


# =============================================================================
# ВЫБОР ОСИ ДЛЯ ПОЧИНКИ
# =============================================================================


def select_repair_axis(i_diff: float, j_diff: float, k_diff: float) -> Axis:
    """
    Ось, округление которой отбрасывается.

    Сравнения строгие и идут в порядке i, j, k:
    - i только если её ошибка строго больше обеих других;
    - иначе j, если её ошибка строго больше ошибки k;
    - иначе k.

    При равенстве двух наибольших ошибок выбирается более поздняя ось.
    Порядок менять нельзя: он определяет результат на границах.

    Args:
        i_diff: |ri - i'|
        j_diff: |rj - j'|
        k_diff: |rk - k'|

    Returns:
        Axis для пересчёта

    Examples:
        >>> select_repair_axis(0.5, 0.5, 0.0)
        <Axis.J: 'j'>
        >>> select_repair_axis(0.2, 0.2, 0.2)
        <Axis.K: 'k'>
    """
    if i_diff > j_diff and i_diff > k_diff:
        return Axis.I
    elif j_diff > k_diff:
        return Axis.J
    else:
        return Axis.K


# =============================================================================
# КОНВЕРСИИ CoordCube <-> CoordIJK
# =============================================================================


def cube_to_ijk(cube: CoordCube) -> CoordIJK:
    """
    CoordCube -> CoordIJK.

    i меняет знак, j сохраняется, третий компонент обнуляется, затем
    нормализация IJK.

    Examples:
        >>> cube_to_ijk(CoordCube(1, -1, 0))
        CoordIJK(i=0, j=0, k=1)
    """
    return CoordIJK(-cube.i, cube.j, 0).normalize()


def ijk_to_cube(ijk: CoordIJK) -> CoordCube:
    """
    CoordIJK -> CoordCube, обратное к cube_to_ijk.

    Результат не зависит от нормализации входа: прибавление (1, 1, 1) к IJK
    не меняет разности, из которых строится куб.

    Examples:
        >>> ijk_to_cube(CoordIJK(0, 0, 1))
        CoordCube(i=1, j=-1, k=0)
    """
    i = -ijk.i + ijk.k
    j = ijk.j - ijk.k
    k = -i - j
    return CoordCube(i, j, k)

"""
CoordIJK: каноническая решёточная координата гексагональной сетки

Три оси под углом 120°, вектор (1, 1, 1) эквивалентен нулю. Нормализованная
форма: все компоненты >= 0 и хотя бы одна равна 0.

Используется остальной системой как представление для хранения и передачи;
для интерполяции см. CoordCube (src.coord.cube).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoordIJK:
    """
    IJK координата.

    Конструктор не валидирует и не нормализует: третий компонент может быть
    избыточным, каноническую форму даёт normalize().
    """

    i: int
    j: int
    k: int

    def normalize(self) -> CoordIJK:
        """
        Каноническая форма координаты.

        Отрицательные компоненты убираются прибавлением их модуля ко всем
        осям, затем вычитается общий минимум.

        Examples:
            >>> CoordIJK(-1, 0, 0).normalize()
            CoordIJK(i=0, j=1, k=1)
            >>> CoordIJK(2, 3, 4).normalize()
            CoordIJK(i=0, j=1, k=2)
        """
        i, j, k = self.i, self.j, self.k

        if i < 0:
            j -= i
            k -= i
            i = 0

        if j < 0:
            i -= j
            k -= j
            j = 0

        if k < 0:
            i -= k
            j -= k
            k = 0

        min_value = min(i, j, k)
        if min_value > 0:
            i -= min_value
            j -= min_value
            k -= min_value

        return CoordIJK(i, j, k)

    def is_normalized(self) -> bool:
        """Находится ли координата в канонической форме."""
        return min(self.i, self.j, self.k) == 0 and self.i >= 0 and self.j >= 0 and self.k >= 0

    def distance(self, other: CoordIJK) -> int:
        """
        Решёточное расстояние (число шагов между ячейками).

        Args:
            other: Вторая координата

        Returns:
            max(|di|, |dj|, |dk|) нормализованной разности
        """
        diff = (self - other).normalize()
        return max(abs(diff.i), abs(diff.j), abs(diff.k))

    def __add__(self, other: CoordIJK) -> CoordIJK:
        # Без нормализации
        return CoordIJK(self.i + other.i, self.j + other.j, self.k + other.k)

    def __sub__(self, other: CoordIJK) -> CoordIJK:
        return CoordIJK(self.i - other.i, self.j - other.j, self.k - other.k)

"""
CellIndex: 64-битный индекс ячейки

Непрозрачный идентификатор одной ячейки на одном разрешении. Кодирование
индекса целиком делегировано библиотеке h3.
"""

from __future__ import annotations

from dataclasses import dataclass

import h3

from src.core.errors import InvalidCellIndex
from src.index.resolution import Resolution


@dataclass(frozen=True, order=True)
class CellIndex:
    """Индекс ячейки."""

    value: int

    @classmethod
    def from_str(cls, value: str) -> CellIndex:
        """
        Индекс из шестнадцатеричной строки (например, '8a2a1072b59ffff').

        Принимается только str; целое значение передавать в CellIndex(value).

        Raises:
            InvalidCellIndex: Если value не str или не является валидной ячейкой
        """
        if not isinstance(value, str):
            raise InvalidCellIndex(value, "expected a hexadecimal string")
        if not h3.is_valid_cell(value):
            raise InvalidCellIndex(value, "not a valid cell")
        return cls(h3.str_to_int(value))

    @property
    def resolution(self) -> Resolution:
        """Разрешение, записанное в битах индекса."""
        return Resolution(h3.get_resolution(str(self)))

    def __str__(self) -> str:
        return h3.int_to_str(self.value)

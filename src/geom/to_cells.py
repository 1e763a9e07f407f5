"""
ToCells: контракт геометрий, порождающих ячейки

Код обхода геометрий использует max_cells_count, чтобы заранее задать
размер выходного буфера, и to_cells, чтобы его заполнить.
"""

from typing import Iterator, Protocol, runtime_checkable

from src.index.cell_index import CellIndex
from src.index.resolution import Resolution


@runtime_checkable
class ToCells(Protocol):
    """Геометрия, покрываемая ячейками заданного разрешения."""

    def max_cells_count(self, resolution: Resolution) -> int:
        """Верхняя граница числа ячеек, которые вернёт to_cells."""
        ...

    def to_cells(self, resolution: Resolution) -> Iterator[CellIndex]:
        """Ячейки, покрывающие геометрию."""
        ...

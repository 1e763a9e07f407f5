"""
Тесты для lattice paths: интерполяция через CoordCube.translate
"""

import pytest

from src.coord.cube import CoordCube
from src.coord.ijk import CoordIJK
from src.coord.path import cube_path, lattice_path


class TestCubePath:
    """Тесты cube_path"""

    def test_length_and_endpoints(self) -> None:
        start = CoordCube(0, 0, 0)
        end = CoordCube(-3, 0, 3)
        path = list(cube_path(start, end, 3))
        assert len(path) == 4
        assert path[0] == start
        assert path[-1] == end

    def test_every_step_valid(self) -> None:
        path = list(cube_path(CoordCube(0, 0, 0), CoordCube(-4, 1, 3), 4))
        assert all(cube.is_valid() for cube in path)

    def test_zero_distance(self) -> None:
        start = CoordCube(1, -1, 0)
        assert list(cube_path(start, start, 0)) == [start]

    def test_negative_distance_rejected(self) -> None:
        """Ошибка поднимается при вызове, без итерации"""
        with pytest.raises(ValueError, match="distance must be non-negative"):
            cube_path(CoordCube(0, 0, 0), CoordCube(1, -1, 0), -1)


class TestLatticePath:
    """Тесты lattice_path"""

    def test_straight_line(self) -> None:
        """Прямая вдоль оси i"""
        path = lattice_path(CoordIJK(0, 0, 0), CoordIJK(3, 0, 0))
        assert path == [
            CoordIJK(0, 0, 0),
            CoordIJK(1, 0, 0),
            CoordIJK(2, 0, 0),
            CoordIJK(3, 0, 0),
        ]

    def test_diagonal_tie_break(self) -> None:
        """Средний шаг попадает на ничью j/k, чинится k"""
        # Шаг 1 в кубе: (-1, 0.5, 0.5) -> (-1, 1, 1) -> k пересчитан в 0
        path = lattice_path(CoordIJK(0, 0, 0), CoordIJK(2, 1, 0))
        assert path == [CoordIJK(0, 0, 0), CoordIJK(1, 1, 0), CoordIJK(2, 1, 0)]

    def test_same_cell(self) -> None:
        assert lattice_path(CoordIJK(2, 0, 1), CoordIJK(2, 0, 1)) == [CoordIJK(2, 0, 1)]

    def test_length_is_distance_plus_one(self) -> None:
        start = CoordIJK(0, 3, 0)
        end = CoordIJK(4, 0, 1)
        path = lattice_path(start, end)
        assert len(path) == start.distance(end) + 1

    def test_unit_steps(self) -> None:
        """Соседние ячейки пути на расстоянии 1"""
        path = lattice_path(CoordIJK(0, 3, 0), CoordIJK(4, 0, 1))
        for a, b in zip(path, path[1:]):
            assert a.distance(b) == 1

    def test_endpoints_normalized(self) -> None:
        """Концы пути в нормализованной форме"""
        path = lattice_path(CoordIJK(1, 1, 1), CoordIJK(3, 1, 1))
        assert path[0] == CoordIJK(0, 0, 0)
        assert path[-1] == CoordIJK(2, 0, 0)

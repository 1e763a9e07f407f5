"""
Errors: таксономия исключений hexcell-core

Все ошибки ввода наследуют ValueError и поднимаются сразу на границе
(при конструировании значения), никогда не откладываются.
"""


class InvalidGeometry(ValueError):
    """
    Невалидная геометрия (например, нефинитные координаты точки).

    Attributes:
        reason: Человекочитаемая причина
    """

    def __init__(self, reason: str):
        super().__init__(f"invalid geometry: {reason}")
        self.reason = reason


class InvalidLatLng(ValueError):
    """Невалидная пара широта/долгота (NaN/Inf)."""

    def __init__(self, value: float, reason: str):
        super().__init__(f"invalid LatLng (got {value!r}): {reason}")
        self.value = value
        self.reason = reason


class InvalidResolution(ValueError):
    """Разрешение вне диапазона [0, 15]."""

    def __init__(self, value: object):
        super().__init__(f"invalid resolution (got {value!r}): out of range")
        self.value = value


class InvalidCellIndex(ValueError):
    """Значение не является валидным индексом ячейки."""

    def __init__(self, value: object, reason: str):
        super().__init__(f"invalid cell index (got {value!r}): {reason}")
        self.value = value
        self.reason = reason

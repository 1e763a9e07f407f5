"""
Resolution: уровни иерархии сетки

Разрешение 0 соответствует самым крупным ячейкам (122 базовые ячейки),
каждое следующее делит ячейку примерно в 7 раз по площади.
"""

from enum import IntEnum
from typing import Final

from src.core.errors import InvalidResolution


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

MIN_RESOLUTION: Final[int] = 0
MAX_RESOLUTION: Final[int] = 15

# Разрешение по умолчанию для вызывающего кода (~5 км² на ячейку)
DEFAULT_RESOLUTION: Final[int] = 7


class Resolution(IntEnum):
    """Разрешение ячейки"""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    ELEVEN = 11
    TWELVE = 12
    THIRTEEN = 13
    FOURTEEN = 14
    FIFTEEN = 15

    @classmethod
    def parse(cls, value: int) -> "Resolution":
        """
        Разрешение из целого.

        Args:
            value: Целое в диапазоне [0, 15] или Resolution

        Returns:
            Resolution

        Raises:
            InvalidResolution: Если value вне диапазона или не целое
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidResolution(value)
        if not MIN_RESOLUTION <= value <= MAX_RESOLUTION:
            raise InvalidResolution(value)
        return cls(value)

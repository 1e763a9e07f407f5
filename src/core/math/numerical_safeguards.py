"""
Numerical Safeguards: Safe Math Primitives

Модуль обеспечивает численную устойчивость координатных вычислений:
- Проверка конечности float (NaN/Inf не допускаются на входе)
- Округление half-away-from-zero без опоры на встроенный round()
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление совпадает с half-away-from-zero для всех конечных значений
2. NaN/Inf отвергаются на границе, а не внутри вычислений
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется при сравнении углов в радианах
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: float) -> int:
    """
    Округление до ближайшего целого, половины от нуля.

    Встроенный round() использует banker's rounding (round half to even),
    поэтому здесь не применяется. Вариант floor(abs(x) + 0.5) ошибается на
    0.49999999999999994 (сумма округляется до 1.0), поэтому дробная часть
    сравнивается напрямую: x - trunc(x) вычисляется точно.

    Args:
        value: Конечное значение

    Returns:
        Ближайшее целое, при равенстве дальнее от нуля

    Raises:
        ValueError: value is NaN
        OverflowError: value is Inf

    Examples:
        >>> round_half_away_from_zero(0.5)
        1
        >>> round_half_away_from_zero(-0.5)
        -1
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-1.2)
        -1
    """
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        return truncated + (1 if value > 0 else -1)
    return truncated


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(math.pi, math.radians(180.0))
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)

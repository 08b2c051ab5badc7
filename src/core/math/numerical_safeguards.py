"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость геометрии Vortex Matrix:
- Epsilon-пороги для вырожденных знаменателей и дедупликации уровней
- Проверка NaN/Inf для входных цен
- Сравнения float с абсолютной толерантностью
- Округление half-up для отображения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на знаменатель |denom| < EPS_DENOM никогда не выполняется
2. Толерантность по цене строже, чем по времени (асимметрия намеренная)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог вырожденного (параллельного) знаменателя при пересечении отрезков
EPS_DENOM: Final[float] = 1e-4

# Толерантность дедупликации по цене
EPS_DEDUP_PRICE: Final[float] = 1e-4

# Толерантность дедупликации по времени
EPS_DEDUP_TIME: Final[float] = 1e-2


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


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_near_zero(value: float, tol: float = EPS_DENOM) -> bool:
    """
    Проверка, что значение строго меньше tol по модулю.

    Используется для отсечения параллельных отрезков: граница tol
    сама по себе считается НЕ нулевой.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_DENOM)

    Returns:
        True если abs(value) < tol
    """
    return abs(value) < tol


def within_tolerance(a: float, b: float, tol: float) -> bool:
    """
    Строгое сравнение двух float с абсолютной толерантностью.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность

    Returns:
        True если abs(a - b) < tol

    Examples:
        >>> within_tolerance(1.0, 1.00005, 1e-4)
        True
        >>> within_tolerance(1.0, 1.0001, 1e-4)
        False
    """
    return abs(a - b) < tol


def in_unit_interval(value: float) -> bool:
    """Проверка 0 <= value <= 1 (включая границы)."""
    return 0.0 <= value <= 1.0


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление до ближайшего целого, половины — от нуля.

    Встроенный round() использует banker's rounding (2.5 → 2), здесь
    нужно стандартное математическое округление (2.5 → 3).

    Args:
        value: Значение для округления (finite)

    Returns:
        Округлённое целое

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -3
        >>> round_half_up(108.49)
        108
    """
    validate_finite(value, "value")

    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)

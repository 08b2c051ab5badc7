"""
Digital Root — цифровой корень ценового уровня

Итеративное суммирование цифр до одной цифры 1..9 через modulo-9:
цена масштабируется на 100 (два знака после точки), округляется,
берётся остаток от деления на 9; остаток 0 отображается как 9.

Используется только для аннотации цен в отчёте, в геометрию не входит.
"""

from typing import Final

from src.core.math.numerical_safeguards import round_half_up, validate_finite

# Масштаб цены перед округлением (2 знака после точки)
PRICE_SCALE: Final[int] = 100


def digital_root(value: float) -> int:
    """
    Цифровой корень цены.

    Формула: v = round_half_up(|value| * 100); v % 9 == 0 → 9, иначе v % 9

    Args:
        value: Цена (finite)

    Returns:
        Цифровой корень в диапазоне [1, 9]

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> digital_root(1.09)
        1
        >>> digital_root(0.0)
        9
        >>> digital_root(-1.08)
        9
    """
    validate_finite(value, "value")

    scaled = round_half_up(abs(value) * PRICE_SCALE)
    remainder = scaled % 9
    return 9 if remainder == 0 else remainder

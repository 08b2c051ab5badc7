"""
Report — табличный вывод уровней Vortex Matrix

Колонки: Price (4 знака), P-Root (цифровой корень цены),
Time (2 знака, минуты), Origin.
"""

from collections.abc import Iterable
from typing import Final

from src.core.domain.result import VortexResult

SEPARATOR_WIDTH: Final[int] = 90

# Выше этого порога целые числа печатаются в экспоненциальной записи
INTEGER_DISPLAY_LIMIT: Final[float] = 1e21


def format_bound(value: float) -> str:
    """
    Граница диапазона для заголовка: целые значения без дробной части.

    Examples:
        >>> format_bound(100.0)
        '100'
        >>> format_bound(1.085)
        '1.085'
    """
    value = float(value)
    if value.is_integer() and abs(value) < INTEGER_DISPLAY_LIMIT:
        return str(int(value))
    return repr(value)


def format_header(price_high: float, price_low: float) -> list[str]:
    """Заголовок таблицы: название, имена колонок, разделитель."""
    high_text = format_bound(price_high)
    low_text = format_bound(price_low)

    return [
        f"--- VORTEX MATRIX (Price Hi: {high_text}, Price Lo: {low_text}) ---",
        " ".join(["Price".ljust(12), "| P-Root", "| Time (m)".ljust(12), "| Origin"]),
        "-" * SEPARATOR_WIDTH,
    ]


def format_row(result: VortexResult) -> str:
    """Строка таблицы для одного уровня."""
    price_text = f"{result.price:.4f}"
    root_text = str(result.price_root())
    time_text = f"{result.time:.2f}"

    return " ".join(
        [
            price_text.ljust(12),
            "| " + root_text.ljust(6),
            "| " + time_text.ljust(10),
            "| " + result.origin,
        ]
    )


def format_results(
    results: Iterable[VortexResult],
    price_high: float,
    price_low: float,
) -> list[str]:
    """
    Все строки отчёта.

    Args:
        results: Итоговые уровни
        price_high: Верхняя граница (для заголовка)
        price_low: Нижняя граница (для заголовка)

    Returns:
        Строки без перевода строки
    """
    return format_header(price_high, price_low) + [format_row(r) for r in results]


def print_results(
    results: Iterable[VortexResult],
    price_high: float,
    price_low: float,
) -> None:
    """Печать отчёта в stdout."""
    for line in format_results(results, price_high, price_low):
        print(line)

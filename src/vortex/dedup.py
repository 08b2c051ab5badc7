"""
Deduplicator / Sorter — удаление близких уровней и сортировка

Два уровня считаются одинаковыми, если
    |Δprice| < EPS_DEDUP_PRICE  И  |Δtime| < EPS_DEDUP_TIME.
Кандидаты обходятся в порядке генерации, каждый сравнивается со всеми
уже принятыми (first-seen-wins, O(n²)). Затем стабильная сортировка
по цене по убыванию: при равной цене сохраняется порядок принятия.
"""

from collections.abc import Iterable

from src.core.domain.result import VortexResult
from src.core.math.numerical_safeguards import (
    EPS_DEDUP_PRICE,
    EPS_DEDUP_TIME,
    within_tolerance,
)


def is_duplicate_level(first: VortexResult, second: VortexResult) -> bool:
    """Совпадение уровней в пределах толерантности по цене и времени."""
    return within_tolerance(first.price, second.price, EPS_DEDUP_PRICE) and within_tolerance(
        first.time, second.time, EPS_DEDUP_TIME
    )


def deduplicate_results(candidates: Iterable[VortexResult]) -> list[VortexResult]:
    """
    Удаление близких уровней, первый встреченный сохраняется.

    Args:
        candidates: Уровни в порядке генерации

    Returns:
        Уникальные уровни в порядке принятия
    """
    accepted: list[VortexResult] = []

    for candidate in candidates:
        if any(is_duplicate_level(existing, candidate) for existing in accepted):
            continue
        accepted.append(candidate)

    return accepted


def sort_by_price_desc(results: Iterable[VortexResult]) -> list[VortexResult]:
    """Стабильная сортировка по цене по убыванию."""
    # sorted() стабилен и с reverse=True сохраняет порядок равных элементов
    return sorted(results, key=lambda r: r.price, reverse=True)


def deduplicate_and_sort(candidates: Iterable[VortexResult]) -> list[VortexResult]:
    """
    Дедупликация, затем сортировка по цене (desc).

    Args:
        candidates: Уровни в порядке генерации

    Returns:
        Итоговая последовательность уровней
    """
    return sort_by_price_desc(deduplicate_results(candidates))

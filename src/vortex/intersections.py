"""
Intersection Engine — pivot-уровни и пересечения отрезков

Pivot-уровни: узлы с метками PIVOT_IDS выдаются напрямую, независимо
от результатов теста пересечений.

Пересечения: параметрический метод для каждой неупорядоченной пары
отрезков (P1, P2) и (P3, P4), включая пары из разных stack:

    denom = (x1 - x2)(y3 - y4) - (y1 - y2)(x3 - x4)
    t     = ((x1 - x3)(y3 - y4) - (y1 - y3)(x3 - x4)) / denom
    u     = -((x1 - x2)(y1 - y3) - (y1 - y2)(x1 - x3)) / denom

|denom| < EPS_DENOM → отрезки считаются параллельными и пропускаются.
Пересечение принимается только при t ∈ [0, 1] и u ∈ [0, 1]
(пересечение отрезков, не бесконечных прямых). Точка: P1 + t (P2 - P1).

Полный перебор O(n²): число отрезков ограничено 27, пар ≤ 351.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional

from src.core.domain.node import Node
from src.core.domain.result import ResultKind, VortexResult
from src.core.domain.segment import Segment
from src.core.math.numerical_safeguards import EPS_DENOM, in_unit_interval, is_near_zero
from src.vortex.geometry import PIVOT_IDS


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass(frozen=True)
class SegmentIntersection:
    """Точка пересечения двух отрезков с параметрами t, u."""

    time: float
    price: float
    t: float  # Параметр на первом отрезке
    u: float  # Параметр на втором отрезке


# =============================================================================
# PIVOTS
# =============================================================================


def pivot_origin(node_id: int, stack_offset: int) -> str:
    """Описание pivot-уровня, например 'Node 1 Pivot (S:0)'."""
    return f"Node {node_id} Pivot (S:{stack_offset})"


def pivot_results(
    nodes: Mapping[int, Node],
    stack_offset: int,
    pivot_ids: Sequence[int] = PIVOT_IDS,
) -> list[VortexResult]:
    """
    Pivot-уровни stack в порядке pivot_ids.

    Args:
        nodes: Узлы stack
        stack_offset: Смещение stack
        pivot_ids: Метки pivot-узлов

    Returns:
        Уровни для меток, присутствующих в nodes
    """
    results: list[VortexResult] = []

    for node_id in pivot_ids:
        node = nodes.get(node_id)
        if node is None:
            continue
        results.append(
            VortexResult(
                price=node.price,
                time=node.time,
                origin=pivot_origin(node_id, stack_offset),
                kind=ResultKind.PIVOT,
            )
        )

    return results


# =============================================================================
# INTERSECTIONS
# =============================================================================


def intersect_segments(
    first: Segment,
    second: Segment,
    eps: float = EPS_DENOM,
) -> Optional[SegmentIntersection]:
    """
    Пересечение двух отрезков.

    Args:
        first: Отрезок (P1, P2)
        second: Отрезок (P3, P4)
        eps: Порог вырожденного знаменателя

    Returns:
        SegmentIntersection или None (параллельны / пересечение вне отрезков)
    """
    x1, y1, x2, y2 = first.x1, first.y1, first.x2, first.y2
    x3, y3, x4, y4 = second.x1, second.y1, second.x2, second.y2

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if is_near_zero(denom, eps):
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if not (in_unit_interval(t) and in_unit_interval(u)):
        return None

    time_value, price_value = first.point_at(t)
    return SegmentIntersection(time=time_value, price=price_value, t=t, u=u)


def find_intersections(segments: Sequence[Segment]) -> list[VortexResult]:
    """
    Пересечения всех неупорядоченных пар отрезков.

    Порядок результатов — порядок перебора пар (i, j), i < j.

    Args:
        segments: Отрезки всех stack (stack -1, 0, +1; circuit, затем flux)

    Returns:
        Уровни-пересечения
    """
    results: list[VortexResult] = []

    for i, first in enumerate(segments):
        for second in segments[i + 1:]:
            hit = intersect_segments(first, second)
            if hit is None:
                continue
            results.append(
                VortexResult(
                    price=hit.price,
                    time=hit.time,
                    origin=f"{first.name} x {second.name}",
                    kind=ResultKind.INTERSECTION,
                )
            )

    return results

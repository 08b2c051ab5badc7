"""
Vortex Engine — вычисление pivot-уровней и пересечений

Поток данных:
1. Для каждого stack (-1, 0, +1):
   - узлы Rodin-проекции вокруг mid + offset * range
   - pivot-уровни (метки 1, 4, 5, 8)
   - отрезки doubling circuit, затем flux pattern
2. Тест пересечений один раз по отрезкам всех stack
3. Дедупликация и сортировка по цене (desc) один раз по всем кандидатам

Порядок кандидатов: pivot-уровни всех stack (в порядке stack),
затем пересечения в порядке перебора пар.

Перевёрнутый диапазон (high < low) вычисляется как есть: радиус
отрицательный, геометрия зеркальная. NaN/Inf отклоняются.
"""

import logging

from src.core.domain.result import VortexMatrix, VortexResult
from src.core.domain.segment import Segment
from src.core.math.numerical_safeguards import is_valid_float
from src.vortex.dedup import deduplicate_and_sort
from src.vortex.geometry import VORTEX_GEOMETRY, VortexGeometry
from src.vortex.intersections import find_intersections, pivot_results
from src.vortex.lines import build_stack_segments
from src.vortex.nodes import generate_stack_nodes, stack_mid_price

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRangeError(ValueError):
    """
    Границы диапазона цены не являются конечными числами (NaN/Inf).

    Без этой проверки NaN распространился бы во все уровни.
    """

    pass


# =============================================================================
# ENGINE
# =============================================================================


class VortexEngine:
    """
    Vortex Matrix: pivot-уровни и пересечения отрезков для диапазона цены.

    Состояние между вызовами не хранится; geometry — неизменяемая таблица.
    """

    def __init__(self, geometry: VortexGeometry = VORTEX_GEOMETRY):
        self.geometry = geometry

    def collect_candidates(self, price_high: float, price_low: float) -> list[VortexResult]:
        """
        Все кандидаты до дедупликации в порядке генерации.

        Args:
            price_high: Верхняя граница диапазона
            price_low: Нижняя граница диапазона

        Returns:
            Pivot-уровни всех stack, затем пересечения

        Raises:
            InvalidRangeError: Если граница NaN/Inf
        """
        self._validate_range(price_high, price_low)

        price_midpoint = (price_high + price_low) / 2
        price_radius = (price_high - price_low) / 2
        price_range = price_high - price_low

        candidates: list[VortexResult] = []
        segments: list[Segment] = []

        for stack_offset in self.geometry.stack_offsets:
            mid_price = stack_mid_price(price_midpoint, price_range, stack_offset)
            nodes = generate_stack_nodes(mid_price, price_radius, self.geometry)

            candidates.extend(pivot_results(nodes, stack_offset, self.geometry.pivot_ids))
            segments.extend(build_stack_segments(nodes, stack_offset, self.geometry))

            logger.debug(
                "Stack %+d: mid=%s, nodes=%d, segments so far=%d",
                stack_offset, mid_price, len(nodes), len(segments),
            )

        intersections = find_intersections(segments)
        candidates.extend(intersections)

        logger.debug(
            "Collected %d candidates (%d intersections from %d segments)",
            len(candidates), len(intersections), len(segments),
        )
        return candidates

    def calculate(self, price_high: float, price_low: float) -> list[VortexResult]:
        """
        Уникальные уровни, отсортированные по цене (desc).

        Args:
            price_high: Верхняя граница диапазона
            price_low: Нижняя граница диапазона

        Returns:
            Итоговая последовательность уровней

        Raises:
            InvalidRangeError: Если граница NaN/Inf
        """
        candidates = self.collect_candidates(price_high, price_low)
        results = deduplicate_and_sort(candidates)

        logger.debug("Kept %d of %d candidates after dedup", len(results), len(candidates))
        return results

    def calculate_matrix(self, price_high: float, price_low: float) -> VortexMatrix:
        """Итоговые уровни вместе с исходными границами."""
        results = self.calculate(price_high, price_low)
        return VortexMatrix(price_high=price_high, price_low=price_low, results=tuple(results))

    @staticmethod
    def _validate_range(price_high: float, price_low: float) -> None:
        if not is_valid_float(price_high) or not is_valid_float(price_low):
            raise InvalidRangeError(
                f"price_high and price_low must be finite, got {price_high}, {price_low}"
            )

        if price_high < price_low:
            logger.warning(
                "price_high %s < price_low %s: computing with inverted radius",
                price_high, price_low,
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def compute(price_high: float, price_low: float) -> list[VortexResult]:
    """
    Уникальные pivot-уровни и пересечения для диапазона цены.

    Args:
        price_high: Верхняя граница диапазона
        price_low: Нижняя граница диапазона

    Returns:
        Уровни, отсортированные по цене (desc)

    Raises:
        InvalidRangeError: Если граница NaN/Inf
    """
    return VortexEngine().calculate(price_high, price_low)


def compute_matrix(price_high: float, price_low: float) -> VortexMatrix:
    """
    То же, что compute(), в конверте VortexMatrix (для отчёта и JSON).

    Raises:
        InvalidRangeError: Если граница NaN/Inf
    """
    return VortexEngine().calculate_matrix(price_high, price_low)

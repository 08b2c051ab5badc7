"""
Тесты для Vortex Engine (сквозное вычисление)

Проверяет:
1. Детерминизм (для диапазонов разного масштаба и знака)
2. Наличие всех 12 pivot-уровней или их слияние дедупликацией
3. Инвариант сортировки (price desc)
4. Инвариант дедупликации
5. Границы пересечений (t, u ∈ [0, 1])
6. Соответствие вывода контракту vortex_matrix
7. Конкретный сценарий 1.085 / 1.08
8. Вырожденный диапазон (high == low)
9. Перевёрнутый диапазон и невалидные границы
"""

import logging
import math

import pytest

from src.core.contracts import dump_vortex_matrix
from src.core.domain import ResultKind, Segment, VortexMatrix
from src.vortex.engine import InvalidRangeError, VortexEngine, compute, compute_matrix
from src.vortex.geometry import STACK_OFFSETS
from src.vortex.intersections import intersect_segments
from src.vortex.lines import build_stack_segments
from src.vortex.nodes import generate_stack_nodes, stack_mid_price

PRICE_HIGH = 1.085
PRICE_LOW = 1.08

# Диапазоны разного масштаба и знака; последний настолько узкий, что
# соседние pivot-уровни одного stack совпадают в пределах 1e-4
WIDE_RANGES = [
    (1.085, 1.08),
    (100.0, 50.0),
    (65000.5, 61234.25),
    (-1.0, -2.5),
]
RANGES = WIDE_RANGES + [(1e-6, 0.0)]


def all_segments(price_high: float, price_low: float) -> list[Segment]:
    """Отрезки всех stack, построенные так же, как в движке."""
    midpoint = (price_high + price_low) / 2
    radius = (price_high - price_low) / 2
    price_range = price_high - price_low

    segments: list[Segment] = []
    for offset in STACK_OFFSETS:
        nodes = generate_stack_nodes(stack_mid_price(midpoint, price_range, offset), radius)
        segments.extend(build_stack_segments(nodes, offset))
    return segments


@pytest.fixture
def results():
    return compute(PRICE_HIGH, PRICE_LOW)


@pytest.fixture(params=RANGES, ids=lambda r: f"{r[0]}-{r[1]}")
def price_range(request) -> tuple[float, float]:
    return request.param


@pytest.fixture
def range_results(price_range):
    return compute(*price_range)


# =============================================================================
# СВОЙСТВА РЕЗУЛЬТАТА
# =============================================================================


class TestComputeProperties:
    """Инварианты итоговой последовательности для любых конечных границ"""

    def test_deterministic(self, price_range) -> None:
        """Одинаковые входы — одинаковые выходы (порядок и значения)"""
        assert compute(*price_range) == compute(*price_range)

    @pytest.mark.parametrize("price_high, price_low", WIDE_RANGES)
    def test_all_pivots_included(self, price_high: float, price_low: float) -> None:
        """12 pivot-уровней: 4 метки × 3 stack"""
        results = compute(price_high, price_low)
        pivot_origins = {r.origin for r in results if r.kind == ResultKind.PIVOT}
        expected = {
            f"Node {node_id} Pivot (S:{offset})"
            for offset in (-1, 0, 1)
            for node_id in (1, 4, 5, 8)
        }
        assert pivot_origins == expected

    def test_pivots_kept_or_merged(self, price_range, range_results) -> None:
        """Каждый pivot-кандидат либо в результате, либо совпал с принятым уровнем"""
        candidates = VortexEngine().collect_candidates(*price_range)

        for candidate in candidates:
            if candidate.kind != ResultKind.PIVOT or candidate in range_results:
                continue
            assert any(
                abs(candidate.price - r.price) < 1e-4 and abs(candidate.time - r.time) < 1e-2
                for r in range_results
            )

    def test_tiny_range_merges_pivots(self) -> None:
        """При радиусе ~5e-7 pivot-уровни одного времени схлопываются"""
        pivots = [r for r in compute(1e-6, 0.0) if r.kind == ResultKind.PIVOT]
        assert 0 < len(pivots) < 12

    def test_sorted_by_price_desc(self, range_results) -> None:
        """Для соседних уровней price_i >= price_{i+1}"""
        for current, following in zip(range_results, range_results[1:]):
            assert current.price >= following.price

    def test_no_near_duplicates(self, range_results) -> None:
        """Никакие два уровня не совпадают в пределах толерантности"""
        for i, first in enumerate(range_results):
            for second in range_results[i + 1:]:
                assert not (
                    abs(first.price - second.price) < 1e-4
                    and abs(first.time - second.time) < 1e-2
                )

    @pytest.mark.parametrize("price_high, price_low", WIDE_RANGES)
    def test_has_intersections(self, price_high: float, price_low: float) -> None:
        """Для ненулевого диапазона есть пересечения"""
        results = compute(price_high, price_low)
        assert any(r.kind == ResultKind.INTERSECTION for r in results)

    def test_intersections_within_segments(self, price_range, range_results) -> None:
        """Каждое пересечение лежит на обоих отрезках (t, u ∈ [0, 1])"""
        segments = {s.name: s for s in all_segments(*price_range)}

        for result in range_results:
            if result.kind != ResultKind.INTERSECTION:
                continue
            first_name, second_name = result.origin.split(" x ")
            hit = intersect_segments(segments[first_name], segments[second_name])

            assert hit is not None
            assert 0.0 <= hit.t <= 1.0
            assert 0.0 <= hit.u <= 1.0
            assert hit.price == result.price
            assert hit.time == result.time

    def test_output_matches_contract(self, price_range) -> None:
        """JSON-конверт проходит vortex_matrix для любого масштаба цены"""
        payload = dump_vortex_matrix(compute_matrix(*price_range))
        assert len(payload["results"]) == len(compute(*price_range))


# =============================================================================
# КОНКРЕТНЫЕ СЦЕНАРИИ
# =============================================================================


class TestConcreteScenario:
    """Сценарий 1.085 / 1.08: midpoint 1.0825, radius 0.0025"""

    def test_segment_count(self) -> None:
        """3 stack × (6 + 3) отрезков"""
        assert len(all_segments(PRICE_HIGH, PRICE_LOW)) == 27

    def test_top_result_is_max_candidate(self, results) -> None:
        """Первый уровень — максимальная цена среди кандидатов"""
        candidates = VortexEngine().collect_candidates(PRICE_HIGH, PRICE_LOW)

        # Кандидат-максимум мог уступить более раннему дубликату в пределах 1e-4
        assert results[0].price == pytest.approx(max(c.price for c in candidates), abs=1e-4)
        assert results[0].price == max(r.price for r in results)

    def test_top_result_bounds(self, results) -> None:
        """Верхний уровень между pivot 8 и узлом 7 верхнего stack"""
        upper_mid = 1.0825 + 0.005
        pivot_8 = upper_mid + 0.0025 * math.sin(math.radians(40))
        node_7 = upper_mid + 0.0025 * math.sin(math.radians(80))

        assert pivot_8 - 1e-12 <= results[0].price <= node_7 + 1e-12

    def test_candidates_order(self) -> None:
        """Кандидаты: сначала pivot-уровни всех stack, затем пересечения"""
        candidates = VortexEngine().collect_candidates(PRICE_HIGH, PRICE_LOW)

        assert [c.origin for c in candidates[:4]] == [
            "Node 1 Pivot (S:-1)",
            "Node 4 Pivot (S:-1)",
            "Node 5 Pivot (S:-1)",
            "Node 8 Pivot (S:-1)",
        ]
        assert all(c.kind == ResultKind.PIVOT for c in candidates[:12])
        assert all(c.kind == ResultKind.INTERSECTION for c in candidates[12:])

    def test_central_crossing(self, results) -> None:
        """Circuit 4->8 и 5->1 пересекаются на цене mid каждого stack"""
        crossing = [r for r in results if r.origin == "Circuit 4->8 (S:0) x Circuit 5->1 (S:0)"]

        assert len(crossing) == 1
        assert crossing[0].price == pytest.approx(1.0825, abs=1e-12)

    def test_pivot_values(self, results) -> None:
        """Pivot 8 stack 0: (180 + 180 cos 40°, mid + r sin 40°)"""
        pivot = next(r for r in results if r.origin == "Node 8 Pivot (S:0)")

        assert pivot.time == pytest.approx(180 + 180 * math.cos(math.radians(40)))
        assert pivot.price == pytest.approx(1.0825 + 0.0025 * math.sin(math.radians(40)))


class TestDegenerateRange:
    """high == low: все уровни на одной цене"""

    def test_zero_range_collapses(self) -> None:
        """Нет пересечений (denom = 0), pivot-уровни схлопываются до 2"""
        results = compute(1.08, 1.08)

        assert [r.origin for r in results] == ["Node 1 Pivot (S:-1)", "Node 4 Pivot (S:-1)"]
        assert all(r.price == 1.08 for r in results)

    def test_zero_range_many_candidates(self) -> None:
        """До дедупликации 12 pivot-кандидатов"""
        candidates = VortexEngine().collect_candidates(1.08, 1.08)
        assert len(candidates) == 12


class TestInvalidInput:
    """Перевёрнутый диапазон и NaN/Inf"""

    def test_reversed_range_computed_with_warning(self, caplog) -> None:
        """high < low: вычисляется как есть, с предупреждением"""
        with caplog.at_level(logging.WARNING, logger="src.vortex.engine"):
            results = compute(PRICE_LOW, PRICE_HIGH)

        assert "inverted radius" in caplog.text
        assert len([r for r in results if r.kind == ResultKind.PIVOT]) == 12
        for current, following in zip(results, results[1:]):
            assert current.price >= following.price

    @pytest.mark.parametrize(
        "price_high, price_low",
        [(float("nan"), 1.08), (1.085, float("inf")), (float("-inf"), float("nan"))],
    )
    def test_non_finite_rejected(self, price_high: float, price_low: float) -> None:
        """NaN/Inf отклоняются InvalidRangeError"""
        with pytest.raises(InvalidRangeError, match="must be finite"):
            compute(price_high, price_low)

    def test_invalid_range_is_value_error(self) -> None:
        """InvalidRangeError — подкласс ValueError"""
        with pytest.raises(ValueError):
            compute_matrix(float("nan"), 1.0)


class TestComputeMatrix:
    """Тесты для compute_matrix"""

    def test_envelope(self) -> None:
        """Конверт содержит границы и те же уровни, что compute()"""
        matrix = compute_matrix(PRICE_HIGH, PRICE_LOW)

        assert isinstance(matrix, VortexMatrix)
        assert matrix.price_high == PRICE_HIGH
        assert matrix.price_low == PRICE_LOW
        assert list(matrix.results) == compute(PRICE_HIGH, PRICE_LOW)
        assert len(matrix.pivots()) == 12

"""
Line Builder — отрезки по последовательностям обхода

Последовательность меток обходится парами (a, b), (b, c), ...;
для каждой пары, где обе метки есть в mapping узлов stack, строится
отрезок. Пары с отсутствующей меткой пропускаются без ошибки.
"""

import logging
from collections.abc import Mapping, Sequence

from src.core.domain.node import Node
from src.core.domain.segment import FlowType, Segment
from src.vortex.geometry import VORTEX_GEOMETRY, VortexGeometry

logger = logging.getLogger(__name__)


def segment_name(flow_type: FlowType, start_id: int, end_id: int, stack_offset: int) -> str:
    """Имя отрезка для трассировки, например 'Circuit 1->2 (S:-1)'."""
    return f"{flow_type.value} {start_id}->{end_id} (S:{stack_offset})"


def build_segments(
    nodes: Mapping[int, Node],
    sequence: Sequence[int],
    flow_type: FlowType,
    stack_offset: int,
) -> list[Segment]:
    """
    Построение отрезков между последовательными метками.

    Args:
        nodes: Узлы stack (метка → Node)
        sequence: Порядок обхода меток
        flow_type: Circuit/Flux (для имени и классификации)
        stack_offset: Смещение stack (для имени)

    Returns:
        Отрезки в порядке обхода
    """
    segments: list[Segment] = []

    for start_id, end_id in zip(sequence, sequence[1:]):
        start_node = nodes.get(start_id)
        end_node = nodes.get(end_id)
        if start_node is None or end_node is None:
            logger.debug(
                "Skipping %s pair %s->%s in stack %s: node missing",
                flow_type.value, start_id, end_id, stack_offset,
            )
            continue

        segments.append(
            Segment(
                name=segment_name(flow_type, start_id, end_id, stack_offset),
                x1=start_node.time,
                y1=start_node.price,
                x2=end_node.time,
                y2=end_node.price,
                flow_type=flow_type,
            )
        )

    return segments


def build_stack_segments(
    nodes: Mapping[int, Node],
    stack_offset: int,
    geometry: VortexGeometry = VORTEX_GEOMETRY,
) -> list[Segment]:
    """
    Все отрезки stack: сначала doubling circuit, затем flux pattern.

    Args:
        nodes: Узлы stack
        stack_offset: Смещение stack
        geometry: Таблица параметров проекции

    Returns:
        Отрезки circuit, за которыми следуют отрезки flux
    """
    return build_segments(
        nodes, geometry.doubling_circuit, FlowType.CIRCUIT, stack_offset
    ) + build_segments(nodes, geometry.flux_pattern, FlowType.FLUX, stack_offset)

"""
Node Generator — полярная проекция углов в узлы (time, price)

Для угла a:
    time  = time_center + time_radius * cos(a)
    upper = mid_price + price_radius * sin(a)   → primary метка
    lower = mid_price - price_radius * sin(a)   → secondary метка

Запись идёт в один mapping по метке; secondary пишется вторым и
при совпадении меток перезаписывает primary (угол 0°: обе метки 9,
sin(0) = 0, координаты совпадают).
"""

import math

from src.core.domain.node import Node
from src.vortex.geometry import VORTEX_GEOMETRY, VortexGeometry


def stack_mid_price(price_midpoint: float, price_range: float, stack_offset: int) -> float:
    """
    Середина цены для stack: midpoint + offset * range.

    Args:
        price_midpoint: (high + low) / 2
        price_range: high - low
        stack_offset: Смещение stack (-1, 0, 1)

    Returns:
        Опорная цена stack
    """
    return price_midpoint + stack_offset * price_range


def generate_stack_nodes(
    mid_price: float,
    price_radius: float,
    geometry: VortexGeometry = VORTEX_GEOMETRY,
) -> dict[int, Node]:
    """
    Генерация узлов одного stack.

    Args:
        mid_price: Опорная цена stack
        price_radius: (high - low) / 2
        geometry: Таблица параметров проекции

    Returns:
        Mapping метка → Node (last-write-wins при совпадении меток)
    """
    nodes: dict[int, Node] = {}

    for angle_index, angle_deg in enumerate(geometry.angles_deg):
        angle_rad = angle_deg * math.pi / 180
        time_value = geometry.time_center + geometry.time_radius * math.cos(angle_rad)
        upper_price = mid_price + price_radius * math.sin(angle_rad)
        lower_price = mid_price - price_radius * math.sin(angle_rad)

        primary_id = geometry.primary_digits[angle_index]
        secondary_id = geometry.secondary_digits[angle_index]

        nodes[primary_id] = Node(time=time_value, price=upper_price, id=primary_id)
        nodes[secondary_id] = Node(time=time_value, price=lower_price, id=secondary_id)

    return nodes

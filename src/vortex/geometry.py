"""
Vortex Geometry — фиксированные параметры Rodin-проекции

Углы, метки узлов, последовательности обхода и смещения stack.
Параметры доменные и в рантайме не меняются: единственный экземпляр
VORTEX_GEOMETRY передаётся стадиям вычисления как неизменяемая таблица.

Схема метка → угол:
    угол      0°   40°   80°   120°   160°
    primary   9    8     7     6      5      (upper: mid + r*sin)
    secondary 9    1     2     3      4      (lower: mid - r*sin)
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Центр и радиус оси времени (минуты): time ∈ [0, 360]
TIME_CENTER: Final[float] = 180.0
TIME_RADIUS: Final[float] = 180.0

# Углы Rodin coil (градусы)
RODIN_ANGLES_DEG: Final[tuple[int, ...]] = (0, 40, 80, 120, 160)

# Метки узлов, выровненные по индексу с RODIN_ANGLES_DEG
PRIMARY_DIGITS: Final[tuple[int, ...]] = (9, 8, 7, 6, 5)
SECONDARY_DIGITS: Final[tuple[int, ...]] = (9, 1, 2, 3, 4)

# Последовательности обхода (замкнутые)
DOUBLING_CIRCUIT: Final[tuple[int, ...]] = (1, 2, 4, 8, 7, 5, 1)
FLUX_PATTERN: Final[tuple[int, ...]] = (3, 6, 9, 3)

# Узлы, всегда выдаваемые как pivot-уровни
PIVOT_IDS: Final[tuple[int, ...]] = (1, 4, 5, 8)

# Смещения stack в единицах ширины диапазона
STACK_OFFSETS: Final[tuple[int, ...]] = (-1, 0, 1)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class VortexGeometry:
    """Неизменяемая таблица параметров проекции."""

    time_center: float = TIME_CENTER
    time_radius: float = TIME_RADIUS
    angles_deg: tuple[int, ...] = RODIN_ANGLES_DEG
    primary_digits: tuple[int, ...] = PRIMARY_DIGITS
    secondary_digits: tuple[int, ...] = SECONDARY_DIGITS
    doubling_circuit: tuple[int, ...] = DOUBLING_CIRCUIT
    flux_pattern: tuple[int, ...] = FLUX_PATTERN
    pivot_ids: tuple[int, ...] = PIVOT_IDS
    stack_offsets: tuple[int, ...] = STACK_OFFSETS

    def __post_init__(self):
        if not (len(self.angles_deg) == len(self.primary_digits) == len(self.secondary_digits)):
            raise ValueError(
                "angles_deg, primary_digits and secondary_digits must have equal length, "
                f"got {len(self.angles_deg)}, {len(self.primary_digits)}, "
                f"{len(self.secondary_digits)}"
            )


VORTEX_GEOMETRY: Final[VortexGeometry] = VortexGeometry()

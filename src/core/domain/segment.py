"""
Segment — отрезок между двумя узлами одного stack

Immutable Pydantic модель. Отрезки всех трёх stack собираются в одну
коллекцию и живут до конца вычисления (тест пересечений идёт по всем парам).
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class FlowType(str, Enum):
    """Тип последовательности, которой построен отрезок"""

    CIRCUIT = "Circuit"
    FLUX = "Flux"


# =============================================================================
# SEGMENT MODEL
# =============================================================================


class Segment(BaseModel):
    """
    Отрезок (x1, y1) → (x2, y2), где x — время, y — цена.

    Имя служит только для трассировки происхождения результата и
    в сравнениях не участвует.
    """

    name: str = Field(..., min_length=1, description="Описательное имя отрезка")
    x1: float = Field(..., description="Время начала")
    y1: float = Field(..., description="Цена начала")
    x2: float = Field(..., description="Время конца")
    y2: float = Field(..., description="Цена конца")
    flow_type: FlowType = Field(..., description="Circuit/Flux")

    model_config = {"frozen": True}

    @property
    def start(self) -> tuple[float, float]:
        """Начальная точка (time, price)."""
        return self.x1, self.y1

    @property
    def end(self) -> tuple[float, float]:
        """Конечная точка (time, price)."""
        return self.x2, self.y2

    def point_at(self, t: float) -> tuple[float, float]:
        """
        Точка на отрезке по параметру t: P1 + t * (P2 - P1).

        Args:
            t: Параметр (0 → start, 1 → end)

        Returns:
            (time, price)
        """
        return (
            self.x1 + t * (self.x2 - self.x1),
            self.y1 + t * (self.y2 - self.y1),
        )

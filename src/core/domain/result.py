"""
VortexResult — ценовой уровень Vortex Matrix

Immutable Pydantic модели результата:
- VortexResult: один уровень (price, time, origin) с типом происхождения
- VortexMatrix: конверт с исходными границами цены и итоговым списком

VortexMatrix.model_dump(mode="json") соответствует контракту
contracts/schema/vortex_matrix.json.
"""

from enum import Enum

from pydantic import BaseModel, Field

from src.core.math.digital_root import digital_root


# =============================================================================
# ENUMS
# =============================================================================


class ResultKind(str, Enum):
    """Происхождение уровня"""

    PIVOT = "pivot"
    INTERSECTION = "intersection"


# =============================================================================
# RESULT MODELS
# =============================================================================


class VortexResult(BaseModel):
    """
    Ценовой уровень: pivot-узел или точка пересечения двух отрезков.
    """

    price: float = Field(..., description="Цена уровня")
    time: float = Field(..., description="Время уровня (минуты)")
    origin: str = Field(..., min_length=1, description="Описание происхождения")
    kind: ResultKind = Field(..., description="pivot/intersection")

    model_config = {"frozen": True}

    def price_root(self) -> int:
        """Цифровой корень цены уровня."""
        return digital_root(self.price)


class VortexMatrix(BaseModel):
    """
    Итог вычисления: входные границы и уровни, отсортированные по цене (desc).
    """

    price_high: float = Field(..., description="Верхняя граница диапазона")
    price_low: float = Field(..., description="Нижняя граница диапазона")
    results: tuple[VortexResult, ...] = Field(..., description="Уникальные уровни")

    model_config = {"frozen": True}

    def pivots(self) -> list[VortexResult]:
        """Уровни pivot-происхождения в порядке итоговой сортировки."""
        return [r for r in self.results if r.kind == ResultKind.PIVOT]

    def intersections(self) -> list[VortexResult]:
        """Уровни-пересечения в порядке итоговой сортировки."""
        return [r for r in self.results if r.kind == ResultKind.INTERSECTION]

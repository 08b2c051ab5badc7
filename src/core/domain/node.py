"""
Node — узел Rodin-проекции

Immutable Pydantic модель точки (time, price) с цифровой меткой 1..9.
Узлы создаются заново для каждого stack и живут только до построения
отрезков этого stack.
"""

from pydantic import BaseModel, Field


class Node(BaseModel):
    """
    Узел проекции: координаты (time, price) и метка.

    Метки берутся из двух фиксированных наборов (primary/secondary),
    поэтому в пределах stack метка может повторяться; хранение в
    mapping по id даёт last-write-wins.
    """

    time: float = Field(..., description="Координата времени (минуты, 0..360)")
    price: float = Field(..., description="Координата цены")
    id: int = Field(..., ge=1, le=9, description="Цифровая метка узла")

    model_config = {"frozen": True}

"""
Domain models and value objects.

Contains the fundamental geometry entities: Node, Segment, VortexResult, VortexMatrix.
"""

from src.core.domain.node import Node
from src.core.domain.result import ResultKind, VortexMatrix, VortexResult
from src.core.domain.segment import FlowType, Segment

__all__ = [
    # Node model
    "Node",
    # Segment model
    "Segment",
    "FlowType",
    # Result models
    "VortexResult",
    "VortexMatrix",
    "ResultKind",
]

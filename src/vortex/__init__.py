"""
Vortex Matrix — pivot-уровни и пересечения Rodin-проекции диапазона цены.
"""

from src.vortex.dedup import (
    deduplicate_and_sort,
    deduplicate_results,
    is_duplicate_level,
    sort_by_price_desc,
)
from src.vortex.engine import (
    InvalidRangeError,
    VortexEngine,
    compute,
    compute_matrix,
)
from src.vortex.geometry import VORTEX_GEOMETRY, VortexGeometry
from src.vortex.intersections import (
    SegmentIntersection,
    find_intersections,
    intersect_segments,
    pivot_results,
)
from src.vortex.lines import build_segments, build_stack_segments, segment_name
from src.vortex.nodes import generate_stack_nodes, stack_mid_price
from src.vortex.report import format_bound, format_results, print_results

__all__ = [
    # Engine
    "InvalidRangeError",
    "VortexEngine",
    "compute",
    "compute_matrix",
    # Geometry
    "VORTEX_GEOMETRY",
    "VortexGeometry",
    # Node Generator
    "generate_stack_nodes",
    "stack_mid_price",
    # Line Builder
    "build_segments",
    "build_stack_segments",
    "segment_name",
    # Intersection Engine
    "SegmentIntersection",
    "find_intersections",
    "intersect_segments",
    "pivot_results",
    # Deduplicator / Sorter
    "deduplicate_and_sort",
    "deduplicate_results",
    "is_duplicate_level",
    "sort_by_price_desc",
    # Report
    "format_bound",
    "format_results",
    "print_results",
]

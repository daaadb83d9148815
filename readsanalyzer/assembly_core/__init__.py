"""
ReadsAnalyzer v0.1.0

Assembly core: overlap graph construction, layout and stitching.

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .overlap_graph_module import (
    OverlapGraph,
    ReadOverlap,
    get_overlap_length,
)

__all__ = [
    "OverlapGraph",
    "ReadOverlap",
    "get_overlap_length",
]

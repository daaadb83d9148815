"""
Utilities module for ReadsAnalyzer.

This module provides the analysis driver and logging setup.
"""

from .pipeline import (
    ReadsAnalyzer,
    AnalysisResult,
    configure_logging,
)

__all__ = [
    "ReadsAnalyzer",
    "AnalysisResult",
    "configure_logging",
]

"""Naming diagnostics."""

from .part_analyzer import PartAnalyzer, analyze_part

__all__ = [
    "PartAnalyzer",
    "analyze_part",
]

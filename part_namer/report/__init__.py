"""Report rendering for Part Namer."""

from .analysis_report import AnalysisReport, format_human, format_json, generate_report

__all__ = [
    "AnalysisReport",
    "format_human",
    "format_json",
    "generate_report",
]

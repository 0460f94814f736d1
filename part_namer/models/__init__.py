"""Data models for Part Namer."""

from .product import ProductRecord, Specification
from .analysis import PartAnalysis, SpecAnalysis, NameComponent

__all__ = [
    "ProductRecord",
    "Specification",
    "PartAnalysis",
    "SpecAnalysis",
    "NameComponent",
]

"""Naming templates, one builder per product family."""

from .base import NamingTemplate, build_family, freeze
from .registry import TemplateRegistry, build_registry, get_registry

__all__ = [
    "NamingTemplate",
    "build_family",
    "freeze",
    "TemplateRegistry",
    "build_registry",
    "get_registry",
]

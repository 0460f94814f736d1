"""
Template Registry

Read-only mapping from category key to NamingTemplate. The registry is
assembled once per process from the family builders and shared by every
generator and analyzer.

Usage:
    registry = get_registry()
    template = registry.lookup("button_head_screw")
"""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional

from .base import NamingTemplate
from .bearings import build_bearing_templates
from .cable_holders import build_cable_holder_templates
from .latches import build_latch_templates
from .nuts import build_nut_templates
from .pins import build_pin_templates, build_shaft_collar_templates
from .pulleys import build_pulley_templates
from .screws import build_screw_templates
from .spacers import build_spacer_templates
from .standoffs import build_standoff_templates
from .washers import build_washer_templates

logger = logging.getLogger(__name__)

FAMILY_BUILDERS: List[Callable[[], Dict[str, NamingTemplate]]] = [
    build_screw_templates,
    build_washer_templates,
    build_nut_templates,
    build_standoff_templates,
    build_spacer_templates,
    build_pin_templates,
    build_shaft_collar_templates,
    build_bearing_templates,
    build_pulley_templates,
    build_latch_templates,
    build_cable_holder_templates,
]


class TemplateRegistry:
    """Immutable category key -> NamingTemplate lookup."""

    def __init__(self, templates: Mapping[str, NamingTemplate]):
        self._templates = MappingProxyType(dict(templates))

    def lookup(self, category_key: str) -> Optional[NamingTemplate]:
        """Template for a category key, or None when the key is not registered."""
        return self._templates.get(category_key)

    def keys(self) -> List[str]:
        return sorted(self._templates)

    def families(self) -> List[str]:
        """Distinct product families covered by the registry."""
        return sorted({t.family for t in self._templates.values()})

    @property
    def templates(self) -> Mapping[str, NamingTemplate]:
        return self._templates

    def __contains__(self, category_key: object) -> bool:
        return category_key in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)


def build_registry() -> TemplateRegistry:
    """
    Run every family builder and collect the results.

    Raises:
        ValueError: If two families register the same category key
    """
    templates: Dict[str, NamingTemplate] = {}
    for builder in FAMILY_BUILDERS:
        for key, template in builder().items():
            if key in templates:
                raise ValueError(f"Category key {key!r} registered twice")
            templates[key] = template

    logger.debug("Built template registry with %d templates", len(templates))
    return TemplateRegistry(templates)


@lru_cache(maxsize=None)
def get_registry() -> TemplateRegistry:
    """Process-wide registry, built on first use."""
    return build_registry()

"""Naming template definition."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

EMPTY_ABBREVIATIONS: Mapping[str, str] = MappingProxyType({})

# Bearing prefixes whose names include the filler ("MDS-Filled Nylon Plastic")
FILLER_BEARING_PREFIXES = ("FSB", "SB", "BB")


@dataclass(frozen=True)
class NamingTemplate:
    """
    How to build a name for one product category.

    Attributes:
        prefix: Short category code, first token of every name (e.g. "BHS")
        key_specs: Logical field names; their order is the token order
        spec_aliases: Alternate catalog attribute names per logical field
        spec_abbreviations: Exact value -> token lookup, shared per family
        family: Product family ("screw", "washer", "bearing", ...)
    """
    prefix: str
    key_specs: Tuple[str, ...]
    spec_aliases: Optional[Mapping[str, Tuple[str, ...]]] = None
    spec_abbreviations: Mapping[str, str] = field(default_factory=lambda: EMPTY_ABBREVIATIONS)
    family: str = ""

    def __post_init__(self):
        if not self.prefix:
            raise ValueError("NamingTemplate prefix must not be empty")
        object.__setattr__(self, "key_specs", tuple(self.key_specs))
        if not self.key_specs:
            raise ValueError(f"NamingTemplate {self.prefix!r} needs at least one key spec")
        if self.spec_aliases is not None and not isinstance(self.spec_aliases, MappingProxyType):
            frozen = {k: tuple(v) for k, v in self.spec_aliases.items()}
            object.__setattr__(self, "spec_aliases", MappingProxyType(frozen))
        if not isinstance(self.spec_abbreviations, MappingProxyType):
            object.__setattr__(
                self, "spec_abbreviations", MappingProxyType(dict(self.spec_abbreviations))
            )

    @property
    def is_washer(self) -> bool:
        return self.family == "washer"

    @property
    def is_bearing(self) -> bool:
        return self.family == "bearing"

    @property
    def takes_filler(self) -> bool:
        """Plain and ball bearings whose material may carry a filler."""
        return self.is_bearing and self.prefix in FILLER_BEARING_PREFIXES

    def aliases_for(self, field_name: str) -> Tuple[str, ...]:
        """Alias list declared for a logical field (empty if none)."""
        if not self.spec_aliases:
            return ()
        return self.spec_aliases.get(field_name, ())

    def abbreviate(self, value: str) -> Optional[str]:
        """Dictionary token for an exact value, or None."""
        return self.spec_abbreviations.get(value)

    def accepts_attribute(self, attribute: str) -> bool:
        """Whether a catalog attribute feeds any field, directly or via alias."""
        name = attribute.lower()
        for key in self.key_specs:
            if key.lower() == name:
                return True
            if any(alias.lower() == name for alias in self.aliases_for(key)):
                return True
        return False


def freeze(abbreviations: Dict[str, str]) -> Mapping[str, str]:
    """Wrap a family's dictionary so every template shares one read-only instance."""
    return MappingProxyType(abbreviations)


def build_family(
    family: str,
    abbreviations: Mapping[str, str],
    entries: Iterable[Tuple[str, str, Sequence[str]]],
    aliases: Optional[Mapping[str, Sequence[str]]] = None,
) -> Dict[str, NamingTemplate]:
    """
    Emit one template per (category_key, prefix, key_specs) entry.

    All templates reference the same ``abbreviations`` object.
    """
    frozen_aliases = None
    if aliases:
        frozen_aliases = MappingProxyType({k: tuple(v) for k, v in aliases.items()})

    templates = {}
    for category_key, prefix, key_specs in entries:
        templates[category_key] = NamingTemplate(
            prefix=prefix,
            key_specs=tuple(key_specs),
            spec_aliases=frozen_aliases,
            spec_abbreviations=abbreviations,
            family=family,
        )
    return templates

"""Part analysis result structure.

The PartAnalysis explains how a generated name came about:
- Which specifications fed the name (directly or through an alias)
- Which template fields had no matching specification
- Which specifications the template ignores
- A token-by-token breakdown of the name (best effort)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SpecAnalysis:
    """
    How one product specification relates to the template.

    Attributes:
        name: Specification attribute name
        values: All values listed for the attribute
        used_in_name: Whether a template field resolved to this specification
        processed_value: Token this specification contributed, if any
        source: "direct", "alias" or "unmapped"
    """
    name: str
    values: List[str] = field(default_factory=list)
    used_in_name: bool = False
    processed_value: Optional[str] = None
    source: str = "unmapped"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "values": list(self.values),
            "usedInName": self.used_in_name,
            "processedValue": self.processed_value,
            "source": self.source,
        }


@dataclass
class NameComponent:
    """
    One '-' separated token of the generated name.

    Pairing tokens with template fields is positional, so it drifts as soon
    as a field is skipped. Treat ``source`` as a best-effort label.
    """
    component: str
    source: str
    original_value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "component": self.component,
            "source": self.source,
            "originalValue": self.original_value,
        }


@dataclass
class PartAnalysis:
    """
    Diagnostic report for one product.

    Attributes:
        part_number: Vendor part number
        category: Catalog product category text
        detected_type: Category key chosen by the detector
        family_description: Family text used for detection
        product_description: Detail description
        specifications: One SpecAnalysis per product specification
        missing_specs: Template fields with no matching specification
        unmapped_specs: Product specifications the template does not use
        template_used: Category key of the template, None if no template
        template_prefix: Name prefix of the template
        template_specs: Template fields in name order
        spec_aliases: Alias lists declared by the template
        generated_name: Canonical generated name
        suggested_name: Name with a guessed finish appended, if applicable
        name_components: Best-effort token breakdown
        suggestions: Free-text improvement hints
    """
    part_number: str = ""
    category: str = ""
    detected_type: str = ""
    family_description: str = ""
    product_description: str = ""
    specifications: List[SpecAnalysis] = field(default_factory=list)
    missing_specs: List[str] = field(default_factory=list)
    unmapped_specs: List[str] = field(default_factory=list)
    template_used: Optional[str] = None
    template_prefix: Optional[str] = None
    template_specs: List[str] = field(default_factory=list)
    spec_aliases: Dict[str, List[str]] = field(default_factory=dict)
    generated_name: str = ""
    suggested_name: Optional[str] = None
    name_components: List[NameComponent] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    @property
    def has_template(self) -> bool:
        """Whether a naming template was found for the detected type."""
        return self.template_used is not None

    @property
    def used_count(self) -> int:
        """Number of product specifications that fed the name."""
        return sum(1 for s in self.specifications if s.used_in_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "partNumber": self.part_number,
            "category": self.category,
            "detectedType": self.detected_type,
            "familyDescription": self.family_description,
            "productDescription": self.product_description,
            "specifications": [s.to_dict() for s in self.specifications],
            "missingSpecs": list(self.missing_specs),
            "unmappedSpecs": list(self.unmapped_specs),
            "templateUsed": self.template_used,
            "templatePrefix": self.template_prefix,
            "templateSpecs": list(self.template_specs),
            "specAliases": {k: list(v) for k, v in self.spec_aliases.items()},
            "generatedName": self.generated_name,
            "suggestedName": self.suggested_name,
            "nameComponents": [c.to_dict() for c in self.name_components],
            "nameComponentsBestEffort": True,
            "suggestions": list(self.suggestions),
        }

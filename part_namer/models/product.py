"""Catalog product record model.

A ProductRecord is the only input the naming engine accepts. It is built by
whatever talks to the catalog service; ``from_dict`` accepts the catalog's
own key names so a saved product response can be fed straight in.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class Specification:
    """
    One named catalog attribute.

    Attributes:
        attribute: Attribute name as the catalog labels it (e.g. "Thread Size")
        values: Attribute values; only the first one is used for naming
    """
    attribute: str
    values: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def first_value(self) -> str:
        """First value, or an empty string when the attribute has none."""
        return self.values[0] if self.values else ""

    def matches(self, name: str) -> bool:
        """Case-insensitive comparison against an attribute name."""
        return self.attribute.lower() == name.lower()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the catalog's key layout."""
        return {"Attribute": self.attribute, "Values": list(self.values)}


@dataclass(frozen=True)
class ProductRecord:
    """
    Product details as returned by the catalog.

    Attributes:
        part_number: Vendor part number, also the fallback name suffix
        detail_description: Long free-text description
        family_description: Family text; drives classification
        product_category: Coarse category, secondary classification signal
        product_status: Catalog status text (not used for naming)
        specifications: Ordered specification attributes (may be empty)
    """
    part_number: str
    detail_description: str = ""
    family_description: str = ""
    product_category: str = ""
    product_status: str = ""
    specifications: Tuple[Specification, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "specifications", tuple(self.specifications))

    def find_spec(self, attribute: str) -> Optional[Specification]:
        """Return the first specification whose attribute matches (case-insensitive)."""
        for spec in self.specifications:
            if spec.matches(attribute):
                return spec
        return None

    def spec_value(self, attribute: str) -> Optional[str]:
        """First value of the named specification, or None if it is absent."""
        spec = self.find_spec(attribute)
        if spec is None or not spec.values:
            return None
        return spec.values[0]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductRecord":
        """
        Build a record from a catalog product document.

        Args:
            data: Dict using the catalog key names (PartNumber,
                DetailDescription, FamilyDescription, ProductCategory,
                ProductStatus, Specifications[{Attribute, Values}])

        Returns:
            ProductRecord; missing keys become empty strings / no specs
        """
        return cls(
            part_number=str(data.get("PartNumber") or ""),
            detail_description=str(data.get("DetailDescription") or ""),
            family_description=str(data.get("FamilyDescription") or ""),
            product_category=str(data.get("ProductCategory") or ""),
            product_status=str(data.get("ProductStatus") or ""),
            specifications=_parse_specifications(data.get("Specifications") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the catalog's key layout."""
        return {
            "PartNumber": self.part_number,
            "DetailDescription": self.detail_description,
            "FamilyDescription": self.family_description,
            "ProductCategory": self.product_category,
            "ProductStatus": self.product_status,
            "Specifications": [s.to_dict() for s in self.specifications],
        }


def _parse_specifications(raw: Iterable[Dict[str, Any]]) -> Tuple[Specification, ...]:
    specs = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        values = item.get("Values") or []
        if isinstance(values, str):
            values = [values]
        specs.append(Specification(
            attribute=str(item.get("Attribute") or ""),
            values=tuple(str(v) for v in values),
        ))
    return tuple(specs)

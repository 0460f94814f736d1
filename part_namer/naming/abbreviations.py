"""Material, finish and generic value abbreviation."""

import re
from typing import Optional, Tuple

from ..models.product import ProductRecord


# Finish phrases the catalog sometimes folds into the material text
# ("Zinc Plated Steel"). Trailing space is part of the match.
FINISH_PREFIXES = (
    "Black-Oxide ",
    "Black Oxide ",
    "Zinc Plated ",
    "Zinc-Plated ",
    "Zinc Yellow-Chromate Plated ",
    "Zinc Yellow Chromate Plated ",
    "Galvanized ",
    "Cadmium Plated ",
    "Cadmium-Plated ",
    "Nickel Plated ",
    "Nickel-Plated ",
    "Chrome Plated ",
    "Chrome-Plated ",
    "Passivated ",
    "Plain ",
    "Unfinished ",
)

# Substring in the grade value -> upgraded material label, checked in order
STEEL_GRADES = (
    ("Grade 1", "Grade 1 Steel"),
    ("Grade 2", "Grade 2 Steel"),
    ("Grade 5", "Grade 5 Steel"),
    ("Grade 8", "Grade 8 Steel"),
    ("8.8", "8.8 Steel"),
    ("10.9", "10.9 Steel"),
    ("12.9", "12.9 Steel"),
)

UNINFORMATIVE_FILLERS = ("", "None", "Not Specified")

_METRIC_START = re.compile(r'^M\d')
_SCREW_NUMBER = re.compile(r'^No\.\s+(.+)$')


def parse_material_and_finish(material_value: str) -> Tuple[str, Optional[str]]:
    """
    Split a finish prefix off a material value.

    Returns:
        (material, finish) - finish is None when no known prefix is present

    Example:
        parse_material_and_finish("Zinc Plated Steel")  # ("Steel", "Zinc Plated")
    """
    for prefix in FINISH_PREFIXES:
        if material_value.startswith(prefix):
            return material_value[len(prefix):], prefix.strip()
    return material_value, None


def is_grade_spec(attribute: str) -> bool:
    """Whether an attribute name carries a fastener strength grade/class."""
    name = attribute.lower()
    return "strength grade" in name or name in ("grade", "grade/class", "strength class")


def get_steel_grade_material(product: ProductRecord, original_material: str) -> str:
    """
    Upgrade a plain steel material to its strength grade, if the product has one.

    "Steel" with "Fastener Strength Grade/Class: Grade 5" becomes
    "Grade 5 Steel"; without a recognizable grade the material is unchanged.
    """
    for spec in product.specifications:
        if not is_grade_spec(spec.attribute) or not spec.values:
            continue
        grade_value = spec.values[0]
        for marker, label in STEEL_GRADES:
            if marker in grade_value:
                return label
    return original_material


def apply_filler_material(product: ProductRecord, material: str) -> str:
    """Prefix a bearing material with its filler ("MDS-Filled Nylon Plastic")."""
    filler = product.spec_value("Filler Material")
    if filler is None or filler.strip() in UNINFORMATIVE_FILLERS:
        return material
    return f"{filler}-Filled {material}"


def looks_like_thread(value: str) -> bool:
    """
    Whether a value reads as a thread or screw-size designation.

    Matches "5/16x18", "M8x1.25", "10x24", "M6" and "1/4".
    """
    if not value:
        return False
    starts_with_digit = value[0].isdigit()
    is_metric = bool(_METRIC_START.match(value))
    if 'x' in value and ('/' in value or is_metric or starts_with_digit):
        return True
    return is_metric or (starts_with_digit and '/' in value)


def abbreviate_value(value: str) -> str:
    """
    Fallback abbreviation for values missing from a template's dictionary.

    - Thread designations are kept intact, minus inch marks
    - "No. 10" becomes "10"
    - Otherwise quotes and spaces are removed; up to three characters are
      uppercased as-is, longer values are cut to four and uppercased
    """
    if looks_like_thread(value):
        return value.replace('"', '')

    screw_number = _SCREW_NUMBER.match(value)
    if screw_number:
        return screw_number.group(1)

    clean_value = value.replace('"', '').replace(' ', '')
    if len(clean_value) <= 3:
        return clean_value.upper()
    return clean_value[:4].upper()

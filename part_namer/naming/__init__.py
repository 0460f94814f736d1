"""Name assembly and value transforms for Part Namer."""

from .converters import convert_length_to_decimal, extract_thread_with_pitch
from .abbreviations import abbreviate_value, parse_material_and_finish
from .roles import FieldRole, role_for
from .generator import (
    FieldResult,
    NameGenerator,
    fallback_name,
    generate_name,
    resolve_field,
)

__all__ = [
    "convert_length_to_decimal",
    "extract_thread_with_pitch",
    "abbreviate_value",
    "parse_material_and_finish",
    "FieldRole",
    "role_for",
    "FieldResult",
    "NameGenerator",
    "fallback_name",
    "generate_name",
    "resolve_field",
]

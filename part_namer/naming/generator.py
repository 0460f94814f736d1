"""
Name Generator

Builds the short part name for a catalog product:

1. Detect the category key (classifier.category_detector)
2. Look up the category's NamingTemplate
3. Resolve each template field to a product specification, directly or
   through one of the template's aliases
4. Transform each value according to its field role and join the
   non-empty tokens behind the template prefix

Products whose category has no template get a fallback name built from the
family description and the part number.

Usage:
    from part_namer.naming import generate_name

    generate_name(product)  # "BHS-SS188-1/4x20-0.75-HEX"
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..classifier.category_detector import determine_category
from ..config import Config, default_config
from ..models.product import ProductRecord, Specification
from ..templates.base import NamingTemplate
from ..templates.registry import TemplateRegistry, get_registry
from .abbreviations import (
    abbreviate_value,
    apply_filler_material,
    get_steel_grade_material,
    parse_material_and_finish,
)
from .converters import convert_length_to_decimal, extract_thread_with_pitch
from .roles import FieldRole, role_for

logger = logging.getLogger(__name__)

SOURCE_DIRECT = "direct"
SOURCE_ALIAS = "alias"
SOURCE_EXTRACTED = "extracted"


@dataclass(frozen=True)
class FieldResult:
    """
    Outcome of one template field.

    Attributes:
        field_name: Logical field name from the template
        role: Role that selected the transform
        spec: Product specification the field resolved to (None if unresolved)
        source: "direct", "alias", "extracted" (finish taken from the material),
            or None when nothing was found
        value: Raw value that was transformed
        token: Name token, None when the field contributed nothing
    """
    field_name: str
    role: FieldRole
    spec: Optional[Specification] = None
    source: Optional[str] = None
    value: Optional[str] = None
    token: Optional[str] = None


def resolve_field(
    product: ProductRecord,
    template: NamingTemplate,
    field_name: str,
) -> Tuple[Optional[Specification], Optional[str]]:
    """
    Find the specification for a logical field.

    The field name itself is tried first, then each alias in order; all
    comparisons are case-insensitive.

    Returns:
        (specification, "direct" | "alias"), or (None, None)
    """
    spec = product.find_spec(field_name)
    if spec is not None:
        return spec, SOURCE_DIRECT

    for alias in template.aliases_for(field_name):
        spec = product.find_spec(alias)
        if spec is not None:
            return spec, SOURCE_ALIAS

    return None, None


class NameGenerator:
    """
    Generates part names from catalog products.

    Usage:
        generator = NameGenerator()
        name = generator.generate_name(product)

        # Inspect how each field was handled
        template = generator.get_template("button_head_screw")
        for result in generator.trace(product, template):
            print(result.field_name, result.token)
    """

    def __init__(self, config: Optional[Config] = None, registry: Optional[TemplateRegistry] = None):
        self.config = config or default_config
        self.registry = registry if registry is not None else get_registry()

    def get_template(self, category_key: str) -> Optional[NamingTemplate]:
        return self.registry.lookup(category_key)

    def generate_name(self, product: ProductRecord) -> str:
        """Detect, look up and assemble; fall back when the category has no template."""
        category_key = determine_category(product)
        template = self.get_template(category_key)
        if template is None:
            return self.fallback_name(product)
        return self.apply(product, template, category_key)

    def apply(self, product: ProductRecord, template: NamingTemplate, category_key: str = "") -> str:
        """
        Assemble the name for a product under a specific template.

        Args:
            product: Catalog record
            template: Template to apply
            category_key: Only used for log messages

        Returns:
            Prefix followed by every non-empty field token
        """
        tokens = [template.prefix]
        tokens.extend(r.token for r in self.trace(product, template) if r.token)
        name = self.config.name_separator.join(tokens)
        logger.debug("%s: %s -> %s", product.part_number, category_key or template.prefix, name)
        return name

    def trace(self, product: ProductRecord, template: NamingTemplate) -> List[FieldResult]:
        """Per-field resolution and transform results, in template order."""
        results = []
        extracted_finish: Optional[str] = None

        for field_name in template.key_specs:
            role = role_for(field_name)
            spec, source = resolve_field(product, template, field_name)

            if spec is None:
                if role is FieldRole.FINISH and extracted_finish:
                    token = self._finish_token(template, "", extracted_finish)
                    results.append(FieldResult(
                        field_name, role, None, SOURCE_EXTRACTED, extracted_finish, token,
                    ))
                else:
                    logger.debug("%s: no specification for %r", product.part_number, field_name)
                    results.append(FieldResult(field_name, role))
                continue

            value = spec.first_value
            if role is FieldRole.MATERIAL:
                token, extracted_finish = self._material_token(product, template, value)
            elif role is FieldRole.FINISH:
                token = self._finish_token(template, value, extracted_finish)
            else:
                token = self._transform(product, template, role, value)

            results.append(FieldResult(field_name, role, spec, source, value, token or None))

        return results

    def fallback_name(self, product: ProductRecord) -> str:
        """
        Name for products without a template.

        First words of the family description, uppercased and without
        commas, followed by the part number.
        """
        words = product.family_description.split()[:self.config.fallback_word_count]
        sep = self.config.name_separator
        if words:
            stem = sep.join(words).upper().replace(",", "")
        else:
            stem = self.config.fallback_unknown_label
        name = f"{stem}{sep}{product.part_number}"
        logger.info("%s: no naming template, using fallback name %s", product.part_number, name)
        return name

    # === Field transforms ===

    def _material_token(
        self, product: ProductRecord, template: NamingTemplate, value: str,
    ) -> Tuple[str, Optional[str]]:
        material, finish = parse_material_and_finish(value)

        # Filler bearings never take the steel grade upgrade
        if template.takes_filler:
            material = apply_filler_material(product, material)
        elif material.lower() in ("steel", "alloy steel"):
            material = get_steel_grade_material(product, material)

        return self._lookup_or_abbreviate(template, material), finish

    def _finish_token(self, template: NamingTemplate, value: str, extracted: Optional[str]) -> str:
        finish = value or extracted or ""
        if not finish:
            return ""
        token = self._lookup_or_abbreviate(template, finish)
        if token in self.config.suppressed_finish_tokens:
            return ""
        return token

    def _transform(
        self, product: ProductRecord, template: NamingTemplate, role: FieldRole, value: str,
    ) -> str:
        if role is FieldRole.SCREW_SIZE:
            if template.is_washer:
                # Washer screw sizes are catalog labels ("6", "1/4"), not lengths
                return self._lookup_or_abbreviate(template, value)
            return self._dimension_token(template, value)
        if role in (FieldRole.LENGTH, FieldRole.DIMENSION):
            return self._dimension_token(template, value)
        if role is FieldRole.THREAD_SIZE:
            thread = extract_thread_with_pitch(product, value)
            return self._lookup_or_abbreviate(template, thread)
        return self._lookup_or_abbreviate(template, value)

    def _dimension_token(self, template: NamingTemplate, value: str) -> str:
        decimal = convert_length_to_decimal(value, self.config.max_decimal_places)
        abbreviated = template.abbreviate(decimal)
        return decimal if abbreviated is None else abbreviated

    @staticmethod
    def _lookup_or_abbreviate(template: NamingTemplate, value: str) -> str:
        abbreviated = template.abbreviate(value)
        return abbreviate_value(value) if abbreviated is None else abbreviated


_default_generator: Optional[NameGenerator] = None


def _get_default_generator() -> NameGenerator:
    global _default_generator
    if _default_generator is None:
        _default_generator = NameGenerator()
    return _default_generator


def generate_name(product: ProductRecord) -> str:
    """Generate a name with the default configuration and registry."""
    return _get_default_generator().generate_name(product)


def fallback_name(product: ProductRecord) -> str:
    """Fallback name with the default configuration."""
    return _get_default_generator().fallback_name(product)

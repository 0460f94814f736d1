"""
Part Analyzer

Explains how a part name was produced. Runs the same detection, template
lookup and field resolution as NameGenerator and records:
- Which product specifications fed the name (directly or via an alias)
- Which template fields found no specification
- Which specifications the template does not use
- A token-by-token breakdown of the name (best effort)
- Suggestions for improving the template, and a name with a guessed finish
"""

import logging
from typing import Dict, List, Optional

from ..classifier.category_detector import determine_category
from ..config import Config, default_config
from ..models.analysis import NameComponent, PartAnalysis, SpecAnalysis
from ..models.product import ProductRecord
from ..naming.generator import FieldResult, NameGenerator, SOURCE_ALIAS, SOURCE_DIRECT
from ..templates.base import NamingTemplate
from ..templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)

SOURCE_UNMAPPED = "unmapped"


class PartAnalyzer:
    """
    Diagnostic companion to NameGenerator.

    Usage:
        analyzer = PartAnalyzer()
        analysis = analyzer.analyze(product)

        print(analysis.generated_name)
        print(analysis.missing_specs)    # ["Finish"]
        print(analysis.suggested_name)   # "BHS-SS188-1/4x20-0.75-HEX-PASS"
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        registry: Optional[TemplateRegistry] = None,
        generator: Optional[NameGenerator] = None,
    ):
        self.config = config or default_config
        self.generator = generator or NameGenerator(config=self.config, registry=registry)

    def analyze(self, product: ProductRecord) -> PartAnalysis:
        """
        Analyze how a product is named.

        Args:
            product: Catalog record

        Returns:
            PartAnalysis for the product; never raises
        """
        detected_type = determine_category(product)
        template = self.generator.get_template(detected_type)

        analysis = PartAnalysis(
            part_number=product.part_number,
            category=product.product_category,
            detected_type=detected_type,
            family_description=product.family_description,
            product_description=product.detail_description,
        )

        if template is None:
            analysis.specifications = [
                SpecAnalysis(name=s.attribute, values=list(s.values)) for s in product.specifications
            ]
            analysis.unmapped_specs = [s.attribute for s in product.specifications]
            analysis.generated_name = self.generator.fallback_name(product)
            analysis.name_components = [
                NameComponent(component=analysis.generated_name, source="Unknown template"),
            ]
            analysis.suggestions = self._suggestions(product, template, [], [])
            logger.debug("%s: no template for %s", product.part_number, detected_type)
            return analysis

        trace = self.generator.trace(product, template)

        analysis.template_used = detected_type
        analysis.template_prefix = template.prefix
        analysis.template_specs = list(template.key_specs)
        analysis.spec_aliases = {k: list(v) for k, v in (template.spec_aliases or {}).items()}

        analysis.specifications = self._analyze_specifications(product, template, trace)
        analysis.unmapped_specs = [s.name for s in analysis.specifications if not s.used_in_name]
        analysis.missing_specs = [r.field_name for r in trace if r.spec is None]

        analysis.generated_name = self.generator.apply(product, template, detected_type)
        analysis.suggested_name = self._suggested_name(
            product, template, analysis.missing_specs, analysis.generated_name,
        )
        analysis.name_components = self._breakdown_name(
            analysis.generated_name, detected_type, template, trace,
        )
        analysis.suggestions = self._suggestions(
            product, template, analysis.unmapped_specs, analysis.missing_specs,
        )
        return analysis

    def _analyze_specifications(
        self,
        product: ProductRecord,
        template: NamingTemplate,
        trace: List[FieldResult],
    ) -> List[SpecAnalysis]:
        # Keyed by identity: two specs may carry the same attribute name
        resolved: Dict[int, FieldResult] = {id(r.spec): r for r in trace if r.spec is not None}
        key_names = {k.lower() for k in template.key_specs}

        analyses = []
        for spec in product.specifications:
            result = resolved.get(id(spec))
            mapped = template.accepts_attribute(spec.attribute)

            if result is not None:
                source = result.source
            elif mapped:
                source = SOURCE_DIRECT if spec.attribute.lower() in key_names else SOURCE_ALIAS
            else:
                source = SOURCE_UNMAPPED

            analyses.append(SpecAnalysis(
                name=spec.attribute,
                values=list(spec.values),
                used_in_name=mapped,
                processed_value=result.token if result is not None else None,
                source=source,
            ))
        return analyses

    def _breakdown_name(
        self,
        name: str,
        category_key: str,
        template: NamingTemplate,
        trace: List[FieldResult],
    ) -> List[NameComponent]:
        """
        Split the name and pair tokens with template fields by position.

        Skipped fields and tokens that contain the separator shift the
        pairing, so the sources are only a best guess.
        """
        parts = name.split(self.config.name_separator)
        components = [NameComponent(component=parts[0], source=f"Template prefix ({category_key})")]

        for i, part in enumerate(parts[1:]):
            if i < len(trace):
                source = trace[i].field_name
                original = trace[i].value
            else:
                source = f"Unknown spec {i + 1}"
                original = None
            components.append(NameComponent(component=part, source=source, original_value=original))
        return components

    def _suggested_name(
        self,
        product: ProductRecord,
        template: NamingTemplate,
        missing_specs: List[str],
        generated_name: str,
    ) -> Optional[str]:
        if "Finish" not in template.key_specs or "Finish" not in missing_specs:
            return None

        sep = self.config.name_separator
        finish = self.suggest_finish(product)
        if generated_name.endswith(f"{sep}{finish}"):
            return None
        return f"{generated_name}{sep}{finish}"

    def suggest_finish(self, product: ProductRecord) -> str:
        """Typical finish token for the product's material ("?" if unknown)."""
        material = (product.spec_value("Material") or "").lower()
        for needle, token in self.config.finish_guesses:
            if needle in material:
                return token
        return self.config.unknown_finish_guess

    def _suggestions(
        self,
        product: ProductRecord,
        template: Optional[NamingTemplate],
        unmapped_specs: List[str],
        missing_specs: List[str],
    ) -> List[str]:
        if template is None:
            return ["⚠️  No template found for this part type. Consider adding a new template."]

        suggestions = []
        if not missing_specs and not unmapped_specs:
            suggestions.append("✅ Template uses all available key specifications")

        if missing_specs:
            suggestions.append(f"🔍 Missing expected specifications: {', '.join(missing_specs)}")
            suggestions.append("   → These specs might be named differently in the catalog")
            suggestions.append("   → Consider adding aliases to the template")

        if unmapped_specs:
            suggestions.append(f"📋 Unmapped specifications available: {', '.join(unmapped_specs)}")
            suggestions.append("   → These could be added to the template for more detailed names")

        if "stainless" in product.family_description.lower() and missing_specs:
            suggestions.append("💡 Stainless steel parts often have finish embedded in material")

        return suggestions


def analyze_part(product: ProductRecord, config: Optional[Config] = None) -> PartAnalysis:
    """
    Convenience function to analyze one product.

    Example:
        analysis = analyze_part(product)
        print(format_human(analysis))
    """
    return PartAnalyzer(config=config).analyze(product)

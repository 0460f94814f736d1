"""Part analysis reports.

Renders a PartAnalysis for people (terminal text or markdown) and for
machines (JSON). All renderers are pure presentation over the same value.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import json

from ..analyzers.part_analyzer import PartAnalyzer
from ..config import Config, default_config
from ..models.analysis import PartAnalysis
from ..models.product import ProductRecord


def format_human(analysis: PartAnalysis, show_template: bool = True, show_aliases: bool = False) -> str:
    """
    Multi-line terminal report, one marked section per topic.

    Args:
        analysis: Result of PartAnalyzer.analyze()
        show_template: Include the template section
        show_aliases: List the template's aliases (only with show_template)

    Returns:
        Report text ending with a newline
    """
    lines = [f"🔍 Part Analysis: {analysis.part_number}", ""]

    lines.append("📦 Product Info:")
    lines.append(f"   Category: {analysis.category}")
    lines.append(f"   Family: {analysis.family_description}")
    lines.append(f"   Detected Type: {analysis.detected_type}")
    lines.append("")

    lines.append(f"📋 Specifications ({len(analysis.specifications)} found):")
    for spec in analysis.specifications:
        mark = "✓" if spec.used_in_name else "✗"
        values = ", ".join(spec.values)
        if spec.used_in_name:
            token = f" → {spec.processed_value}" if spec.processed_value else ""
            lines.append(f"   {mark} {spec.name}: {values}{token} (used in name, {spec.source})")
        else:
            lines.append(f"   {mark} {spec.name}: {values} (not used)")
    lines.append("")

    if show_template:
        if analysis.template_used:
            lines.append(f"🏷️  Template: {analysis.template_used} ({analysis.template_prefix})")
            lines.append(f"   Expected: [{', '.join(analysis.template_specs)}]")
            if show_aliases and analysis.spec_aliases:
                lines.append("   Aliases:")
                for spec_name, aliases in analysis.spec_aliases.items():
                    lines.append(f"   - {spec_name}: {', '.join(aliases)}")
        else:
            lines.append("🏷️  Template: None found")
        lines.append("")

    lines.append(f"🔧 Generated Name: {analysis.generated_name}")
    if analysis.suggested_name:
        lines.append(f"💡 Suggested Name with Finish: {analysis.suggested_name}")
    if analysis.name_components:
        lines.append("   Components (best effort):")
        for component in analysis.name_components:
            lines.append(f"   - {component.component}: {component.source}")
    lines.append("")

    if analysis.suggestions:
        lines.append("💡 Suggestions:")
        for suggestion in analysis.suggestions:
            lines.append(f"   {suggestion}")

    return "\n".join(lines) + "\n"


def format_json(analysis: PartAnalysis, indent: Optional[int] = None) -> str:
    """
    Serialize an analysis as a JSON document.

    Raises:
        ValueError: If the analysis holds values JSON cannot represent
    """
    if indent is None:
        indent = default_config.json_indent
    try:
        return json.dumps(analysis.to_dict(), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Could not serialize analysis for {analysis.part_number}: {e}") from e


@dataclass
class AnalysisReport:
    """
    Naming report for one part.

    Attributes:
        analysis: The underlying PartAnalysis
        generated_at: ISO timestamp
        show_template: Include template details in text output
        show_aliases: Include template aliases in text output
    """
    analysis: PartAnalysis
    generated_at: str = ""
    show_template: bool = True
    show_aliases: bool = False
    notes: List[str] = field(default_factory=list)

    @property
    def status(self) -> str:
        """TEMPLATE when a template named the part, FALLBACK otherwise."""
        return "TEMPLATE" if self.analysis.has_template else "FALLBACK"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generatedAt": self.generated_at,
            "status": self.status,
            "notes": list(self.notes),
            "analysis": self.analysis.to_dict(),
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        if indent is None:
            indent = default_config.json_indent
        try:
            return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Could not serialize report for {self.analysis.part_number}: {e}"
            ) from e

    def to_text(self) -> str:
        return format_human(self.analysis, self.show_template, self.show_aliases)

    def to_markdown(self) -> str:
        """Generate full markdown report."""
        a = self.analysis
        header = f"""# Part Naming Report

**Part Number:** {a.part_number}
**Detected Type:** {a.detected_type}
**Status:** {"✅ " if a.has_template else "❌ "}{self.status}
**Generated Name:** `{a.generated_name}`
**Generated:** {self.generated_at}

---

"""
        lines = ["## Specifications", ""]
        if a.specifications:
            lines.append("| Specification | Values | Used | Token | Source |")
            lines.append("|---|---|---|---|---|")
            for spec in a.specifications:
                lines.append(
                    f"| {spec.name} | {', '.join(spec.values)} | "
                    f"{'✓' if spec.used_in_name else '✗'} | {spec.processed_value or ''} | {spec.source} |"
                )
        else:
            lines.append("No specifications listed.")

        if self.show_template and a.has_template:
            lines.extend(["", "## Template", ""])
            lines.append(f"- Key: {a.template_used}")
            lines.append(f"- Prefix: {a.template_prefix}")
            lines.append(f"- Fields: {', '.join(a.template_specs)}")
            if self.show_aliases:
                for spec_name, aliases in a.spec_aliases.items():
                    lines.append(f"- Aliases for {spec_name}: {', '.join(aliases)}")

        if a.missing_specs:
            lines.extend(["", "## Missing Fields", ""])
            for name in a.missing_specs:
                lines.append(f"- {name}")

        if a.suggested_name:
            lines.extend(["", "## Suggested Name", "", f"`{a.suggested_name}`"])

        if a.suggestions:
            lines.extend(["", "## Suggestions", ""])
            for suggestion in a.suggestions:
                lines.append(f"- {suggestion.strip()}")

        if self.notes:
            lines.extend(["", "## Notes", ""])
            for note in self.notes:
                lines.append(f"- {note}")

        return header + "\n".join(lines) + "\n"


def generate_report(
    product: ProductRecord,
    config: Optional[Config] = None,
    notes: Optional[List[str]] = None,
) -> AnalysisReport:
    """
    Convenience function to analyze a product and wrap the result.

    Example:
        report = generate_report(product)
        print(report.to_markdown())
    """
    config = config or default_config
    analysis = PartAnalyzer(config=config).analyze(product)
    return AnalysisReport(
        analysis=analysis,
        generated_at=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        show_template=config.report_show_template,
        show_aliases=config.report_show_aliases,
        notes=list(notes or []),
    )

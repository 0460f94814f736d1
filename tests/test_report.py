"""Tests for analysis report rendering."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from part_namer.analyzers.part_analyzer import PartAnalyzer
from part_namer.config import Config
from part_namer.models.analysis import SpecAnalysis
from part_namer.report.analysis_report import (
    AnalysisReport,
    format_human,
    format_json,
    generate_report,
)


@pytest.fixture
def screw_analysis(button_head_screw):
    return PartAnalyzer().analyze(button_head_screw)


class TestFormatHuman:
    """Terminal report."""

    def test_sections(self, screw_analysis):
        text = format_human(screw_analysis)

        assert text.startswith("🔍 Part Analysis: 91251A540\n")
        assert "📦 Product Info:" in text
        assert "📋 Specifications (4 found):" in text
        assert "🏷️  Template: button_head_screw (BHS)" in text
        assert "   Expected: [Material, Thread Size, Length, Drive Style, Finish]" in text
        assert "🔧 Generated Name: BHS-SS188-1/4x20-0.75-HEX" in text
        assert "💡 Suggested Name with Finish: BHS-SS188-1/4x20-0.75-HEX-PASS" in text
        assert "💡 Suggestions:" in text
        assert text.endswith("\n")

    def test_specification_lines(self, make_product):
        product = make_product("Hex Nut", {"Material": "Steel", "Color": "Black"})
        text = format_human(PartAnalyzer().analyze(product))

        assert "   ✓ Material: Steel → S (used in name, direct)" in text
        assert "   ✗ Color: Black (not used)" in text

    def test_template_hidden(self, screw_analysis):
        assert "Template:" not in format_human(screw_analysis, show_template=False)

    def test_aliases_shown(self, mf_standoff):
        text = format_human(PartAnalyzer().analyze(mf_standoff), show_aliases=True)
        assert "   Aliases:" in text
        assert "   - Thread Size: Thread (A) Size, Thread (B) Size" in text

    def test_aliases_hidden_by_default(self, mf_standoff):
        assert "Aliases:" not in format_human(PartAnalyzer().analyze(mf_standoff))

    def test_no_template(self, make_product):
        text = format_human(PartAnalyzer().analyze(make_product("Widget", part_number="1")))
        assert "🏷️  Template: None found" in text


class TestFormatJson:
    """Machine-readable output."""

    def test_round_trip_fields(self, screw_analysis):
        data = json.loads(format_json(screw_analysis))
        assert data["partNumber"] == "91251A540"
        assert data["generatedName"] == "BHS-SS188-1/4x20-0.75-HEX"

    def test_indent_and_unicode(self, screw_analysis):
        """Indented by default, with emoji written as-is."""
        text = format_json(screw_analysis)
        assert '\n  "partNumber"' in text
        assert "🔍" in text

    def test_unserializable_value(self, screw_analysis):
        screw_analysis.specifications.append(SpecAnalysis(name="Bad", values=[object()]))
        with pytest.raises(ValueError, match="91251A540"):
            format_json(screw_analysis)


class TestAnalysisReport:
    """Report wrapper and markdown output."""

    def test_generate_report(self, button_head_screw):
        report = generate_report(button_head_screw, notes=["checked by hand"])

        assert report.status == "TEMPLATE"
        assert report.generated_at.endswith("Z")
        assert report.notes == ["checked by hand"]
        assert report.to_text() == format_human(report.analysis, True, False)

    def test_timestamp_is_utc(self, button_head_screw):
        """The trailing Z marks a real UTC time."""
        stamp = generate_report(button_head_screw).generated_at
        parsed = datetime.fromisoformat(stamp[:-1] + "+00:00")
        assert parsed.utcoffset() == timedelta(0)
        assert abs(datetime.now(timezone.utc) - parsed) < timedelta(minutes=5)

    def test_markdown(self, button_head_screw):
        md = generate_report(button_head_screw, notes=["checked by hand"]).to_markdown()

        assert md.startswith("# Part Naming Report")
        assert "**Part Number:** 91251A540" in md
        assert "**Status:** ✅ TEMPLATE" in md
        assert "| Material | 18-8 Stainless Steel | ✓ | SS188 | direct |" in md
        assert "## Missing Fields" in md
        assert "- Finish" in md
        assert "`BHS-SS188-1/4x20-0.75-HEX-PASS`" in md
        assert "## Notes" in md

    def test_fallback_status(self, make_product):
        report = generate_report(make_product("Widget", part_number="1"))
        assert report.status == "FALLBACK"
        assert "❌ FALLBACK" in report.to_markdown()

    def test_to_json(self, button_head_screw):
        data = json.loads(generate_report(button_head_screw).to_json())
        assert data["status"] == "TEMPLATE"
        assert data["analysis"]["partNumber"] == "91251A540"

    def test_config_controls_aliases(self, mf_standoff):
        report = generate_report(mf_standoff, config=Config(report_show_aliases=True))
        assert report.show_aliases
        assert "Aliases:" in report.to_text()

    def test_report_without_specifications(self, make_product):
        report = AnalysisReport(analysis=PartAnalyzer().analyze(make_product("Hex Nut")))
        assert "No specifications listed." in report.to_markdown()

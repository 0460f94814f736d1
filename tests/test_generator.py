"""Tests for name generation."""

import logging

import pytest

from part_namer.config import Config
from part_namer.naming.generator import (
    NameGenerator,
    SOURCE_ALIAS,
    SOURCE_DIRECT,
    SOURCE_EXTRACTED,
    generate_name,
    resolve_field,
)
from part_namer.naming.roles import FieldRole
from part_namer.templates.base import NamingTemplate
from part_namer.templates.registry import TemplateRegistry, get_registry


class TestScrewNames:
    """Screws: material, thread, length, drive and finish."""

    def test_button_head_screw(self, button_head_screw):
        """McMaster 91251A540."""
        assert generate_name(button_head_screw) == "BHS-SS188-1/4x20-0.75-HEX"

    def test_passivated_finish_is_suppressed(self, make_product):
        """A finish folded into the material abbreviates to PASS and is dropped."""
        product = make_product("Button Head Socket Cap Screw", {
            "Material": "Passivated 316 Stainless Steel",
            "Thread Size": "1/4-20",
            "Length": '3/4"',
            "Drive Style": "Hex",
        })
        name = generate_name(product)
        assert name == "BHS-SS316-1/4x20-0.75-HEX"
        assert "PASS" not in name.split("-")

    def test_direct_passivated_finish_is_suppressed(self, button_head_screw, make_product):
        specs = {s.attribute: s.first_value for s in button_head_screw.specifications}
        specs["Finish"] = "Passivated"
        product = make_product(button_head_screw.family_description, specs)
        assert generate_name(product) == "BHS-SS188-1/4x20-0.75-HEX"

    def test_finish_extracted_from_material(self, make_product):
        """'Zinc Plated Steel' gives material S and finish ZP."""
        product = make_product("Hex Head Screw", {
            "Material": "Zinc Plated Steel",
            "Thread Size": "3/8-16",
            "Length": '1"',
            "Drive Style": "External Hex",
        })
        assert generate_name(product) == "HHS-S-3/8x16-1-EHEX-ZP"

    def test_finish_spec_wins_over_extracted(self, make_product):
        product = make_product("Hex Head Screw", {
            "Material": "Zinc Plated Steel",
            "Thread Size": "3/8-16",
            "Length": '1"',
            "Drive Style": "External Hex",
            "Finish": "Black Oxide",
        })
        assert generate_name(product).endswith("-BO")

    @pytest.mark.parametrize("material,grade,token", [
        ("Steel", "Grade 8", "SG8"),
        ("Alloy Steel", "Class 12.9", "S12.9"),
    ])
    def test_steel_grade_upgrade(self, make_product, material, grade, token):
        product = make_product("Hex Head Screw", {
            "Material": material,
            "Thread Size": "1/2-13",
            "Length": '2"',
            "Fastener Strength Grade/Class": grade,
        })
        assert generate_name(product).split("-")[1] == token

    def test_metric_pitch_from_description(self, make_product):
        product = make_product(
            "Socket Head Screw",
            {
                "Material": "Alloy Steel",
                "Thread Size": "M5",
                "Length": "10mm",
                "Drive Style": "Hex",
                "Finish": "Black Oxide",
            },
            detail="Socket Head Screw, M5 x 0.8 mm Thread, 10 mm Long",
        )
        assert generate_name(product) == "SHS-S-M5x0.8-10-HEX-BO"

    def test_threads_per_inch(self, make_product):
        product = make_product("Pan Head Screw", {
            "Material": "18-8 Stainless Steel",
            "Thread Size": "No. 10",
            "Threads per Inch": "32",
            "Length": '1/2"',
            "Drive Style": "Phillips",
        })
        assert generate_name(product) == "PHS-SS188-10x32-0.5-PH"


class TestOtherFamilies:
    """One representative product per non-screw family."""

    def test_washer_screw_size_is_not_converted(self, make_product):
        """Washer screw sizes stay as catalog labels."""
        product = make_product("Split Lock Washer", {
            "Material": "18-8 Stainless Steel",
            "For Screw Size": "1/4",
        })
        assert generate_name(product) == "SPLW-SS188-1/4"

    def test_washer_number_size(self, make_product):
        product = make_product("Split Lock Washer", {
            "Material": "Steel",
            "For Screw Size": "No. 10",
            "Finish": "Zinc Plated",
        })
        assert generate_name(product) == "SPLW-Steel-10-ZP"

    def test_spacer(self, make_product):
        product = make_product("Aluminum Unthreaded Spacer", {
            "Material": "Aluminum",
            "For Screw Size": '1/4"',
            "OD": '1/2"',
            "Length": '3/4"',
        }, category="Spacers")
        assert generate_name(product) == "ASP-AL-0.25-0.5-0.75"

    def test_standoff_thread_alias(self, mf_standoff):
        """Thread Size resolves through the Thread (A) Size alias."""
        assert generate_name(mf_standoff) == "MFSO-AL-4x40-0.5"

    def test_bearing_filler(self, make_product):
        product = make_product("Sleeve Bearing", {
            "Material": "Nylon Plastic",
            "Filler Material": "MDS",
            "For Shaft Diameter": '1/4"',
            "OD": '3/8"',
            "Length": '1/2"',
        }, category="Bearings")
        assert generate_name(product) == "SB-MDSNYL-0.25-0.375-0.5"

    def test_bearing_without_filler(self, make_product):
        product = make_product("Sleeve Bearing", {
            "Material": "Nylon Plastic",
            "Filler Material": "Not Specified",
            "For Shaft Diameter": '1/4"',
            "OD": '3/8"',
            "Length": '1/2"',
        })
        assert generate_name(product) == "SB-NYL-0.25-0.375-0.5"

    def test_ball_bearing_keeps_plain_steel(self, make_product):
        """Filler bearings are not upgraded to a strength grade."""
        product = make_product("Ball Bearing", {
            "Material": "Steel",
            "Fastener Strength Grade/Class": "Grade 5",
            "Bore": '1/4"',
            "OD": '5/8"',
        })
        assert generate_name(product) == "BB-S-0.25-0.625"

    def test_filler_only_on_plain_and_ball_bearings(self, make_product):
        """A flanged bearing ignores its filler material."""
        product = make_product("Flanged Bearing", {
            "Material": "Nylon Plastic",
            "Filler Material": "MDS",
            "For Shaft Diameter": '1/4"',
            "OD": '3/8"',
            "Length": '1/2"',
        })
        assert generate_name(product) == "FB-NYL-0.25-0.375-0.5"

    def test_flanged_sleeve_bearing_filler(self, make_product):
        product = make_product("Flanged Sleeve Bearing", {
            "Material": "Nylon Plastic",
            "Filler Material": "MDS",
            "For Shaft Diameter": '1/4"',
        })
        assert generate_name(product) == "FSB-MDSNYL-0.25"

    def test_mounted_bearing(self, make_product):
        """Housing material and mixed-number dimensions."""
        product = make_product("Mounted Ball Bearing", {
            "Mounted Bearing Type": "Two-Bolt Flange",
            "Housing Material": "Cast Iron",
            "For Shaft Diameter": '1"',
            "Mounting Hole Center -to-Center": '3-5/8"',
            "Overall Height": '4-1/4"',
        })
        assert generate_name(product) == "MFBB-CAST-1-3.625-4.25"

    def test_clevis_pin(self, make_product):
        product = make_product("Clevis Pin", {
            "Material": "18-8 Stainless Steel",
            "Diameter": '1/4"',
            "Usable Length": '1"',
        }, category="Pins")
        assert generate_name(product) == "CP-SS188-0.25-1"

    def test_wire_rope_pulley(self, make_product):
        product = make_product("Wire Rope Pulley", {
            "Material": "Steel",
            "For Rope Diameter": '1/4"',
            "OD": '2"',
            "Bearing Type": "Ball",
        })
        assert generate_name(product) == "WRP-S-0.25-2-BALL"

    def test_draw_latch(self, make_product):
        product = make_product("Draw Latch", {
            "Material": "Steel",
            "Mount Type": "Screw On",
            "Latching Distance": '1/2"',
            "Draw Latch Type": "Locking",
        })
        assert generate_name(product) == "DL-STEEL-SO-0.5-L"

    def test_cable_holder(self, make_product):
        product = make_product("Cable Holder", {
            "Material": "Nylon Plastic",
            "Mount Type": "Screw-In",
            "For Maximum Bundle Diameter": '1/4"',
            "For Screw Size": "No. 8",
        })
        assert generate_name(product) == "CH-NY-SI-0.25-8"


class TestFallback:
    """Products without a template."""

    def test_fallback_from_family_words(self, make_product):
        product = make_product("Widget Assembly, Large Blue Extra", part_number="123")
        assert generate_name(product) == "WIDGET-ASSEMBLY-LARGE-BLUE-123"

    def test_fallback_without_family(self, make_product):
        assert generate_name(make_product(part_number="123")) == "UNKNOWN-123"

    def test_fallback_word_count(self, make_product):
        generator = NameGenerator(config=Config(fallback_word_count=2))
        product = make_product("Widget Assembly, Large Blue", part_number="123")
        assert generator.generate_name(product) == "WIDGET-ASSEMBLY-123"

    def test_empty_registry_falls_back(self, button_head_screw):
        """A detected key without a registered template uses the fallback."""
        generator = NameGenerator(registry=TemplateRegistry({}))
        assert generator.generate_name(button_head_screw) == "BUTTON-HEAD-SOCKET-CAP-91251A540"

    def test_fallback_logged(self, make_product, caplog):
        caplog.set_level(logging.INFO, logger="part_namer.naming.generator")
        generate_name(make_product("Widget", part_number="123"))
        assert "fallback" in caplog.text


class TestNameProperties:
    """Determinism, non-emptiness and configuration."""

    def test_deterministic(self, button_head_screw, mf_standoff):
        for product in (button_head_screw, mf_standoff):
            assert generate_name(product) == generate_name(product)

    def test_no_specifications_gives_prefix(self, make_product):
        """A recognized product with no specifications is named by its prefix alone."""
        assert generate_name(make_product("Hex Nut")) == "HN"

    def test_no_empty_tokens(self, make_product):
        product = make_product("Hex Nut", {"Material": "Steel", "Finish": "Passivated"})
        assert "" not in generate_name(product).split("-")

    def test_custom_separator(self, button_head_screw):
        generator = NameGenerator(config=Config(name_separator="_"))
        assert generator.generate_name(button_head_screw) == "BHS_SS188_1/4x20_0.75_HEX"

    def test_suppression_can_be_disabled(self, button_head_screw, make_product):
        specs = {s.attribute: s.first_value for s in button_head_screw.specifications}
        specs["Finish"] = "Passivated"
        product = make_product(button_head_screw.family_description, specs)
        generator = NameGenerator(config=Config(suppressed_finish_tokens=()))
        assert generator.generate_name(product).endswith("-PASS")

    def test_attribute_case_ignored(self, make_product):
        product = make_product("Button Head Socket Cap Screw", {
            "material": "18-8 Stainless Steel",
            "THREAD SIZE": "1/4-20",
            "length": '3/4"',
            "drive style": "Hex",
        })
        assert generate_name(product) == "BHS-SS188-1/4x20-0.75-HEX"


class TestResolveAndTrace:
    """Field resolution and per-field trace."""

    def test_alias_resolution(self, mf_standoff):
        template = get_registry().lookup("male_female_hex_standoff")
        spec, source = resolve_field(mf_standoff, template, "Thread Size")
        assert spec.attribute == "Thread (A) Size"
        assert source == SOURCE_ALIAS

    def test_direct_resolution(self, mf_standoff):
        template = get_registry().lookup("male_female_hex_standoff")
        spec, source = resolve_field(mf_standoff, template, "Length")
        assert spec.attribute == "Length"
        assert source == SOURCE_DIRECT

    def test_unresolved(self, mf_standoff):
        template = get_registry().lookup("male_female_hex_standoff")
        assert resolve_field(mf_standoff, template, "Finish") == (None, None)

    def test_alias_is_optional(self, make_product):
        """Without the aliased attribute the field is simply skipped."""
        template = NamingTemplate(
            "SP", ("For Screw Size",), spec_aliases={"For Screw Size": ("For Screw Size",)},
        )
        generator = NameGenerator()
        with_size = make_product(specs={"For Screw Size": '1/4"'})
        assert generator.apply(with_size, template) == "SP-0.25"
        assert generator.apply(make_product(), template) == "SP"

    def test_trace_records_extracted_finish(self, make_product):
        product = make_product("Hex Head Screw", {"Material": "Zinc Plated Steel"})
        template = get_registry().lookup("hex_head_screw")
        trace = NameGenerator().trace(product, template)

        assert [r.field_name for r in trace] == list(template.key_specs)
        finish = trace[-1]
        assert finish.role is FieldRole.FINISH
        assert finish.source == SOURCE_EXTRACTED
        assert finish.value == "Zinc Plated"
        assert finish.token == "ZP"

    def test_trace_unresolved_field(self, make_product):
        product = make_product("Hex Head Screw", {"Material": "Steel"})
        template = get_registry().lookup("hex_head_screw")
        length = NameGenerator().trace(product, template)[2]
        assert length.field_name == "Length"
        assert length.spec is None
        assert length.token is None

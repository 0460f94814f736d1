"""Pin and shaft collar naming templates.

Pins and shaft collars are separate families with separate dictionaries;
the collar dictionary starts from the pin groups and adds collar alloys.
"""

from typing import Dict

from .base import NamingTemplate, build_family, freeze
from .common import base_material_abbreviations, finish_abbreviations, steel_grade_abbreviations

PIN_SPECS = ("Material", "Diameter", "Usable Length", "Finish")
GENERIC_PIN_SPECS = ("Material", "Diameter", "Length", "Finish")
COLLAR_SPECS = ("Material", "For Shaft Diameter", "OD", "Width", "Finish")


def create_pin_abbreviations() -> Dict[str, str]:
    """Materials, grades, finishes and end types for pins."""
    abbrevs = base_material_abbreviations()
    for name in ("Nylon", "Plastic"):
        del abbrevs[name]
    abbrevs["Titanium"] = "TI"
    abbrevs.update(steel_grade_abbreviations(include_alloy=False))
    abbrevs.update(finish_abbreviations())
    abbrevs.update({
        "Retaining Ring Groove": "RRG",
        "Plain": "",
    })
    return abbrevs


def create_collar_abbreviations() -> Dict[str, str]:
    abbrevs = create_pin_abbreviations()
    abbrevs.update({
        "303 Stainless Steel": "SS303",
        "1215 Carbon Steel": "1215S",
    })
    return abbrevs


def build_pin_templates() -> Dict[str, NamingTemplate]:
    """Clevis pin templates plus the generic pin."""
    abbrevs = freeze(create_pin_abbreviations())
    return build_family(
        "pin", abbrevs,
        [
            ("clevis_pin", "CP", PIN_SPECS),
            ("clevis_pin_with_retaining_ring_groove", "CPRRG", PIN_SPECS),
            ("generic_pin", "GP", GENERIC_PIN_SPECS),
        ],
    )


def build_shaft_collar_templates() -> Dict[str, NamingTemplate]:
    abbrevs = freeze(create_collar_abbreviations())
    return build_family(
        "shaft_collar", abbrevs,
        [
            ("face_mount_shaft_collar", "FMSC", COLLAR_SPECS),
            ("flange_mount_shaft_collar", "FLSC", COLLAR_SPECS),
            ("generic_shaft_collar", "SC", COLLAR_SPECS),
        ],
    )

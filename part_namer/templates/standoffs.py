"""Threaded standoff naming templates."""

from typing import Dict

from .base import NamingTemplate, build_family, freeze
from .common import base_material_abbreviations, finish_abbreviations, steel_grade_abbreviations

STANDOFF_SPECS = ("Material", "Thread Size", "Length", "Finish")

# Male-female standoffs list each end separately; the first end names the part
STANDOFF_ALIASES = {
    "Thread Size": ("Thread (A) Size", "Thread (B) Size"),
}

STANDOFF_TYPES = (
    ("male_female_hex_standoff", "MFSO"),
    ("female_hex_standoff", "FSO"),
    ("generic_standoff", "SO"),
)


def create_standoff_abbreviations() -> Dict[str, str]:
    abbrevs = base_material_abbreviations()
    del abbrevs["Plastic"]
    abbrevs.update(steel_grade_abbreviations())
    abbrevs.update(finish_abbreviations())
    return abbrevs


def build_standoff_templates() -> Dict[str, NamingTemplate]:
    abbrevs = freeze(create_standoff_abbreviations())
    return build_family(
        "standoff", abbrevs,
        [(key, prefix, STANDOFF_SPECS) for key, prefix in STANDOFF_TYPES],
        aliases=STANDOFF_ALIASES,
    )

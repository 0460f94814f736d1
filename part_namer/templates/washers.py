"""Washer naming templates.

Washers are named by the screw they fit. "For Screw Size" values such as
"6" or "1/4" are catalog labels, so they are kept as-is rather than being
converted to decimals.
"""

from typing import Dict

from .base import NamingTemplate, build_family, freeze
from .common import base_material_abbreviations, finish_abbreviations

WASHER_SPECS = ("Material", "For Screw Size", "Finish")

WASHER_TYPES = (
    ("cup_washer", "CW"),
    ("curved_washer", "CRVW"),
    ("dished_washer", "DW"),
    ("domed_washer", "DMW"),
    ("double_clipped_washer", "DCW"),
    ("clipped_washer", "CLW"),
    ("flat_washer", "FW"),
    ("hillside_washer", "HW"),
    ("notched_washer", "NW"),
    ("perforated_washer", "PW"),
    ("pronged_washer", "PRW"),
    ("rectangular_washer", "RW"),
    ("sleeve_washer", "SW"),
    ("slotted_washer", "SLW"),
    ("spherical_washer", "SPW"),
    ("split_washer", "SPLW"),
    ("square_washer", "SQW"),
    ("tab_washer", "TW"),
    ("tapered_washer", "TPW"),
    ("tooth_washer", "TOW"),
    ("wave_washer", "WW"),
    ("wedge_washer", "WDW"),
)


def create_washer_abbreviations() -> Dict[str, str]:
    """Materials and finishes for washers."""
    abbrevs = base_material_abbreviations()
    # Washers keep the full word for plain steel
    abbrevs.update({
        "Steel": "Steel",
        "Alloy Steel": "Steel",
        "Spring Steel": "Steel",
        "Rubber": "Rubber",
    })
    abbrevs.update(finish_abbreviations())
    return abbrevs


def build_washer_templates() -> Dict[str, NamingTemplate]:
    """One template per washer shape."""
    abbrevs = freeze(create_washer_abbreviations())
    return build_family(
        "washer", abbrevs,
        [(key, prefix, WASHER_SPECS) for key, prefix in WASHER_TYPES],
    )

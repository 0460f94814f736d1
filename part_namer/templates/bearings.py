"""Bearing naming templates.

Plain bearings are named by shaft and outer diameter, rolling bearings by
bore, and mounted bearings by their housing. Filled materials reach the
dictionary as "<filler>-Filled <material>" (see NameGenerator).
"""

from typing import Dict

from .base import NamingTemplate, build_family, freeze

PLAIN_BEARING_SPECS = ("Material", "For Shaft Diameter", "OD", "Length")
MOUNTED_BEARING_SPECS = (
    "Housing Material",
    "For Shaft Diameter",
    "Mounting Hole Center -to-Center",
    "Overall Height",
)


def create_bearing_abbreviations() -> Dict[str, str]:
    """Bearing materials, including filled plastics and bronze alloys."""
    return {
        "MDS-Filled Nylon Plastic": "MDSNYL",
        "MDS-Filled Nylon": "MDSNYL",
        "Nylon Plastic": "NYL",
        "Bronze SAE 841": "BR841",
        "Bronze SAE 863": "BR863",
        "Cast Bronze": "CB",
        "Oil-Filled Bronze": "OFB",
        "PTFE": "PTFE",
        "Rulon": "RUL",
        "Graphite": "GRAPH",
        "Steel-Backed PTFE": "SBPTFE",
        "Bronze": "BR",
        "Steel": "S",
        "Stainless Steel": "SS",
        "303 Stainless Steel": "SS303",
        "Aluminum": "AL",
        "Plastic": "PL",
    }


def build_bearing_templates() -> Dict[str, NamingTemplate]:
    abbrevs = freeze(create_bearing_abbreviations())
    return build_family(
        "bearing", abbrevs,
        [
            ("flanged_sleeve_bearing", "FSB", PLAIN_BEARING_SPECS),
            ("sleeve_bearing", "SB", PLAIN_BEARING_SPECS),
            ("flanged_bearing", "FB", PLAIN_BEARING_SPECS),
            ("ball_bearing", "BB", ("Material", "Bore", "OD")),
            ("linear_bearing", "LB", ("Material", "For Shaft Diameter", "Length")),
            ("needle_bearing", "NB", ("Material", "Bore", "OD", "Length")),
            ("roller_bearing", "RB", ("Material", "Bore", "OD", "Length")),
            ("flange_mounted_ball_bearing", "MFBB", MOUNTED_BEARING_SPECS),
            ("low_profile_flange_mounted_ball_bearing", "LPMFBB", MOUNTED_BEARING_SPECS),
            ("pillow_block_mounted_ball_bearing", "PBMBB", MOUNTED_BEARING_SPECS),
            ("generic_mounted_bearing", "MBB",
             ("Housing Material", "For Shaft Diameter", "Overall Height")),
            ("generic_bearing", "BRG", ("Material", "Type")),
        ],
    )

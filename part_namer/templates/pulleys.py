"""Pulley and sheave naming templates."""

from typing import Dict

from .base import NamingTemplate, build_family, freeze

ROPE_PULLEY_SPECS = ("Material", "For Rope Diameter", "OD", "Bearing Type")


def create_pulley_abbreviations() -> Dict[str, str]:
    """Materials, bearing types and pulling applications."""
    return {
        "Steel": "S",
        "Stainless Steel": "SS",
        "303 Stainless Steel": "SS303",
        "316 Stainless Steel": "SS316",
        "Aluminum": "AL",
        "Bronze": "BR",
        "Cast Iron": "CI",
        "Plastic": "PL",
        "Nylon": "NYL",
        # Bearing type
        "Ball": "BALL",
        "Plain": "PLAIN",
        "Roller": "ROLLER",
        "None": "NONE",
        # Application
        "For Pulling": "PULL",
        "For Lifting": "LIFT",
        "For Horizontal Pulling": "HPULL",
    }


def build_pulley_templates() -> Dict[str, NamingTemplate]:
    abbrevs = freeze(create_pulley_abbreviations())
    return build_family(
        "pulley", abbrevs,
        [
            ("wire_rope_pulley", "WRP", ROPE_PULLEY_SPECS),
            ("rope_pulley", "RP", ROPE_PULLEY_SPECS),
            ("v_belt_pulley", "VBP", ("Material", "For Belt Width", "OD", "Bearing Type")),
            ("pulley", "PUL", ("Material", "OD", "Bearing Type")),
            ("sheave", "SHV", ROPE_PULLEY_SPECS),
        ],
    )

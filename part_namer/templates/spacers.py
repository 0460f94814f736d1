"""Unthreaded spacer naming templates.

Spacers are named by the screw they clear, not by their exact ID.
"""

from typing import Dict

from .base import NamingTemplate, build_family, freeze
from .common import base_material_abbreviations, finish_abbreviations

SPACER_SPECS = ("Material", "For Screw Size", "OD", "Length", "Finish")
# Nylon spacers come in one finish only
NYLON_SPACER_SPECS = ("Material", "For Screw Size", "OD", "Length")

SPACER_ALIASES = {
    "For Screw Size": ("For Screw Size",),
}


def create_spacer_abbreviations() -> Dict[str, str]:
    """Plastics, metals and finishes (including anodizing) for spacers."""
    abbrevs = {
        "Acetal Plastic": "ACET",
        "Acetal": "ACET",
        "Polyethylene": "PE",
        "Polypropylene": "PP",
        "PEEK": "PEEK",
        "PTFE": "PTFE",
        "Polycarbonate": "PC",
        "Titanium": "TI",
    }
    abbrevs.update(base_material_abbreviations())
    del abbrevs["Plastic"]
    abbrevs.update(finish_abbreviations())
    abbrevs.update({
        "Black Anodized": "BA",
        "Black-Anodized": "BA",
    })
    return abbrevs


def build_spacer_templates() -> Dict[str, NamingTemplate]:
    abbrevs = freeze(create_spacer_abbreviations())
    return build_family(
        "spacer", abbrevs,
        [
            ("unthreaded_spacer", "SP", SPACER_SPECS),
            ("aluminum_unthreaded_spacer", "ASP", SPACER_SPECS),
            ("stainless_steel_unthreaded_spacer", "SSSP", SPACER_SPECS),
            ("nylon_unthreaded_spacer", "NSP", NYLON_SPACER_SPECS),
        ],
        aliases=SPACER_ALIASES,
    )

"""Latch naming templates."""

from typing import Dict

from .base import NamingTemplate, build_family, freeze
from .common import inch_fraction_abbreviations


def create_latch_abbreviations() -> Dict[str, str]:
    """Materials, mounting styles, reach, latch types and capacities."""
    abbrevs = {
        "304 Stainless Steel": "SS304",
        "316 Stainless Steel": "SS316",
        "18-8 Stainless Steel": "SS188",
        "Stainless Steel": "SS",
        "Steel": "STEEL",
        "Aluminum": "AL",
        "Brass": "BRASS",
        "Zinc Plated Steel": "STEEL-ZP",
        "Chrome Plated Steel": "STEEL-CR",
        # Mount type
        "Screw On": "SO",
        "Screw-On": "SO",
        "Weld On": "WO",
        "Weld-On": "WO",
        "Bolt On": "BO",
        "Bolt-On": "BO",
        "Surface Mount": "SM",
        "Surface": "SM",
    }
    abbrevs.update(inch_fraction_abbreviations())
    abbrevs.update({
        "Locking": "L",
        "Nonlocking": "NL",
        "Non-locking": "NL",
        "Keyed": "K",
        "Adjustable": "ADJ",
        "Fixed": "F",
    })
    for pounds in (130, 200, 250, 300, 400, 500):
        abbrevs[f"{pounds} lbs."] = str(pounds)
    return abbrevs


def build_latch_templates() -> Dict[str, NamingTemplate]:
    abbrevs = freeze(create_latch_abbreviations())
    return build_family(
        "latch", abbrevs,
        [
            ("draw_latch", "DL",
             ("Material", "Mount Type", "Latching Distance", "Draw Latch Type")),
            ("toggle_latch", "TL", ("Material", "Mount Type", "Latching Distance")),
            ("compression_latch", "CL", ("Material", "Mount Type")),
            ("slam_latch", "SL", ("Material", "Mount Type")),
            ("generic_latch", "LATCH", ("Material", "Mount Type")),
        ],
    )

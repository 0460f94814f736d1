"""Cable holder naming templates.

Both variants share the "CH" prefix; adhesive-backed holders simply have no
screw size to report.
"""

from typing import Dict

from .base import NamingTemplate, build_family, freeze
from .common import inch_fraction_abbreviations

CABLE_HOLDER_SPECS = ("Material", "Mount Type", "For Maximum Bundle Diameter")


def create_cable_holder_abbreviations() -> Dict[str, str]:
    abbrevs = {
        "Nylon Plastic": "NY",
        "Plastic": "PL",
        "Polyethylene": "PE",
        "Polypropylene": "PP",
        "PVC": "PVC",
        "Aluminum": "AL",
        "Steel": "STEEL",
        "Stainless Steel": "SS",
        # Mount type
        "Screw In": "SI",
        "Screw-In": "SI",
        "Adhesive": "ADH",
        "Self-Adhesive": "ADH",
        "Snap In": "SNP",
        "Snap-In": "SNP",
        "Push Mount": "PUSH",
        "Tie Mount": "TIE",
    }
    abbrevs.update(inch_fraction_abbreviations())
    for size in (4, 6, 8, 10):
        abbrevs[f"No. {size}"] = str(size)
        abbrevs[f"#{size}"] = str(size)
    return abbrevs


def build_cable_holder_templates() -> Dict[str, NamingTemplate]:
    abbrevs = freeze(create_cable_holder_abbreviations())
    return build_family(
        "cable_holder", abbrevs,
        [
            ("cable_holder", "CH", CABLE_HOLDER_SPECS + ("For Screw Size",)),
            ("generic_cable_holder", "CH", CABLE_HOLDER_SPECS),
        ],
    )

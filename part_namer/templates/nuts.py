"""Nut naming templates.

All locking sub-types collapse to the "LN" prefix; the locking mechanism is
not part of the name.
"""

from typing import Dict

from .base import NamingTemplate, build_family, freeze
from .common import base_material_abbreviations, finish_abbreviations, steel_grade_abbreviations

NUT_SPECS = ("Material", "Thread Size", "Finish")

COMMON_NUTS = (
    ("hex_nut", "HN"),
    ("wing_nut", "WN"),
    ("cap_nut", "CN"),
    ("flange_nut", "FN"),
    ("generic_nut", "N"),
)

LOCKING_NUTS = (
    "nylon_insert_locknut",
    "generic_locknut",
    "cotter_pin_locknut",
    "distorted_thread_locknut",
    "flex_top_locknut",
    "lock_washer_locknut",
    "serrations_locknut",
    "spring_stop_locknut",
    "steel_insert_locknut",
)

SPECIALTY_NUTS = (
    ("acorn_nut", "AN"),
    ("barrel_nut", "BN"),
    ("cage_nut", "CAGEN"),
    ("castle_nut", "CASN"),
    ("clinch_nut", "CLIN"),
    ("coupling_nut", "COUPN"),
    ("jam_nut", "JN"),
    ("knurled_thumb_nut", "KTN"),
    ("machine_screw_nut", "MSN"),
    ("panel_nut", "PN"),
    ("push_on_nut", "PON"),
    ("rivet_nut", "RN"),
    ("round_nut", "ROUNDN"),
    ("screw_mount_nut", "SMN"),
    ("snap_in_nut", "SIN"),
    ("socket_nut", "SN"),
    ("speed_nut", "SPEEDN"),
    ("square_nut", "SQN"),
    ("tamper_resistant_nut", "TRN"),
    ("threadless_nut", "TLN"),
    ("thumb_nut", "TN"),
    ("tube_end_nut", "TEN"),
    ("twist_close_nut", "TCN"),
    ("weld_nut", "WLN"),
    ("with_pilot_hole_nut", "PHN"),
)


def create_nut_abbreviations() -> Dict[str, str]:
    """Materials, grades and finishes for nuts."""
    abbrevs = base_material_abbreviations()
    abbrevs.update(steel_grade_abbreviations())
    abbrevs.update(finish_abbreviations())
    return abbrevs


def build_nut_templates() -> Dict[str, NamingTemplate]:
    """Common, locking and specialty nut templates."""
    abbrevs = freeze(create_nut_abbreviations())
    entries = [(key, prefix, NUT_SPECS) for key, prefix in COMMON_NUTS]
    entries += [(key, "LN", NUT_SPECS) for key in LOCKING_NUTS]
    entries += [(key, prefix, NUT_SPECS) for key, prefix in SPECIALTY_NUTS]
    return build_family("nut", abbrevs, entries)

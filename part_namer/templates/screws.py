"""Screw naming templates.

Every head style the detector recognizes gets its own prefix. Head styles
that take a driver carry the drive style; hand-turned screws (thumb, eye,
hook, ...) do not.
"""

from typing import Dict

from .base import NamingTemplate, build_family, freeze
from .common import base_material_abbreviations, finish_abbreviations, steel_grade_abbreviations

DRIVEN_SCREW_SPECS = ("Material", "Thread Size", "Length", "Drive Style", "Finish")
HAND_SCREW_SPECS = ("Material", "Thread Size", "Length", "Finish")

THREAD_FORMING_SCREWS = (
    ("thread_forming_button_head_screw", "TFBHS"),
    ("thread_forming_high_socket_head_screw", "TFHSHS"),
    ("thread_forming_low_socket_head_screw", "TFLSHS"),
    ("thread_forming_socket_head_screw", "TFSHS"),
    ("thread_forming_flat_head_screw", "TFFHS"),
    ("thread_forming_pan_head_screw", "TFPHS"),
    ("thread_forming_hex_head_screw", "TFHHS"),
    ("thread_forming_screw", "TFS"),
)

DRIVEN_HEAD_SCREWS = (
    ("button_head_screw", "BHS"),
    # Socket heads
    ("socket_head_screw", "SHS"),
    ("high_socket_head_screw", "HSHS"),
    ("low_socket_head_screw", "LSHS"),
    ("ultra_low_socket_head_screw", "ULSHS"),
    ("standard_socket_head_screw", "SSHS"),
    # Flat heads
    ("flat_head_screw", "FHS"),
    ("narrow_flat_head_screw", "NFHS"),
    ("standard_flat_head_screw", "SFHS"),
    ("undercut_flat_head_screw", "UFHS"),
    ("wide_flat_head_screw", "WFHS"),
    # Other heads
    ("pan_head_screw", "PHS"),
    ("hex_head_screw", "HHS"),
    ("rounded_head_screw", "RHS"),
    ("standard_oval_head_screw", "SOHS"),
    ("undercut_oval_head_screw", "UOHS"),
    ("oval_head_screw", "OHS"),
    ("square_head_screw", "SQHS"),
    ("binding_head_screw", "BNHS"),
    ("carriage_head_screw", "CRHS"),
    ("cheese_head_screw", "CHHS"),
    ("fillister_head_screw", "FILHS"),
    ("pancake_head_screw", "PCHS"),
    ("round_head_screw", "RDHS"),
    ("truss_head_screw", "TRHS"),
    ("12_point_head_screw", "12PHS"),
    ("domed_head_screw", "DHS"),
    ("headless_screw", "HLS"),
    ("pentagon_head_screw", "PNHS"),
    ("t_slot_screw", "TSS"),
)

HAND_SCREWS = (
    ("thumb_screw", "THUMB"),
    ("four_arm_thumb_screw", "FATS"),
    ("hex_thumb_screw", "HXTS"),
    ("multilobe_thumb_screw", "MLTS"),
    ("rectangle_thumb_screw", "RCTS"),
    ("round_thumb_screw", "RDTS"),
    ("spade_thumb_screw", "SPTS"),
    ("two_arm_thumb_screw", "TATS"),
    ("wing_thumb_screw", "WTS"),
    ("t_handle_screw", "THS"),
    ("l_handle_screw", "LHS"),
    ("captive_panel_screw", "CPS"),
    ("eye_screw", "EYE"),
    ("hook_screw", "HOOK"),
    ("ring_screw", "RING"),
    ("knob_screw", "KNOB"),
    ("threaded_screw", "TRDS"),
    ("tee_screw", "TEE"),
    ("generic_screw", "SCREW"),
)


def create_screw_abbreviations() -> Dict[str, str]:
    """Materials, grades, finishes and drive styles for screws."""
    abbrevs = base_material_abbreviations()
    abbrevs.update(steel_grade_abbreviations())
    abbrevs.update(finish_abbreviations())

    # Drive styles
    abbrevs.update({
        "External Hex": "EHEX",
        "Hex": "HEX",
        "Phillips": "PH",
        "Torx": "TX",
        "Torx Plus": "TXP",
        "Slotted": "SL",
        "Square": "SQUARE",
        "Tamper-Resistant Hex": "TRHEX",
        "Tamper-Resistant Torx": "TRTX",
        "Pozidriv®": "PZ",
        "Pozidriv": "PZ",
        "6-Lobe": "6L",
        "12-Point": "12PT",
        "Double Hex": "DHEX",
        "Splined": "SPL",
        "Triangle": "TRI",
        "Spline": "SP",
        "Clutch": "CLU",
        "One-Way": "1WAY",
        "Pin-in-Torx": "PINTX",
        "Pin Hex": "PINHEX",
        "Phillips/Slotted": "PHSL",
    })
    return abbrevs


def build_screw_templates() -> Dict[str, NamingTemplate]:
    """All screw templates, sharing one abbreviation dictionary."""
    abbrevs = freeze(create_screw_abbreviations())

    templates = build_family(
        "screw", abbrevs,
        [(key, prefix, DRIVEN_SCREW_SPECS) for key, prefix in THREAD_FORMING_SCREWS + DRIVEN_HEAD_SCREWS],
    )
    templates.update(build_family(
        "screw", abbrevs,
        [(key, prefix, HAND_SCREW_SPECS) for key, prefix in HAND_SCREWS],
    ))
    return templates

"""
Category Detector

Maps a catalog product to a category key by scanning its lower-cased family
description and product category. Rules are evaluated top to bottom and the
first match wins, so more specific phrases must come before the phrases they
contain ("thread-forming" before "socket head", "narrow flat head" before
"flat head").

Families:
- Screws: thread-forming variants, then head and drive styles
- Washers, nuts, unthreaded spacers, standoffs
- Bearings: mounted, flanged, sleeve, rolling
- Pins, shaft collars, pulleys and sheaves
- Latches and cable holders
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from ..models.product import ProductRecord

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "unknown"

# (phrases, key): matches when any phrase occurs in the family description
PhraseRule = Tuple[Tuple[str, ...], str]

THREAD_FORMING_RULES: List[PhraseRule] = [
    (("button head",), "thread_forming_button_head_screw"),
    (("high socket head",), "thread_forming_high_socket_head_screw"),
    (("low socket head", "low-profile socket head"), "thread_forming_low_socket_head_screw"),
    (("socket head",), "thread_forming_socket_head_screw"),
    (("flat head",), "thread_forming_flat_head_screw"),
    (("pan head",), "thread_forming_pan_head_screw"),
    (("hex head",), "thread_forming_hex_head_screw"),
]

# Every screw rule additionally requires "screw" in the family description.
# "ultra low socket head" sits after "low socket head" and is shadowed by it;
# catalog data relies on that order, so it is kept.
SCREW_RULES: List[PhraseRule] = [
    (("button head",), "button_head_screw"),
    (("high socket head",), "high_socket_head_screw"),
    (("low socket head", "low-profile socket head"), "low_socket_head_screw"),
    (("ultra low socket head", "ultra low-profile socket head"), "ultra_low_socket_head_screw"),
    (("standard socket head",), "standard_socket_head_screw"),
    (("socket head",), "socket_head_screw"),
    (("narrow flat head",), "narrow_flat_head_screw"),
    (("standard flat head",), "standard_flat_head_screw"),
    (("undercut flat head",), "undercut_flat_head_screw"),
    (("wide flat head",), "wide_flat_head_screw"),
    (("flat head",), "flat_head_screw"),
    (("pan head",), "pan_head_screw"),
    (("hex head",), "hex_head_screw"),
    (("standard oval head",), "standard_oval_head_screw"),
    (("undercut oval head",), "undercut_oval_head_screw"),
    (("oval head",), "oval_head_screw"),
    (("square head",), "square_head_screw"),
    (("binding head",), "binding_head_screw"),
    (("carriage head",), "carriage_head_screw"),
    (("cheese head",), "cheese_head_screw"),
    (("fillister head",), "fillister_head_screw"),
    (("pancake head",), "pancake_head_screw"),
    (("round head",), "round_head_screw"),
    (("truss head",), "truss_head_screw"),
    (("rounded head",), "rounded_head_screw"),
    (("12-point",), "12_point_head_screw"),
    (("t-handle",), "t_handle_screw"),
    (("t-slot",), "t_slot_screw"),
    (("l-handle",), "l_handle_screw"),
    (("domed",), "domed_head_screw"),
    (("headless",), "headless_screw"),
    (("pentagon",), "pentagon_head_screw"),
    (("four arm thumb",), "four_arm_thumb_screw"),
    (("hex thumb",), "hex_thumb_screw"),
    (("multilobe thumb",), "multilobe_thumb_screw"),
    (("rectangle thumb",), "rectangle_thumb_screw"),
    (("round thumb",), "round_thumb_screw"),
    (("spade thumb",), "spade_thumb_screw"),
    (("two arm thumb",), "two_arm_thumb_screw"),
    (("wing thumb",), "wing_thumb_screw"),
    (("thumb",), "thumb_screw"),
    (("captive panel",), "captive_panel_screw"),
    (("hook",), "hook_screw"),
    (("ring",), "ring_screw"),
    (("eye",), "eye_screw"),
    (("knob",), "knob_screw"),
    (("threaded",), "threaded_screw"),
    (("tee",), "tee_screw"),
]

WASHER_RULES: List[PhraseRule] = [
    (("cup",), "cup_washer"),
    (("curved",), "curved_washer"),
    (("dished",), "dished_washer"),
    (("domed",), "domed_washer"),
    (("double clipped", "double-clipped"), "double_clipped_washer"),
    (("clipped",), "clipped_washer"),
    (("hillside",), "hillside_washer"),
    (("notched",), "notched_washer"),
    (("perforated",), "perforated_washer"),
    (("pronged",), "pronged_washer"),
    (("rectangular",), "rectangular_washer"),
    (("sleeve",), "sleeve_washer"),
    (("slotted",), "slotted_washer"),
    (("spherical",), "spherical_washer"),
    (("split",), "split_washer"),
    (("square",), "square_washer"),
    (("tab",), "tab_washer"),
    (("tapered",), "tapered_washer"),
    (("tooth",), "tooth_washer"),
    (("wave",), "wave_washer"),
    (("wedge",), "wedge_washer"),
]

LOCKNUT_WORDS = ("locknut", "lock nut")

# (phrases, key, requires a locknut word)
LOCKING_NUT_RULES: List[Tuple[Tuple[str, ...], str, bool]] = [
    (("cotter pin",), "cotter_pin_locknut", True),
    (("distorted thread",), "distorted_thread_locknut", True),
    (("flex-top",), "flex_top_locknut", True),
    (("lock washer",), "lock_washer_locknut", True),
    (("nylon insert", "nylon-insert"), "nylon_insert_locknut", False),
    (("serrations",), "serrations_locknut", True),
    (("spring-stop",), "spring_stop_locknut", True),
    (("steel insert",), "steel_insert_locknut", True),
    (LOCKNUT_WORDS, "generic_locknut", False),
]

NUT_RULES: List[PhraseRule] = [
    (("acorn nut", "acornnut"), "acorn_nut"),
    (("barrel nut",), "barrel_nut"),
    (("cage nut",), "cage_nut"),
    (("castle nut",), "castle_nut"),
    (("clinch nut",), "clinch_nut"),
    (("coupling nut",), "coupling_nut"),
    (("flange nut", "flangenut"), "flange_nut"),
    (("hex nut", "hexnut"), "hex_nut"),
    (("jam nut",), "jam_nut"),
    (("knurled thumb nut",), "knurled_thumb_nut"),
    (("machine screw nut",), "machine_screw_nut"),
    (("panel nut",), "panel_nut"),
    (("push on nut", "push-on nut"), "push_on_nut"),
    (("rivet nut",), "rivet_nut"),
    (("round nut",), "round_nut"),
    (("screw mount",), "screw_mount_nut"),
    (("snap in", "snap-in"), "snap_in_nut"),
    (("socket nut",), "socket_nut"),
    (("speed",), "speed_nut"),
    (("square",), "square_nut"),
    (("tamper resistant", "tamper-resistant"), "tamper_resistant_nut"),
    (("threadless",), "threadless_nut"),
    (("thumb",), "thumb_nut"),
    (("tube end",), "tube_end_nut"),
    (("twist close", "twist-close"), "twist_close_nut"),
    (("weld",), "weld_nut"),
    (("with pilot hole",), "with_pilot_hole_nut"),
    (("wing nut", "wingnut"), "wing_nut"),
    (("cap nut", "capnut"), "cap_nut"),
]

BEARING_RULES: List[PhraseRule] = [
    (("sleeve", "plain"), "sleeve_bearing"),
    (("ball",), "ball_bearing"),
    (("linear",), "linear_bearing"),
    (("needle",), "needle_bearing"),
    (("roller",), "roller_bearing"),
]

# Wire rope and fiber rope are resolved before this table
PULLEY_RULES: List[PhraseRule] = [
    (("v-belt", "belt"), "v_belt_pulley"),
    (("sheave",), "sheave"),
]

LATCH_RULES: List[PhraseRule] = [
    (("draw",), "draw_latch"),
    (("toggle",), "toggle_latch"),
    (("compression",), "compression_latch"),
    (("slam",), "slam_latch"),
]


def _contains_any(text: str, phrases: Sequence[str]) -> bool:
    return any(phrase in text for phrase in phrases)


def _first_match(text: str, rules: Sequence[PhraseRule], default: str, require: str = "") -> str:
    """Key of the first rule whose phrases occur in text, else default."""
    for phrases, key in rules:
        if _contains_any(text, phrases) and require in text:
            return key
    return default


# === Family sub-waterfalls ===

def _thread_forming_type(product: ProductRecord, family: str, category: str) -> str:
    return _first_match(family, THREAD_FORMING_RULES, "thread_forming_screw", require="screw")


def _screw_type(product: ProductRecord, family: str, category: str) -> str:
    return _first_match(family, SCREW_RULES, "generic_screw", require="screw")


def _washer_type(product: ProductRecord, family: str, category: str) -> str:
    return _first_match(family, WASHER_RULES, "flat_washer")


def _nut_type(product: ProductRecord, family: str, category: str) -> str:
    is_locknut = _contains_any(family, LOCKNUT_WORDS)
    for phrases, key, needs_locknut in LOCKING_NUT_RULES:
        if _contains_any(family, phrases) and (is_locknut or not needs_locknut):
            return key
    return _first_match(family, NUT_RULES, "generic_nut")


def _spacer_type(product: ProductRecord, family: str, category: str) -> str:
    if "aluminum" in family:
        return "aluminum_unthreaded_spacer"
    if _contains_any(family, ("stainless steel", "18-8", "316")):
        return "stainless_steel_unthreaded_spacer"
    if "nylon" in family:
        return "nylon_unthreaded_spacer"
    return "unthreaded_spacer"


def _standoff_type(product: ProductRecord, family: str, category: str) -> str:
    if _contains_any(family, ("male-female", "male female")):
        return "male_female_hex_standoff"
    if "female" in family and "threaded" in family:
        return "female_hex_standoff"
    return "generic_standoff"


def _mounted_bearing_type(product: ProductRecord, family: str) -> str:
    mount_type = (product.spec_value("Mounted Bearing Type") or "").lower()
    description = product.detail_description.lower()

    if "flange" in mount_type:
        low_profile = ("low-profile", "low profile")
        if _contains_any(family, low_profile) or _contains_any(description, low_profile):
            return "low_profile_flange_mounted_ball_bearing"
        return "flange_mounted_ball_bearing"
    if "pillow" in mount_type:
        return "pillow_block_mounted_ball_bearing"
    return "generic_mounted_bearing"


def _bearing_type(product: ProductRecord, family: str, category: str) -> str:
    if "mounted" in family or "mounted" in category:
        return _mounted_bearing_type(product, family)

    plain_type = product.spec_value("Plain Bearing Type") or ""
    if "flanged" in family or plain_type.lower() == "flanged":
        if _contains_any(family, ("sleeve", "plain")):
            return "flanged_sleeve_bearing"
        return "flanged_bearing"

    return _first_match(family, BEARING_RULES, "generic_bearing")


def _pin_type(product: ProductRecord, family: str, category: str) -> str:
    if "clevis pin with retaining ring groove" in family:
        return "clevis_pin_with_retaining_ring_groove"
    if "clevis pin" in family:
        return "clevis_pin"
    return "generic_pin"


def _shaft_collar_type(product: ProductRecord, family: str, category: str) -> str:
    if _contains_any(family, ("face-mount shaft collar", "face mount shaft collar")):
        return "face_mount_shaft_collar"
    if _contains_any(family, ("flange-mount shaft collar", "flange mount shaft collar")):
        return "flange_mount_shaft_collar"
    return "generic_shaft_collar"


def _pulley_type(product: ProductRecord, family: str, category: str) -> str:
    if "wire rope" in family:
        return "wire_rope_pulley"
    if "rope" in family and "wire" not in family:
        return "rope_pulley"
    return _first_match(family, PULLEY_RULES, "pulley")


def _latch_type(product: ProductRecord, family: str, category: str) -> str:
    return _first_match(family, LATCH_RULES, "generic_latch")


def _cable_holder_type(product: ProductRecord, family: str, category: str) -> str:
    # Adhesive-backed holders take no mounting screw
    if "adhesive" in family:
        return "generic_cable_holder"
    return "cable_holder"


# === Top-level waterfall ===

Matcher = Callable[[str, str], bool]
Resolver = Callable[[ProductRecord, str, str], str]

FAMILY_RULES: List[Tuple[str, Matcher, Resolver]] = [
    ("thread-forming screw",
     lambda f, c: _contains_any(f, ("thread-forming", "thread forming")),
     _thread_forming_type),
    ("screw", lambda f, c: "screw" in f, _screw_type),
    ("washer", lambda f, c: "washer" in f, _washer_type),
    ("nut", lambda f, c: "nut" in c or "nut" in f, _nut_type),
    ("spacer",
     lambda f, c: "unthreaded spacer" in f or ("spacers" in c and "spacer" in f),
     _spacer_type),
    ("standoff", lambda f, c: "standoff" in c or "standoff" in f, _standoff_type),
    ("bearing", lambda f, c: "bearing" in c or "bearing" in f, _bearing_type),
    ("pin", lambda f, c: "pins" in c or "pin" in f, _pin_type),
    ("shaft collar",
     lambda f, c: "shaft collars" in c or "shaft collar" in f,
     _shaft_collar_type),
    ("pulley",
     lambda f, c: "pulleys" in c or "pulley" in f or "sheave" in f,
     _pulley_type),
    ("latch", lambda f, c: "latch" in f or "latches" in c, _latch_type),
    ("cable holder",
     lambda f, c: "cable holder" in f or "cable holders" in c,
     _cable_holder_type),
]


def match_family(product: ProductRecord) -> Optional[str]:
    """Name of the first family rule that matches, or None."""
    family = product.family_description.lower()
    category = product.product_category.lower()
    for name, matches, _ in FAMILY_RULES:
        if matches(family, category):
            return name
    return None


def determine_category(product: ProductRecord) -> str:
    """
    Determine the category key for a product.

    Args:
        product: Catalog record; only the family description, product
            category, detail description and a few specifications are read

    Returns:
        Category key such as "button_head_screw", or "unknown"
    """
    family = product.family_description.lower()
    category = product.product_category.lower()

    for name, matches, resolve in FAMILY_RULES:
        if matches(family, category):
            key = resolve(product, family, category)
            logger.debug("%s: %s rule matched -> %s", product.part_number, name, key)
            return key

    logger.debug("%s: no category rule matched %r", product.part_number, product.family_description)
    return UNKNOWN_CATEGORY

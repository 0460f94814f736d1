"""Tests for field role classification."""

import pytest

from part_namer.naming.roles import FieldRole, role_for


@pytest.mark.parametrize("field_name,role", [
    ("Material", FieldRole.MATERIAL),
    ("Housing Material", FieldRole.MATERIAL),
    ("Finish", FieldRole.FINISH),
    ("Length", FieldRole.LENGTH),
    ("For Screw Size", FieldRole.SCREW_SIZE),
    ("Usable Length", FieldRole.DIMENSION),
    ("For Shaft Diameter", FieldRole.DIMENSION),
    ("For Rope Diameter", FieldRole.DIMENSION),
    ("Diameter", FieldRole.DIMENSION),
    ("Bore", FieldRole.DIMENSION),
    ("OD", FieldRole.DIMENSION),
    ("Width", FieldRole.DIMENSION),
    ("Overall Height", FieldRole.DIMENSION),
    ("Mounting Hole Center -to-Center", FieldRole.DIMENSION),
    ("Thread Size", FieldRole.THREAD_SIZE),
    ("Thread (A) Size", FieldRole.THREAD_SIZE),
    ("Drive Style", FieldRole.DEFAULT),
    ("Mount Type", FieldRole.DEFAULT),
    ("Latching Distance", FieldRole.DEFAULT),
    ("Type", FieldRole.DEFAULT),
])
def test_role_for(field_name, role):
    """Each logical field name maps to one role."""
    assert role_for(field_name) is role


def test_role_is_case_insensitive():
    """Roles do not depend on the field name's capitalization."""
    assert role_for("material") is FieldRole.MATERIAL
    assert role_for("THREAD SIZE") is FieldRole.THREAD_SIZE


def test_width_substring_is_not_dimension():
    """Only a trailing word counts: 'Widthwise Style' is not a dimension."""
    assert role_for("Widthwise Style") is FieldRole.DEFAULT

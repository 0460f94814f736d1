"""Shared test fixtures for the part_namer test suite."""

import pytest

from part_namer.models.product import ProductRecord, Specification


@pytest.fixture
def make_product():
    """Factory for ProductRecord instances.

    ``specs`` is a dict or a list of (attribute, value) pairs; a value may be
    a single string or a list of strings.
    """
    def _make(family="", specs=None, part_number="TEST-001", category="", detail=""):
        items = specs.items() if isinstance(specs, dict) else (specs or [])
        specifications = [
            Specification(name, (value,) if isinstance(value, str) else tuple(value))
            for name, value in items
        ]
        return ProductRecord(
            part_number=part_number,
            detail_description=detail,
            family_description=family,
            product_category=category,
            specifications=specifications,
        )
    return _make


@pytest.fixture
def button_head_screw(make_product):
    """McMaster 91251A540: 18-8 stainless button head screw, no finish listed."""
    return make_product(
        "Button Head Socket Cap Screw",
        {
            "Material": "18-8 Stainless Steel",
            "Thread Size": "1/4-20",
            "Length": '3/4"',
            "Drive Style": "Hex",
        },
        part_number="91251A540",
        category="Screws",
    )


@pytest.fixture
def mf_standoff(make_product):
    """Male-female standoff whose thread size is only given per end."""
    return make_product(
        "Male-Female Threaded Hex Standoff",
        {
            "Material": "Aluminum",
            "Thread (A) Size": "4-40",
            "Thread (B) Size": "4-40",
            "Length": '1/2"',
        },
        part_number="93505A101",
        category="Standoffs",
    )

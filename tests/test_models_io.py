"""Tests for product models and JSON loading."""

import dataclasses
import json

import pytest

from part_namer.config import default_config
from part_namer.models.product import ProductRecord, Specification
from part_namer.utils.io import load_json_robust, load_product_record, load_product_records

CATALOG_DOCUMENT = {
    "PartNumber": "91251A540",
    "DetailDescription": "Black-Oxide Alloy Steel Socket Head Screw",
    "FamilyDescription": "Button Head Socket Cap Screw",
    "ProductCategory": "Screws",
    "ProductStatus": "Active",
    "Specifications": [
        {"Attribute": "Material", "Values": ["18-8 Stainless Steel"]},
        {"Attribute": "Thread Size", "Values": ["1/4-20"]},
    ],
}


class TestProductRecord:
    """Catalog record model."""

    def test_from_dict(self):
        record = ProductRecord.from_dict(CATALOG_DOCUMENT)

        assert record.part_number == "91251A540"
        assert record.family_description == "Button Head Socket Cap Screw"
        assert record.product_status == "Active"
        assert record.specifications[0] == Specification("Material", ("18-8 Stainless Steel",))

    def test_from_dict_missing_keys(self):
        record = ProductRecord.from_dict({"PartNumber": "X1"})
        assert record.family_description == ""
        assert record.specifications == ()

    def test_string_values_are_wrapped(self):
        record = ProductRecord.from_dict({
            "PartNumber": "X1",
            "Specifications": [{"Attribute": "Material", "Values": "Brass"}],
        })
        assert record.spec_value("Material") == "Brass"

    def test_to_dict_uses_catalog_keys(self):
        assert ProductRecord.from_dict(CATALOG_DOCUMENT).to_dict() == CATALOG_DOCUMENT

    def test_find_spec_case_insensitive(self, button_head_screw):
        assert button_head_screw.find_spec("thread size").first_value == "1/4-20"
        assert button_head_screw.find_spec("Finish") is None
        assert button_head_screw.spec_value("Finish") is None

    def test_first_value_of_empty_spec(self):
        assert Specification("Finish").first_value == ""

    def test_immutable(self, button_head_screw):
        with pytest.raises(dataclasses.FrozenInstanceError):
            button_head_screw.part_number = "other"
        assert isinstance(button_head_screw.specifications, tuple)


class TestLoaders:
    """JSON loading with encoding fallback."""

    def test_load_single_record(self, tmp_path):
        path = tmp_path / "product.json"
        path.write_text(json.dumps(CATALOG_DOCUMENT), encoding="utf-8")

        record, error = load_product_record(path)
        assert error is None
        assert record.part_number == "91251A540"

    def test_bom_is_accepted(self, tmp_path):
        path = tmp_path / "product.json"
        path.write_text(json.dumps(CATALOG_DOCUMENT), encoding="utf-8-sig")

        data, error = load_json_robust(path)
        assert error is None
        assert data["PartNumber"] == "91251A540"

    def test_latin1_is_accepted(self, tmp_path):
        """Non-UTF-8 text falls back to latin-1."""
        path = tmp_path / "product.json"
        document = {"PartNumber": "A1", "FamilyDescription": "Café"}
        path.write_bytes(json.dumps(document, ensure_ascii=False).encode("latin-1"))

        record, error = load_product_record(path)
        assert error is None
        assert record.family_description == "Café"

    def test_products_wrapper(self, tmp_path):
        path = tmp_path / "products.json"
        second = dict(CATALOG_DOCUMENT, PartNumber="91251A541")
        path.write_text(json.dumps({"Products": [CATALOG_DOCUMENT, second]}), encoding="utf-8")

        records, error = load_product_records(path)
        assert error is None
        assert [r.part_number for r in records] == ["91251A540", "91251A541"]

    def test_missing_file(self, tmp_path):
        record, error = load_product_record(tmp_path / "nope.json")
        assert record is None
        assert error.startswith("File not found")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        data, error = load_json_robust(path)
        assert data is None
        assert error.startswith("JSON error")

    def test_no_records(self, tmp_path):
        path = tmp_path / "number.json"
        path.write_text("42", encoding="utf-8")

        records, error = load_product_records(path)
        assert records == []
        assert error.startswith("No product records")


def test_default_config():
    assert default_config.name_separator == "-"
    assert default_config.suppressed_finish_tokens == ("PASS",)
    assert default_config.max_decimal_places == 5

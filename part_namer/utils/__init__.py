"""Utility modules (catalog file loading)."""

from .io import load_json_robust, load_product_record, load_product_records

__all__ = [
    "load_json_robust",
    "load_product_record",
    "load_product_records",
]

"""File I/O utilities."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.product import ProductRecord


def load_json_robust(filepath: Union[str, Path]) -> Tuple[Optional[Any], Optional[str]]:
    """
    Read a saved catalog response, tolerating a BOM or latin-1 text.

    Returns:
        (parsed JSON, None) or (None, error message)
    """
    filepath = Path(filepath)

    if not filepath.exists():
        return None, f"File not found: {filepath}"

    for encoding in ["utf-8-sig", "utf-8", "latin-1"]:
        try:
            with open(filepath, "r", encoding=encoding) as f:
                return json.load(f), None
        except UnicodeDecodeError:
            continue
        except json.JSONDecodeError as e:
            return None, f"JSON error: {str(e)[:100]}"
        except OSError as e:
            return None, f"Error: {str(e)[:100]}"

    return None, f"Failed all encodings for: {filepath}"


def _product_documents(data: Any) -> List[Dict[str, Any]]:
    """Product documents in a saved response: one object, a list, or {"Products": [...]}."""
    if isinstance(data, list):
        return [d for d in data if isinstance(d, dict)]
    if isinstance(data, dict):
        products = data.get("Products")
        if isinstance(products, list):
            return [d for d in products if isinstance(d, dict)]
        return [data]
    return []


def load_product_records(filepath: Union[str, Path]) -> Tuple[List[ProductRecord], Optional[str]]:
    """
    Load every product record from a saved catalog response.

    Returns:
        Tuple of (records, error); records is empty when error is set

    Example:
        records, err = load_product_records("products.json")
        if err:
            print(f"Failed to load: {err}")
    """
    data, error = load_json_robust(filepath)
    if error:
        return [], error

    documents = _product_documents(data)
    if not documents:
        return [], f"No product records in: {filepath}"
    return [ProductRecord.from_dict(d) for d in documents], None


def load_product_record(filepath: Union[str, Path]) -> Tuple[Optional[ProductRecord], Optional[str]]:
    """
    Load a single product record (the first one, if the file holds several).

    Returns:
        Tuple of (record, error)
    """
    records, error = load_product_records(filepath)
    if error:
        return None, error
    return records[0], None

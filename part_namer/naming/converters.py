"""Dimension and thread notation conversion.

Catalog dimensions come as inch fractions ("13/32\""), mixed numbers
("1-3/8\"" or "1 3/8\""), whole inches ("2\"") or metric ("10mm").
Names carry them as plain decimals so that sizes sort and compare.

Usage:
    from part_namer.naming.converters import convert_length_to_decimal

    convert_length_to_decimal('3/4"')    # "0.75"
    convert_length_to_decimal('1-3/8"')  # "1.375"
    convert_length_to_decimal('10mm')    # "10"
"""

import re
from fractions import Fraction
from typing import Optional

from ..config import default_config
from ..models.product import ProductRecord


# Whole part, optional "-num/den" or bare "num/den" / decimal
_MIXED_NUMBER = re.compile(r'^(\d+)-(\d+)/(\d+)$')
_FRACTION = re.compile(r'^(\d+)/(\d+)$')
_DECIMAL = re.compile(r'^(\d+(?:\.\d+)?|\.\d+)$')

# "M5 x 0.8 mm Thread" in a detail description
METRIC_PITCH_PATTERN = re.compile(
    r'M\d+(?:\.\d+)?\s*[xX×]\s*(\d+(?:\.\d+)?)\s*mm',
)

_NO_PREFIX = re.compile(r'^No\.\s*', re.IGNORECASE)


def format_decimal(value: Fraction, max_places: Optional[int] = None) -> str:
    """
    Render a number without noise.

    Integral values have no decimal point; others are rounded to
    ``max_places`` and lose trailing zeros ("0.40625", "0.5").
    """
    if max_places is None:
        max_places = default_config.max_decimal_places
    if value.denominator == 1:
        return str(value.numerator)
    # Integer arithmetic: catalog numbers of any size format without overflow
    scale = 10 ** max_places
    scaled = round(value * scale)
    whole, frac = divmod(abs(scaled), scale)
    sign = "-" if scaled < 0 else ""
    if max_places == 0:
        return f"{sign}{whole}"
    text = f"{whole}.{frac:0{max_places}d}".rstrip("0").rstrip(".")
    return f"{sign}{text}" if text != "0" else "0"


def parse_inch_value(text: str) -> Optional[Fraction]:
    """
    Parse a cleaned inch value ("3/4", "1-3/8", "2", "0.5").

    Returns:
        Exact Fraction, or None if the text is not a number or the
        denominator is zero
    """
    mixed = _MIXED_NUMBER.match(text)
    if mixed:
        whole, num, den = (int(g) for g in mixed.groups())
        if den == 0:
            return None
        return whole + Fraction(num, den)

    frac = _FRACTION.match(text)
    if frac:
        num, den = int(frac.group(1)), int(frac.group(2))
        if den == 0:
            return None
        return Fraction(num, den)

    if _DECIMAL.match(text):
        return Fraction(text)

    return None


def convert_length_to_decimal(value: str, max_places: Optional[int] = None) -> str:
    """
    Convert an inch fraction or metric dimension to a decimal string.

    Args:
        value: Catalog dimension text
        max_places: Decimal places kept for non-integral results

    Returns:
        Decimal string. Unparseable inch values come back cleaned (quotes
        dropped, spaces turned into hyphens) but otherwise unconverted.
        Values with neither an inch mark nor "mm" are returned unchanged.
    """
    if '"' in value:
        # "1 3/8" is the same number as "1-3/8"
        clean = value.replace('"', '').strip().replace(' ', '-')
        parsed = parse_inch_value(clean)
        if parsed is None:
            return clean
        return format_decimal(parsed, max_places)

    if 'mm' in value:
        return value.replace('mm', '').strip()

    return value


def extract_thread_with_pitch(product: ProductRecord, thread_size: str) -> str:
    """
    Normalize a thread size and add the pitch when the catalog splits it out.

    - Hyphen separators become 'x' ("1/4-20" -> "1/4x20")
    - Metric sizes without a pitch take it from the detail description
      ("M5 x 0.8 mm Thread"), then from a "Thread Pitch" specification
    - Inch sizes without a pitch take it from a "... Threads per Inch"
      specification, dropping a leading "No. " ("No. 10" -> "10x32")

    Returns:
        Normalized thread designation (unchanged pitch-wise if none found)
    """
    thread_with_x = thread_size.replace('-', 'x')

    if 'x' in thread_with_x:
        return thread_with_x

    if thread_with_x.startswith('M'):
        match = METRIC_PITCH_PATTERN.search(product.detail_description)
        if match:
            return f"{thread_with_x}x{match.group(1)}"

        pitch = _find_value(product, lambda name: name == "thread pitch")
        if pitch:
            clean_pitch = pitch.replace('mm', '').strip()
            if clean_pitch:
                return f"{thread_with_x}x{clean_pitch}"
        return thread_with_x

    tpi = _find_value(product, lambda name: name.endswith("threads per inch"))
    if tpi:
        size = _NO_PREFIX.sub('', thread_with_x)
        return f"{size}x{tpi.strip()}"

    return thread_with_x


def _find_value(product: ProductRecord, predicate) -> Optional[str]:
    """First value of the first specification whose lower-cased name satisfies predicate."""
    for spec in product.specifications:
        if predicate(spec.attribute.lower()) and spec.values:
            return spec.values[0]
    return None

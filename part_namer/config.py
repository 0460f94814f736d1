"""
Configuration for the Part Namer.

All settings centralized here. Override by creating a Config instance
with custom values and passing it to NameGenerator / PartAnalyzer.

Usage:
    from part_namer.config import Config, default_config

    # Use defaults
    print(default_config.name_separator)  # "-"

    # Override for a run
    my_config = Config(fallback_word_count=3)
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class Config:
    """
    Central configuration for name generation and analysis.

    The defaults reproduce the canonical naming scheme. Changing them
    changes every generated name, so overrides are meant for experiments
    and reports, not for names that get stored elsewhere.
    """

    # === Name assembly ===
    name_separator: str = "-"

    # Finish tokens that add no information and are dropped from names
    suppressed_finish_tokens: Tuple[str, ...] = ("PASS",)

    # === Fraction -> decimal conversion ===
    max_decimal_places: int = 5

    # === Fallback naming ===
    fallback_word_count: int = 4          # Words taken from the family description
    fallback_unknown_label: str = "UNKNOWN"

    # === Analyzer ===
    # Finish guesses offered in the suggested name, checked in order
    finish_guesses: Tuple[Tuple[str, str], ...] = field(
        default_factory=lambda: (
            ("stainless", "PASS"),
            ("steel", "ZP"),
            ("brass", "UNFINISHED"),
            ("aluminum", "CLEAR"),
        )
    )
    unknown_finish_guess: str = "?"

    # === Report output ===
    json_indent: int = 2
    report_show_template: bool = True
    report_show_aliases: bool = False


# Default configuration instance
default_config = Config()

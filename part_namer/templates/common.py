"""Abbreviation groups reused by the family builders.

Each function returns a new dict; a family merges the groups it needs
into its own dictionary, so no two families share an instance.
"""

from typing import Dict


def base_material_abbreviations() -> Dict[str, str]:
    """Metals and plastics common to most fastener families."""
    return {
        "316 Stainless Steel": "SS316",
        "18-8 Stainless Steel": "SS188",
        "Stainless Steel": "SS",
        "Steel": "S",
        "Alloy Steel": "S",
        "Brass": "Brass",
        "Aluminum": "AL",
        "Nylon": "Nylon",
        "Plastic": "Plastic",
    }


def steel_grade_abbreviations(include_alloy: bool = True) -> Dict[str, str]:
    """Strength-graded steels, as produced by the grade upgrade."""
    abbrevs = {
        "Grade 1 Steel": "SG1",
        "Grade 2 Steel": "SG2",
        "Grade 5 Steel": "SG5",
        "Grade 8 Steel": "SG8",
        "8.8 Steel": "S8.8",
        "10.9 Steel": "S10.9",
        "12.9 Steel": "S12.9",
    }
    if include_alloy:
        abbrevs.update({
            "Grade 1 Alloy Steel": "SG1",
            "Grade 2 Alloy Steel": "SG2",
            "Grade 5 Alloy Steel": "SG5",
            "Grade 8 Alloy Steel": "SG8",
            "8.8 Alloy Steel": "S8.8",
            "10.9 Alloy Steel": "S10.9",
            "12.9 Alloy Steel": "S12.9",
        })
    return abbrevs


def finish_abbreviations() -> Dict[str, str]:
    """Plating and coating finishes. "Unfinished" contributes no token."""
    return {
        "Zinc Plated": "ZP",
        "Zinc-Plated": "ZP",
        "Zinc Yellow-Chromate Plated": "ZYC",
        "Zinc Yellow Chromate Plated": "ZYC",
        "Black Oxide": "BO",
        "Black-Oxide": "BO",
        "Cadmium Plated": "CD",
        "Cadmium-Plated": "CD",
        "Nickel Plated": "NI",
        "Nickel-Plated": "NI",
        "Chrome Plated": "CR",
        "Chrome-Plated": "CR",
        "Galvanized": "GAL",
        "Unfinished": "",
    }


def inch_fraction_abbreviations() -> Dict[str, str]:
    """Quoted inch fractions for fields that are not routed through the converter."""
    return {
        "1/8\"": "0.125",
        "3/16\"": "0.1875",
        "1/4\"": "0.25",
        "5/16\"": "0.3125",
        "3/8\"": "0.375",
        "1/2\"": "0.5",
        "5/8\"": "0.625",
        "3/4\"": "0.75",
        "1\"": "1",
    }

"""
Part Namer v1.0

Short, deterministic part names for catalog hardware.

Pipeline:
- Category detection: ordered phrase rules over the family description
- Template lookup: prefix, field order, aliases and abbreviations per category
- Name assembly: role-based transforms per field (material, finish,
  dimensions, thread size)
- Part analysis: how a name came about, plus improvement suggestions

Example:
    BHS-SS188-1/4x20-0.75-HEX  (button head screw, 18-8 stainless, 1/4"-20, 3/4" long, hex drive)
"""

__version__ = "1.0.0"


def __getattr__(name):
    """Lazy imports so that importing a submodule (e.g. models) does not
    build the template registry."""

    _model_names = {
        "ProductRecord", "Specification", "PartAnalysis", "SpecAnalysis", "NameComponent",
    }
    _naming_names = {
        "NameGenerator", "generate_name", "fallback_name", "FieldRole",
        "convert_length_to_decimal", "abbreviate_value",
    }
    _classifier_names = {
        "determine_category",
    }
    _template_names = {
        "NamingTemplate", "TemplateRegistry", "get_registry",
    }
    _analyzer_names = {
        "PartAnalyzer", "analyze_part",
    }
    _report_names = {
        "AnalysisReport", "format_human", "format_json", "generate_report",
    }

    if name in _model_names:
        from . import models
        return getattr(models, name)
    elif name in _naming_names:
        from . import naming
        return getattr(naming, name)
    elif name in _classifier_names:
        from . import classifier
        return getattr(classifier, name)
    elif name in _template_names:
        from . import templates
        return getattr(templates, name)
    elif name in _analyzer_names:
        from . import analyzers
        return getattr(analyzers, name)
    elif name in _report_names:
        from . import report
        return getattr(report, name)
    elif name in ("Config", "default_config"):
        from . import config
        return getattr(config, name)

    raise AttributeError(f"module 'part_namer' has no attribute {name!r}")

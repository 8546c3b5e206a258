from cascade.model.breakpoint import (
    DEFAULT_SCREENS,
    Breakpoint,
    breakpoints_from_mapping,
    parse_width,
    sort_breakpoints,
)
from cascade.model.diagnostic import Diagnostic, Severity
from cascade.model.rule import GeneratedRule, RawRule, raw_rules
from cascade.model.variant import (
    DEFAULT,
    RESPONSIVE,
    VariantList,
    cast_variants,
    ensure_unique,
    find_duplicate,
)

__all__ = [
    "DEFAULT",
    "DEFAULT_SCREENS",
    "RESPONSIVE",
    "Breakpoint",
    "Diagnostic",
    "GeneratedRule",
    "RawRule",
    "Severity",
    "VariantList",
    "breakpoints_from_mapping",
    "cast_variants",
    "ensure_unique",
    "find_duplicate",
    "parse_width",
    "raw_rules",
    "sort_breakpoints",
]

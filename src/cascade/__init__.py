"""Cascade: variant order resolution and rule emission for utility CSS."""

__version__ = "0.1.0"

from cascade.config import EngineConfig, load_config, load_rules
from cascade.defaults import DEFAULT_TABLE, DefaultTable
from cascade.engine import generate, resolve_config
from cascade.errors import (
    CascadeError,
    ConfigError,
    CyclicVariantReferenceError,
    DuplicateVariantError,
    ExpressionError,
    ParseError,
    UnknownPluginError,
    UnknownVariantNameError,
)
from cascade.expression import Expression, parse_expression
from cascade.model import Breakpoint, GeneratedRule, RawRule
from cascade.resolver import ResolvedOrder, UnknownPluginPolicy, VariantAlgebra, resolve
from cascade.sequencer import (
    UnknownVariantPolicy,
    VariantDefinition,
    VariantRegistry,
    sequence,
)

__all__ = [
    "__version__",
    "DEFAULT_TABLE",
    "Breakpoint",
    "CascadeError",
    "ConfigError",
    "CyclicVariantReferenceError",
    "DefaultTable",
    "DuplicateVariantError",
    "EngineConfig",
    "Expression",
    "ExpressionError",
    "GeneratedRule",
    "ParseError",
    "RawRule",
    "ResolvedOrder",
    "UnknownPluginError",
    "UnknownPluginPolicy",
    "UnknownVariantNameError",
    "UnknownVariantPolicy",
    "VariantAlgebra",
    "VariantDefinition",
    "VariantRegistry",
    "generate",
    "load_config",
    "load_rules",
    "parse_expression",
    "resolve",
    "resolve_config",
    "sequence",
]

from cascade.sequencer.sequencer import (
    UnknownVariantPolicy,
    build_group,
    core_variants,
    sequence,
)
from cascade.sequencer.variants import (
    BUILTIN_VARIANTS,
    DEFAULT_REGISTRY,
    VariantDefinition,
    VariantRegistry,
    escape_class_name,
    prefix_classes,
    split_selector_list,
)

__all__ = [
    "BUILTIN_VARIANTS",
    "DEFAULT_REGISTRY",
    "UnknownVariantPolicy",
    "VariantDefinition",
    "VariantRegistry",
    "build_group",
    "core_variants",
    "escape_class_name",
    "prefix_classes",
    "sequence",
    "split_selector_list",
]

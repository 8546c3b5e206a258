from cascade.resolver.algebra import VariantAlgebra, insert_after, insert_before, remove
from cascade.resolver.resolver import (
    ResolvedOrder,
    ResolverFunction,
    UnknownPluginPolicy,
    UserVariantConfig,
    resolve,
    split_config,
)

__all__ = [
    "ResolvedOrder",
    "ResolverFunction",
    "UnknownPluginPolicy",
    "UserVariantConfig",
    "VariantAlgebra",
    "insert_after",
    "insert_before",
    "remove",
    "resolve",
    "split_config",
]

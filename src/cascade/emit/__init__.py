from cascade.emit.css import render_css, render_rule
from cascade.emit.table import (
    ClassRow,
    class_table,
    format_class_table,
    rules_to_classes,
    stringify_properties,
)

__all__ = [
    "ClassRow",
    "class_table",
    "format_class_table",
    "render_css",
    "render_rule",
    "rules_to_classes",
    "stringify_properties",
]

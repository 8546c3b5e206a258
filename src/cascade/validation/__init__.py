from cascade.validation.rules import ValidationContext
from cascade.validation.validator import ValidationError, validate, validate_or_raise

__all__ = ["ValidationContext", "ValidationError", "validate", "validate_or_raise"]

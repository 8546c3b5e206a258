from cascade.expression.parser import Call, Expression, parse_expression

__all__ = ["Call", "Expression", "parse_expression"]

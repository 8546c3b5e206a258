from cascade.defaults.table import DEFAULT_TABLE, DEFAULT_VARIANTS, DefaultTable

__all__ = ["DEFAULT_TABLE", "DEFAULT_VARIANTS", "DefaultTable"]

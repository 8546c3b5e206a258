from cascade.config.settings import EngineConfig, load_config, load_rules

__all__ = ["EngineConfig", "load_config", "load_rules"]

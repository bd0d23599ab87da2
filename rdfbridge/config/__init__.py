from .config_loader import ConfigurationError, RdfBridgeConfig, get_config, reload_config

__all__ = [
    "ConfigurationError",
    "RdfBridgeConfig",
    "get_config",
    "reload_config",
]

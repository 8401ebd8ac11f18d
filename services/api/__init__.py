from .app import create_app
from .config import APIConfig, ConfigError, load_config, reset_config
from .context import AppContext

__all__ = [
    "create_app",
    "APIConfig",
    "ConfigError",
    "load_config",
    "reset_config",
    "AppContext",
]

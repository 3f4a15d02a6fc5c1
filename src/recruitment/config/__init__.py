# recruitment/config/__init__.py

from .models import AppConfig, DatabaseConfig, LoggingConfig, SecurityConfig, load_config

__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "SecurityConfig",
    "load_config",
]

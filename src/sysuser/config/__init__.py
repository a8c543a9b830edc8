"""設定管理モジュール"""

from sysuser.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from sysuser.config.models import AccountsConfig, Config, LoggingConfig

__all__ = [
    "AccountsConfig",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "LoggingConfig",
    "expand_env_vars",
    "load_config",
]

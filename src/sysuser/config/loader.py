"""YAML設定ファイルの読み込みと環境変数展開"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from sysuser.config.models import (
    ACCOUNT_BACKENDS,
    AccountsConfig,
    Config,
    LoggingConfig,
)


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""


# 環境変数パターン: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する"""
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """任意セクションを取得する

    Raises:
        ConfigValidationError: セクションが mapping でない
    """
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigValidationError(f"Section '{name}' must be a mapping")
    return section


def _parse_bool(value: Any, field: str) -> bool:
    """真偽値を解釈する

    環境変数展開後の文字列 "true" / "false" も受け付ける。
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ConfigValidationError(f"Field '{field}' must be a boolean")


def _load_accounts(data: dict[str, Any]) -> AccountsConfig:
    accounts_data = _section(data, "accounts")

    backend = accounts_data.get("backend", "auto")
    if backend not in ACCOUNT_BACKENDS:
        raise ConfigValidationError(
            f"Field 'accounts.backend' must be one of {', '.join(ACCOUNT_BACKENDS)}"
        )

    return AccountsConfig(
        backend=backend,
        use_effective_id=_parse_bool(
            accounts_data.get("use_effective_id", True), "accounts.use_effective_id"
        ),
    )


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト（全セクション省略可）

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 設定値が不正
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f)

    if raw_data is None:
        return Config()
    if not isinstance(raw_data, dict):
        raise ConfigValidationError("Config root must be a mapping")

    # 環境変数を展開
    data = _expand_recursive(raw_data)

    accounts = _load_accounts(data)

    return Config(accounts=accounts, logging=_load_logging(data))


def _parse_str(value: Any, field: str) -> str:
    """文字列値を検証する"""
    if not isinstance(value, str):
        raise ConfigValidationError(f"Field '{field}' must be a string")
    return value


def _load_logging(data: dict[str, Any]) -> LoggingConfig | None:
    """logging セクションを読み込む（省略時は None）"""
    logging_data = _section(data, "logging")
    if not logging_data:
        return None

    defaults = LoggingConfig()
    loggers = logging_data.get("loggers")
    if loggers is not None:
        if not isinstance(loggers, dict):
            raise ConfigValidationError("Field 'logging.loggers' must be a mapping")
        loggers = {
            _parse_str(name, "logging.loggers"): _parse_str(
                level, f"logging.loggers.{name}"
            )
            for name, level in loggers.items()
        }

    return LoggingConfig(
        level=_parse_str(logging_data.get("level", defaults.level), "logging.level"),
        format=_parse_str(
            logging_data.get("format", defaults.format), "logging.format"
        ),
        loggers=loggers,
    )

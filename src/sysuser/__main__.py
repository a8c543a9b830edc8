"""アプリケーションのエントリポイント

Usage:
    python -m sysuser
    python -m sysuser root 1000 '*'
    python -m sysuser --by-name 1000
    python -m sysuser --config config.yaml alice
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from sysuser.config import Config, ConfigError, LoggingConfig, load_config
from sysuser.domain.entities import ALL_USERS_MARKER, User
from sysuser.domain.exceptions import AccountError
from sysuser.domain.repositories import AccountDatabase
from sysuser.infrastructure.accounts import (
    create_account_database,
    set_account_database,
)

DEFAULT_CONFIG_PATH = Path("config.yaml")

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    root_logger = logging.getLogger()

    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sysuser",
        description="Resolve the current user and the given user names or ids.",
    )
    parser.add_argument(
        "identities",
        nargs="*",
        metavar="IDENTITY",
        help=f"user name, numeric user id, or '{ALL_USERS_MARKER}' for all users",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"config file (default: {DEFAULT_CONFIG_PATH} if present)",
    )
    parser.add_argument(
        "--by-name",
        action="store_true",
        help="look up numeric identities as user names",
    )
    return parser.parse_args(argv)


def load_settings(path: Path | None) -> Config:
    """設定を読み込む

    パス未指定かつ config.yaml が無い場合はデフォルト設定を使う。

    Raises:
        FileNotFoundError: 指定された設定ファイルが存在しない
        ConfigError: 設定ファイルが不正
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return Config()
        path = DEFAULT_CONFIG_PATH
    return load_config(path)


def lookup_user(identity: str, database: AccountDatabase, by_name: bool = False) -> User:
    """Resolve one command-line identity to a user."""
    if identity == ALL_USERS_MARKER:
        return User.all_users()
    if identity.isdecimal() and database.supports_numeric_ids and not by_name:
        return User.from_id(int(identity), database)
    return User.from_name(identity, database)


def describe_user(user: User) -> str:
    """Format a user as a single line."""
    if user.is_all_users:
        return f"{ALL_USERS_MARKER} (all users)"
    if user.is_empty:
        return "(empty user)"
    if not user.exists:
        return "(not found)"

    parts = [user.username]
    if user.user_id is not None:
        parts.append(f"uid={user.user_id}")
        parts.append(f"gid={user.group_id}")
    parts.append(f"home={user.home_path.path or '-'}")
    return " ".join(parts)


def main(argv: list[str] | None = None) -> int:
    """現在ユーザーと指定ユーザーを解決して表示する

    Returns:
        終了ステータス（現在ユーザーを特定できない場合は 1）
    """
    args = parse_args(argv)

    try:
        config = load_settings(args.config)
    except (ConfigError, FileNotFoundError, yaml.YAMLError) as e:
        logger.error("Failed to load config: %s", e)
        return 1

    configure_logging(config.logging)

    try:
        database = create_account_database(config.accounts)
    except AccountError as e:
        logger.error("Failed to create account database: %s", e)
        return 1
    set_account_database(database)

    result = User.get_current_user(database)
    if not result.ok:
        logger.error("Cannot determine the current user, aborting")
        return 1
    print(f"current: {describe_user(result.user)}")

    for identity in args.identities:
        user = lookup_user(identity, database, by_name=args.by_name)
        print(f"{identity}: {describe_user(user)}")

    return 0


def run() -> None:
    """Run main and exit with its status."""
    sys.exit(main())


if __name__ == "__main__":
    run()

"""設定データクラス"""

from dataclasses import dataclass, field

# accounts.backend に指定できる値
ACCOUNT_BACKENDS = ("auto", "posix", "named")


@dataclass
class AccountsConfig:
    """アカウントデータベース設定

    Attributes:
        backend: 使用する実装（auto / posix / named）
        use_effective_id: 現在ユーザーの特定に実効 UID を使うかどうか
    """

    backend: str = "auto"
    use_effective_id: bool = True


@dataclass
class LoggingConfig:
    """ログ設定"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    loggers: dict[str, str] | None = None


@dataclass
class Config:
    """アプリケーション設定"""

    accounts: AccountsConfig = field(default_factory=AccountsConfig)
    logging: LoggingConfig | None = None

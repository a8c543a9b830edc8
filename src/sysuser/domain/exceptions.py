"""Domain exceptions."""


class AccountError(Exception):
    """アカウント関連の基底例外"""


class AccountNotFoundError(AccountError):
    """アカウントデータベースに該当するユーザーが存在しない場合に発生する例外"""

    def __init__(self, identity: int | str, message: str = "") -> None:
        """初期化

        Args:
            identity: 検索に使用したユーザー ID またはユーザー名
            message: エラーメッセージ（オプション）
        """
        self.identity = identity
        super().__init__(message or f"Account '{identity}' not found")


class CurrentUserError(AccountError):
    """プロセスの実行ユーザーを特定できない場合に発生する例外"""


class UnsupportedLookupError(AccountError):
    """数値 ID を持たないプラットフォームで ID 検索を行った場合に発生する例外"""

"""Account database protocol."""

from typing import Protocol

from sysuser.domain.entities.account import Account, PosixAccount


class AccountDatabase(Protocol):
    """OS アカウントデータベースの抽象インターフェース

    ユーザー ID・ユーザー名・実行中プロセスからアカウント情報を引き、
    プラットフォーム固有の実装詳細を隠蔽する。
    """

    @property
    def supports_numeric_ids(self) -> bool:
        """数値 ID を持つプラットフォームかどうか"""
        ...

    def find_by_id(self, user_id: int) -> PosixAccount | None:
        """ID でアカウントを検索する

        Args:
            user_id: ユーザー ID

        Returns:
            アカウント（存在しない場合は None）

        Raises:
            UnsupportedLookupError: 数値 ID を持たないプラットフォームの場合
        """
        ...

    def find_by_name(self, username: str) -> Account | None:
        """ユーザー名でアカウントを検索する

        ユーザー名はそのままデータベースに渡す。数字のみの名前を
        ID として解釈し直すことはしない。

        Args:
            username: ユーザー名

        Returns:
            アカウント（存在しない場合は None）
        """
        ...

    def find_current(self) -> Account:
        """実行中プロセスのアカウントを取得する

        Returns:
            アカウント

        Raises:
            CurrentUserError: アカウントを特定できない場合
        """
        ...

"""pwd implementation of AccountDatabase."""

import logging
import os
import pwd

from sysuser.domain.entities import FilePath, PosixAccount
from sysuser.domain.exceptions import AccountNotFoundError, CurrentUserError

logger = logging.getLogger(__name__)


class PwdAccountDatabase:
    """pwd 版 AccountDatabase 実装

    passwd データベース（NSS 経由の LDAP 等を含む）からアカウントを引く。
    検索のたびに OS へ問い合わせ、結果はキャッシュしない。
    """

    supports_numeric_ids = True

    def __init__(self, use_effective_id: bool = True) -> None:
        """初期化

        Args:
            use_effective_id: 現在ユーザーの特定に実効 UID を使うかどうか
                （False の場合は実 UID）
        """
        self._use_effective_id = use_effective_id

    def find_by_id(self, user_id: int) -> PosixAccount | None:
        """ID でアカウントを検索する

        Args:
            user_id: ユーザー ID

        Returns:
            アカウント（存在しない場合は None）
        """
        try:
            entry = pwd.getpwuid(user_id)
        except (KeyError, OverflowError):
            return None
        return self._to_account(entry)

    def find_by_name(self, username: str) -> PosixAccount | None:
        """ユーザー名でアカウントを検索する

        Args:
            username: ユーザー名

        Returns:
            アカウント（存在しない場合は None）
        """
        try:
            entry = pwd.getpwnam(username)
        except (KeyError, ValueError):
            # ValueError: embedded null character
            return None
        return self._to_account(entry)

    def find_current(self) -> PosixAccount:
        """実行中プロセスのアカウントを取得する

        Raises:
            CurrentUserError: UID がデータベースに存在しない場合
        """
        try:
            user_id = os.geteuid() if self._use_effective_id else os.getuid()
        except OSError as e:
            raise CurrentUserError(f"Failed to get process user id: {e}") from e

        logger.debug("Current process user id: %d", user_id)
        account = self.find_by_id(user_id)
        if account is None:
            raise CurrentUserError(
                "Current process user not found"
            ) from AccountNotFoundError(user_id)
        return account

    def _to_account(self, entry: pwd.struct_passwd) -> PosixAccount:
        """passwd エントリをエンティティに変換する"""
        return PosixAccount(
            username=entry.pw_name,
            user_id=entry.pw_uid,
            group_id=entry.pw_gid,
            home_path=FilePath(entry.pw_dir or ""),
        )

"""User entity."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from sysuser.domain.entities.account import Account, PosixAccount
from sysuser.domain.entities.file_path import FilePath
from sysuser.domain.exceptions import CurrentUserError

if TYPE_CHECKING:
    from sysuser.domain.repositories import AccountDatabase

logger = logging.getLogger(__name__)

# Username reported by the all-users sentinel
ALL_USERS_MARKER = "*"


class UserKind(Enum):
    """States a User can be in."""

    CONCRETE = "concrete"
    ALL_USERS = "all_users"
    EMPTY = "empty"
    NOT_FOUND = "not_found"


def _resolve_database(database: AccountDatabase | None) -> AccountDatabase:
    if database is not None:
        return database
    from sysuser.infrastructure.accounts import get_account_database

    return get_account_database()


@dataclass(frozen=True)
class User:
    """System user account.

    A User is resolved against the account database when it is created and
    never changes afterwards. Use the alternate constructors rather than
    passing `kind` and `account` directly:

    - `User.from_id()` / `User.from_name()` look up a real account. A lookup
      that finds nothing produces a NOT_FOUND user instead of raising.
    - `User.sentinel()` produces the all-users or empty user. `User()` is
      the empty user.
    - `User.get_current_user()` resolves the account of this process.

    Attributes:
        kind: Which state this user is in.
        account: Resolved account record (CONCRETE users only).
    """

    kind: UserKind = UserKind.EMPTY
    account: Account | None = None

    def __post_init__(self) -> None:
        """バリデーション"""
        if (self.kind is UserKind.CONCRETE) != (self.account is not None):
            raise ValueError("Only a concrete user carries an account record")

    @classmethod
    def from_id(cls, user_id: int, database: AccountDatabase | None = None) -> "User":
        """Create a user by numeric user id.

        Args:
            user_id: ID of the user.
            database: Account database (defaults to the process-wide one).

        Returns:
            A CONCRETE user, or a NOT_FOUND user if the id does not resolve.

        Raises:
            UnsupportedLookupError: On platforms without numeric user ids.
        """
        account = _resolve_database(database).find_by_id(user_id)
        return cls._from_lookup(user_id, account)

    @classmethod
    def from_name(
        cls, username: str, database: AccountDatabase | None = None
    ) -> "User":
        """Create a user by username.

        The name is passed to the account database as is, so a purely
        numeric name resolves however the platform resolves it.

        Args:
            username: Name of the user.
            database: Account database (defaults to the process-wide one).

        Returns:
            A CONCRETE user, or a NOT_FOUND user if the name does not resolve.
        """
        account = _resolve_database(database).find_by_name(username)
        return cls._from_lookup(username, account)

    @classmethod
    def sentinel(cls, is_all_users: bool = False) -> "User":
        """Create the all-users user or the empty user.

        Neither has a user id, group id or home path.

        Args:
            is_all_users: True for the all-users user, False for the empty user.
        """
        return cls(UserKind.ALL_USERS if is_all_users else UserKind.EMPTY)

    @classmethod
    def all_users(cls) -> "User":
        """Create the user which represents all users."""
        return cls.sentinel(True)

    @classmethod
    def empty(cls) -> "User":
        """Create the empty user."""
        return cls.sentinel(False)

    @classmethod
    def _from_lookup(cls, identity: int | str, account: Account | None) -> "User":
        if account is None:
            logger.warning("User '%s' not found in account database", identity)
            return cls(UserKind.NOT_FOUND)
        logger.debug("Resolved user '%s' to %s", identity, account)
        return cls(UserKind.CONCRETE, account)

    @staticmethod
    def get_current_user(
        database: AccountDatabase | None = None,
    ) -> "CurrentUserResult":
        """Get the user this process is executing on behalf of.

        Args:
            database: Account database (defaults to the process-wide one).

        Returns:
            Result holding the current user on success, or the empty user
            and the error on failure.
        """
        try:
            account = _resolve_database(database).find_current()
        except CurrentUserError as e:
            logger.error("Failed to determine current user: %s", e)
            return CurrentUserResult(user=User.empty(), error=e)
        return CurrentUserResult(user=User(UserKind.CONCRETE, account))

    @classmethod
    def current(cls, database: AccountDatabase | None = None) -> "User":
        """Get the current user, raising if it cannot be determined.

        Raises:
            CurrentUserError: If the current user cannot be determined.
        """
        return cls.get_current_user(database).raise_for_error()

    @property
    def exists(self) -> bool:
        """Whether this user was resolved against the account database.

        False for the empty user, the all-users user and failed lookups.
        """
        return self.kind is UserKind.CONCRETE

    @property
    def is_all_users(self) -> bool:
        return self.kind is UserKind.ALL_USERS

    @property
    def is_empty(self) -> bool:
        return self.kind is UserKind.EMPTY

    @property
    def username(self) -> str:
        """Name of the user ("*" for all users, "" when there is none)."""
        if self.account is not None:
            return self.account.username
        if self.kind is UserKind.ALL_USERS:
            return ALL_USERS_MARKER
        return ""

    @property
    def user_id(self) -> int | None:
        """Numeric user id, None unless this is a resolved POSIX user."""
        if isinstance(self.account, PosixAccount):
            return self.account.user_id
        return None

    @property
    def group_id(self) -> int | None:
        """Primary group id, None unless this is a resolved POSIX user."""
        if isinstance(self.account, PosixAccount):
            return self.account.group_id
        return None

    @property
    def home_path(self) -> FilePath:
        """Home directory, or the empty path if it is not known."""
        if self.account is not None:
            return self.account.home_path
        return FilePath()

    def __str__(self) -> str:
        return self.username


@dataclass(frozen=True)
class CurrentUserResult:
    """Result of resolving the current user.

    Attributes:
        user: The current user, or the empty user on failure.
        error: Why the current user could not be determined (None on success).
    """

    user: User
    error: CurrentUserError | None = None

    def __post_init__(self) -> None:
        """バリデーション"""
        if self.error is None and not self.user.exists:
            raise ValueError("A successful result must hold an existing user")
        if self.error is not None and not self.user.is_empty:
            raise ValueError("A failed result must hold the empty user")

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> User:
        """Return the user, or raise the error of a failed result.

        Raises:
            CurrentUserError: If the result is a failure.
        """
        if self.error is not None:
            raise self.error
        return self.user

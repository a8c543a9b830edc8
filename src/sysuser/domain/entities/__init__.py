"""Domain entities."""

from sysuser.domain.entities.account import Account, NamedAccount, PosixAccount
from sysuser.domain.entities.file_path import FilePath
from sysuser.domain.entities.user import (
    ALL_USERS_MARKER,
    CurrentUserResult,
    User,
    UserKind,
)

__all__ = [
    "ALL_USERS_MARKER",
    "Account",
    "CurrentUserResult",
    "FilePath",
    "NamedAccount",
    "PosixAccount",
    "User",
    "UserKind",
]

"""System user accounts."""

from sysuser.domain.entities import (
    ALL_USERS_MARKER,
    CurrentUserResult,
    FilePath,
    User,
    UserKind,
)
from sysuser.domain.exceptions import (
    AccountError,
    AccountNotFoundError,
    CurrentUserError,
    UnsupportedLookupError,
)

__version__ = "0.1.0"

__all__ = [
    "ALL_USERS_MARKER",
    "AccountError",
    "AccountNotFoundError",
    "CurrentUserError",
    "CurrentUserResult",
    "FilePath",
    "UnsupportedLookupError",
    "User",
    "UserKind",
]

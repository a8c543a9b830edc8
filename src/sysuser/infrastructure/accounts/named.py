"""Name-only implementation of AccountDatabase."""

import getpass
import logging
import os

from sysuser.domain.entities import FilePath, NamedAccount
from sysuser.domain.exceptions import CurrentUserError, UnsupportedLookupError

logger = logging.getLogger(__name__)


class NamedAccountDatabase:
    """Account database for platforms without numeric user ids.

    Accounts are identified by name only. A name is considered to exist
    when the platform expands it to an existing home directory.
    """

    supports_numeric_ids = False

    def find_by_id(self, user_id: int) -> None:
        raise UnsupportedLookupError(
            f"Cannot look up user id {user_id}: platform has no numeric user ids"
        )

    def find_by_name(self, username: str) -> NamedAccount | None:
        home = self._home_for(username)
        if home is None:
            return None
        return NamedAccount(username=username, home_path=home)

    def find_current(self) -> NamedAccount:
        """Get the account of this process from the OS-reported username.

        Raises:
            CurrentUserError: If the OS does not report a username.
        """
        try:
            username = getpass.getuser()
        except (OSError, KeyError, ImportError) as e:
            raise CurrentUserError(f"Failed to get current username: {e}") from e
        if not username:
            raise CurrentUserError("Current username is empty")

        # The current user exists even when its home cannot be expanded
        home = self._home_for(username)
        if home is None:
            logger.debug("Home path of current user '%s' is unknown", username)
            home = FilePath()
        return NamedAccount(username=username, home_path=home)

    def _is_plain_name(self, username: str) -> bool:
        """Whether the name cannot be read as a path by expanduser."""
        if not username or "\0" in username or username in (".", ".."):
            return False
        separators = [sep for sep in (os.sep, os.altsep, "/", "\\") if sep]
        return not any(sep in username for sep in separators)

    def _home_for(self, username: str) -> FilePath | None:
        if not self._is_plain_name(username):
            return None
        tilde = f"~{username}"
        expanded = os.path.expanduser(tilde)
        if expanded == tilde or not os.path.isdir(expanded):
            return None
        return FilePath(expanded)

"""AccountDatabase selection."""

import importlib.util
import logging

from sysuser.config.models import AccountsConfig
from sysuser.domain.exceptions import UnsupportedLookupError
from sysuser.domain.repositories import AccountDatabase

logger = logging.getLogger(__name__)

_default_database: AccountDatabase | None = None


def has_numeric_ids() -> bool:
    """Whether this platform provides the pwd account database."""
    return importlib.util.find_spec("pwd") is not None


def create_account_database(config: AccountsConfig | None = None) -> AccountDatabase:
    """Create the account database selected by config.

    Args:
        config: Accounts configuration. If None, uses defaults.

    Returns:
        PwdAccountDatabase or NamedAccountDatabase.

    Raises:
        UnsupportedLookupError: If the posix backend is requested on a
            platform without pwd.
    """
    config = config or AccountsConfig()

    backend = config.backend
    if backend == "auto":
        backend = "posix" if has_numeric_ids() else "named"

    if backend == "posix":
        if not has_numeric_ids():
            raise UnsupportedLookupError("posix backend requires the pwd module")
        from sysuser.infrastructure.accounts.posix import PwdAccountDatabase

        logger.debug(
            "Using pwd account database (effective id: %s)", config.use_effective_id
        )
        return PwdAccountDatabase(use_effective_id=config.use_effective_id)

    from sysuser.infrastructure.accounts.named import NamedAccountDatabase

    logger.debug("Using name-only account database")
    return NamedAccountDatabase()


def get_account_database() -> AccountDatabase:
    """Get the process-wide account database, creating it on first use."""
    global _default_database
    if _default_database is None:
        _default_database = create_account_database()
    return _default_database


def set_account_database(database: AccountDatabase | None) -> None:
    """Replace the process-wide account database.

    Args:
        database: New default, or None to recreate it from defaults on next use.
    """
    global _default_database
    _default_database = database

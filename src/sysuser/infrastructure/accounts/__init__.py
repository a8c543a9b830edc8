"""OS account database infrastructure."""

from sysuser.infrastructure.accounts.factory import (
    create_account_database,
    get_account_database,
    has_numeric_ids,
    set_account_database,
)
from sysuser.infrastructure.accounts.named import NamedAccountDatabase

__all__ = [
    "NamedAccountDatabase",
    "create_account_database",
    "get_account_database",
    "has_numeric_ids",
    "set_account_database",
]

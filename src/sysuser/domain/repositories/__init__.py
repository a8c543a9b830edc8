"""Domain repositories."""

from sysuser.domain.repositories.account_database import AccountDatabase

__all__ = ["AccountDatabase"]

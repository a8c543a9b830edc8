"""Common fixtures."""

from collections.abc import Generator

import pytest

from sysuser.domain.entities import Account, FilePath, NamedAccount, PosixAccount
from sysuser.domain.exceptions import CurrentUserError, UnsupportedLookupError
from sysuser.infrastructure.accounts import set_account_database


class FakeAccountDatabase:
    """In-memory AccountDatabase for tests."""

    def __init__(
        self,
        accounts: list[Account],
        current: Account | None = None,
        supports_numeric_ids: bool = True,
    ) -> None:
        self._accounts = list(accounts)
        self._current = current
        self.supports_numeric_ids = supports_numeric_ids
        self.name_queries: list[str] = []

    def find_by_id(self, user_id: int) -> PosixAccount | None:
        if not self.supports_numeric_ids:
            raise UnsupportedLookupError("no numeric ids")
        for account in self._accounts:
            if isinstance(account, PosixAccount) and account.user_id == user_id:
                return account
        return None

    def find_by_name(self, username: str) -> Account | None:
        self.name_queries.append(username)
        for account in self._accounts:
            if account.username == username:
                return account
        return None

    def find_current(self) -> Account:
        if self._current is None:
            raise CurrentUserError("current user unknown")
        return self._current


@pytest.fixture
def make_database() -> type[FakeAccountDatabase]:
    """Provide the fake database class for tests that build their own."""
    return FakeAccountDatabase


@pytest.fixture
def alice() -> PosixAccount:
    """Create test POSIX account."""
    return PosixAccount(
        username="alice",
        user_id=1000,
        group_id=1000,
        home_path=FilePath("/home/alice"),
    )


@pytest.fixture
def daemon() -> PosixAccount:
    """Create test POSIX account without a home directory."""
    return PosixAccount(username="daemon", user_id=2, group_id=2)


@pytest.fixture
def database(alice: PosixAccount, daemon: PosixAccount) -> FakeAccountDatabase:
    """Create fake POSIX account database whose current user is alice."""
    return FakeAccountDatabase([alice, daemon], current=alice)


@pytest.fixture
def named_database() -> FakeAccountDatabase:
    """Create fake name-only account database."""
    bob = NamedAccount(username="bob", home_path=FilePath("C:\\Users\\bob"))
    return FakeAccountDatabase([bob], current=bob, supports_numeric_ids=False)


@pytest.fixture(autouse=True)
def reset_default_database() -> Generator[None, None, None]:
    """Drop any process-wide account database set by a test."""
    yield
    set_account_database(None)

"""Account record entities."""

from dataclasses import dataclass, field

from sysuser.domain.entities.file_path import FilePath


@dataclass(frozen=True)
class PosixAccount:
    """Account record on platforms with numeric user ids.

    Attributes:
        username: Login name.
        user_id: Numeric user id.
        group_id: Numeric id of the primary group.
        home_path: Home directory (empty when unknown).
    """

    username: str
    user_id: int
    group_id: int
    home_path: FilePath = field(default_factory=FilePath)


@dataclass(frozen=True)
class NamedAccount:
    """Account record on platforms without numeric user ids.

    Attributes:
        username: Login name.
        home_path: Home directory (empty when unknown).
    """

    username: str
    home_path: FilePath = field(default_factory=FilePath)


Account = PosixAccount | NamedAccount

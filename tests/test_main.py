"""エントリポイントのテスト"""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from sysuser.__main__ import (
    configure_logging,
    describe_user,
    load_settings,
    lookup_user,
    main,
)
from sysuser.config import Config, LoggingConfig
from sysuser.domain.entities import User
from sysuser.infrastructure.accounts import get_account_database


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """config.yaml を拾わないよう一時ディレクトリで実行する"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestLookupUser:
    """lookup_user関数のテスト"""

    def test_numeric_identity_is_id(self, database) -> None:
        """数字は ID として検索される"""
        user = lookup_user("1000", database)

        assert user.username == "alice"
        assert database.name_queries == []

    def test_by_name_forces_name_lookup(self, database) -> None:
        """--by-name 指定時は数字も名前として検索される"""
        user = lookup_user("1000", database, by_name=True)

        assert user.exists is False
        assert database.name_queries == ["1000"]

    def test_numeric_identity_on_named_platform(self, named_database) -> None:
        """数値 ID の無いプラットフォームでは名前として検索される"""
        lookup_user("1000", named_database)

        assert named_database.name_queries == ["1000"]

    @pytest.mark.parametrize("identity", ["²", "①"])
    def test_non_decimal_digits_are_names(self, database, identity: str) -> None:
        """int() で解釈できない数字文字は名前として検索される"""
        user = lookup_user(identity, database)

        assert user.exists is False
        assert database.name_queries == [identity]

    def test_all_users_marker(self, database) -> None:
        """'*' は全ユーザーを表す"""
        assert lookup_user("*", database).is_all_users is True


class TestDescribeUser:
    """describe_user関数のテスト"""

    def test_posix_user(self, database) -> None:
        """POSIX ユーザーの表示"""
        line = describe_user(User.from_id(1000, database))

        assert line == "alice uid=1000 gid=1000 home=/home/alice"

    def test_user_without_home(self, database) -> None:
        """ホームディレクトリが無いユーザーの表示"""
        assert describe_user(User.from_id(2, database)).endswith("home=-")

    def test_named_user(self, named_database) -> None:
        """名前のみのユーザーには uid を表示しない"""
        line = describe_user(User.from_name("bob", named_database))

        assert "uid=" not in line
        assert line.startswith("bob ")

    def test_sentinels_and_missing(self, database) -> None:
        """センチネルと未解決ユーザーの表示"""
        assert describe_user(User.all_users()) == "* (all users)"
        assert describe_user(User.empty()) == "(empty user)"
        assert describe_user(User.from_name("nobody", database)) == "(not found)"


class TestLoadSettings:
    """load_settings関数のテスト"""

    def test_defaults_without_file(self) -> None:
        """config.yaml が無ければデフォルト設定"""
        assert load_settings(None) == Config()

    def test_reads_default_file(self, isolated_cwd: Path) -> None:
        """カレントディレクトリの config.yaml を読む"""
        (isolated_cwd / "config.yaml").write_text("accounts:\n  backend: named\n")

        assert load_settings(None).accounts.backend == "named"

    def test_missing_explicit_file(self, isolated_cwd: Path) -> None:
        """指定された設定ファイルが無ければエラー"""
        with pytest.raises(FileNotFoundError):
            load_settings(isolated_cwd / "missing.yaml")


class TestMain:
    """main関数のテスト"""

    def test_prints_current_and_requested_users(self, database, capsys) -> None:
        """現在ユーザーと指定ユーザーを表示する"""
        with patch(
            "sysuser.__main__.create_account_database", return_value=database
        ):
            status = main(["2", "nobody", "*"])

        out = capsys.readouterr().out.splitlines()
        assert status == 0
        assert out == [
            "current: alice uid=1000 gid=1000 home=/home/alice",
            "2: daemon uid=2 gid=2 home=-",
            "nobody: (not found)",
            "*: * (all users)",
        ]
        assert get_account_database() is database

    def test_current_user_failure_exits(self, make_database, capsys) -> None:
        """現在ユーザーを特定できなければ終了ステータス 1"""
        with patch(
            "sysuser.__main__.create_account_database",
            return_value=make_database([]),
        ):
            status = main(["root"])

        assert status == 1
        assert capsys.readouterr().out == ""

    def test_invalid_config(self, isolated_cwd: Path) -> None:
        """不正な設定ファイルなら終了ステータス 1"""
        config_path = isolated_cwd / "bad.yaml"
        config_path.write_text("accounts:\n  backend: ldap\n")

        assert main(["--config", str(config_path)]) == 1

    def test_yaml_syntax_error(self, isolated_cwd: Path) -> None:
        """YAML構文エラーなら終了ステータス 1"""
        (isolated_cwd / "config.yaml").write_text("accounts:\n  backend: [oops\n")

        assert main([]) == 1

    def test_missing_config(self, isolated_cwd: Path) -> None:
        """存在しない設定ファイルなら終了ステータス 1"""
        assert main(["--config", str(isolated_cwd / "missing.yaml")]) == 1

    def test_unsupported_backend(self, isolated_cwd: Path) -> None:
        """利用できない backend なら終了ステータス 1"""
        config_path = isolated_cwd / "config.yaml"
        config_path.write_text("accounts:\n  backend: posix\n")

        with patch(
            "sysuser.infrastructure.accounts.factory.has_numeric_ids",
            return_value=False,
        ):
            assert main([]) == 1


class TestConfigureLogging:
    """configure_logging関数のテスト"""

    @pytest.fixture(autouse=True)
    def restore_levels(self):
        """ログレベルを元に戻す"""
        root_level = logging.getLogger().level
        yield
        logging.getLogger().setLevel(root_level)
        logging.getLogger("sysuser.test").setLevel(logging.NOTSET)

    def test_none_keeps_defaults(self) -> None:
        """None の場合は何もしない"""
        level = logging.getLogger().level

        configure_logging(None)

        assert logging.getLogger().level == level

    def test_sets_levels(self) -> None:
        """ルートと個別ロガーのレベルを設定する"""
        configure_logging(
            LoggingConfig(level="warning", loggers={"sysuser.test": "debug"})
        )

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("sysuser.test").level == logging.DEBUG

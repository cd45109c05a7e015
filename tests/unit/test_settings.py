"""Tests for environment driven settings."""

import pytest

from sqltree import ErrorCode, SQLTreeError, select
from sqltree.settings import SQLTreeSettings, get_settings, reload_settings


class TestDefaults:

    def test_default_values(self):
        settings = get_settings()
        assert isinstance(settings, SQLTreeSettings)
        assert settings.default_flavor == "mysql"
        assert settings.subquery_alias == "t"
        assert settings.log_level == "INFO"
        assert settings.app_env == "dev"

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()


class TestEnvironmentOverrides:

    def test_default_flavor(self, monkeypatch):
        monkeypatch.setenv("SQLTREE_DEFAULT_FLAVOR", "aws_timestream")
        reload_settings()
        assert select().from_("users").to_sql() == 'SELECT * FROM "users"'

    def test_subquery_alias(self, monkeypatch):
        monkeypatch.setenv("SQLTREE_SUBQUERY_ALIAS", "sub")
        reload_settings()
        query = select().from_(select().from_("t"))
        assert query.to_sql() == "SELECT * FROM (SELECT * FROM `t`) AS `sub`"

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("SQLTREE_LOG_LEVEL", "debug")
        assert reload_settings().log_level == "DEBUG"

    @pytest.mark.parametrize(
        "key, value",
        [
            ("SQLTREE_SUBQUERY_ALIAS", "1bad"),
            ("SQLTREE_SUBQUERY_ALIAS", "has space"),
            ("SQLTREE_LOG_LEVEL", "verbose"),
        ],
    )
    def test_invalid_values(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(SQLTreeError) as exc_info:
            reload_settings()
        assert exc_info.value.error_code == ErrorCode.CONFIG_ERROR

    def test_unknown_default_flavor_fails_on_render(self, monkeypatch):
        monkeypatch.setenv("SQLTREE_DEFAULT_FLAVOR", "oracle")
        reload_settings()
        with pytest.raises(SQLTreeError) as exc_info:
            select().from_("users").to_sql()
        assert exc_info.value.error_code == ErrorCode.FLAVOR_NOT_FOUND

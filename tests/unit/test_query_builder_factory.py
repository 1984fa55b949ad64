"""Unit tests for dialect selection."""

import pytest
from unittest.mock import Mock, patch

from fluentsql.common.exceptions import ErrorCode, FluentSQLError
from fluentsql.constants.sql import Dialect
from fluentsql.query_builder.factory import QueryBuilderFactory, get_query_builder
from fluentsql.query_builder.mysql import MySQLQueryBuilder
from fluentsql.query_builder.postgres import PostgresQueryBuilder
from fluentsql.settings import _reload_settings


class TestQueryBuilderFactory:
    """Test QueryBuilderFactory."""

    @pytest.mark.parametrize(
        "dialect, expected",
        [
            (Dialect.MYSQL, MySQLQueryBuilder),
            (Dialect.POSTGRES, PostgresQueryBuilder),
            ("mysql", MySQLQueryBuilder),
            ("POSTGRES", PostgresQueryBuilder),
        ],
    )
    def test_create(self, dialect, expected):
        assert isinstance(QueryBuilderFactory.create(dialect), expected)

    def test_create_returns_new_instance_each_call(self):
        assert QueryBuilderFactory.create("mysql") is not QueryBuilderFactory.create("mysql")

    def test_named_constructors(self):
        assert isinstance(QueryBuilderFactory.create_mysql_builder(), MySQLQueryBuilder)
        assert isinstance(QueryBuilderFactory.create_postgres_builder(), PostgresQueryBuilder)

    def test_unsupported_dialect(self):
        with pytest.raises(FluentSQLError, match="Unsupported dialect: oracle") as exc_info:
            QueryBuilderFactory.create("oracle")

        error = exc_info.value
        assert error.error_code == ErrorCode.DIALECT_NOT_SUPPORTED
        assert error.details["config_key"] == "dialect"
        assert isinstance(error.cause, ValueError)


class TestGetQueryBuilder:
    """Test settings-driven builder selection."""

    @pytest.fixture
    def mock_settings(self):
        settings = Mock()
        settings.builder = Mock()
        settings.builder.dialect = Dialect.POSTGRES
        return settings

    def test_uses_passed_settings(self, mock_settings):
        assert isinstance(get_query_builder(mock_settings), PostgresQueryBuilder)

    @patch("fluentsql.settings.get_settings")
    def test_falls_back_to_global_settings(self, mock_get_settings, mock_settings):
        mock_get_settings.return_value = mock_settings

        builder = get_query_builder()

        assert isinstance(builder, PostgresQueryBuilder)
        mock_get_settings.assert_called_once_with()

    def test_reads_dialect_from_environment(self, monkeypatch):
        monkeypatch.setenv("FLUENTSQL_BUILDER_DIALECT", "postgres")
        try:
            builder = get_query_builder(_reload_settings())
        finally:
            monkeypatch.delenv("FLUENTSQL_BUILDER_DIALECT")
            _reload_settings()

        assert isinstance(builder, PostgresQueryBuilder)

"""Unit tests for identifier adapters and the adapter factory."""

import pytest

from sqlfluent.adapters import (
    AdapterFactory,
    AnsiAdapter,
    BaseAdapter,
    IdentifierAdapter,
    MSSQLAdapter,
    MySQLAdapter,
    PostgreSQLAdapter,
    SQLiteAdapter,
    get_adapter,
)
from sqlfluent.common.exceptions import ErrorCode, SQLFluentError
from sqlfluent.constants import DialectType
from sqlfluent.settings import _reload_settings


class TestBaseAdapter:
    """Test the no-op default adapter."""

    def test_quote_identifier_is_noop(self):
        adapter = BaseAdapter()
        assert adapter.quote_identifier("users") == "users"
        assert adapter.quote_identifier("public.users") == "public.users"

    def test_repeated_quoting_is_stable(self):
        """Test that calling quote_identifier repeatedly yields the same result."""
        adapter = BaseAdapter()
        name = "orders"
        assert adapter.quote_identifier(name) == adapter.quote_identifier(name) == "orders"
        assert name == "orders"

    def test_get_option_returns_configured_value(self):
        adapter = BaseAdapter(dsn="sqlite://", options={"schema": "sales", "strict": False})

        assert adapter.dsn == "sqlite://"
        assert adapter.has_option("schema")
        assert adapter.get_option("schema") == "sales"
        assert adapter.get_option("strict") is False

    def test_get_option_unknown_key_raises_invalid_argument(self):
        """Test that looking up an undefined option is rejected."""
        adapter = BaseAdapter(options={"schema": "sales"})

        with pytest.raises(SQLFluentError, match="Undefined BaseAdapter option: readonly") as exc_info:
            adapter.get_option("readonly")

        assert exc_info.value.error_code == ErrorCode.INVALID_ARGUMENT

    def test_get_options_returns_copy(self):
        adapter = BaseAdapter(options={"schema": "sales"})
        options = adapter.get_options()
        options["schema"] = "changed"

        assert adapter.get_option("schema") == "sales"


class TestQuotingAdapters:
    """Test dialect-specific identifier quoting."""

    @pytest.mark.parametrize(
        "adapter, name, expected",
        [
            (AnsiAdapter(), "users", '"users"'),
            (AnsiAdapter(), "public.users", '"public"."users"'),
            (AnsiAdapter(), 'we"ird', '"we""ird"'),
            (AnsiAdapter(), "u.*", '"u".*'),
            (MySQLAdapter(), "order", "`order`"),
            (MySQLAdapter(), "shop.order", "`shop`.`order`"),
            (MySQLAdapter(), "a`b", "`a``b`"),
            (MSSQLAdapter(), "dbo.Order Details", "[dbo].[Order Details]"),
            (MSSQLAdapter(), "a]b", "[a]]b]"),
        ],
    )
    def test_quote_identifier(self, adapter, name, expected):
        assert adapter.quote_identifier(name) == expected

    def test_wildcard_is_not_quoted(self):
        for adapter in (AnsiAdapter(), MySQLAdapter(), MSSQLAdapter()):
            assert adapter.quote_identifier("*") == "*"

    def test_dialects(self):
        assert AnsiAdapter.dialect == DialectType.ANSI
        assert PostgreSQLAdapter.dialect == DialectType.POSTGRESQL
        assert SQLiteAdapter.dialect == DialectType.SQLITE
        assert MySQLAdapter.dialect == DialectType.MYSQL
        assert MSSQLAdapter.dialect == DialectType.MSSQL
        assert PostgreSQLAdapter().quote_identifier("t") == '"t"'
        assert SQLiteAdapter().quote_identifier("t") == '"t"'


class TestIdentifierAdapterProtocol:
    """Test structural substitution of adapters."""

    def test_bundled_adapters_satisfy_protocol(self):
        for adapter in (BaseAdapter(), AnsiAdapter(), MySQLAdapter(), MSSQLAdapter()):
            assert isinstance(adapter, IdentifierAdapter)

    def test_any_object_with_quote_identifier_satisfies_protocol(self):
        class UpperAdapter:
            def quote_identifier(self, identifier):
                return identifier.upper()

        assert isinstance(UpperAdapter(), IdentifierAdapter)
        assert not isinstance(object(), IdentifierAdapter)


class TestAdapterFactory:
    """Test adapter creation from dialects and settings."""

    @pytest.mark.parametrize(
        "dialect, adapter_cls",
        [
            ("generic", BaseAdapter),
            ("ansi", AnsiAdapter),
            ("postgresql", PostgreSQLAdapter),
            ("sqlite", SQLiteAdapter),
            (DialectType.MYSQL, MySQLAdapter),
            (DialectType.MSSQL, MSSQLAdapter),
        ],
    )
    def test_create_by_dialect(self, dialect, adapter_cls):
        adapter = AdapterFactory.create(dialect)
        assert type(adapter) is adapter_cls

    def test_create_defaults_to_configured_dialect(self, monkeypatch):
        monkeypatch.setenv("SQLFLUENT_DIALECT", "mssql")
        _reload_settings()

        assert isinstance(get_adapter(), MSSQLAdapter)

    def test_create_default_dialect_is_ansi(self):
        assert type(get_adapter()) is AnsiAdapter

    def test_unsupported_dialect_raises(self):
        with pytest.raises(SQLFluentError, match="Dialect 'oracle' is not supported") as exc_info:
            AdapterFactory.create("oracle")

        assert exc_info.value.error_code == ErrorCode.DIALECT_NOT_SUPPORTED
        assert exc_info.value.details["dialect"] == "oracle"

    def test_options_merge_settings_and_explicit_values(self, monkeypatch):
        """Test that explicit options override the configured adapter options."""
        monkeypatch.setenv("SQLFLUENT_ADAPTER_OPTIONS", '{"schema": "sales", "strict": true}')
        _reload_settings()

        adapter = AdapterFactory.create("mysql", dsn="mysql://db", schema="hr")

        assert adapter.dsn == "mysql://db"
        assert adapter.get_option("schema") == "hr"
        assert adapter.get_option("strict") is True

    def test_register_custom_adapter(self, monkeypatch):
        class BracketAnsiAdapter(MSSQLAdapter):
            dialect = DialectType.ANSI

        monkeypatch.setitem(AdapterFactory._registry, DialectType.ANSI, BracketAnsiAdapter)
        AdapterFactory.register(DialectType.ANSI, BracketAnsiAdapter)

        assert AdapterFactory.create("ansi").quote_identifier("t") == "[t]"

"""Unit tests for the tracing decorator."""

from unittest.mock import MagicMock, patch

import pytest
from opentelemetry.trace import SpanKind, StatusCode

from sqlfluent.adapters import BaseAdapter
from sqlfluent.query_builder import AliasGenerator, SelectQueryBuilder
from sqlfluent.utils.decorators import traced


@pytest.fixture
def span():
    return MagicMock()


@pytest.fixture
def tracer(span):
    tracer = MagicMock()
    tracer.start_as_current_span.return_value.__enter__.return_value = span
    with patch("sqlfluent.utils.decorators.get_tracer", return_value=tracer):
        yield tracer


class TestTraced:
    """Test span creation around decorated functions."""

    def test_default_span_name_and_return_value(self, tracer):
        @traced()
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        name = tracer.start_as_current_span.call_args[0][0]
        assert name.endswith("add")
        assert tracer.start_as_current_span.call_args[1]["kind"] == SpanKind.INTERNAL

    def test_static_and_dynamic_attributes(self, tracer, span):
        @traced(
            "custom.span",
            attributes={"component": "test", "skipped": None},
            attribute_getter=lambda table: {"table": table},
        )
        def load(table):
            return table

        load("users")

        tracer.start_as_current_span.assert_called_once_with("custom.span", kind=SpanKind.INTERNAL)
        span.set_attribute.assert_any_call("component", "test")
        span.set_attribute.assert_any_call("table", "users")
        assert all(call.args[0] != "skipped" for call in span.set_attribute.call_args_list)

    def test_exception_is_recorded_and_reraised(self, tracer, span):
        @traced("failing.span")
        def fail():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            fail()

        span.record_exception.assert_called_once()
        status = span.set_status.call_args[0][0]
        assert status.status_code == StatusCode.ERROR

    def test_wraps_preserves_metadata(self):
        @traced()
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."

    def test_compile_opens_a_span(self, tracer, span):
        builder = SelectQueryBuilder(BaseAdapter(), "users", alias_generator=AliasGenerator())
        builder.compile()

        tracer.start_as_current_span.assert_called_once_with("sqlfluent.select.compile", kind=SpanKind.INTERNAL)
        span.set_attribute.assert_any_call("sqlfluent.table", "users")

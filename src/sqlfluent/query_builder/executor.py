"""Execution collaborators for compiled statements.

The select builder never talks to a database itself. ``query``/``get``/
``get_one``/``count`` hand a ``CompiledQuery`` to an object implementing
``QueryExecutor``. ``SQLAlchemyExecutor`` is the bundled implementation:
it sends the text through ``Connection.exec_driver_sql`` so the ``?``
placeholders reach the DB-API driver untouched. That requires a driver
using the ``qmark`` paramstyle, such as sqlite3 or pyodbc.
"""

import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Protocol, runtime_checkable

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine

from sqlfluent.common.exceptions import ErrorCode, configuration_error, query_execution_error
from sqlfluent.logging import get_logger
from sqlfluent.query_builder.types import CompiledQuery
from sqlfluent.utils.decorators import traced

logger = get_logger(__name__)


@runtime_checkable
class QueryExecutor(Protocol):
    """Protocol for objects that run compiled statements."""

    def fetch_all(self, query: CompiledQuery) -> List[Mapping[str, Any]]:
        """Run ``query`` and return every row."""
        ...

    def fetch_scalar(self, query: CompiledQuery) -> Any:
        """Run ``query`` and return the first column of its single row."""
        ...


class SQLAlchemyExecutor:
    """SQLAlchemy-based executor for compiled SELECT statements.

    Example:
        >>> engine = create_engine("sqlite:///app.db")
        >>> executor = SQLAlchemyExecutor(engine)
        >>> builder = SelectQueryBuilder(SQLiteAdapter(), "users", executor=executor)
        >>> builder.where("age > ?", 30).get()
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._connection_info: Dict[str, Any] = {
            "platform": engine.dialect.name,
        }

    @contextmanager
    def _get_connection(self) -> Iterator[Connection]:
        conn = self.engine.connect()
        try:
            yield conn
        finally:
            conn.close()

    def _span_attributes(self, query: CompiledQuery, *, operation: str) -> Dict[str, Any]:
        """Build OpenTelemetry span attributes for SQL operations."""
        statement = query.text.strip()
        if len(statement) > 4096:
            statement = f"{statement[:4093]}..."

        return {
            "db.system": self._connection_info["platform"],
            "db.operation": operation,
            "db.statement": statement,
            "db.statement.parameters": len(query.values),
        }

    @traced(
        span_name="sqlfluent.executor.fetch_all",
        attribute_getter=lambda self, query: self._span_attributes(query, operation="fetch_all"),
    )
    def fetch_all(self, query: CompiledQuery) -> List[Dict[str, Any]]:
        """Execute query and fetch all results as list of dictionaries."""
        start_time = time.time()
        payload = {"db.platform": self._connection_info["platform"]}

        try:
            with self._get_connection() as conn:
                result = conn.exec_driver_sql(query.text, query.params)
                rows = [dict(row) for row in result.mappings().all()]

            duration = time.time() - start_time
            logger.info(
                "Results fetched",
                extra={**payload, "row_count": len(rows), "duration.seconds": f"{duration:.6f}"},
            )
            return rows

        except Exception as exc:
            duration = time.time() - start_time
            logger.error(
                "Fetch all failed",
                extra={**payload, "duration.seconds": f"{duration:.6f}", "error": str(exc)},
                exc_info=True,
            )
            raise query_execution_error(query.text, exc)

    @traced(
        span_name="sqlfluent.executor.fetch_scalar",
        attribute_getter=lambda self, query: self._span_attributes(query, operation="fetch_scalar"),
    )
    def fetch_scalar(self, query: CompiledQuery) -> Any:
        """Execute query and return a single scalar value.

        Used for queries that return a single value (COUNT, MAX, etc).

        Raises:
            SQLFluentError: QUERY_EXECUTION_ERROR if execution fails or the
                query returns more than one row
        """
        start_time = time.time()
        payload = {"db.platform": self._connection_info["platform"]}

        try:
            with self._get_connection() as conn:
                value = conn.exec_driver_sql(query.text, query.params).scalar_one_or_none()

            duration = time.time() - start_time
            logger.info(
                "Scalar fetched",
                extra={**payload, "duration.seconds": f"{duration:.6f}", "value_is_null": value is None},
            )
            return value

        except Exception as exc:
            duration = time.time() - start_time
            logger.error(
                "Scalar fetch failed",
                extra={**payload, "duration.seconds": f"{duration:.6f}", "error": str(exc)},
                exc_info=True,
            )
            raise query_execution_error(query.text, exc)


def create_executor(database_url: Optional[str] = None, **engine_options: Any) -> SQLAlchemyExecutor:
    """Create an executor for ``database_url`` (or ``SQLFLUENT_DATABASE_URL``).

    Raises:
        SQLFluentError: CONFIG_MISSING when no URL is available
    """
    if database_url is None:
        from sqlfluent.settings import get_settings
        database_url = get_settings().database_url

    if not database_url:
        raise configuration_error(
            "No database URL configured. Pass one explicitly or set SQLFLUENT_DATABASE_URL.",
            config_key="database_url",
            error_code=ErrorCode.CONFIG_MISSING,
        )

    engine = create_engine(database_url, pool_pre_ping=True, **engine_options)
    logger.info("Created executor", extra={"db.platform": engine.dialect.name})
    return SQLAlchemyExecutor(engine)

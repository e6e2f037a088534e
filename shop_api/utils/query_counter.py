"""SQL 실행 횟수 측정 유틸리티.

SQL statement counting utility.
A SQLAlchemy ``before_cursor_execute`` listener registered on every Engine
increments the counter bound to the current context. SQLAlchemy's async layer
runs driver calls in a greenlet that shares the caller's contextvars, so the
count reflects the statements issued by the current request or block.

Usage:
    with count_queries() as counter:
        await order_repository.find_all(db)
    counter.count  # -> 1
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine


class QueryCounter:
    """실행된 SQL 문 개수를 누적하는 카운터.

    Accumulates the number of SQL statements sent to the database.

    Attributes:
        count: 누적 실행 횟수 (Number of statements executed)
        statements: 실행된 SQL 문 목록 (Executed statements, in order)
    """

    def __init__(self) -> None:
        self.count: int = 0
        self.statements: list[str] = []

    def record(self, statement: str) -> None:
        self.count += 1
        self.statements.append(statement)


_current_counter: ContextVar[QueryCounter | None] = ContextVar("query_counter", default=None)


@event.listens_for(Engine, "before_cursor_execute")
def _count_statement(
    conn: Any,
    cursor: Any,
    statement: str,
    parameters: Any,
    context: Any,
    executemany: bool,
) -> None:
    counter: QueryCounter | None = _current_counter.get()
    if counter is not None:
        counter.record(statement)


@contextmanager
def count_queries() -> Iterator[QueryCounter]:
    """현재 컨텍스트에서 실행되는 SQL 문을 셉니다.

    Bind a fresh QueryCounter to the current context for the duration of the block.

    Yields:
        QueryCounter: 블록 안에서 누적되는 카운터 (Counter filled while the block runs)
    """
    counter = QueryCounter()
    token = _current_counter.set(counter)
    try:
        yield counter
    finally:
        _current_counter.reset(token)

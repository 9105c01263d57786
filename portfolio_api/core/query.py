"""
SQL statement builders.

Builders are pure: they take a table name, column/value mappings and key
mappings and return a `Statement` without touching the database. Values are
never interpolated into `Statement.sql`; they travel in `Statement.params` and
are bound by asyncpg through `$n` placeholders. `Statement.render()` inlines
them through `format_value` for logs and tests, e.g.

    >>> delete_where("Demo", {"id": 5}).render()
    'DELETE FROM Demo WHERE id=5'

Column order in the generated SQL always follows the order of the input
mapping (or key sequence), so column lists and value lists line up.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping, Sequence, Union

from portfolio_api.core.errors import (
    EmptyDelete,
    EmptyInsert,
    EmptyUpdate,
    InvalidIdentifier,
    InvalidValueType,
)


class _Absent:
    """Marker for "omit this column"; stripped before INSERT/UPDATE."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

Scalar = Union[str, int, float, bool, None]
Value = Union[Scalar, _Absent]

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_PLACEHOLDER = re.compile(r"\$(\d+)")
_SLUG_STRIP = re.compile(r"[^a-zA-Z0-9\-_]")


# ----------------------------------------------------------------------------
# Value formatting
# ----------------------------------------------------------------------------


def check_scalar(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidValueType(f"Non-finite number has no SQL literal: {value!r}.")
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    raise InvalidValueType(f"Unsupported value type for SQL: {type(value).__name__}.")


def format_value(value: Any) -> str:
    """
    Render a scalar as SQL literal text.

    Strings are single-quoted with embedded quotes doubled; numbers and
    booleans are emitted unquoted. Anything else raises InvalidValueType.
    """
    check_scalar(value)
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    return str(value)


def slugify(text: str) -> str:
    """Turn a display string into a URL/identifier-safe slug."""
    return _SLUG_STRIP.sub("", (text or "").lower().replace(" ", "-"))


# ----------------------------------------------------------------------------
# Column map helpers
# ----------------------------------------------------------------------------


def strip_absent(data: Mapping[str, Value]) -> dict[str, Value]:
    return {column: value for column, value in data.items() if value is not ABSENT}


def strip_empty_strings(data: Mapping[str, Value]) -> dict[str, Value]:
    return {column: value for column, value in data.items() if not (isinstance(value, str) and value == "")}


def fully_strip(data: Mapping[str, Value]) -> dict[str, Value]:
    return strip_absent(strip_empty_strings(data))


def identifier(name: str) -> str:
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise InvalidIdentifier(f"Invalid SQL identifier: {name!r}.")
    return name


# ----------------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------------


@dataclass(frozen=True)
class Key:
    column: str
    value: Scalar


@dataclass(frozen=True)
class Statement:
    sql: str
    params: tuple[Scalar, ...] = ()
    returns_rows: bool = False

    def render(self) -> str:
        return _PLACEHOLDER.sub(lambda m: format_value(self.params[int(m.group(1)) - 1]), self.sql)


@dataclass(frozen=True)
class Batch:
    statements: tuple[Statement, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def render(self) -> str:
        return "; ".join(statement.render() for statement in self.statements)


class _Params:
    """Collects bound values and hands out their placeholders."""

    def __init__(self) -> None:
        self.values: list[Scalar] = []

    def bind(self, value: Any) -> str:
        self.values.append(check_scalar(value))
        return f"${len(self.values)}"

    def statement(self, sql: str, *, returns_rows: bool = False) -> Statement:
        return Statement(sql=sql, params=tuple(self.values), returns_rows=returns_rows)


def _predicates(params: _Params, pairs: Iterable[tuple[str, Any]]) -> list[str]:
    return [f"{identifier(column)}={params.bind(value)}" for column, value in pairs]


def select_all(table: str) -> Statement:
    return Statement(sql=f"SELECT * FROM {identifier(table)}", returns_rows=True)


def select_where(table: str, column: str, value: Scalar) -> Statement:
    params = _Params()
    where = _predicates(params, [(column, value)])[0]
    return params.statement(f"SELECT * FROM {identifier(table)} WHERE {where}", returns_rows=True)


def insert(table: str, data: Mapping[str, Value], *, returning: Sequence[str] = ()) -> Statement:
    columns = strip_absent(data)
    if not columns:
        raise EmptyInsert(f"Nothing to insert into {table}.")

    params = _Params()
    names = ", ".join(identifier(column) for column in columns)
    values = ", ".join(params.bind(value) for value in columns.values())
    sql = f"INSERT INTO {identifier(table)} ({names}) VALUES ({values})"
    if returning:
        sql += " RETURNING " + ", ".join(identifier(column) for column in returning)
    return params.statement(sql, returns_rows=bool(returning))


def insert_ignore(table: str, data: Mapping[str, Value]) -> Statement:
    """INSERT that is a no-op when it would violate a uniqueness constraint."""
    statement = insert(table, data)
    return Statement(
        sql=statement.sql + " ON CONFLICT DO NOTHING",
        params=statement.params,
    )


def delete_where(table: str, data: Mapping[str, Scalar]) -> Statement:
    # An empty predicate would wipe the table.
    if not data:
        raise EmptyDelete(f"Refusing to delete from {table} without a condition.")

    params = _Params()
    where = " AND ".join(_predicates(params, data.items()))
    return params.statement(f"DELETE FROM {identifier(table)} WHERE {where}")


def update_by_keys(table: str, keys: Sequence[Key], data: Mapping[str, Value]) -> Statement:
    columns = strip_absent(data)
    if not columns:
        raise EmptyUpdate(f"Nothing to update in {table}.")
    if not keys:
        raise EmptyUpdate(f"Refusing to update {table} without a key.")

    params = _Params()
    assignments = ", ".join(_predicates(params, columns.items()))
    where = " AND ".join(_predicates(params, [(key.column, key.value) for key in keys]))
    return params.statement(f"UPDATE {identifier(table)} SET {assignments} WHERE {where}")


def update_by_key(table: str, key: Key, data: Mapping[str, Value]) -> Statement:
    return update_by_keys(table, [key], data)

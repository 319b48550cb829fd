"""
Partial mutation query builder.

Every resource writes rows the same way: the client sends any subset of
the mutable fields, and only the fields that are *present* take part in
the statement.  The functions below turn a mapping of present fields
into the pieces of a parameterized SQL statement.  Columns always come
out in the fixed order given by the caller, so the produced SQL is
deterministic for a given set of fields.

Column names are taken from the caller's column order only; values
always travel as bound ``?`` parameters.  The builders never touch the
database.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple

from .errors import InvalidValuesError

PLACEHOLDER = "?"
UPDATED_AT_ASSIGNMENT = "updated_at = CURRENT_TIMESTAMP"


@dataclass(frozen=True)
class UpdateStatement:
    """``SET`` assignments for an UPDATE and their bound arguments."""

    assignments: Tuple[str, ...]
    args: Tuple[Any, ...]

    @property
    def set_clause(self) -> str:
        return ", ".join(self.assignments)


@dataclass(frozen=True)
class InsertStatement:
    """Column list, placeholder list and arguments for an INSERT."""

    columns: Tuple[str, ...]
    placeholders: Tuple[str, ...]
    args: Tuple[Any, ...]

    @property
    def column_list(self) -> str:
        return ", ".join(self.columns)

    @property
    def placeholder_list(self) -> str:
        return ", ".join(self.placeholders)


def _present(values: Mapping[str, Any], columns: Sequence[str]) -> List[Tuple[str, Any]]:
    return [(column, values[column]) for column in columns if column in values]


def build_update(values: Mapping[str, Any], columns: Sequence[str]) -> UpdateStatement:
    """Build the SET part of a partial UPDATE.

    ``values`` holds only the fields the client supplied; a key mapped to
    ``None`` is present and writes NULL.  Keys not listed in ``columns``
    are ignored.  When at least one column is set an
    ``updated_at = CURRENT_TIMESTAMP`` assignment is appended.

    Raises ``InvalidValuesError`` when no column is present.
    """
    present = _present(values, columns)
    if not present:
        raise InvalidValuesError()
    assignments = [f"{column} = {PLACEHOLDER}" for column, _ in present]
    assignments.append(UPDATED_AT_ASSIGNMENT)
    return UpdateStatement(
        assignments=tuple(assignments),
        args=tuple(value for _, value in present),
    )


def build_insert(values: Mapping[str, Any], columns: Sequence[str]) -> InsertStatement:
    """Build the column and placeholder lists of an INSERT.

    Same presence rules as ``build_update``; raises ``InvalidValuesError``
    when no column is present.
    """
    present = _present(values, columns)
    if not present:
        raise InvalidValuesError()
    return InsertStatement(
        columns=tuple(column for column, _ in present),
        placeholders=tuple(PLACEHOLDER for _ in present),
        args=tuple(value for _, value in present),
    )


def build_where(filters: Mapping[str, Any]) -> Tuple[str, Tuple[Any, ...]]:
    """Build an equality WHERE clause from ``filters``.

    Filters whose value is ``None`` are skipped.  Returns the clause with
    a leading space (or an empty string) and its arguments.
    """
    conditions = []
    args = []
    for column, value in filters.items():
        if value is None:
            continue
        conditions.append(f"{column} = {PLACEHOLDER}")
        args.append(value)
    if not conditions:
        return "", ()
    return " WHERE " + " AND ".join(conditions), tuple(args)

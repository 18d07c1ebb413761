"""
Filter-to-WHERE compiler.

A PredicateBuilder collects (fragment, value) pairs. Placeholders are named
`:p1, :p2, ...` from the builder's own running parameter count, so the n-th
bound value is always `:pn` no matter which optional fields were skipped.

Column names come from the constants in this module, never from callers;
every caller-supplied value travels as a bound parameter. Substring matches
escape `%` and `_` in the value, so they match literally.

The compilers never judge whether a value is legal (negative ids, unknown
enum values). An impossible filter just matches no rows.
"""

from dataclasses import dataclass
from typing import Any, Iterable

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from .filters import CommentFilter, ProjectFilter, TaskFilter, UserAssignFilter, UserFilter

PARAM_PREFIX = "p"
ALWAYS_FALSE = "1 = 0"
LIKE_ESCAPE = "!"


def escape_like(value: str) -> str:
    for char in (LIKE_ESCAPE, "%", "_"):
        value = value.replace(char, LIKE_ESCAPE + char)
    return value


@dataclass(frozen=True)
class CompiledPredicate:
    """Ordered AND-clauses plus the bound values in placeholder order."""

    clauses: tuple[str, ...] = ()
    params: tuple[Any, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.clauses

    @property
    def where_sql(self) -> str:
        """Clause text without the WHERE keyword; "" when nothing was compiled."""
        return " AND ".join(self.clauses)

    @property
    def bind_params(self) -> dict[str, Any]:
        return {f"{PARAM_PREFIX}{i}": value for i, value in enumerate(self.params, start=1)}

    def as_clause(self) -> TextClause | None:
        """A SQLAlchemy text clause for `.where()`, or None for an empty filter."""
        if self.is_empty:
            return None
        return text(self.where_sql).bindparams(**self.bind_params)


class PredicateBuilder:
    def __init__(self) -> None:
        self._clauses: list[str] = []
        self._params: list[Any] = []

    def add(self, fragment: str, *values: Any) -> "PredicateBuilder":
        """
        Append a clause. Each `{}` in `fragment` is replaced, in order, by the
        placeholder of the matching value.
        """
        placeholders = []
        for value in values:
            self._params.append(value)
            placeholders.append(f":{PARAM_PREFIX}{len(self._params)}")
        self._clauses.append(fragment.format(*placeholders))
        return self

    def eq(self, column: str, value: Any) -> "PredicateBuilder":
        if value is not None:
            self.add(f"{column} = {{}}", value)
        return self

    def contains(self, column: str, value: str | None) -> "PredicateBuilder":
        if value is not None:
            self.add(f"{column} LIKE '%' || {{}} || '%' ESCAPE '{LIKE_ESCAPE}'", escape_like(value))
        return self

    def in_range(self, column: str, lower: Any, upper: Any) -> "PredicateBuilder":
        """Inclusive range; either bound may be missing."""
        if lower is not None and upper is not None:
            self.add(f"{column} BETWEEN {{}} AND {{}}", lower, upper)
        elif lower is not None:
            self.add(f"{column} >= {{}}", lower)
        elif upper is not None:
            self.add(f"{column} <= {{}}", upper)
        return self

    def in_(self, column: str, values: Iterable[Any] | None) -> "PredicateBuilder":
        """
        Restrict to an id set. None leaves the query unrestricted; an empty
        set compiles to an always-false clause.
        """
        if values is None:
            return self
        values = list(values)
        if not values:
            self._clauses.append(ALWAYS_FALSE)
            return self
        self.add(f"{column} IN ({', '.join(['{}'] * len(values))})", *values)
        return self

    def build(self) -> CompiledPredicate:
        return CompiledPredicate(clauses=tuple(self._clauses), params=tuple(self._params))


# =================================================================================================================
# Per-entity compilers (emission order is fixed and part of the contract)
# =================================================================================================================

def compile_task_filter(task_filter: TaskFilter | None, task_ids: Iterable[int] | None = None) -> CompiledPredicate:
    """
    Order: project_id, parent_id, level, name, description, status, deadline,
    created_at, updated_at, then the optional `task_ids` restriction.
    """
    builder = PredicateBuilder()
    if task_filter is not None:
        (
            builder
            .eq("tasks.project_id", task_filter.project_id)
            .eq("tasks.parent_id", task_filter.parent_id)
            .eq("tasks.level", task_filter.level)
            .contains("tasks.name", task_filter.name)
            .contains("tasks.description", task_filter.description)
            .eq("tasks.status", task_filter.status)
            .in_range("tasks.deadline", task_filter.deadline_from, task_filter.deadline_to)
            .in_range("tasks.created_at", task_filter.created_at_from, task_filter.created_at_to)
            .in_range("tasks.updated_at", task_filter.updated_at_from, task_filter.updated_at_to)
        )
    builder.in_("tasks.id", task_ids)
    return builder.build()


def compile_project_filter(project_filter: ProjectFilter | None) -> CompiledPredicate:
    builder = PredicateBuilder()
    if project_filter is not None:
        builder.contains("projects.name", project_filter.name)
    return builder.build()


def compile_user_filter(user_filter: UserFilter | None) -> CompiledPredicate:
    builder = PredicateBuilder()
    if user_filter is not None:
        builder.contains("users.username", user_filter.username).contains("users.email", user_filter.email)
    return builder.build()


def compile_user_assign_filter(assign_filter: UserAssignFilter | None) -> CompiledPredicate:
    builder = PredicateBuilder()
    if assign_filter is not None:
        builder.eq("user_assign.user_id", assign_filter.user_id).eq("user_assign.task_id", assign_filter.task_id)
    return builder.build()


def compile_comment_filter(comment_filter: CommentFilter | None) -> CompiledPredicate:
    builder = PredicateBuilder()
    if comment_filter is not None:
        (
            builder
            .eq("comments.user_id", comment_filter.user_id)
            .eq("comments.task_id", comment_filter.task_id)
            .contains("comments.content", comment_filter.content)
            .in_range("comments.created_at", comment_filter.created_at_from, comment_filter.created_at_to)
            .in_range("comments.updated_at", comment_filter.updated_at_from, comment_filter.updated_at_to)
        )
    return builder.build()

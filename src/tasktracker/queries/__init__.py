from .filters import CommentFilter, ProjectFilter, TaskFilter, UserAssignFilter, UserFilter
from .pagination import PageRequest, PaginationState, classify_pagination, validate_pagination
from .predicates import CompiledPredicate, PredicateBuilder, compile_task_filter

__all__ = [
    "CommentFilter",
    "ProjectFilter",
    "TaskFilter",
    "UserAssignFilter",
    "UserFilter",
    "PageRequest",
    "PaginationState",
    "classify_pagination",
    "validate_pagination",
    "CompiledPredicate",
    "PredicateBuilder",
    "compile_task_filter",
]

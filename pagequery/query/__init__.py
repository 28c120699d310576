"""Paginated query engine: filter, order and page a record collection."""

from .definition import QueryDefinition
from .executor import QueryExecutor
from .filters import Contains, Equals, OneOf, Range, SoftDelete
from .pager import paginate, validate_page_params
from .predicates import build_predicate
from .sorting import SortSpec, resolve_sort

__all__ = [
    "Contains",
    "Equals",
    "OneOf",
    "QueryDefinition",
    "QueryExecutor",
    "Range",
    "SoftDelete",
    "SortSpec",
    "build_predicate",
    "paginate",
    "resolve_sort",
    "validate_page_params",
]

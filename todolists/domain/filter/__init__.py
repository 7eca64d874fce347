"""Filter domain - predicate trees over tasks.

Key Types:
    LogicalNode - AND / OR combinator
    ComparisonNode - Compiled field comparison
    Node - Either of the above
    FilteredList - Named filter (virtual list)
    Rule, RuleSet - OR-of-AND convenience layer

Compiler:
    compile_comparison - (field, op, value) -> predicate
    FilterField, ComparisonOp - Field and operator tokens

Codec:
    encode / decode - Persisted tagged form

Resolution:
    filter_tasks - Tasks of all lists matching a filter

Builders:
    new_filter, due, pending, pending_or_done_today, overdue,
    due_by_in_days, due_on_in_days, due_on_today, no_due_date, in_lists
"""

from .builders import (
    due,
    due_by_in_days,
    due_on_in_days,
    due_on_today,
    in_lists,
    new_filter,
    no_due_date,
    overdue,
    pending,
    pending_or_done_today,
)
from .codec import decode, encode
from .compiler import (
    FIELD_OPERATORS,
    ComparisonOp,
    FilterField,
    TaskPredicate,
    compile_comparison,
    default_operator,
)
from .models import FilteredList
from .nodes import (
    ComparisonNode,
    LogicalNode,
    LogicalOp,
    Node,
    iter_comparisons,
    references_list,
)
from .resolution import filter_tasks
from .rules import Rule, RuleSet, from_rule_sets

__all__ = [
    # Nodes
    "LogicalOp",
    "LogicalNode",
    "ComparisonNode",
    "Node",
    "iter_comparisons",
    "references_list",
    # Compiler
    "FilterField",
    "ComparisonOp",
    "FIELD_OPERATORS",
    "TaskPredicate",
    "compile_comparison",
    "default_operator",
    # Codec
    "encode",
    "decode",
    # Models
    "FilteredList",
    # Resolution
    "filter_tasks",
    # Rules
    "Rule",
    "RuleSet",
    "from_rule_sets",
    # Builders
    "new_filter",
    "due",
    "pending",
    "pending_or_done_today",
    "overdue",
    "due_by_in_days",
    "due_on_in_days",
    "due_on_today",
    "no_due_date",
    "in_lists",
]

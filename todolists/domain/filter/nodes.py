"""Predicate tree nodes.

A filter is a tree of two node shapes:

    LogicalNode     AND / OR over an ordered tuple of children
    ComparisonNode  leaf comparing one task field against a literal

Both are immutable. Evaluation is a pure function of the node, the task and
the evaluation instant; the instant is resolved once at the root and passed
down so every leaf sees the same "now".
"""

import dataclasses
from collections.abc import Iterator
from datetime import datetime
from enum import Enum
from typing import Union

from todolists.domain.shared.clock import local_now, to_local
from todolists.domain.shared.errors import TodoError
from todolists.domain.shared.result import Err, Ok, Result
from todolists.domain.task.models import Task

from .compiler import FilterField, TaskPredicate, compile_comparison, default_operator


class LogicalOp(str, Enum):
    """Logical combinator of a LogicalNode."""

    AND = "AND"
    OR = "OR"


def _resolve_now(now: datetime | None) -> datetime:
    return to_local(now) if now is not None else local_now()


@dataclasses.dataclass(frozen=True)
class LogicalNode:
    """AND / OR over child nodes.

    AND without children is true, OR without children is false. The
    operator is coerced to ``LogicalOp`` on construction, so an unknown
    operator raises ``ValueError`` here rather than during evaluation.
    """

    operator: LogicalOp
    children: tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator", LogicalOp(self.operator))
        object.__setattr__(self, "children", tuple(self.children))

    def evaluate(self, task: Task, now: datetime | None = None) -> bool:
        now = _resolve_now(now)
        if self.operator == LogicalOp.AND:
            return all(child.evaluate(task, now) for child in self.children)
        return any(child.evaluate(task, now) for child in self.children)


@dataclasses.dataclass(frozen=True)
class ComparisonNode:
    """Leaf comparing a task field with a literal value.

    Build instances with ``ComparisonNode.create`` so the predicate is always
    compiled from the triple. Equality only looks at the triple.
    """

    field: str
    op: str
    value: str
    predicate: TaskPredicate = dataclasses.field(compare=False, repr=False)

    @classmethod
    def create(
        cls,
        field: str,
        op: str = "",
        value: str = "",
    ) -> Result["ComparisonNode", TodoError]:
        """Compile a comparison leaf.

        Args:
            field: Field token, e.g. "done"
            op: Operator token; empty selects the field's operator
            value: Literal value as text

        Returns:
            Ok(ComparisonNode) or Err(TodoError) of kind INVALID_INPUT.
        """
        op = op or default_operator(field) or ""
        compiled = compile_comparison(field, op, value)
        if isinstance(compiled, Err):
            return Err(TodoError.invalid_input(compiled.error, field=field, op=op, value=value))
        return Ok(cls(field=field, op=op, value=value, predicate=compiled.value))

    def evaluate(self, task: Task, now: datetime | None = None) -> bool:
        return self.predicate(task, _resolve_now(now))


Node = Union[LogicalNode, ComparisonNode]


def iter_comparisons(node: Node) -> Iterator[ComparisonNode]:
    """Yield every comparison leaf of a tree, depth-first."""
    if isinstance(node, ComparisonNode):
        yield node
        return
    for child in node.children:
        yield from iter_comparisons(child)


def references_list(node: Node, list_name: str) -> bool:
    """Return True if any ``list`` comparison in the tree names ``list_name``."""
    for leaf in iter_comparisons(node):
        if leaf.field != FilterField.LIST.value:
            continue
        names = {name.strip() for name in leaf.value.split(",")}
        if list_name in names:
            return True
    return False

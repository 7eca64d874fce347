"""Rule sets: OR-of-AND filters built from (field, value) rules.

A rule set matches when all of its rules match; a list of rule sets matches
when any rule set matches. This is a thin layer over the general node tree.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from todolists.domain.shared.errors import TodoError
from todolists.domain.shared.result import Err, Ok, Result

from .nodes import ComparisonNode, LogicalNode, LogicalOp, Node


@dataclass(frozen=True)
class Rule:
    """A single comparison; ``op`` defaults to the field's operator."""

    field: str
    value: str = ""
    op: str = ""

    def to_node(self) -> Result[ComparisonNode, TodoError]:
        return ComparisonNode.create(self.field, self.op, self.value)


@dataclass(frozen=True)
class RuleSet:
    """Rules that must all match."""

    rules: tuple[Rule, ...] = ()

    def to_node(self) -> Result[LogicalNode, TodoError]:
        children: list[Node] = []
        for rule in self.rules:
            result = rule.to_node()
            if isinstance(result, Err):
                return result
            children.append(result.value)
        return Ok(LogicalNode(LogicalOp.AND, tuple(children)))


def from_rule_sets(rule_sets: Iterable[RuleSet]) -> Result[LogicalNode, TodoError]:
    """Build an OR over the AND of each rule set.

    Args:
        rule_sets: Rule sets, any of which may match

    Returns:
        Ok(root node), or the error of the first rule that fails to compile.
    """
    children: list[Node] = []
    for index, rule_set in enumerate(rule_sets):
        result = rule_set.to_node()
        if isinstance(result, Err):
            error = result.error
            return Err(
                TodoError.invalid_input(
                    f"rule set {index}: {error.message}",
                    rule_set=index,
                    **error.details,
                )
            )
        children.append(result.value)
    return Ok(LogicalNode(LogicalOp.OR, tuple(children)))

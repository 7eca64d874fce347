"""Virtual list resolution."""

from collections.abc import Sequence
from datetime import datetime

from todolists.domain.shared.clock import local_now, to_local
from todolists.domain.task.models import Task, TaskList
from todolists.domain.task.traversal import collect_tasks

from .nodes import Node


def filter_tasks(
    lists: Sequence[TaskList],
    node: Node,
    now: datetime | None = None,
) -> list[Task]:
    """Evaluate a filter against every task of every list.

    The evaluation instant is fixed once for the whole pass, so all tasks
    are judged against the same "today".

    Args:
        lists: Real lists to scan
        node: Filter to evaluate
        now: Evaluation instant; defaults to the current local time

    Returns:
        Matching tasks in list order, then task order
    """
    now = to_local(now) if now is not None else local_now()
    return collect_tasks(lists, lambda task: node.evaluate(task, now))

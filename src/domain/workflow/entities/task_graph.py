from dataclasses import dataclass, field
from datetime import datetime

from src.domain.workflow.value_objects.task_status import TaskStatus
from src.domain.workflow.value_objects.task_timing import MAX_RETRIES

TASK_ID_PREFIX = "task_"


def task_id(index: int) -> str:
    return f"{TASK_ID_PREFIX}{index}"


def task_index(identifier: str) -> int:
    """Inverse of task_id: ``task_12`` -> 12."""
    return int(identifier[len(TASK_ID_PREFIX):])


@dataclass(frozen=True)
class TaskNode:
    """
    A single unit of work inside a synthesized workflow graph.

    Attributes:
        id (str): ``task_<index>``; indices start at 0 and increase monotonically.
        name (str): Display name embedding the workflow id, operator label and index.
        status (TaskStatus): Synthesized execution status.
        operator (str): Operator kind, a label only.
        start_time / end_time (datetime | None): Consistent with ``status``.
        duration (float | None): Seconds between start and end for finished tasks.
        retries (int): Attempts already consumed, never above ``max_retries``.
    """

    id: str
    name: str
    status: TaskStatus
    operator: str
    start_time: datetime | None = None
    end_time: datetime | None = None
    duration: float | None = None
    retries: int = 0
    max_retries: int = MAX_RETRIES


@dataclass(frozen=True)
class Edge:
    source: str
    target: str


@dataclass
class TaskGraph:
    """Task graph for one workflow. Edges always point from a lower to a higher task index."""

    dag_id: str
    tasks: list[TaskNode] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    _edge_keys: set[tuple[int, int]] = field(default_factory=set, init=False, repr=False, compare=False)

    @property
    def size(self) -> int:
        return len(self.tasks)

    def add_edge(self, source: int, target: int) -> bool:
        """Adds the edge ``source -> target`` by task index; returns False for duplicates."""
        if not 0 <= source < target < len(self.tasks):
            raise ValueError(f"Edge {source}->{target} violates index ordering for {len(self.tasks)} tasks")
        if (source, target) in self._edge_keys:
            return False
        self._edge_keys.add((source, target))
        self.edges.append(Edge(source=task_id(source), target=task_id(target)))
        return True

    def get_root_nodes(self) -> list[str]:
        targets = {edge.target for edge in self.edges}
        return [task.id for task in self.tasks if task.id not in targets]

    def status_counts(self) -> dict[TaskStatus, int]:
        counts = {status: 0 for status in TaskStatus}
        for task in self.tasks:
            counts[task.status] += 1
        return counts

import random
from enum import Enum


class TaskStatus(str, Enum):
    """
    Enumeration of synthesized states for a task inside a workflow graph.

    States:
        PENDING: Waiting for upstream tasks.
        SUCCEEDED: Finished without error.
        QUEUED: Scheduled and waiting for a worker slot.
        RUNNING: Currently executing.
        FAILED: Finished with an error.
        SKIPPED: Bypassed by a branch or trigger rule.
        PAUSED: Held by an operator.
    """

    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    QUEUED = "QUEUED"
    RUNNING = "RUNNING"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"
    PAUSED = "PAUSED"

    @property
    def weight(self) -> int:
        return STATUS_WEIGHTS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        return STATUS_COLORS[self]

    @property
    def is_finished(self) -> bool:
        return self in (TaskStatus.SUCCEEDED, TaskStatus.FAILED)


# Percentages; iteration order defines the cumulative bands used by draw_status.
STATUS_WEIGHTS: dict[TaskStatus, int] = {
    TaskStatus.PENDING: 10,
    TaskStatus.SUCCEEDED: 50,
    TaskStatus.QUEUED: 10,
    TaskStatus.RUNNING: 15,
    TaskStatus.FAILED: 10,
    TaskStatus.SKIPPED: 3,
    TaskStatus.PAUSED: 2,
}

STATUS_COLORS: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "#9e9e9e",
    TaskStatus.SUCCEEDED: "#4caf50",
    TaskStatus.QUEUED: "#ff9800",
    TaskStatus.RUNNING: "#2196f3",
    TaskStatus.FAILED: "#f44336",
    TaskStatus.SKIPPED: "#673ab7",
    TaskStatus.PAUSED: "#795548",
}

TOTAL_WEIGHT = sum(STATUS_WEIGHTS.values())


def draw_status(rng: random.Random) -> TaskStatus:
    """Draws one status from the weighted table using a single integer roll."""
    roll = rng.randrange(TOTAL_WEIGHT)
    upper = 0
    for status, weight in STATUS_WEIGHTS.items():
        upper += weight
        if roll < upper:
            return status
    raise AssertionError(f"roll {roll} outside weight table")

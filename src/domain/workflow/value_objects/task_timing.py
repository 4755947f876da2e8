import random
from dataclasses import dataclass
from datetime import datetime, timedelta

from src.domain.workflow.value_objects.task_status import TaskStatus

MAX_RETRIES = 3

# Minutes before "now" a finished task started
FINISHED_START_MINUTES = (30, 120)
# Seconds a finished task ran for
FINISHED_DURATION_SECONDS = (30.0, 600.0)
# Minutes before "now" a running task started
RUNNING_START_MINUTES = (5, 30)


@dataclass(frozen=True)
class TaskTiming:
    """Start/end instants and duration (seconds) consistent with a task status."""
    start_time: datetime | None = None
    end_time: datetime | None = None
    duration: float | None = None

    @classmethod
    def sample(cls, status: TaskStatus, now: datetime, rng: random.Random) -> "TaskTiming":
        if status.is_finished:
            start = now - timedelta(minutes=rng.randrange(*FINISHED_START_MINUTES))
            duration = rng.uniform(*FINISHED_DURATION_SECONDS)
            return cls(
                start_time=start,
                end_time=start + timedelta(seconds=duration),
                duration=duration,
            )
        if status == TaskStatus.RUNNING:
            start = now - timedelta(minutes=rng.randrange(*RUNNING_START_MINUTES))
            return cls(start_time=start)
        return cls()


def sample_retries(status: TaskStatus, rng: random.Random) -> int:
    if status == TaskStatus.FAILED:
        return rng.randrange(0, MAX_RETRIES)
    return 0

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


@dataclass(frozen=True)
class WorkflowSummary:
    """
    One catalog entry describing a workflow definition.

    Invariants:
        - A paused workflow has no ``next_run``.
        - ``runs_count >= success_count + failed_count``.
    """

    dag_id: str
    owner: str
    paused: bool
    schedule_interval: str
    file_path: str
    created_at: datetime
    updated_at: datetime
    tags: tuple[str, ...] = ()
    runs_count: int = 0
    success_count: int = 0
    failed_count: int = 0
    running_count: int = 0
    last_run: datetime | None = None
    next_run: datetime | None = None
    description: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def status(self) -> str:
        """Single keyword summarising the workflow for the dashboard badge."""
        if self.paused:
            return "paused"
        if self.running_count > 0:
            return "running"
        if self.failed_count > 0:
            return "failed"
        if self.success_count > 0:
            return "success"
        return "none"

    def has_tag(self, tag: str) -> bool:
        wanted = tag.casefold()
        return any(t.casefold() == wanted for t in self.tags)

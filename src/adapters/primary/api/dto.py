from datetime import datetime

from pydantic import BaseModel, ConfigDict

from src.domain.workflow.value_objects.task_status import TaskStatus


class WorkflowSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    dag_id: str
    description: str | None = None
    file_path: str
    owner: str
    paused: bool
    status: str
    last_run: datetime | None = None
    next_run: datetime | None = None
    runs_count: int
    success_count: int
    failed_count: int
    running_count: int
    schedule_interval: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime


class CatalogPageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    dags: list[WorkflowSummaryResponse]
    total_count: int
    filtered_count: int
    page: int
    limit: int


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    status: TaskStatus
    duration: float | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    operator: str
    retries: int
    max_retries: int


class EdgeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    source: str
    target: str


class TaskGraphResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    dag_id: str
    tasks: list[TaskResponse]
    edges: list[EdgeResponse]


class TaskStatusLegendEntry(BaseModel):
    status: TaskStatus
    label: str
    color: str
    weight: int


class ErrorResponse(BaseModel):
    detail: str

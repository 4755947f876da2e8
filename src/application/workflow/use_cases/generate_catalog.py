import random
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable

from src.domain.workflow.entities.workflow_summary import WorkflowSummary
from src.domain.workflow.value_objects.catalog_vocabulary import (
    DAG_FILE_ROOT,
    DAG_NAME_PREFIXES,
    DAG_NAME_SUFFIXES,
    OWNERS,
    SCHEDULE_INTERVALS,
    SPECIAL_WORKFLOW_SCHEDULE,
    SPECIAL_WORKFLOW_SIZES,
    SPECIAL_WORKFLOW_TAGS,
    TAG_VOCABULARY,
)
from src.shared.logger import get_logger

logger = get_logger(__name__)

DEFAULT_FILLER_COUNT = 45

PAUSED_PROBABILITY = 0.2
LAST_RUN_PROBABILITY = 0.9
RUNNING_PROBABILITY = 0.1
DESCRIPTION_PROBABILITY = 0.8


class GenerateCatalogUseCase:
    """
    Produces the workflow catalog: random filler records followed by the
    special scale-testing workflows from SPECIAL_WORKFLOW_SIZES.
    """
    def __init__(
        self,
        rng: random.Random,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
        filler_count: int = DEFAULT_FILLER_COUNT,
    ):
        self._rng = rng
        self._now = now
        self._filler_count = filler_count

    def execute(self) -> list[WorkflowSummary]:
        now = self._now()
        catalog = [self._build_filler(i, now) for i in range(self._filler_count)]
        catalog.extend(
            self._build_special(j, name, size, now)
            for j, (name, size) in enumerate(SPECIAL_WORKFLOW_SIZES.items())
        )
        logger.debug("catalog_generated", record_count=len(catalog))
        return catalog

    def _new_id(self) -> str:
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))

    def _hours(self, low: int, high: int) -> timedelta:
        return timedelta(hours=self._rng.randrange(low, high))

    def _build_filler(self, i: int, now: datetime) -> WorkflowSummary:
        rng = self._rng
        suffix = DAG_NAME_SUFFIXES[i % len(DAG_NAME_SUFFIXES)]
        dag_id = f"{DAG_NAME_PREFIXES[i % len(DAG_NAME_PREFIXES)]}{suffix}_{i:03d}"

        paused = rng.random() < PAUSED_PROBABILITY
        created_at = now - self._hours(24, 720)
        updated_at = created_at + self._hours(1, 24)
        last_run = now - self._hours(1, 48) if rng.random() < LAST_RUN_PROBABILITY else None
        next_run = None if paused else now + self._hours(1, 48)

        runs_count = rng.randrange(0, 100)
        success_count = round(runs_count * rng.uniform(0.5, 0.99))
        running_count = rng.randrange(1, 5) if rng.random() < RUNNING_PROBABILITY else 0

        tags = tuple(rng.sample(TAG_VOCABULARY, rng.randint(1, 3)))
        description = (
            f"DAG for processing {suffix} data"
            if rng.random() < DESCRIPTION_PROBABILITY
            else None
        )

        return WorkflowSummary(
            id=self._new_id(),
            dag_id=dag_id,
            owner=OWNERS[i % len(OWNERS)],
            paused=paused,
            schedule_interval=SCHEDULE_INTERVALS[i % len(SCHEDULE_INTERVALS)],
            file_path=f"{DAG_FILE_ROOT}/{dag_id}.py",
            created_at=created_at,
            updated_at=updated_at,
            tags=tags,
            runs_count=runs_count,
            success_count=success_count,
            failed_count=runs_count - success_count,
            running_count=running_count,
            last_run=last_run,
            next_run=next_run,
            description=description,
        )

    def _build_special(self, j: int, dag_id: str, size: int, now: datetime) -> WorkflowSummary:
        created_at = now - self._hours(24, 720)
        runs_count = self._rng.randrange(5, 20)

        return WorkflowSummary(
            id=self._new_id(),
            dag_id=dag_id,
            owner=OWNERS[j % len(OWNERS)],
            paused=False,
            schedule_interval=SPECIAL_WORKFLOW_SCHEDULE,
            file_path=f"{DAG_FILE_ROOT}/{dag_id}.py",
            created_at=created_at,
            updated_at=created_at + self._hours(1, 24),
            tags=SPECIAL_WORKFLOW_TAGS + (f"nodes_{size}",),
            runs_count=runs_count,
            success_count=runs_count - 1,
            failed_count=1,
            running_count=0,
            last_run=now - self._hours(1, 24),
            next_run=now + self._hours(1, 24),
            description=f"Test DAG with {size} nodes",
        )

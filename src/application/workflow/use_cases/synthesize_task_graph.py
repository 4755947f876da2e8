import random
import re
from datetime import datetime, timezone
from typing import Callable

from src.domain.workflow.entities.task_graph import TaskGraph, TaskNode, task_id
from src.domain.workflow.value_objects.catalog_vocabulary import SPECIAL_WORKFLOW_SIZES
from src.domain.workflow.value_objects.operator_kind import draw_operator, operator_label
from src.domain.workflow.value_objects.task_status import draw_status
from src.domain.workflow.value_objects.task_timing import TaskTiming, sample_retries
from src.ports.secondary.metrics import IMetrics
from src.shared.logger import get_logger

logger = get_logger(__name__)

MIN_TASKS = 5
MAX_TASKS = 1000
# Half-open range used when the identifier yields no usable task count
DEFAULT_TASK_RANGE = (5, 20)

SMALL_GRAPH_THRESHOLD = 50
SMALL_CHAIN_PROBABILITY = 0.7
SMALL_EXTRA_EDGE_PROBABILITY = 0.3

BLOCK_JOIN_SPAN = 10
FAN_OUT_STEP = 5
FAN_OUT_BRANCHES = (2, 4)
FAN_OUT_DISTANCE = (2, 10)
CROSS_LINK_STEP = 20
CROSS_LINK_DISTANCE = (15, 30)

DIGIT_RUN = re.compile(r"[0-9]+")
# Largest task count an identifier may carry before it counts as unparseable
MAX_PARSEABLE_COUNT = 2**64 - 1


def first_digit_run(text: str) -> str | None:
    """Returns the first run of ASCII digits in ``text``, if any."""
    match = DIGIT_RUN.search(text)
    return match.group() if match else None


def resolve_task_count(workflow_id: str, rng: random.Random) -> int:
    """
    Resolves how many tasks a workflow graph gets, in strict order:

    1. Exact match in SPECIAL_WORKFLOW_SIZES.
    2. First ASCII digit run in the identifier, clamped into [MIN_TASKS, MAX_TASKS].
    3. A random draw from DEFAULT_TASK_RANGE.
    """
    special = SPECIAL_WORKFLOW_SIZES.get(workflow_id)
    if special is not None:
        return special

    digits = first_digit_run(workflow_id)
    if digits is None:
        return rng.randrange(*DEFAULT_TASK_RANGE)

    count = int(digits)
    if count > MAX_PARSEABLE_COUNT:
        # Shares the no-digit range; confirm against real identifiers before
        # depending on it.
        logger.warning("task_count_digits_unparseable", dag_id=workflow_id, digits=digits)
        return rng.randrange(*DEFAULT_TASK_RANGE)

    return max(MIN_TASKS, min(MAX_TASKS, count))


def graph_regime(task_count: int) -> str:
    return "small" if task_count <= SMALL_GRAPH_THRESHOLD else "large"


class SynthesizeTaskGraphUseCase:
    """
    Builds a synthetic task graph for a workflow identifier.

    Every edge points from a lower to a higher task index, so the result is
    acyclic by construction and task_0 is always a root.
    """
    def __init__(
        self,
        rng: random.Random,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
        metrics: IMetrics | None = None,
    ):
        self._rng = rng
        self._now = now
        self._metrics = metrics

    def execute(self, workflow_id: str) -> TaskGraph:
        task_count = resolve_task_count(workflow_id, self._rng)
        graph = TaskGraph(dag_id=workflow_id, tasks=self._build_tasks(workflow_id, task_count))
        regime = graph_regime(task_count)

        if regime == "small":
            self._build_small_edges(graph)
        else:
            self._build_large_edges(graph)

        status_counts = {status.value: count for status, count in graph.status_counts().items()}
        logger.info(
            "task_graph_synthesized",
            dag_id=workflow_id,
            task_count=task_count,
            edge_count=len(graph.edges),
            regime=regime,
            status_counts=status_counts,
        )
        if self._metrics:
            self._metrics.record_graph_synthesis(regime, task_count, status_counts)
        return graph

    def _build_tasks(self, workflow_id: str, task_count: int) -> list[TaskNode]:
        now = self._now()
        tasks = []
        for index in range(task_count):
            status = draw_status(self._rng)
            timing = TaskTiming.sample(status, now, self._rng)
            operator = draw_operator(self._rng)
            tasks.append(
                TaskNode(
                    id=task_id(index),
                    name=f"task_{workflow_id}_{operator_label(operator)}_{index}",
                    status=status,
                    operator=operator,
                    start_time=timing.start_time,
                    end_time=timing.end_time,
                    duration=timing.duration,
                    retries=sample_retries(status, self._rng),
                )
            )
        return tasks

    def _build_small_edges(self, graph: TaskGraph) -> None:
        """Mostly-linear pipeline with occasional branches and extra joins."""
        rng = self._rng
        for i in range(1, graph.size):
            if i == 1 or rng.random() < SMALL_CHAIN_PROBABILITY:
                graph.add_edge(i - 1, i)
            else:
                graph.add_edge(rng.randrange(0, i - 1), i)

            if i > 2 and rng.random() < SMALL_EXTRA_EDGE_PROBABILITY:
                graph.add_edge(rng.randrange(0, i - 1), i)

    def _build_large_edges(self, graph: TaskGraph) -> None:
        """Chain with block joins, periodic fan-outs and long-range cross-links."""
        rng = self._rng
        n = graph.size

        for i in range(1, n):
            if i % BLOCK_JOIN_SPAN == 0:
                graph.add_edge(i - BLOCK_JOIN_SPAN, i)
            else:
                graph.add_edge(i - 1, i)

        for i in range(FAN_OUT_STEP, n, FAN_OUT_STEP):
            for _ in range(rng.randint(*FAN_OUT_BRANCHES)):
                target = i + rng.randint(*FAN_OUT_DISTANCE)
                if target < n:
                    graph.add_edge(i, target)

        for i in range(CROSS_LINK_STEP, n, CROSS_LINK_STEP):
            target = i + rng.randint(*CROSS_LINK_DISTANCE)
            if target < n:
                graph.add_edge(i, target)

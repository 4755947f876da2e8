import random
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from src.application.workflow.use_cases.synthesize_task_graph import (
    DEFAULT_TASK_RANGE,
    MAX_PARSEABLE_COUNT,
    SynthesizeTaskGraphUseCase,
    first_digit_run,
    graph_regime,
    resolve_task_count,
)
from src.domain.workflow.entities.task_graph import task_index
from src.domain.workflow.value_objects.task_status import TaskStatus
from src.ports.secondary.metrics import IMetrics

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _synthesize(workflow_id: str, seed: int = 0):
    use_case = SynthesizeTaskGraphUseCase(rng=random.Random(seed), now=lambda: NOW)
    return use_case.execute(workflow_id)


def _edge_pairs(graph):
    return [(task_index(e.source), task_index(e.target)) for e in graph.edges]


class TestResolveTaskCount:
    @pytest.mark.parametrize(
        "workflow_id,expected",
        [
            ("tiny_dag_5", 5),
            ("small_dag_20", 20),
            ("medium_dag_100", 100),
            ("large_dag_500", 500),
            ("huge_dag_1000", 1000),
        ],
    )
    def test_special_workflows(self, workflow_id, expected):
        assert resolve_task_count(workflow_id, random.Random(0)) == expected

    def test_digit_extraction(self):
        assert resolve_task_count("foo123bar", random.Random(0)) == 123

    def test_first_run_only(self):
        assert resolve_task_count("etl_daily_042_v2", random.Random(0)) == 42

    @pytest.mark.parametrize("workflow_id,expected", [("dag_2", 5), ("dag_0", 5), ("dag_5000", 1000)])
    def test_clamped(self, workflow_id, expected):
        assert resolve_task_count(workflow_id, random.Random(0)) == expected

    def test_no_digits_uses_default_range(self):
        rng = random.Random(5)
        counts = {resolve_task_count("no_digits_here", rng) for _ in range(500)}
        low, high = DEFAULT_TASK_RANGE
        assert min(counts) >= low
        assert max(counts) < high
        assert len(counts) > 1

    def test_overflowing_digits_use_default_range(self):
        rng = random.Random(5)
        low, high = DEFAULT_TASK_RANGE
        counts = {resolve_task_count("wf_" + "9" * 25, rng) for _ in range(200)}
        assert min(counts) >= low
        assert max(counts) < high
        assert len(counts) > 1

    def test_largest_parseable_count_is_clamped(self):
        assert resolve_task_count(f"wf_{MAX_PARSEABLE_COUNT}", random.Random(5)) == 1000

    def test_non_ascii_digits_are_not_digits(self):
        rng = random.Random(5)
        low, high = DEFAULT_TASK_RANGE
        assert first_digit_run("wf_٣") is None
        counts = {resolve_task_count("wf_٣", rng) for _ in range(200)}
        assert min(counts) >= low
        assert max(counts) < high
        assert len(counts) > 1

    def test_non_ascii_digit_does_not_hide_later_number(self):
        assert resolve_task_count("wf_²_30", random.Random(5)) == 30

    def test_first_digit_run(self):
        assert first_digit_run("abc") is None
        assert first_digit_run("a12b34") == "12"
        assert first_digit_run("99") == "99"


class TestSynthesizeTaskGraph:
    @pytest.mark.parametrize("workflow_id,size", [("tiny_dag_5", 5), ("huge_dag_1000", 1000)])
    def test_exact_sizes(self, workflow_id, size):
        graph = _synthesize(workflow_id)
        assert graph.dag_id == workflow_id
        assert len(graph.tasks) == size

    def test_task_identity_and_naming(self):
        graph = _synthesize("medium_dag_100")
        for index, task in enumerate(graph.tasks):
            assert task.id == f"task_{index}"
            expected_label = task.operator.replace("Operator", "")
            assert task.name == f"task_medium_dag_100_{expected_label}_{index}"
            assert task.max_retries == 3
            assert 0 <= task.retries <= task.max_retries
            if task.status != TaskStatus.FAILED:
                assert task.retries == 0

    @pytest.mark.parametrize(
        "workflow_id", ["tiny_dag_5", "small_dag_20", "wf_50", "wf_51", "medium_dag_100", "huge_dag_1000"]
    )
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_acyclic_and_well_formed(self, workflow_id, seed):
        graph = _synthesize(workflow_id, seed)
        ids = {task.id for task in graph.tasks}
        pairs = _edge_pairs(graph)

        for edge in graph.edges:
            assert edge.source in ids
            assert edge.target in ids
        assert all(source < target for source, target in pairs)
        assert len(pairs) == len(set(pairs))
        assert "task_0" in graph.get_root_nodes()

    def test_timing_consistency(self):
        graph = _synthesize("large_dag_500", seed=9)
        for task in graph.tasks:
            if task.status in (TaskStatus.SUCCEEDED, TaskStatus.FAILED):
                assert task.start_time <= task.end_time
                elapsed = (task.end_time - task.start_time).total_seconds()
                assert elapsed == pytest.approx(task.duration, abs=1e-3)
            elif task.status == TaskStatus.RUNNING:
                assert task.start_time is not None
                assert task.end_time is None
            else:
                assert task.start_time is None
                assert task.end_time is None
                assert task.duration is None

    def test_seeded_runs_are_reproducible(self):
        first = _synthesize("wf_40", seed=77)
        second = _synthesize("wf_40", seed=77)
        assert first.tasks == second.tasks
        assert first.edges == second.edges


class TestSmallRegime:
    @pytest.mark.parametrize("seed", range(10))
    def test_every_task_after_root_has_a_parent(self, seed):
        graph = _synthesize("small_dag_20", seed)
        pairs = _edge_pairs(graph)
        targets = {target for _, target in pairs}

        assert (0, 1) in pairs
        assert targets == set(range(1, 20))
        assert graph.get_root_nodes() == ["task_0"]

    def test_threshold(self):
        assert graph_regime(50) == "small"
        assert graph_regime(51) == "large"


class TestLargeRegime:
    @pytest.mark.parametrize("seed", range(5))
    def test_edge_shapes(self, seed):
        graph = _synthesize("medium_dag_100", seed)
        n = graph.size
        pairs = set(_edge_pairs(graph))

        for i in range(1, n):
            expected_parent = i - 10 if i % 10 == 0 else i - 1
            assert (expected_parent, i) in pairs

        for source, target in pairs:
            distance = target - source
            is_chain = distance == 1 or (distance == 10 and target % 10 == 0)
            is_fan_out = source % 5 == 0 and source > 0 and 2 <= distance <= 10
            is_cross_link = source % 20 == 0 and source > 0 and 15 <= distance <= 30
            assert is_chain or is_fan_out or is_cross_link, (source, target)

    def test_fan_out_present(self):
        graph = _synthesize("large_dag_500", seed=3)
        pairs = _edge_pairs(graph)
        fan_sources = {s for s, t in pairs if s % 5 == 0 and s > 0 and 2 <= t - s <= 10 and (t - s) != 10}
        assert len(fan_sources) > 50

    def test_targets_stay_in_bounds(self):
        graph = _synthesize("wf_55", seed=4)
        assert all(target < 55 for _, target in _edge_pairs(graph))


class TestGraphMetrics:
    def test_records_regime_size_and_status_counts(self):
        metrics = MagicMock(spec=IMetrics)
        use_case = SynthesizeTaskGraphUseCase(rng=random.Random(3), now=lambda: NOW, metrics=metrics)

        graph = use_case.execute("small_dag_20")

        metrics.record_graph_synthesis.assert_called_once()
        regime, task_count, status_counts = metrics.record_graph_synthesis.call_args.args
        assert regime == "small"
        assert task_count == 20
        assert sum(status_counts.values()) == 20
        assert set(status_counts) == {status.value for status in TaskStatus}
        for status in TaskStatus:
            assert status_counts[status.value] == sum(1 for t in graph.tasks if t.status == status)

    def test_large_regime_reported(self):
        metrics = MagicMock(spec=IMetrics)
        SynthesizeTaskGraphUseCase(rng=random.Random(3), now=lambda: NOW, metrics=metrics).execute("wf_51")

        assert metrics.record_graph_synthesis.call_args.args[:2] == ("large", 51)

    def test_metrics_optional(self):
        graph = SynthesizeTaskGraphUseCase(rng=random.Random(3), now=lambda: NOW).execute("tiny_dag_5")
        assert graph.size == 5

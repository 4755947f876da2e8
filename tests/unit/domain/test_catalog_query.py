from datetime import datetime, timezone

import pytest

from src.domain.workflow.entities.workflow_summary import WorkflowSummary
from src.domain.workflow.exceptions import InvalidCatalogQueryError
from src.domain.workflow.value_objects.catalog_query import (
    DEFAULT_TOTAL_COUNT_MODE,
    CatalogQuery,
    SortField,
    SortOrder,
    TotalCountMode,
)

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)


class TestCatalogQuery:
    def test_defaults(self):
        query = CatalogQuery()
        assert query.page == 1
        assert query.limit == 25
        assert query.search is None
        assert query.sort_by == "dag_id"
        assert query.sort_order == "asc"
        assert query.offset == 0

    def test_offset(self):
        assert CatalogQuery(page=3, limit=10).offset == 20

    def test_page_must_be_positive(self):
        with pytest.raises(InvalidCatalogQueryError) as exc_info:
            CatalogQuery(page=0)
        assert exc_info.value.error_code == "INVALID_CATALOG_QUERY"
        assert exc_info.value.context["field"] == "page"

    def test_limit_must_not_be_negative(self):
        with pytest.raises(InvalidCatalogQueryError):
            CatalogQuery(limit=-1)

    def test_tag_list_splits_and_strips(self):
        assert CatalogQuery(tags="production, ml,,").tag_list == ["production", "ml"]
        assert CatalogQuery(tags="").tag_list == []
        assert CatalogQuery().tag_list == []


class TestKeywordParsing:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("dag_id", SortField.DAG_ID),
            ("owner", SortField.OWNER),
            ("last_run", SortField.LAST_RUN),
            ("next_run", SortField.NEXT_RUN),
            ("bogus", SortField.DAG_ID),
            (None, SortField.DAG_ID),
        ],
    )
    def test_sort_field(self, value, expected):
        assert SortField.parse(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [("asc", SortOrder.ASC), ("desc", SortOrder.DESC), ("DESC", SortOrder.DESC), ("up", SortOrder.ASC), (None, SortOrder.ASC)],
    )
    def test_sort_order(self, value, expected):
        assert SortOrder.parse(value) == expected

    def test_default_total_count_mode_is_unfiltered(self):
        assert DEFAULT_TOTAL_COUNT_MODE == TotalCountMode.UNFILTERED


class TestWorkflowSummaryStatus:
    def _summary(self, **overrides):
        fields = dict(
            dag_id="etl_daily_000",
            owner="admin",
            paused=False,
            schedule_interval="@daily",
            file_path="/home/airflow/dags/etl_daily_000.py",
            created_at=NOW,
            updated_at=NOW,
        )
        fields.update(overrides)
        return WorkflowSummary(**fields)

    def test_status_precedence(self):
        assert self._summary(paused=True, running_count=2).status == "paused"
        assert self._summary(running_count=1, failed_count=3).status == "running"
        assert self._summary(failed_count=1, success_count=5).status == "failed"
        assert self._summary(success_count=5).status == "success"
        assert self._summary().status == "none"

    def test_has_tag_is_case_insensitive(self):
        summary = self._summary(tags=("Production", "ml"))
        assert summary.has_tag("production")
        assert summary.has_tag("ML")
        assert not summary.has_tag("prod")

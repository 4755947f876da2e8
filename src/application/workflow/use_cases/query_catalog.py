from typing import Callable

from src.domain.workflow.entities.workflow_summary import WorkflowSummary
from src.domain.workflow.value_objects.catalog_query import (
    DEFAULT_TOTAL_COUNT_MODE,
    CatalogPage,
    CatalogQuery,
    SortField,
    SortOrder,
    TotalCountMode,
)
from src.ports.secondary.metrics import IMetrics
from src.shared.logger import get_logger

logger = get_logger(__name__)

STATUS_FILTERS: dict[str, Callable[[WorkflowSummary], bool]] = {
    "active": lambda dag: not dag.paused,
    "paused": lambda dag: dag.paused,
    "success": lambda dag: dag.success_count > 0 and dag.failed_count == 0,
    "failed": lambda dag: dag.failed_count > 0,
    "running": lambda dag: dag.running_count > 0,
}


def _sort_key(sort_field: SortField) -> Callable[[WorkflowSummary], object]:
    if sort_field == SortField.OWNER:
        return lambda dag: dag.owner
    if sort_field in (SortField.LAST_RUN, SortField.NEXT_RUN):
        attr = sort_field.value
        # Absent timestamps order before present ones
        return lambda dag: (getattr(dag, attr) is not None, getattr(dag, attr))
    return lambda dag: dag.dag_id


class QueryCatalogUseCase:
    """
    Filters, sorts and paginates a catalog.

    Pipeline order is fixed: search, status, tags, sort, paginate.
    """
    def __init__(
        self,
        total_count_mode: TotalCountMode = DEFAULT_TOTAL_COUNT_MODE,
        metrics: IMetrics | None = None,
    ):
        self._total_count_mode = total_count_mode
        self._metrics = metrics

    def execute(self, catalog: list[WorkflowSummary], query: CatalogQuery) -> CatalogPage:
        dags = list(catalog)

        if query.search:
            needle = query.search.casefold()
            dags = [
                dag for dag in dags
                if needle in dag.dag_id.casefold()
                or needle in dag.owner.casefold()
                or (dag.description is not None and needle in dag.description.casefold())
            ]

        predicate = STATUS_FILTERS.get(query.status) if query.status else None
        if predicate is not None:
            dags = [dag for dag in dags if predicate(dag)]

        tag_list = query.tag_list
        if tag_list:
            dags = [dag for dag in dags if any(dag.has_tag(tag) for tag in tag_list)]

        # Stable in both directions: equal keys keep catalog order
        dags = sorted(
            dags,
            key=_sort_key(SortField.parse(query.sort_by)),
            reverse=SortOrder.parse(query.sort_order) == SortOrder.DESC,
        )

        filtered_count = len(dags)
        offset = query.offset
        page = dags[offset:offset + query.limit] if offset < filtered_count else []

        if self._total_count_mode == TotalCountMode.FILTERED:
            total_count = filtered_count
        else:
            total_count = len(catalog)

        logger.debug(
            "catalog_queried",
            page=query.page,
            limit=query.limit,
            filtered_count=filtered_count,
            returned=len(page),
        )
        if self._metrics:
            self._metrics.record_catalog_query(query.status or "none", len(page))
        return CatalogPage(
            dags=page,
            total_count=total_count,
            filtered_count=filtered_count,
            page=query.page,
            limit=query.limit,
        )

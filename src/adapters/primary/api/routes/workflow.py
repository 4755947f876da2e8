import time

from fastapi import APIRouter, Depends, Query

from src.adapters.primary.api.dto import (
    CatalogPageResponse,
    ErrorResponse,
    TaskGraphResponse,
    TaskStatusLegendEntry,
)
from src.adapters.primary.api.dependencies import (
    get_generate_catalog_use_case,
    get_query_catalog_use_case,
    get_synthesize_task_graph_use_case,
)
from src.application.workflow.use_cases.generate_catalog import GenerateCatalogUseCase
from src.application.workflow.use_cases.query_catalog import QueryCatalogUseCase
from src.application.workflow.use_cases.synthesize_task_graph import SynthesizeTaskGraphUseCase
from src.domain.workflow.value_objects.catalog_query import CatalogQuery, SortField, SortOrder
from src.domain.workflow.value_objects.task_status import TaskStatus
from src.shared.config import settings
from src.shared.logger import bind_context, clear_context, get_logger
from src.shared.metrics import metrics_registry

logger = get_logger(__name__)

router = APIRouter(prefix=f"/api/{settings.API_VERSION}", tags=["Workflow"])


@router.get(
    "/dags",
    response_model=CatalogPageResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List workflows",
    description="Search, filter, sort and paginate the workflow catalog.",
)
def list_dags(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.CATALOG_DEFAULT_LIMIT, ge=0, le=settings.CATALOG_MAX_LIMIT),
    search: str | None = None,
    status: str | None = None,
    tags: str | None = Query(None, description="Comma-separated; matches any"),
    sort_by: str = SortField.DAG_ID.value,
    sort_order: str = SortOrder.ASC.value,
    generate_catalog: GenerateCatalogUseCase = Depends(get_generate_catalog_use_case),
    query_catalog: QueryCatalogUseCase = Depends(get_query_catalog_use_case),
) -> CatalogPageResponse:
    """
    Regenerates the catalog and returns one page of it.

    ``total_count`` follows the configured CATALOG_TOTAL_COUNT_MODE;
    ``filtered_count`` is always the number of records that passed the filters.
    """
    start = time.perf_counter()
    query = CatalogQuery(
        page=page,
        limit=limit,
        search=search,
        status=status,
        tags=tags,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    result = query_catalog.execute(generate_catalog.execute(), query)

    metrics_registry.record_api_duration("/dags", "GET", time.perf_counter() - start)

    return CatalogPageResponse.model_validate(result)


@router.get(
    "/dags/{dag_id}/graph",
    response_model=TaskGraphResponse,
    summary="Get workflow task graph",
    description="Synthesize the task graph for a workflow identifier.",
)
def get_dag_graph(
    dag_id: str,
    use_case: SynthesizeTaskGraphUseCase = Depends(get_synthesize_task_graph_use_case),
) -> TaskGraphResponse:
    """
    Builds a fresh graph per request. Known scale-test identifiers (e.g.
    ``huge_dag_1000``) have fixed sizes; otherwise the first number in the
    identifier picks the size.
    """
    start = time.perf_counter()
    bind_context({"dag_id": dag_id})
    try:
        graph = use_case.execute(dag_id)
    finally:
        clear_context()

    metrics_registry.record_api_duration("/dags/{dag_id}/graph", "GET", time.perf_counter() - start)

    return TaskGraphResponse.model_validate(graph)


@router.get(
    "/task-statuses",
    response_model=list[TaskStatusLegendEntry],
    summary="Task status legend",
)
async def list_task_statuses() -> list[TaskStatusLegendEntry]:
    return [
        TaskStatusLegendEntry(status=s, label=s.label, color=s.color, weight=s.weight)
        for s in TaskStatus
    ]

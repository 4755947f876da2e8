import random

from fastapi import Depends

from src.application.workflow.use_cases.generate_catalog import GenerateCatalogUseCase
from src.application.workflow.use_cases.query_catalog import QueryCatalogUseCase
from src.application.workflow.use_cases.synthesize_task_graph import SynthesizeTaskGraphUseCase
from src.domain.workflow.value_objects.catalog_query import TotalCountMode
from src.ports.secondary.metrics import IMetrics
from src.shared.config import settings
from src.shared.metrics import metrics_registry


def get_random_source() -> random.Random:
    """A fresh random source per request; nothing is shared across requests."""
    return random.Random(settings.RANDOM_SEED)


def get_metrics() -> IMetrics:
    return metrics_registry


def get_synthesize_task_graph_use_case(
    rng: random.Random = Depends(get_random_source),
    metrics: IMetrics = Depends(get_metrics),
) -> SynthesizeTaskGraphUseCase:
    return SynthesizeTaskGraphUseCase(rng=rng, metrics=metrics)


def get_generate_catalog_use_case(
    rng: random.Random = Depends(get_random_source),
) -> GenerateCatalogUseCase:
    return GenerateCatalogUseCase(rng=rng, filler_count=settings.CATALOG_FILLER_COUNT)


def get_query_catalog_use_case(
    metrics: IMetrics = Depends(get_metrics),
) -> QueryCatalogUseCase:
    return QueryCatalogUseCase(
        total_count_mode=TotalCountMode(settings.CATALOG_TOTAL_COUNT_MODE),
        metrics=metrics,
    )

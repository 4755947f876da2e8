from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from fastapi import APIRouter, Response

router = APIRouter(tags=["Metrics"])

@router.get("/metrics", include_in_schema=False)
async def metrics():
    """
    Prometheus exposition of graph synthesis, catalog query and API latency metrics.
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

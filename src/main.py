from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from src.adapters.primary.api.routes.workflow import router
from src.adapters.primary.api.routes.health import router as health_router
from src.adapters.primary.api.routes.metrics import router as metrics_router
from src.adapters.primary.api.error_handlers import workflow_exception_handler, general_exception_handler
from src.domain.workflow.exceptions import WorkflowException
from src.shared.config import settings
from src.shared.logger import configure_logging, get_logger

# Configure logging early
configure_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "application_started",
        version=settings.APP_VERSION,
        catalog_filler_count=settings.CATALOG_FILLER_COUNT,
        total_count_mode=settings.CATALOG_TOTAL_COUNT_MODE,
    )
    yield
    logger.info("application_shutdown_complete")


app = FastAPI(
    title=settings.APP_NAME,
    description="Synthetic workflow catalog and task graph API for the monitoring dashboard.",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# Transport middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MINIMUM_SIZE)

# Exceptions
app.add_exception_handler(WorkflowException, workflow_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Routes
app.include_router(router)
app.include_router(health_router)
app.include_router(metrics_router)

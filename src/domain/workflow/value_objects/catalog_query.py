from dataclasses import dataclass, field
from enum import Enum

from src.domain.workflow.entities.workflow_summary import WorkflowSummary
from src.domain.workflow.exceptions import InvalidCatalogQueryError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 25


class SortField(str, Enum):
    DAG_ID = "dag_id"
    OWNER = "owner"
    LAST_RUN = "last_run"
    NEXT_RUN = "next_run"

    @classmethod
    def parse(cls, value: str | None) -> "SortField":
        """Unrecognized or absent fields fall back to ``dag_id``."""
        try:
            return cls(value)
        except ValueError:
            return cls.DAG_ID


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortOrder":
        if value is not None and value.lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


class TotalCountMode(str, Enum):
    """
    What ``CatalogPage.total_count`` reports.

    UNFILTERED: size of the catalog before search/status/tag filters.
    FILTERED: size of the filtered collection before pagination.
    """

    UNFILTERED = "unfiltered"
    FILTERED = "filtered"


# total_count ignores filters unless CATALOG_TOTAL_COUNT_MODE says otherwise
DEFAULT_TOTAL_COUNT_MODE = TotalCountMode.UNFILTERED


@dataclass(frozen=True)
class CatalogQuery:
    """A request for one page of the workflow catalog. All filters are optional."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: str | None = None
    status: str | None = None
    tags: str | None = None
    sort_by: str | None = SortField.DAG_ID.value
    sort_order: str | None = SortOrder.ASC.value

    def __post_init__(self):
        if self.page < 1:
            raise InvalidCatalogQueryError("page", self.page, "must be at least 1")
        if self.limit < 0:
            raise InvalidCatalogQueryError("limit", self.limit, "must not be negative")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def tag_list(self) -> list[str]:
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]


@dataclass(frozen=True)
class CatalogPage:
    dags: list[WorkflowSummary] = field(default_factory=list)
    total_count: int = 0
    filtered_count: int = 0
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

from abc import ABC, abstractmethod


class IMetrics(ABC):
    @abstractmethod
    def record_graph_synthesis(self, regime: str, task_count: int, status_counts: dict[str, int]) -> None:
        pass

    @abstractmethod
    def record_catalog_query(self, status_filter: str, page_size: int) -> None:
        pass

    @abstractmethod
    def record_api_duration(self, endpoint: str, method: str, duration: float) -> None:
        pass

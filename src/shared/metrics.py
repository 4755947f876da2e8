from prometheus_client import Counter, Histogram

from src.ports.secondary.metrics import IMetrics


class MetricsRegistry(IMetrics):
    """Prometheus metrics registry."""

    def __init__(self):
        # Graph metrics
        self.GRAPHS_SYNTHESIZED_TOTAL = Counter(
            "graphs_synthesized_total", "Total number of synthesized task graphs", ["regime"]
        )

        self.GRAPH_TASK_COUNT = Histogram(
            "graph_task_count",
            "Number of tasks in synthesized graphs",
            buckets=(5, 10, 20, 50, 100, 250, 500, 1000),
        )

        self.TASK_STATUSES_TOTAL = Counter(
            "task_statuses_total", "Total number of synthesized tasks by status", ["status"]
        )

        # Catalog metrics
        self.CATALOG_QUERIES_TOTAL = Counter(
            "catalog_queries_total", "Total number of catalog queries", ["status_filter"]
        )

        self.CATALOG_PAGE_SIZE = Histogram(
            "catalog_page_size",
            "Number of records returned per catalog page",
            buckets=(0, 1, 5, 10, 25, 50, 100),
        )

        # API metrics
        self.API_REQUEST_DURATION_SECONDS = Histogram(
            "api_request_duration_seconds",
            "Duration of API requests in seconds",
            ["endpoint", "method"],
            buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
        )

    def record_graph_synthesis(self, regime: str, task_count: int, status_counts: dict[str, int]):
        self.GRAPHS_SYNTHESIZED_TOTAL.labels(regime=regime).inc()
        self.GRAPH_TASK_COUNT.observe(task_count)
        for status, count in status_counts.items():
            if count:
                self.TASK_STATUSES_TOTAL.labels(status=status).inc(count)

    def record_catalog_query(self, status_filter: str, page_size: int):
        self.CATALOG_QUERIES_TOTAL.labels(status_filter=status_filter).inc()
        self.CATALOG_PAGE_SIZE.observe(page_size)

    def record_api_duration(self, endpoint: str, method: str, duration: float):
        self.API_REQUEST_DURATION_SECONDS.labels(endpoint=endpoint, method=method).observe(duration)


# Global registry instance for adapter/framework layer
metrics_registry = MetricsRegistry()

"""Static lookup tables used to synthesize workflow catalogs and graphs."""

# Workflows with an exact, well-known task count used for scale testing.
# Order is the order special records are appended to the catalog.
SPECIAL_WORKFLOW_SIZES: dict[str, int] = {
    "large_dag_500": 500,
    "huge_dag_1000": 1000,
    "medium_dag_100": 100,
    "small_dag_20": 20,
    "tiny_dag_5": 5,
}

DAG_NAME_PREFIXES: tuple[str, ...] = (
    "etl_", "data_pipeline_", "process_", "transform_", "extract_", "load_", "sync_",
    "analytics_", "report_", "backup_", "cleanup_", "validate_", "monitor_", "alert_",
)

DAG_NAME_SUFFIXES: tuple[str, ...] = (
    "daily", "hourly", "weekly", "monthly", "sales", "inventory", "users", "events",
    "transactions", "logs", "metrics", "alerts", "notifications", "products", "orders",
    "shipments", "payments", "refunds", "customers", "suppliers",
)

OWNERS: tuple[str, ...] = (
    "admin", "airflow", "john_doe", "jane_smith", "data_engineer", "data_scientist",
    "data_analyst", "system_admin", "devops", "sre", "developer",
)

SCHEDULE_INTERVALS: tuple[str, ...] = (
    "* * * * *",
    "*/5 * * * *",
    "0 * * * *",
    "0 */2 * * *",
    "0 0 * * *",
    "0 8 * * *",
    "0 0 * * 0",
    "0 0 1 * *",
    "0 0 1 1 *",
    "@hourly", "@daily", "@weekly", "@monthly", "@yearly",
)

TAG_VOCABULARY: tuple[str, ...] = (
    "production", "development", "staging", "testing", "data_warehouse", "data_lake",
    "batch", "streaming", "etl", "ml", "ai", "reporting", "monitoring", "cleanup",
    "validation", "transformation", "extraction", "loading", "high_priority", "low_priority",
)

SPECIAL_WORKFLOW_TAGS: tuple[str, ...] = ("test", "performance")
SPECIAL_WORKFLOW_SCHEDULE = "@daily"

DAG_FILE_ROOT = "/home/airflow/dags"

from typing import Any, Dict, Optional

class WorkflowException(Exception):
    def __init__(
        self, 
        message: str, 
        error_code: str = "WORKFLOW_ERROR", 
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self.message)

class InvalidCatalogQueryError(WorkflowException):
    def __init__(self, field_name: str, value: Any, details: str):
        self.field_name = field_name
        super().__init__(
            message=f"Invalid catalog query field '{field_name}': {details}",
            error_code="INVALID_CATALOG_QUERY",
            context={"field": field_name, "value": value, "details": details}
        )

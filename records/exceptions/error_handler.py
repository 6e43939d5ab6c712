"""Centralized error handling and responses - DRY principle"""
from typing import Tuple
from records.exceptions.exceptions import (
    RecordsError, ValidationError, DuplicateKeyError, EmptyAggregationError,
    BackendUnavailableError, DatabaseError
)
from records.logging_logs.log_config import get_logger

logger = get_logger("error_handler")


# ============= ERROR HANDLERS =============

def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Centralized error handling for services"""

    if isinstance(e, ValidationError):
        return {"success": False, "message": e.message}, 400

    elif isinstance(e, DuplicateKeyError):
        response = {"success": False, "message": e.message}
        if e.field:
            response["field"] = e.field
        return response, 409

    elif isinstance(e, EmptyAggregationError):
        return {"success": False, "message": e.message}, 404

    elif isinstance(e, BackendUnavailableError):
        return {"success": False, "message": "Database unavailable"}, 503

    elif isinstance(e, DatabaseError):
        return {"success": False, "message": "Database error"}, 500

    elif isinstance(e, RecordsError):
        return {"success": False, "message": e.message}, e.code

    elif isinstance(e, ValueError):
        return {"success": False, "message": str(e)}, 400

    else:
        sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
        logger.error(f"Unexpected error: {sanitized_error}")
        return {"success": False, "message": "Server error"}, 500

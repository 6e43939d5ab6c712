"""Custom exceptions - SoC principle"""
from typing import Optional

class RecordsError(Exception):
    """Base exception for the records service"""
    def __init__(self, message: str, code: int = 400):
        self.message = message
        self.code = code
        super().__init__(self.message)

class ValidationError(RecordsError):
    """Input validation error"""
    def __init__(self, message: str):
        super().__init__(message, 400)

class DuplicateKeyError(RecordsError):
    """Unique constraint violation (branch name, student email)"""
    def __init__(self, message: str = "Duplicate key", field: Optional[str] = None):
        self.field = field
        super().__init__(message, 409)

class EmptyAggregationError(RecordsError):
    """Statistics requested over zero records"""
    def __init__(self, message: str = "No student records to aggregate"):
        super().__init__(message, 404)

class DatabaseError(RecordsError):
    """Database operation errors"""
    def __init__(self, message: str = "Database operation failed", code: int = 500):
        super().__init__(message, code)

class BackendUnavailableError(DatabaseError):
    """Store connectivity failure"""
    def __init__(self, message: str = "Database unavailable"):
        super().__init__(message, 503)

"""
Base Repository Class
Common database operations following DRY principle
"""
from typing import Dict, List, Optional
from bson import ObjectId
from pymongo import errors as mongo_errors
from pymongo.database import Database
from records.records_db import get_collection
from records.exceptions.exceptions import (
    RecordsError, DuplicateKeyError, DatabaseError, BackendUnavailableError
)
from records.logging_logs.log_config import get_logger

logger = get_logger("repositories")

class BaseRepo:
    """Base repository with common database operations"""

    collection_key: str = ""

    def __init__(self, db: Database):
        self.db = db
        self.collection = get_collection(db, self.collection_key)

    def _translate_error(self, e: Exception, action: str) -> RecordsError:
        """Map driver errors onto the service error hierarchy"""
        if isinstance(e, mongo_errors.DuplicateKeyError):
            key_value = (getattr(e, "details", None) or {}).get("keyValue") or {}
            field = next(iter(key_value), None)
            message = f"Duplicate value for {field}" if field else "Duplicate key"
            return DuplicateKeyError(message, field=field)
        if isinstance(e, mongo_errors.ConnectionFailure):
            logger.error(f"Database {action} failed on {self.collection.name}: backend unavailable: {str(e)}")
            return BackendUnavailableError(f"Database {action} failed: backend unavailable")
        logger.error(f"Database {action} failed on {self.collection.name}: {str(e)}")
        return DatabaseError(f"Database {action} failed: {str(e)}")

    def find_by_id(self, doc_id: ObjectId, projection: Optional[Dict] = None) -> Optional[Dict]:
        return self.find_one({"_id": doc_id}, projection)

    def find_one(self, query: Dict, projection: Optional[Dict] = None) -> Optional[Dict]:
        """Find single document"""
        try:
            return self.collection.find_one(query, projection)
        except mongo_errors.PyMongoError as e:
            raise self._translate_error(e, "query")

    def find_many(self, query: Dict, projection: Optional[Dict] = None,
                  skip: int = 0, limit: int = 0) -> List[Dict]:
        """Find multiple documents in insertion order"""
        try:
            cursor = self.collection.find(query, projection).sort("_id", 1)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            return list(cursor)
        except mongo_errors.PyMongoError as e:
            raise self._translate_error(e, "query")

    def insert_one(self, document: Dict) -> Dict:
        """Insert single document and return it with its _id"""
        document.setdefault("_id", ObjectId())
        try:
            self.collection.insert_one(document)
            return document
        except mongo_errors.PyMongoError as e:
            raise self._translate_error(e, "insert")

    def delete_by_id(self, doc_id: ObjectId) -> Optional[Dict]:
        """Delete a document, returning what was removed"""
        try:
            return self.collection.find_one_and_delete({"_id": doc_id})
        except mongo_errors.PyMongoError as e:
            raise self._translate_error(e, "delete")

    def count_documents(self, query: Dict) -> int:
        """Count documents matching query"""
        try:
            return self.collection.count_documents(query)
        except mongo_errors.PyMongoError as e:
            raise self._translate_error(e, "count")

    def aggregate(self, pipeline: List[Dict]) -> List[Dict]:
        """Execute aggregation pipeline"""
        try:
            return list(self.collection.aggregate(pipeline))
        except mongo_errors.PyMongoError as e:
            raise self._translate_error(e, "aggregation")

    def create_index(self, keys: List, unique: bool = False) -> str:
        """Create database index"""
        try:
            return self.collection.create_index(keys, unique=unique)
        except mongo_errors.PyMongoError as e:
            raise self._translate_error(e, "index creation")

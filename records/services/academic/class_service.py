"""Class Service - Business Logic Layer"""
from typing import Dict, Optional
from pymongo.database import Database
from records.models.document_factory import RecordDocumentFactory
from records.repositories.core.repository_factory import RepositoryFactory
from records.utils.formatting.json_utils import sanitize_mongo_document
from records.utils.security.security_utils import parse_object_id
from records.logging_logs.log_config import get_logger

logger = get_logger("class_service")

class ClassService:
    def __init__(self, db: Database):
        self.repo_factory = RepositoryFactory(db)

    def create_class(self, name: str, branch_id: Optional[str]) -> Dict:
        """Create a new class and assign it to a branch"""
        new_class = RecordDocumentFactory.build_class(name, branch_id)
        self.repo_factory.get_class_repo().insert_one(new_class)
        logger.info(f"Class created with id {new_class['_id']}")
        return sanitize_mongo_document(new_class)

    def find_class_by_id(self, class_id: str) -> Optional[Dict]:
        oid = parse_object_id(class_id)
        if oid is None:
            return None
        return sanitize_mongo_document(self.repo_factory.get_class_repo().find_by_id(oid))

"""Branch Service - Business Logic Layer"""
from typing import Dict, List, Optional
from pymongo.database import Database
from records.exceptions.exceptions import DuplicateKeyError
from records.models.document_factory import RecordDocumentFactory
from records.repositories.core.repository_factory import RepositoryFactory
from records.utils.formatting.json_utils import sanitize_mongo_document
from records.utils.security.security_utils import parse_object_id
from records.logging_logs.log_config import get_logger

logger = get_logger("branch_service")

class BranchService:
    def __init__(self, db: Database):
        self.repo_factory = RepositoryFactory(db)

    def create_branch(self, name: str, subjects: Optional[List[str]] = None) -> Dict:
        """Create a new branch; names are unique"""
        branch = RecordDocumentFactory.build_branch(name, subjects)
        try:
            self.repo_factory.get_branch_repo().insert_one(branch)
        except DuplicateKeyError:
            raise DuplicateKeyError(f"Branch '{branch['name']}' already exists", field="name")
        logger.info(f"Branch created with id {branch['_id']}")
        return sanitize_mongo_document(branch)

    def find_branch_by_id(self, branch_id: str) -> Optional[Dict]:
        oid = parse_object_id(branch_id)
        if oid is None:
            return None
        return sanitize_mongo_document(self.repo_factory.get_branch_repo().find_by_id(oid))

    def find_branch_by_name(self, name: str) -> Optional[Dict]:
        return sanitize_mongo_document(self.repo_factory.get_branch_repo().find_by_name(name.strip()))

"""Index Service - Index creation and index timing demo"""
import time
from typing import Dict
from pymongo.database import Database
from records.repositories.core.repository_factory import RepositoryFactory
from records.logging_logs.log_config import get_logger

logger = get_logger("index_service")

class IndexService:
    def __init__(self, db: Database):
        self.repo_factory = RepositoryFactory(db)

    def ensure_indexes(self) -> None:
        """Create every index the collections rely on"""
        self.repo_factory.get_branch_repo().ensure_indexes()
        self.repo_factory.get_class_repo().ensure_indexes()
        self.repo_factory.get_student_repo().ensure_indexes()
        self.repo_factory.get_admin_repo().ensure_indexes()
        logger.info("Indexes ensured")

    def create_student_name_index(self) -> str:
        index_name = self.repo_factory.get_student_repo().ensure_name_index()
        logger.info("Index created on Student name")
        return index_name

    def demonstrate_index_use(self, email: str = "JohnDoe@gmail.com") -> Dict[str, float]:
        """Time an email lookup before and after ensuring the email index (milliseconds)"""
        student_repo = self.repo_factory.get_student_repo()

        start = time.perf_counter()
        student_repo.find_many({"email": email})
        without_index = (time.perf_counter() - start) * 1000

        student_repo.ensure_email_index()

        start = time.perf_counter()
        student_repo.find_many({"email": email})
        with_index = (time.perf_counter() - start) * 1000

        logger.debug(f"Email lookup: {without_index:.3f} ms without index, {with_index:.3f} ms with index")
        return {"withoutIndex": without_index, "withIndex": with_index}

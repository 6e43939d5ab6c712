"""Student Service - Student writes"""
from typing import Dict, List, Optional
from pymongo.database import Database
from records.exceptions.exceptions import DuplicateKeyError
from records.models.document_factory import RecordDocumentFactory
from records.repositories.core.repository_factory import RepositoryFactory
from records.utils.formatting.json_utils import sanitize_mongo_document
from records.utils.security.security_utils import parse_object_id
from records.logging_logs.log_config import get_logger

logger = get_logger("student_service")

class StudentService:
    def __init__(self, db: Database):
        self.repo_factory = RepositoryFactory(db)

    def create_student(
        self,
        name: str,
        age: int,
        email: str,
        phone: str,
        class_id: Optional[str] = None,
        role: Optional[str] = None,
        electives: Optional[List[str]] = None,
        cgpa: Optional[float] = None
    ) -> Dict:
        """Create a new student and assign it to a class; emails are unique"""
        student = RecordDocumentFactory.build_student(
            name, age, email, phone, class_id, role, electives, cgpa
        )
        try:
            self.repo_factory.get_student_repo().insert_one(student)
        except DuplicateKeyError:
            raise DuplicateKeyError(f"Student with email '{student['email']}' already exists", field="email")
        logger.info(f"Student created with id {student['_id']}")
        return sanitize_mongo_document(student)

    def delete_student_by_id(self, student_id: str) -> Optional[Dict]:
        """Delete a student; None when no such student exists"""
        oid = parse_object_id(student_id)
        if oid is None:
            return None
        deleted = self.repo_factory.get_student_repo().delete_by_id(oid)
        if deleted:
            logger.info(f"Student deleted with id {student_id}")
        return sanitize_mongo_document(deleted)

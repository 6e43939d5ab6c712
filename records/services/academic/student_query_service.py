"""Student Query Service - Reference resolution and collection queries"""
from typing import Dict, List, Optional
from bson import ObjectId
from pymongo.database import Database
from records.repositories.core.repository_factory import RepositoryFactory
from records.utils.formatting.json_utils import sanitize_mongo_document
from records.utils.pagination.pagination_utils import (
    validate_page_args, calculate_skip, build_pagination_meta
)
from records.utils.security.security_utils import parse_object_id
from records.utils.validation.validation_utils import ValidationUtils

class StudentQueryService:
    """
    Read side of the students collection.

    Student -> Class -> Branch references are resolved here with explicit
    fetch-by-id calls. A reference that no longer points at a document
    resolves to None instead of failing the whole lookup.
    """

    def __init__(self, db: Database):
        self.repo_factory = RepositoryFactory(db)

    # ───────────── reference resolution ─────────────

    def _resolve_branch(self, branch_ref: Optional[ObjectId]) -> Optional[Dict]:
        if branch_ref is None:
            return None
        return self.repo_factory.get_branch_repo().find_by_id(branch_ref)

    def _resolve_class(self, class_ref: Optional[ObjectId], with_branch: bool = True) -> Optional[Dict]:
        if class_ref is None:
            return None
        class_doc = self.repo_factory.get_class_repo().find_by_id(class_ref)
        if class_doc is not None and with_branch:
            class_doc["branch"] = self._resolve_branch(class_doc.get("branch"))
        return class_doc

    def _find_resolved(self, student_id: str, exclude_phone: bool) -> Optional[Dict]:
        oid = parse_object_id(student_id)
        if oid is None:
            return None
        student = self.repo_factory.get_student_repo().find_by_id(oid, exclude_phone=exclude_phone)
        if student is None:
            return None
        student["class"] = self._resolve_class(student.get("class"))
        if exclude_phone:
            student.pop("phone", None)
        return sanitize_mongo_document(student)

    def find_student_by_id(self, student_id: str) -> Optional[Dict]:
        """Student with class and branch populated; None when not found"""
        return self._find_resolved(student_id, exclude_phone=False)

    def find_student_by_id_no_phone(self, student_id: str) -> Optional[Dict]:
        """Same as find_student_by_id without the phone number"""
        return self._find_resolved(student_id, exclude_phone=True)

    def find_student_by_id_no_phone_lean(self, student_id: str) -> Optional[Dict]:
        """Lean variant of find_student_by_id_no_phone; documents are plain dicts already"""
        return self._find_resolved(student_id, exclude_phone=True)

    # ───────────── collection queries ─────────────

    def find_all_students(self) -> List[Dict]:
        return sanitize_mongo_document(self.repo_factory.get_student_repo().find_all())

    def find_all_students_paginated(self, page: int, page_size: int) -> Dict:
        """One page of students in insertion order with pagination metadata"""
        validate_page_args(page, page_size)
        student_repo = self.repo_factory.get_student_repo()

        total_items = student_repo.count_all()
        skip = calculate_skip(page, page_size)
        # Past the last page; skip may not fit in an 8-byte BSON int
        students = student_repo.find_all(skip=skip, limit=page_size) if skip < total_items else []

        return {
            "data": sanitize_mongo_document(students),
            "pagination": build_pagination_meta(page, page_size, total_items)
        }

    def find_students_by_class(self, class_id: str) -> List[Dict]:
        """Students of one class with the class populated (branch left as a reference)"""
        oid = parse_object_id(class_id)
        if oid is None:
            return []
        students = self.repo_factory.get_student_repo().find_by_class(oid)
        if not students:
            return []

        class_doc = self._resolve_class(oid, with_branch=False)
        for student in students:
            student["class"] = dict(class_doc) if class_doc else None
        return sanitize_mongo_document(students)

    # ───────────── filters ─────────────

    def find_students_by_electives(self, electives: List[str]) -> List[Dict]:
        """Students who have taken any of the given electives"""
        electives = ValidationUtils.validate_string_list(electives, "electives")
        return sanitize_mongo_document(self.repo_factory.get_student_repo().find_by_electives(electives))

    def find_students_by_not_electives(self, electives: List[str]) -> List[Dict]:
        """Students who have taken none of the given electives"""
        electives = ValidationUtils.validate_string_list(electives, "electives")
        return sanitize_mongo_document(self.repo_factory.get_student_repo().find_without_electives(electives))

    def find_students_younger_than(self, age: int = 20) -> List[Dict]:
        age = ValidationUtils.validate_non_negative_integer(age, "age")
        return sanitize_mongo_document(
            self.repo_factory.get_student_repo().find_by_age_filter({"age": {"$lt": age}})
        )

    def find_students_by_age_between(self, low: int = 20, high: int = 30) -> List[Dict]:
        """Bounds are exclusive"""
        low = ValidationUtils.validate_non_negative_integer(low, "low")
        high = ValidationUtils.validate_non_negative_integer(high, "high")
        return sanitize_mongo_document(
            self.repo_factory.get_student_repo().find_by_age_filter({"age": {"$gt": low, "$lt": high}})
        )

    def find_students_outside_age_range(self, low: int = 20, high: int = 30) -> List[Dict]:
        low = ValidationUtils.validate_non_negative_integer(low, "low")
        high = ValidationUtils.validate_non_negative_integer(high, "high")
        return sanitize_mongo_document(
            self.repo_factory.get_student_repo().find_by_age_filter(
                {"$or": [{"age": {"$lt": low}}, {"age": {"$gt": high}}]}
            )
        )

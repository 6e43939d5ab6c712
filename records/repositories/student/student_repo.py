"""Student Repository - Data Access Layer (SoC)"""
from typing import Dict, List, Optional
from bson import ObjectId
from records.repositories.core.base_repo import BaseRepo
from records.repositories.student.student_pipelines import (
    build_average_cgpa_pipeline, build_highest_cgpa_pipeline,
    build_count_by_field_pipeline, build_average_age_by_role_pipeline
)

NO_PHONE_PROJECTION = {"phone": 0}

class StudentRepo(BaseRepo):
    collection_key = "students"

    def find_by_id(self, student_id: ObjectId, exclude_phone: bool = False) -> Optional[Dict]:
        projection = NO_PHONE_PROJECTION if exclude_phone else None
        return self.find_one({"_id": student_id}, projection)

    def find_all(self, skip: int = 0, limit: int = 0) -> List[Dict]:
        return self.find_many({}, skip=skip, limit=limit)

    def count_all(self) -> int:
        return self.count_documents({})

    def find_by_class(self, class_id: ObjectId) -> List[Dict]:
        return self.find_many({"class": class_id})

    def find_by_electives(self, electives: List[str]) -> List[Dict]:
        return self.find_many({"electives": {"$in": electives}})

    def find_without_electives(self, electives: List[str]) -> List[Dict]:
        return self.find_many({"electives": {"$nin": electives}})

    def find_by_age_filter(self, age_filter: Dict) -> List[Dict]:
        return self.find_many(age_filter)

    # ───────────── statistics ─────────────

    def get_average_cgpa(self) -> List[Dict]:
        return self.aggregate(build_average_cgpa_pipeline())

    def get_highest_cgpa(self) -> List[Dict]:
        return self.aggregate(build_highest_cgpa_pipeline())

    def get_counts_by(self, field: str) -> List[Dict]:
        return self.aggregate(build_count_by_field_pipeline(field))

    def get_average_age_by_role(self) -> List[Dict]:
        return self.aggregate(build_average_age_by_role_pipeline())

    # ───────────── indexes ─────────────

    def ensure_name_index(self) -> str:
        return self.create_index([("name", 1)])

    def ensure_email_index(self) -> str:
        return self.create_index([("email", 1)], unique=True)

    def ensure_indexes(self) -> None:
        self.ensure_name_index()
        self.ensure_email_index()
        self.create_index([("phone", 1)])

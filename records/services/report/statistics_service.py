"""Statistics Service - Aggregations over the students collection"""
from typing import Any, Dict, List
from pymongo.database import Database
from records.config.settings import CGPA_DECIMALS
from records.exceptions.exceptions import EmptyAggregationError
from records.repositories.core.repository_factory import RepositoryFactory

class StatisticsService:
    def __init__(self, db: Database):
        self.repo_factory = RepositoryFactory(db)

    @staticmethod
    def _single_value(result: List[Dict], key: str, label: str) -> Any:
        """Scalar from a single-bucket group; raises when there was nothing to group"""
        value = result[0].get(key) if result else None
        if value is None:
            raise EmptyAggregationError(f"Cannot compute {label}: no student records")
        return value

    def calculate_average_cgpa(self) -> float:
        """Mean CGPA rounded to 3 decimals"""
        result = self.repo_factory.get_student_repo().get_average_cgpa()
        return round(self._single_value(result, "avgCgpa", "average CGPA"), CGPA_DECIMALS)

    def find_highest_cgpa(self) -> float:
        result = self.repo_factory.get_student_repo().get_highest_cgpa()
        return self._single_value(result, "maxCgpa", "highest CGPA")

    def count_students_by_age(self) -> Dict[int, int]:
        """Student count per age, ordered by age"""
        result = self.repo_factory.get_student_repo().get_counts_by("age")
        return {doc["_id"]: doc["count"] for doc in result}

    def count_students_by_role(self) -> Dict[str, int]:
        result = self.repo_factory.get_student_repo().get_counts_by("role")
        return {doc["_id"]: doc["count"] for doc in result}

    def calculate_average_age_by_role(self) -> Dict[str, float]:
        # Left unrounded, unlike the CGPA average
        result = self.repo_factory.get_student_repo().get_average_age_by_role()
        return {doc["_id"]: doc["avgAge"] for doc in result}

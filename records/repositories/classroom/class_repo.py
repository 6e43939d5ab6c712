"""Class Repository - Data Access Layer (SoC)"""
from records.repositories.core.base_repo import BaseRepo

class ClassRepo(BaseRepo):
    collection_key = "classes"

    def ensure_indexes(self) -> None:
        self.create_index([("name", 1)])

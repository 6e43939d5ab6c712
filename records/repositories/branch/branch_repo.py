"""Branch Repository - Data Access Layer (SoC)"""
from typing import Dict, Optional
from records.repositories.core.base_repo import BaseRepo

class BranchRepo(BaseRepo):
    collection_key = "branches"

    def find_by_name(self, name: str) -> Optional[Dict]:
        return self.find_one({"name": name})

    def ensure_indexes(self) -> None:
        self.create_index([("name", 1)], unique=True)

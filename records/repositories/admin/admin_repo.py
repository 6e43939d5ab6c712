"""Admin Repository - Data Access Layer"""
from typing import Dict
from pymongo import errors as mongo_errors
from records.config.settings import ADMIN_ROLE
from records.repositories.core.base_repo import BaseRepo

class AdminRepo(BaseRepo):
    collection_key = "admins"

    def ensure_indexes(self) -> None:
        # At most one record per role; backs the insert-if-absent below
        self.create_index([("role", 1)], unique=True)

    def insert_admin_if_absent(self, admin: Dict) -> bool:
        """Atomic upsert keyed on role; True only when this call inserted the record"""
        fields = {key: value for key, value in admin.items() if key != "role"}
        try:
            result = self.collection.update_one(
                {"role": ADMIN_ROLE},
                {"$setOnInsert": fields},
                upsert=True
            )
        except mongo_errors.PyMongoError as e:
            raise self._translate_error(e, "upsert")
        return result.upserted_id is not None

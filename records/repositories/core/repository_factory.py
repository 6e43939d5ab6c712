"""Repository Factory - DRY Implementation"""
from typing import Dict
from pymongo.database import Database
from records.repositories.branch.branch_repo import BranchRepo
from records.repositories.classroom.class_repo import ClassRepo
from records.repositories.student.student_repo import StudentRepo
from records.repositories.admin.admin_repo import AdminRepo

class RepositoryFactory:
    """Centralized repository creation bound to one database handle"""

    def __init__(self, db: Database):
        self.db = db
        self._repos: Dict[type, object] = {}

    def _get(self, repo_class):
        if repo_class not in self._repos:
            self._repos[repo_class] = repo_class(self.db)
        return self._repos[repo_class]

    def get_branch_repo(self) -> BranchRepo:
        return self._get(BranchRepo)

    def get_class_repo(self) -> ClassRepo:
        return self._get(ClassRepo)

    def get_student_repo(self) -> StudentRepo:
        """Get student repository instance with caching"""
        return self._get(StudentRepo)

    def get_admin_repo(self) -> AdminRepo:
        return self._get(AdminRepo)

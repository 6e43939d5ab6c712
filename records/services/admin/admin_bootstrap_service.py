"""Admin Bootstrap Service - Startup creation of the single admin record"""
from typing import Dict, Optional
from pymongo.database import Database
from records.config.settings import ADMIN_SEED
from records.exceptions.exceptions import DuplicateKeyError
from records.models.document_factory import RecordDocumentFactory
from records.repositories.core.repository_factory import RepositoryFactory
from records.logging_logs.log_config import get_logger

logger = get_logger("admin_bootstrap")

class AdminBootstrapService:
    def __init__(self, db: Database):
        self.repo_factory = RepositoryFactory(db)

    def create_admin_user(self, seed: Optional[Dict] = None) -> bool:
        """Insert the admin record if none exists; True when this call created it"""
        admin_repo = self.repo_factory.get_admin_repo()
        admin_repo.ensure_indexes()
        admin = RecordDocumentFactory.build_admin(seed or ADMIN_SEED)

        try:
            created = admin_repo.insert_admin_if_absent(admin)
        except DuplicateKeyError:
            # A concurrent startup upserted first
            created = False

        if created:
            logger.info("Admin user created")
        else:
            logger.info("Admin user already exists")
        return created

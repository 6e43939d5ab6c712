from contextlib import contextmanager
from typing import Iterator, Optional
from pymongo import MongoClient
from pymongo.database import Database
from records.config.settings import DatabaseConfig, COLLECTIONS
from records.logging_logs.log_config import get_logger

logger = get_logger("records_db")

# MongoDB connection configuration
MONGO_CLIENT_CONFIG = {
    'maxPoolSize': DatabaseConfig.MAX_POOL_SIZE,
    'minPoolSize': DatabaseConfig.MIN_POOL_SIZE,
    'connectTimeoutMS': DatabaseConfig.CONNECT_TIMEOUT_MS,
    'serverSelectionTimeoutMS': DatabaseConfig.SERVER_SELECTION_TIMEOUT_MS,
    'socketTimeoutMS': DatabaseConfig.SOCKET_TIMEOUT_MS,
    'retryWrites': True,
    'retryReads': True,
    'w': 1
}

def get_mongo_client(uri: Optional[str] = None) -> MongoClient:
    """Get a MongoDB client with connection pooling."""
    return MongoClient(uri or DatabaseConfig.MONGO_URI, **MONGO_CLIENT_CONFIG)

@contextmanager
def open_database(uri: Optional[str] = None, db_name: Optional[str] = None) -> Iterator[Database]:
    """Yield a database handle and close its client when the scope ends."""
    client = get_mongo_client(uri)
    name = db_name or DatabaseConfig.DB_NAME
    logger.info(f"MongoDB connected to database {name}")
    try:
        yield client[name]
    finally:
        client.close()
        logger.info("MongoDB connection closed")

def get_collection(db: Database, key: str):
    """Get collection from database by its logical name."""
    return db[COLLECTIONS[key]]

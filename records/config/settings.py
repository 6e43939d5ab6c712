"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import Dict
from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

# Database Configuration
class DatabaseConfig:
    MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/")
    DB_NAME = os.getenv("DB_NAME", "nmit-full")
    MAX_POOL_SIZE = safe_int_env("MONGO_MAX_POOL_SIZE", "50")
    MIN_POOL_SIZE = safe_int_env("MONGO_MIN_POOL_SIZE", "5")
    CONNECT_TIMEOUT_MS = safe_int_env("MONGO_CONNECT_TIMEOUT_MS", "10000")
    SERVER_SELECTION_TIMEOUT_MS = safe_int_env("MONGO_SERVER_SELECTION_TIMEOUT_MS", "10000")
    SOCKET_TIMEOUT_MS = safe_int_env("MONGO_SOCKET_TIMEOUT_MS", "30000")

# Collection names
COLLECTIONS: Dict[str, str] = {
    "branches": "branches",
    "classes": "classes",
    "students": "students",
    "admins": "admins"
}

# Student Defaults (Business Configuration)
DEFAULT_STUDENT_ROLE = "Student"
ADMIN_ROLE = "admin"
CGPA_MIN = 0.0
CGPA_MAX = 10.0
CGPA_DECIMALS = 3

# Admin seed record, created once on startup
ADMIN_SEED: Dict = {
    "name": "admin",
    "role": ADMIN_ROLE,
    "age": 20,
    "email": "admin@nmitMock.ac",
    "phone": 9080706050
}

# Pagination Configuration
class PaginationConfig:
    DEFAULT_PAGE_SIZE = safe_int_env("DEFAULT_PAGE_SIZE", "10")
    MAX_PAGE_SIZE = safe_int_env("MAX_PAGE_SIZE", "1000")

# Security Configuration
class SecurityConfig:
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
    CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:4200")

# Server Configuration
class ServerConfig:
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = safe_int_env("PORT", "3000")

# Logging Configuration
class LoggingConfig:
    LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs"))
    LOG_FILE_NAME = "records.log"
    MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
    BACKUP_COUNT = 5

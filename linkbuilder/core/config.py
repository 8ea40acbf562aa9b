# linkbuilder/core/config.py
"""
Application configuration - loads from environment variables.
Single source of truth for all settings.
"""
import os
from typing import List, Optional
from urllib.parse import quote_plus
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables FIRST
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_path = BASE_DIR / '.env'
load_dotenv(dotenv_path=env_path)

# ────────────────────────────────────────────
# Application
# ────────────────────────────────────────────
APP_NAME: str = os.getenv("APP_NAME", "linkbuilder")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "true").lower() not in ("0", "false", "no")

ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")
    if origin.strip()
]

# Used by the reference-data client when no httpx client is passed in
API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8100")
API_TIMEOUT: float = float(os.getenv("API_TIMEOUT", "10"))

# ────────────────────────────────────────────
# Tracking links
# ────────────────────────────────────────────
TRACKING_PARAM: str = os.getenv("TRACKING_PARAM", "cid")
DEFAULT_TRACKING_PREFIX: str = os.getenv("DEFAULT_TRACKING_PREFIX", "MP")
TRACKING_CODE_DIGITS: int = int(os.getenv("TRACKING_CODE_DIGITS", "5"))

# ────────────────────────────────────────────
# Database Configuration
# ────────────────────────────────────────────
DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "linkbuilder_db")
DATABASE_URL = os.getenv("DATABASE_URL")

# Build DATABASE_URL
if not DATABASE_URL:
    encoded_password = quote_plus(DB_PASSWORD)
    DATABASE_URL = f"postgresql://{DB_USER}:{encoded_password}@{DB_HOST}:{DB_PORT}/{DB_NAME}"

# ────────────────────────────────────────────
# JWT Configuration (tokens come from the identity provider)
# ────────────────────────────────────────────
JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "")
JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
JWT_AUDIENCE: Optional[str] = os.getenv("JWT_AUDIENCE") or None

if not JWT_SECRET_KEY:
    import warnings
    warnings.warn("JWT_SECRET_KEY not set! Bearer tokens will be rejected.")

# ────────────────────────────────────────────
# Settings Class
# ────────────────────────────────────────────
class Settings:
    APP_NAME: str = APP_NAME
    DATABASE_URL: str = DATABASE_URL
    LOG_LEVEL: str = LOG_LEVEL
    LOG_TO_FILE: bool = LOG_TO_FILE
    ALLOWED_ORIGINS: List[str] = ALLOWED_ORIGINS
    API_BASE_URL: str = API_BASE_URL
    API_TIMEOUT: float = API_TIMEOUT
    TRACKING_PARAM: str = TRACKING_PARAM
    DEFAULT_TRACKING_PREFIX: str = DEFAULT_TRACKING_PREFIX
    TRACKING_CODE_DIGITS: int = TRACKING_CODE_DIGITS
    JWT_SECRET_KEY: str = JWT_SECRET_KEY
    JWT_ALGORITHM: str = JWT_ALGORITHM
    JWT_AUDIENCE: Optional[str] = JWT_AUDIENCE

settings = Settings()

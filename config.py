import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///habits.db"


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-key-change-me-before-deploying")
    JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", 1))
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    PORT = int(os.getenv("PORT", 5000))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-secret-key-for-habit-tracker-suite"


def warn_on_default_database(config):
    if config.SQLALCHEMY_DATABASE_URI == DEFAULT_DATABASE_URL:
        logger.warning(f"DATABASE_URL is not set, falling back to {DEFAULT_DATABASE_URL}")

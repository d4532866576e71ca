import os
import sys
import logging
from flask_migrate import upgrade
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from app import create_app
from models import db

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "migrations")


def apply_schema(app, migrations_dir=MIGRATIONS_DIR):
    """Check the database connection, then run migrations or create the tables."""
    with app.app_context():
        try:
            with db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("Database connection successful")
        except OperationalError as e:
            logger.error(f"Database connection failed: {e}")
            raise

        if os.path.isdir(migrations_dir):
            upgrade(directory=migrations_dir)  # Apply migrations
            logger.info("Database migrations applied successfully")
            return "upgraded"
        db.create_all()
        logger.info("No migration repository found, tables created")
        return "created"


if __name__ == "__main__":
    try:
        apply_schema(create_app())
    except Exception as e:
        logger.error(f"Failed to apply schema: {e}")
        sys.exit(1)

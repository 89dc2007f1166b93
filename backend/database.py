# backend/database.py
import logging

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

db = SQLAlchemy()


class DatabaseInitError(RuntimeError):
    pass


def create_tables():
    # models must be imported so their tables are registered on db.metadata
    from models.question import Question  # noqa: F401
    from models.student import Student  # noqa: F401

    try:
        db.create_all()
    except SQLAlchemyError as e:
        logger.error("Table creation failed: %s", e)
        raise DatabaseInitError(f"could not create tables: {e}") from e


def init_db(app):
    """Bind the extension to ``app``, check connectivity, create tables."""
    db.init_app(app)

    with app.app_context():
        try:
            with db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Database connection failed: %s", e)
            raise DatabaseInitError(f"could not connect to database: {e}") from e

        create_tables()

    logger.info("Database ready")

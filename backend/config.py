# backend/config.py
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _as_bool(value, default=False):
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def normalize_database_url(url):
    # SQLAlchemy dropped the bare "postgres" scheme
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def load_config(overrides=None):
    overrides = dict(overrides or {})

    database_url = overrides.pop("SQLALCHEMY_DATABASE_URI", None) or os.getenv("DATABASE_URL")
    if not database_url:
        raise RuntimeError("DATABASE_URL environment variable not set")

    config = {
        "SQLALCHEMY_DATABASE_URI": normalize_database_url(database_url),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "HOST": os.getenv("HOST", "0.0.0.0"),
        "PORT": int(os.getenv("PORT", "8000")),
        "STATIC_FOLDER": os.getenv("STATIC_FOLDER", os.path.join(BASE_DIR, "static")),
        "CSV_ATOMIC_UPLOAD": _as_bool(os.getenv("CSV_ATOMIC_UPLOAD")),
        "MAX_CONTENT_LENGTH": int(os.getenv("MAX_UPLOAD_MB", "16")) * 1024 * 1024,
        "CORS_ORIGINS": os.getenv("CORS_ORIGINS", "*"),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
    }
    config.update(overrides)
    return config

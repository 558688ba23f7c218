from dotenv import load_dotenv
import os

load_dotenv()


def _split(value):
    return [item.strip() for item in (value or "").split(",") if item.strip()]


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///foodstore.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Test connections before use so stale pooled connections are recycled
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }

    # Origins allowed to call the JSON representation of the resources
    CORS_ORIGINS = _split(os.getenv("CORS_ORIGINS", "http://localhost:5173"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

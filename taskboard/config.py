import os

# Load .env from project root so local development settings are picked up
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # "shared" keeps one store for the whole process; "per_request" rebuilds
    # the seed data for every request.
    TASK_STORE_MODE = os.environ.get("TASK_STORE_MODE", "shared")
    TASKS_URL_PREFIX = os.environ.get("TASKS_URL_PREFIX", "/api/tasks")
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    ENV = os.environ.get("FLASK_ENV", "development")
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"

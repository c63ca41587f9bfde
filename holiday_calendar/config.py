"""
Application settings.

Settings are read from the environment (and a .env file) once, then passed
explicitly to the app factory, the database and the holiday source client.
"""
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_HOLIDAY_API_BASE_URL = "https://api.argentinadatos.com/v1/feriados"


def _default_database_url() -> str:
    host = os.getenv("MYSQL_HOST", "localhost")
    port = int(os.getenv("MYSQL_PORT", 3306))
    user = os.getenv("MYSQL_USER", "root")
    password = os.getenv("MYSQL_PASSWORD", "")
    database = os.getenv("MYSQL_DATABASE", "holiday_calendar_db")
    return f"mysql+aiomysql://{user}:{password}@{host}:{port}/{database}?charset=utf8mb4"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Runtime configuration for the service"""
    database_url: str = Field(..., description="SQLAlchemy async database URL")
    database_echo: bool = False
    holiday_api_base_url: str = DEFAULT_HOLIDAY_API_BASE_URL
    holiday_api_timeout: float = 10.0
    min_source_holidays: int = Field(5, description="Sanity floor for records per year")
    default_year: int = 2025
    log_level: str = "INFO"
    log_file: Optional[str] = Field("logs/app.log", description="Rotating log file; None disables file logging")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )
    admin_api_key: Optional[str] = None
    scheduler_enabled: bool = False
    translation_job_hour: int = 3

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        origins = os.getenv("CORS_ORIGINS")
        data = {
            "database_url": os.getenv("DATABASE_URL") or _default_database_url(),
            "database_echo": _env_bool("DATABASE_ECHO"),
            "holiday_api_base_url": os.getenv("HOLIDAY_API_BASE_URL", DEFAULT_HOLIDAY_API_BASE_URL),
            "holiday_api_timeout": float(os.getenv("HOLIDAY_API_TIMEOUT", 10.0)),
            "min_source_holidays": int(os.getenv("MIN_SOURCE_HOLIDAYS", 5)),
            "default_year": int(os.getenv("DEFAULT_YEAR", 2025)),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "log_file": os.getenv("LOG_FILE", "logs/app.log") or None,
            "admin_api_key": os.getenv("ADMIN_API_KEY") or None,
            "scheduler_enabled": _env_bool("SCHEDULER_ENABLED"),
            "translation_job_hour": int(os.getenv("TRANSLATION_JOB_HOUR", 3)),
        }
        if origins:
            data["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        return cls(**data)

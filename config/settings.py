"""
config/settings.py

- Reads environment variables (and .env) into application-wide settings.
- pydantic v2 / pydantic-settings v2.
- DATABASE_URL defaults to a local SQLite file so the service runs without
  any external database; point it at MySQL/PostgreSQL in stage/prod.
"""

from typing import Annotated, Dict, List, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # =========================
    # App / runtime
    # =========================
    ENV: Literal["dev", "stage", "prod"] = "dev"
    APP_TITLE: str = "GPA Tracker API"
    APP_DESCRIPTION: str = "Personal academic record tracker: grades, GPA, degree progress and target planning"
    APP_VERSION: str = "1.0.0"

    # =========================
    # CORS
    # =========================
    # Comma separated string -> List[str]
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            # "a,b , c" -> ["a","b","c"]
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    # =========================
    # Database
    # =========================
    DATABASE_URL: str = "sqlite:///./gpa_tracker.db"
    DB_ECHO: bool = False

    # =========================
    # Degree defaults (new accounts)
    # =========================
    DEFAULT_DEGREE_NAME: str = "Computer Science"
    DEFAULT_DEGREE_TOTAL_CREDITS: int = 120
    DEFAULT_CREDIT_CATEGORIES: Dict[str, int] = {
        "core_subjects": 24,
        "major_requirements": 84,
        "electives": 24,
        "general_education": 12,
    }

    # =========================
    # Auth
    # =========================
    PASSWORD_MIN_LENGTH: int = 6
    TOKEN_BYTES: int = 32

    # =========================
    # Export
    # =========================
    TEMPLATE_DIR: str = "templates"
    SHARE_TOKEN_BYTES: int = 16

    # =========================
    # Logging / Misc
    # =========================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # =========================
    # BaseSettings Config
    # =========================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# shared settings object
settings = Settings()

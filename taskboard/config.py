"""
Centralized configuration management using pydantic-settings.

Every tunable of the service (database, token signing, server, CORS) is read
from the environment or a local ``.env`` file into a single ``settings``
instance.
"""

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taskboard.utils.logger import setup_logger

load_dotenv()


logger = setup_logger("core_config")

DEFAULT_JWT_SECRET = "change-this-secret-in-production"


class Settings(BaseSettings):
    """
    Application settings managed by pydantic-settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_prefix="",
        populate_by_name=True,
    )

    # ===== Database Configuration =====
    database_url: str | None = Field(
        default=None,
        alias="TASKBOARD_DATABASE_URL",
        description="Application database URL (postgresql:// or postgresql+asyncpg://)",
    )

    taskboard_schema: str = Field(
        default="taskboard",
        alias="TASKBOARD_SCHEMA",
        description="Database schema holding the users and tasks tables",
    )

    # ===== Token Configuration =====
    jwt_secret: str = Field(
        default=DEFAULT_JWT_SECRET,
        alias="JWT_SECRET",
        description="Secret used to sign and verify bearer tokens",
    )

    jwt_algorithm: str = Field(
        default="HS256",
        alias="JWT_ALGORITHM",
        description="JWT signing algorithm",
    )

    access_token_expire_minutes: int = Field(
        default=1440,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
        description="Lifetime of an issued token in minutes (24 hours by default)",
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0", alias="SERVER_HOST", description="Server host address"
    )

    server_port: int = Field(
        default=5700, alias="SERVER_PORT", description="Server port number"
    )

    server_workers: int = Field(
        default=1, alias="SERVER_WORKERS", description="Number of uvicorn workers"
    )

    # ===== CORS Configuration =====
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",  # Vite dev server default port
            "http://localhost:3000",
            "http://127.0.0.1:5173",
        ],
        alias="CORS_ALLOW_ORIGINS",
        description="Origins allowed to call the API from a browser",
    )

    cors_allow_credentials: bool = Field(
        default=True,
        alias="CORS_ALLOW_CREDENTIALS",
        description="Whether to allow credentials in CORS requests",
    )

    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
        description="CORS allowed methods",
    )

    cors_allow_headers: list[str] = Field(
        default_factory=lambda: ["Authorization", "Content-Type"],
        alias="CORS_ALLOW_HEADERS",
        description="CORS allowed headers",
    )

    db_unavailable_hint: str = Field(
        default="Database connection failed. The server may be offline or network connectivity is down.",
        alias="DB_UNAVAILABLE_HINT",
        description="User-facing message returned when the database is unreachable",
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Log warnings for missing or unsafe critical configuration."""
        if not self.database_url:
            logger.warning("TASKBOARD_DATABASE_URL environment variable not set.")

        if self.jwt_secret == DEFAULT_JWT_SECRET:
            logger.warning(
                "JWT_SECRET is not set; tokens are signed with the built-in default secret."
            )

        logger.debug(f"Using database schema: {self.taskboard_schema}")
        return self

    @property
    def schema_name(self) -> str:
        return self.taskboard_schema


# Global settings instance
settings = Settings()

SCHEMA_NAME = settings.schema_name

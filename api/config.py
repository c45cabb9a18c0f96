"""Configuration management using Pydantic Settings."""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden using environment variables or .env file.
    """

    # SQLite Database Configuration
    database_path: str = Field(
        default="data/rto.db",
        description="Path to the SQLite database file"
    )
    seed_on_startup: bool = Field(
        default=True,
        description="Seed reference data into empty tables when the API starts"
    )
    seed_random_drivers: int = Field(
        default=500,
        description="Number of generated drivers added after the fixed demo drivers"
    )

    # API Configuration
    api_key: Optional[str] = Field(
        default=None,
        description="API key for authentication. If not set, authentication is disabled (dev mode)"
    )
    allowed_origins: str = Field(
        default="*",
        description="Comma separated list of CORS origins"
    )

    # Officer profile returned by the mock login
    officer_name: str = Field(
        default="Inspector Vikram Singh",
        description="Display name of the logged in officer"
    )
    officer_rank: str = Field(
        default="Senior Inspector",
        description="Rank of the logged in officer"
    )
    officer_station: str = Field(
        default="RTO Main Station",
        description="Station of the logged in officer"
    )

    # Face matching
    match_threshold: float = Field(
        default=0.5,
        description="Maximum Euclidean distance accepted as a face match"
    )
    demo_match_distance: float = Field(
        default=0.35,
        description="Synthetic distance reported for the demo driver fallback"
    )

    # Kiosk client
    api_base_url: str = Field(
        default="http://localhost:3000/api",
        description="Base URL of the RTO API used by the kiosk client"
    )
    request_timeout: float = Field(
        default=10.0,
        description="HTTP timeout in seconds for kiosk client requests"
    )
    scan_interval_ms: int = Field(
        default=200,
        description="Interval between face scan ticks in milliseconds"
    )

    # Application Settings
    app_name: str = Field(
        default="RTO Face Scan API",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode flag"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: str = Field(
        default="logs/api.log",
        description="Path to log file"
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    class Config:
        """Pydantic config."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

        # Allow extra fields from environment
        extra = "ignore"

        # Example values for documentation
        json_schema_extra = {
            "example": {
                "database_path": "data/rto.db",
                "api_key": "your_api_key_here",
                "seed_random_drivers": 500,
                "match_threshold": 0.5,
                "debug": False,
                "log_level": "INFO"
            }
        }


# Create a singleton instance
settings = Settings()

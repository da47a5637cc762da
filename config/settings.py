"""
Configuration management using Pydantic Settings.

Environment variables:
- ORGCHART_INPUT_ENCODING: Encoding used to read employee CSV files
- ORGCHART_LOG_LEVEL: Logging level for the CLI
- ORGCHART_LOG_FORMAT: Logging format string for the CLI
- ORGCHART_TREE_INDENT: Spaces per level when printing a tree
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORGCHART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input
    input_encoding: str = Field(default="utf-8")

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Tree rendering
    tree_indent: int = Field(default=2, ge=0)

    def get_logging_config(self) -> dict:
        """Get keyword arguments for logging.basicConfig."""
        return {
            'level': self.log_level.upper(),
            'format': self.log_format,
        }


# Global settings instance
settings = Settings()

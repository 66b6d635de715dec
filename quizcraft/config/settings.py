"""Application settings and configuration."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Model Configuration
    llm_provider: Literal["anthropic", "bedrock"] = Field(
        default="anthropic",
        description="Chat model provider used for question generation",
        validation_alias="LLM_PROVIDER",
    )

    model_name: str = Field(
        default="claude-haiku-4-5",
        description="Model identifier passed to the provider",
        validation_alias="MODEL_NAME",
    )

    anthropic_api_key: str | None = Field(
        default=None,
        description="Anthropic API key",
        validation_alias="ANTHROPIC_API_KEY",
    )

    # AWS CONFIG (bedrock provider only)
    aws_access_key_id: str | None = Field(
        default=None,
        description="AWS API key ID",
        validation_alias="AWS_ACCESS_KEY_ID",
    )
    aws_secret_access_key: str | None = Field(
        default=None,
        description="AWS API key",
        validation_alias="AWS_SECRET_ACCESS_KEY",
    )
    aws_default_region: str | None = Field(
        default=None,
        description="AWS API region",
        validation_alias="AWS_DEFAULT_REGION",
    )

    # Generation Settings
    generation_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Temperature for question generation",
        validation_alias="GENERATION_TEMPERATURE",
    )

    # Storage
    database_url: str = Field(
        default="sqlite:///./quizcraft.db",
        description="SQLAlchemy database URL",
        validation_alias="DATABASE_URL",
    )

    # Server / logging
    log_level: str = Field(
        default="INFO",
        description="Log level for the quizcraft logger",
        validation_alias="LOG_LEVEL",
    )

    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8000, ge=1, le=65535, validation_alias="API_PORT")

    # Output Settings
    default_output_path: str = Field(
        default="quiz",
        description="Default output file path for DOCX export",
        validation_alias="DEFAULT_OUTPUT",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def has_generation_credentials(self) -> bool:
        """Whether the configured provider has the credential it needs."""
        if self.llm_provider == "bedrock":
            return bool(self.aws_access_key_id and self.aws_secret_access_key)
        return bool(self.anthropic_api_key)


# Loaded the first time and then cached for the API, CLI and services
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()

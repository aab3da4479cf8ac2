"""Configuration management using pydantic-settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from islamic_names.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Vertex AI settings (used when no API key is configured)
    gcp_project_id: str = ""
    vertex_ai_location: str = "us-central1"

    # Gemini Developer API key; takes precedence over Vertex AI when set
    google_api_key: str = ""

    # Model used for both name generation and meaning augmentation
    gemini_model: str = "gemini-2.5-flash"

    # Application settings
    app_name: str = "islamic-name-finder"

    # Server settings
    frontend_port: int = 3000

    def check_credentials(self) -> None:
        """Raise ConfigurationError unless a GCP project or an API key is set."""
        if not self.gcp_project_id and not self.google_api_key:
            raise ConfigurationError("either GCP_PROJECT_ID or GOOGLE_API_KEY must be set")

    @property
    def use_vertexai(self) -> bool:
        return not self.google_api_key


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()

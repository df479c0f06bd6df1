"""Application settings with environment variable support."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRIVATE_HOST_PREFIXES = ("localhost", "127.0.0.1", "10.", "172.", "192.168.")


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Elasticsearch connection
    elastic_url: str = Field(
        default="http://localhost:9200",
        description="Elasticsearch URL, with or without protocol",
    )
    elastic_username: str = Field(default="elastic", description="Elasticsearch username")
    elastic_password: str = Field(default="changeme", description="Elasticsearch password")
    elastic_verify_certs: bool = Field(
        default=True, description="Verify TLS certificates on HTTPS connections"
    )
    request_timeout: float = Field(
        default=30.0, description="Timeout in seconds for each Elasticsearch request"
    )

    # Destination index
    index_name: str = Field(default="logs-siem", description="Index that receives the events")

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_json: bool = Field(default=False, description="Enable JSON formatted logging")

    @field_validator("elastic_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate Elasticsearch URL format."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("Elasticsearch URL cannot be empty")
        return v

    @field_validator("index_name")
    @classmethod
    def validate_index_name(cls, v: str) -> str:
        """Validate index name against Elasticsearch naming rules."""
        if not v or v != v.lower():
            raise ValueError(f"Invalid index name: {v!r}. Must be non-empty and lowercase")
        if v.startswith(("-", "_", "+")) or any(c in v for c in ' \\/*?"<>|,#:'):
            raise ValueError(f"Invalid index name: {v!r}")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate request timeout."""
        if v <= 0:
            raise ValueError(f"Request timeout must be positive, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    def _is_elastic_cloud_url(self, url: str) -> bool:
        """Check if URL is an Elastic Cloud domain."""
        return ".es." in url or url.endswith(".elastic-cloud.com")

    @property
    def elastic_url_with_protocol(self) -> str:
        """Get Elasticsearch URL with protocol."""
        url = self.elastic_url
        if "://" in url:
            return url

        # Elastic Cloud requires HTTPS, local and private addresses default to HTTP
        if self._is_elastic_cloud_url(url) or not url.startswith(PRIVATE_HOST_PREFIXES):
            return f"https://{url}"
        return f"http://{url}"


# Global settings instance (can be overridden)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings instance.

    Returns:
        Settings instance (singleton pattern)
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

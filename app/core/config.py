"""
Core configuration and settings for the Product Store
Values come from environment variables or an optional .env file
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service information
    service_name: str = Field(default="product-store")
    service_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=3000)
    host: str = Field(default="0.0.0.0")  # nosec B104

    # API surface
    api_prefix: str = Field(default="/api")
    default_page_size: int = Field(default=10, ge=1)

    # Security configuration
    api_key: str = Field(default="your-secret-api-key")
    api_key_header: str = Field(default="x-api-key")
    correlation_id_header: str = Field(default="X-Correlation-ID")

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")
    log_to_file: bool = Field(default=False)
    log_to_console: bool = Field(default=True)
    log_file_path: str = Field(default="logs/product-store.log")

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


# Global config instance
config = Config()

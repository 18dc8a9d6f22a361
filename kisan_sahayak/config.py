"""
Configuration settings for the KisanSahayak offline scheme engine
"""
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, ConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application Configuration
    app_name: str = Field(default="KisanSahayak Offline Scheme Engine", env="APP_NAME")
    app_version: str = Field(default="1.0.0", env="APP_VERSION")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # API Configuration
    api_prefix: str = Field(default="/api/v1", env="API_PREFIX")
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:9002",
        env="CORS_ORIGINS"
    )

    # Catalog generation: leave unset for a fresh entropy source per process
    catalog_seed: Optional[int] = Field(default=None, env="CATALOG_SEED")

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()

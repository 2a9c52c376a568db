# backend/tripboard/core/config_loader.py

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # shared secrets; unset or empty means the role can never be satisfied
    ADMIN_SECRET_KEY: Optional[str] = None
    TRUSTED_SECRET_KEY: Optional[str] = None

    # one header carries the secret for both roles
    AUTH_HEADER: str = "x-trip-secret"

    DB_PATH: str = "data.sqlite3"

    environment: str = "development"
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    cors_origins: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def missing_secrets(self) -> List[str]:
        """Names of the secret settings that are unset or empty."""
        missing = []
        if not self.ADMIN_SECRET_KEY:
            missing.append("ADMIN_SECRET_KEY")
        if not self.TRUSTED_SECRET_KEY:
            missing.append("TRUSTED_SECRET_KEY")
        return missing

"""Configuration management using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for API sessions, loaded from AKAMAI_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AKAMAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Connection
    host: str = Field(default="localhost", min_length=1, description="API host, with or without scheme")
    request_timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    verify_tls: bool = True

    # Request decoration
    user_agent: str = Field(default="akamai-apis/1.0.0", min_length=1)
    account_key: str | None = Field(default=None, description="Sent as the accountSwitchKey query parameter")

    @property
    def base_url(self) -> str:
        host = self.host.rstrip("/")
        if host.startswith(("http://", "https://")):
            return host
        return f"https://{host}"


# Global settings instance
settings = Settings()

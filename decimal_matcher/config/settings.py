from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Matcher configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    default_digit_limit: int = 11

# dashboard/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Dashboard configuration"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # App settings
    app_name: str = "Resume Analyzer"
    debug: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Largest resume / job description accepted, in characters
    max_text_length: int = 100_000


settings = Settings()

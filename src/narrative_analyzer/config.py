from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    OPENAI_API_KEY: Optional[str] = Field(None, description="OpenAI API Key (falls back to the client's own env lookup)")
    OPENAI_BASE_URL: Optional[str] = Field(None, description="Override for OpenAI-compatible endpoints")
    MODEL: str = "gpt-4o"
    LOG_LEVEL: str = "INFO"

    # Retry wrapper around the completion client (0 = no retry)
    COMPLETION_MAX_RETRIES: int = Field(0, ge=0, description="Extra attempts on transient API errors")
    COMPLETION_RETRY_WAIT_SECONDS: float = Field(2.0, ge=0, description="Fixed wait between attempts")

    # MLflow settings
    MLFLOW_TRACKING_URI: str = Field("http://127.0.0.1:5000", description="MLflow tracking server URI")
    MLFLOW_ENABLE_TRACING: bool = Field(False, description="Enable MLflow tracing")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()

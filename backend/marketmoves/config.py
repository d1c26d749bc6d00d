from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Alpha Vantage powers quote, metrics and history; NewsAPI is optional
    alpha_vantage_api_key: str = ""
    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"
    newsapi_key: str = ""
    newsapi_base_url: str = "https://newsapi.org/v2/everything"

    history_output_size: str = "compact"  # "full" for 20+ years of dailies
    history_limit: int = 126  # ~6 months of trading days
    news_limit: int = 5

    http_timeout: float = 10.0

    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env"}


@lru_cache
def get_settings() -> Settings:
    return Settings()

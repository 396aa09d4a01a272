from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    REDIS_URL: Optional[str] = None
    ESTIMATE_CACHE_TTL: int = 60  # seconds

    DEFAULT_DEMAND_LEVEL: str = "normal"

    API_TITLE: str = "Delivery Fare Estimation Service"
    API_DESCRIPTION: str = "Fare estimates, surge and pricing rules for delivery service types"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PORT: int = 3001
    NODE_ENV: str = "development"

    PINATA_API_KEY: str | None = None
    # older deployments export the secret as PINATA_SECRET_API_KEY
    PINATA_SECRET_KEY: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PINATA_SECRET_KEY", "PINATA_SECRET_API_KEY"),
    )

    PINATA_API_URL: str = "https://api.pinata.cloud"
    PINATA_GATEWAY_URL: str = "https://gateway.pinata.cloud/ipfs"
    PINATA_METADATA_NAME: str = "metadata.json"
    PINATA_TIMEOUT: Optional[float] = None

    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def bind_host(self) -> str:
        return "0.0.0.0" if self.NODE_ENV == "production" else "localhost"

    @property
    def pinata_configured(self) -> bool:
        return bool(self.PINATA_API_KEY and self.PINATA_SECRET_KEY)

@lru_cache
def get_settings() -> Settings:
    return Settings()

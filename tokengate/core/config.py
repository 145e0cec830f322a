import logging
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Only ever used when DEBUG is on.
DEV_ACCESS_SECRET_KEY = "insecure-dev-access-key-do-not-use-in-production"
DEV_REFRESH_SECRET_KEY = "insecure-dev-refresh-key-do-not-use-in-production"


class Settings(BaseSettings):
    PROJECT_NAME: str = "Tokengate"
    DEBUG: bool = False
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"
    ACCESS_SECRET_KEY: str = ""
    REFRESH_SECRET_KEY: str = ""
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7
    TOKEN_CLEANUP_INTERVAL_SECONDS: float = 3600
    ALLOWED_ORIGINS: list[str] = []

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @model_validator(mode="after")
    def validate_secret_keys(self) -> "Settings":
        """
        Missing signing keys fall back to fixed development values only in DEBUG mode.
        Outside of DEBUG the application refuses to start without both keys.
        """
        if not self.ACCESS_SECRET_KEY:
            if not self.DEBUG:
                raise ValueError("ACCESS_SECRET_KEY is required. Set DEBUG=true to use a development key.")
            logger.warning("ACCESS_SECRET_KEY not set, using an insecure development key")
            self.ACCESS_SECRET_KEY = DEV_ACCESS_SECRET_KEY

        if not self.REFRESH_SECRET_KEY:
            if not self.DEBUG:
                raise ValueError("REFRESH_SECRET_KEY is required. Set DEBUG=true to use a development key.")
            logger.warning("REFRESH_SECRET_KEY not set, using an insecure development key")
            self.REFRESH_SECRET_KEY = DEV_REFRESH_SECRET_KEY

        if self.ACCESS_SECRET_KEY == self.REFRESH_SECRET_KEY:
            raise ValueError("ACCESS_SECRET_KEY and REFRESH_SECRET_KEY must be different")
        return self


@lru_cache
def get_settings():
    return Settings()

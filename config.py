import os
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Vastra Saree Store API"
    CORS_ORIGINS: List[str] = ["*"]
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Sessions
    SESSION_COOKIE_NAME: str = "vastra_session"
    SESSION_TTL_DAYS: int = 7
    COOKIE_SECURE: bool = False

    # Credentials
    PASSWORD_HASH_ITERATIONS: int = 240_000

    # Checkout
    FREE_SHIPPING_THRESHOLD: float = 2999
    SHIPPING_FEE: float = 199

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


settings = Settings()


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": settings.LOG_LEVEL,
    },
    "loggers": {
        "uvicorn": {
            "handlers": ["console"],
            "level": os.environ.get("UVICORN_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        "uvicorn.access": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}

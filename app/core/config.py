from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Lab Portal API"

    # database
    DATABASE_URL: str
    DB_ECHO: bool = False

    # JWT (optional caller identity; every route stays public)
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

    class Config:
        env_file = ".env"


settings = Settings()

from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # --- App Config ---
    APP_NAME: str = "TaskFlow"
    APP_ENV: str = "development"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # --- Database ---
    DATABASE_URL: str = "sqlite+aiosqlite:///./taskflow.db"
    DATABASE_ECHO: bool = False

    # --- OAuth / Google ---
    GOOGLE_CLIENT_ID: str
    GOOGLE_CLIENT_SECRET: str
    GOOGLE_CALLBACK_URL: str | None = None

    # --- Session ---
    SESSION_SECRET: str
    SESSION_MAX_AGE: int = 24 * 60 * 60

    # --- CORS ---
    CLIENT_URL: str = "http://localhost:3000"

    class Config:
        env_file = ".env"

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

@lru_cache()
def get_settings():
    return Settings()

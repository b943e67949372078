from pydantic import BaseModel
import os

DEFAULT_CORS_ORIGINS = (
    "http://127.0.0.1:5173,http://localhost:5173,"
    "http://127.0.0.1:5500,http://localhost:5500"
)


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseModel):
    ENV: str = os.getenv("ENV", "dev")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./dev.db")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "sessionId")
    SESSION_COOKIE_MAX_AGE: int = int(os.getenv("SESSION_COOKIE_MAX_AGE", str(60 * 60 * 24 * 7)))
    CORS_ORIGINS: list[str] = _split_csv(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))

settings = Settings()

# chatroom_server/config.py
import os
from pathlib import Path
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

PACKAGE_DIR = Path(__file__).resolve().parent


def _split_origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Chatroom Server"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").lower()

    # Store connection strings (Tortoise URL format, e.g. sqlite://db.sqlite3 or postgres://user:pw@host/db)
    database_url: str = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
    test_database_url: str = os.getenv("TEST_DATABASE_URL", "sqlite://:memory:")

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = _split_origins(
        os.getenv("CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8080")
    )

    # Directory holding index.html and the client assets served at "/"
    static_dir: Path = Path(os.getenv("STATIC_DIR", str(PACKAGE_DIR / "public")))

settings = Settings()  # Instantiate configuration

# backend/app/core/config.py
import os
from dotenv import load_dotenv

# Loads backend/.env relative to this file, so it works no matter where run.py is started from.
env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), '..', '.env')
load_dotenv(dotenv_path=env_path)


class Settings:
    """
    Backend settings read from environment variables.
    Plain attributes with manual conversion and defaults.
    """
    HOST: str = os.getenv("BACKEND_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("BACKEND_PORT", 8421))

    # Header carrying the client address when running behind a proxy (Vercel, nginx, ...).
    FORWARDED_FOR_HEADER: str = os.getenv("FORWARDED_FOR_HEADER", "x-forwarded-for")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # uvicorn's per-request lines; get-ip is hit on every page view, so quiet by default.
    ACCESS_LOG_LEVEL: str = os.getenv("ACCESS_LOG_LEVEL", "WARNING")
    LOG_FILE_NAME: str = os.getenv("LOG_FILE_NAME", "drinkmailer_backend.log")
    LOG_DIR: str = os.getenv(
        "LOG_DIR",
        os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', '..', 'logs')
    )


# Global settings instance
settings = Settings()

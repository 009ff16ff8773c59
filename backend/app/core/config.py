# backend/app/core/config.py
from pydantic_settings import BaseSettings
from pathlib import Path
from functools import lru_cache


class Settings(BaseSettings):
    PROJECT_NAME: str = "Validador SPED"
    API_V1_STR: str = "/api/v1"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 22000

    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    UPLOAD_DIR: Path = BASE_DIR / "backend" / "storage" / "uploads"
    LAYOUT_PATH: Path = BASE_DIR / "layout_blocos.json"

    DATA_FILE_SUFFIX: str = ".txt"

    MAX_UPLOAD_SIZE: int = 200 * 1024 * 1024  # 200MB
    MAX_ARCHIVE_MEMBERS: int = 10000
    MAX_EXTRACTED_SIZE: int = 2 * 1024 * 1024 * 1024  # 2GB
    VALIDATION_MAX_WORKERS: int = 1

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Crea una instancia única de Settings que se reutiliza.
    El decorador lru_cache asegura que solo se cree una vez.
    """
    return Settings()

"""Central application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List, Optional
from pathlib import Path
from urllib.parse import quote_plus


class Settings(BaseSettings):
    # Database (MySQL by default, any SQLAlchemy URL through DATABASE_URL)
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "streamline_sport"
    DB_POOL_SIZE: int = 10
    DB_POOL_RECYCLE: int = 600
    DB_CONNECT_TIMEOUT: int = 10

    # Server
    SERVER_PORT: int = 3001
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3001"]

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # File storage
    STATIC_DIR: str = "static"
    MAX_IMAGE_SIZE: int = 10 * 1024 * 1024  # 10 MB
    MAX_FILE_SIZE: int = 50 * 1024 * 1024  # 50 MB
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpeg", "jpg", "png", "gif", "webp"]
    ALLOWED_FILE_EXTENSIONS: List[str] = [
        "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
        "txt", "csv", "zip", "rar", "7z", "svg",
    ]
    THUMBNAIL_SIZE: int = 300

    # Front-end API client
    API_BASE_URL: str = "http://localhost:3001"
    API_TIMEOUT_SECONDS: float = 15.0

    # Site
    CLUB_ID: str = "swimdorval"
    DEFAULT_LANGUAGE: str = "fr"

    def database_url(self) -> str:
        explicit = str(self.DATABASE_URL or "").strip()
        if explicit:
            return explicit
        password = quote_plus(self.DB_PASSWORD) if self.DB_PASSWORD else ""
        credentials = f"{self.DB_USER}:{password}" if password else self.DB_USER
        # MySQL 5.1 only knows the 3-byte utf8 charset
        return f"mysql+pymysql://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8"

    def is_mysql(self) -> bool:
        return self.database_url().startswith("mysql")

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()

from pydantic_settings import BaseSettings
from typing import Dict, Optional


class Settings(BaseSettings):

    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8001

    APP_TITLE: str = "File URL Service"
    APP_DESCRIPTION: str = "Resolves stream wrapper URIs into web-accessible file URLs"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Canonical site URL; when unset the base URL context comes from each request
    BASE_URL: Optional[str] = None

    PUBLIC_FILES_PATH: str = "sites/default/files"
    PUBLIC_FILES_BASE_URL: Optional[str] = None
    PRIVATE_FILES_ROUTE: str = "system/files"
    TEMPORARY_FILES_ROUTE: str = "system/temporary"

    CDN_BASE_URL: Optional[str] = None

    S3_BUCKET: Optional[str] = None
    S3_REGION: str = "us-east-1"
    S3_PUBLIC_BASE_URL: Optional[str] = None

    # scheme -> base URL, e.g. {"media": "https://media.example.org/assets"}
    REMOTE_STREAM_WRAPPERS: Dict[str, str] = {}

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

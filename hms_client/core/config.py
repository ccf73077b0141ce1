from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Hospital Management System Client"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    LOG_LEVEL: str = "INFO"

    # Remote services
    API_BASE_URL: str = "http://localhost:4000"
    AUTH_BASE_URL: str = "http://127.0.0.1:8000"
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    # Token storage
    TOKEN_STORAGE_KEY: str = "login-system"
    TOKEN_FILE: Optional[str] = None

    @property
    def uses_persistent_tokens(self) -> bool:
        """Whether the auth token outlives the process."""
        return bool(self.TOKEN_FILE) and not self.TESTING

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create settings instance
settings = Settings()

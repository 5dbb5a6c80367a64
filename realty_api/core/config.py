"""
Realty API - Configuration
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

# Carrega .env com override para sobrescrever variáveis do sistema
env_file = Path(__file__).parent.parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file, override=True)


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Realty API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    API_PREFIX: str = "/api"

    # Obrigatórios: sem eles a aplicação não sobe
    DATABASE_URL: str
    API_KEY: str

    # Logging
    LOG_LEVEL: Optional[str] = None
    LOG_DIR: Optional[str] = None

    # CORS
    CORS_ORIGINS: list = ["*"]

    # Popula user_types na inicialização
    SEED_USER_TYPES: bool = True

    @property
    def log_level(self) -> str:
        """Nível de log explícito ou derivado do ambiente"""
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.ENVIRONMENT == "development" else "INFO"

    class Config:
        extra = "ignore"
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

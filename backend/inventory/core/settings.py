# backend/inventory/core/settings.py - Configuración de la aplicación (env + .env)

import logging
from typing import Optional
from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    # =========================
    # App metadata
    # =========================
    PROJECT_NAME: str = "inventory-seed"
    VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Entorno
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_CONFIG: bool = False

    # False = solo sembrar e imprimir, sin levantar el servidor
    SERVE: bool = True

    # =========================
    # Persistencia
    # =========================
    STORAGE_BACKEND: str = "memory"  # memory | supabase
    SUPABASE_URL: Optional[AnyHttpUrl] = None
    SUPABASE_KEY: Optional[str] = None
    ITEMS_TABLE: str = "items"

    @field_validator("STORAGE_BACKEND")
    @classmethod
    def normalize_backend(cls, v):
        """Acepta 'Supabase', ' MEMORY ', etc."""
        return (v or "memory").strip().lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v):
        """Nivel válido para logging y uvicorn; WARN -> WARNING, desconocido -> INFO."""
        level = (v or "INFO").strip().upper()
        if level == "WARN":
            level = "WARNING"
        return level if level in LOG_LEVELS else "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# ===== INSTANCIA GLOBAL =====
settings = Settings()


def log_settings() -> None:
    """Log seguro de configuración sin exponer secretos (va al log, no a stdout)."""
    logger.info("[CONFIG] ===== CONFIGURACIÓN %s v%s =====", settings.PROJECT_NAME, settings.VERSION)
    logger.info("[CONFIG] Entorno: %s", settings.ENVIRONMENT)
    logger.info("[CONFIG] Debug: %s", settings.DEBUG)
    logger.info("[CONFIG] Serve: %s", settings.SERVE)
    logger.info("[CONFIG] Storage backend: %s", settings.STORAGE_BACKEND)
    if settings.STORAGE_BACKEND == "supabase":
        logger.info("[CONFIG] Supabase URL: %s", settings.SUPABASE_URL)
        key = settings.SUPABASE_KEY
        logger.info("[CONFIG] Supabase Key: %s", "*" * 8 + "..." if key else "No configurado")
        logger.info("[CONFIG] Tabla items: %s", settings.ITEMS_TABLE)
    logger.info("[CONFIG] ===== FIN CONFIGURACIÓN =====")

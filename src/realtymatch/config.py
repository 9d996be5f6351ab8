"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> realtymatch/ -> src/ -> project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Supabase (solo requerido por el catálogo persistente)
    supabase_url: Optional[str] = Field(None, description="URL del proyecto Supabase")
    supabase_key: Optional[str] = Field(None, description="Anon key de Supabase")
    supabase_service_key: Optional[str] = Field(
        None, description="Service role key para operaciones admin"
    )

    # Matching
    min_match_score: int = Field(
        60, ge=0, le=100, description="Score mínimo por defecto para best matches"
    )
    max_match_results: int = Field(
        10, ge=1, le=100, description="Cantidad máxima de resultados por defecto"
    )
    match_workers: int = Field(
        4, ge=1, description="Threads usados en el matching por lotes"
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema
TRANSACTION_TYPES = ["buy", "rent"]

PROPERTY_CATEGORIES = [
    "residential",
    "commercial",
    "industrial",
    "agricultural",
    "plot",
]

# Categorías en las que el número de dormitorios (BHK) tiene sentido
BEDROOM_CATEGORIES = {"residential"}

PROPERTY_STATUSES = ["available", "on_hold", "sold_or_rented"]

REQUIREMENT_STATUSES = ["active", "matched", "closed"]

# Límites aceptados para los parámetros de best matches
MIN_SCORE_BOUNDS = (0, 100)
LIMIT_BOUNDS = (1, 100)

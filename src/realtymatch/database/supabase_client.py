"""
Conexión a Supabase.

Los repositorios reciben el `supabase.Client` tal cual; este módulo
solo resuelve las credenciales y cachea la instancia.
"""

from functools import lru_cache

import structlog
from supabase import Client, create_client

from realtymatch.config import Settings, get_settings
from realtymatch.exceptions import ConfigurationError

logger = structlog.get_logger()


def resolve_credentials(settings: Settings) -> tuple[str, str]:
    """
    Devuelve (url, key) para el catálogo persistente.

    La service key tiene prioridad sobre la anon key: el matching lee
    tablas completas y no debe quedar recortado por políticas RLS.
    """
    if not settings.supabase_url or not settings.supabase_key:
        raise ConfigurationError(
            "SUPABASE_URL y SUPABASE_KEY son requeridos para el catálogo "
            "persistente. Configura las variables de entorno o usa --demo."
        )
    return settings.supabase_url, settings.supabase_service_key or settings.supabase_key


@lru_cache
def get_supabase_client() -> Client:
    """Cliente de Supabase compartido por todos los repositorios."""
    settings = get_settings()
    url, key = resolve_credentials(settings)
    client = create_client(url, key)
    logger.info(
        "Conexión a Supabase lista",
        url=url,
        service_role=bool(settings.supabase_service_key),
    )
    return client

"""
Módulo de base de datos.

Provee acceso a Supabase y el catálogo persistente del matching.
"""

from realtymatch.database.supabase_client import get_supabase_client, resolve_credentials
from realtymatch.database.repositories import PropertyRepository, RequirementRepository
from realtymatch.database.catalog import SupabaseCatalog

__all__ = [
    "get_supabase_client",
    "resolve_credentials",
    "PropertyRepository",
    "RequirementRepository",
    "SupabaseCatalog",
]

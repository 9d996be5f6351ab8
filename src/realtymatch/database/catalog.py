"""
Catálogo respaldado por Supabase.

Adapta los repositorios a la interfaz Catalog del motor de matching
y convierte filas en modelos.
"""

from typing import Optional

import structlog
from supabase import Client

from realtymatch.database.repositories import PropertyRepository, RequirementRepository
from realtymatch.database.supabase_client import get_supabase_client
from realtymatch.exceptions import CatalogError
from realtymatch.matching.catalog import Catalog, CandidateFilter
from realtymatch.models import Property, Requirement

logger = structlog.get_logger()


class SupabaseCatalog(Catalog):
    """Catálogo que lee de las tablas properties y buyer_requirements."""

    def __init__(self, client: Optional[Client] = None):
        client = client or get_supabase_client()
        self.properties = PropertyRepository(client)
        self.requirements = RequirementRepository(client)

    def _read(self, operation: str, func, *args):
        try:
            return func(*args)
        except Exception as e:
            logger.error("Error leyendo catálogo", operation=operation, error=str(e))
            raise CatalogError(f"{operation} falló: {e}") from e

    def get_requirement(self, requirement_id: str) -> Optional[Requirement]:
        row = self._read("get_requirement", self.requirements.get_by_id, requirement_id)
        return Requirement.from_db_row(row) if row else None

    def get_property(self, property_id: str) -> Optional[Property]:
        row = self._read("get_property", self.properties.get_by_id, property_id)
        return Property.from_db_row(row) if row else None

    def get_active_requirements(self) -> list[Requirement]:
        rows = self._read("get_active_requirements", self.requirements.get_active)
        return [Requirement.from_db_row(row) for row in rows]

    def get_available_properties(self) -> list[Property]:
        rows = self._read("get_available_properties", self.properties.get_available)
        return [Property.from_db_row(row) for row in rows]

    def find_candidate_properties(self, candidate_filter: CandidateFilter) -> list[Property]:
        rows = self._read(
            "find_candidate_properties",
            self.properties.search_candidates,
            candidate_filter,
        )
        listings = [Property.from_db_row(row) for row in rows]
        return [p for p in listings if candidate_filter.accepts(p)]

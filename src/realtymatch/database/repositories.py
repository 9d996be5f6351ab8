"""
Repositorios de lectura en Supabase.

Cada repositorio maneja una tabla/entidad específica. Las lecturas
se reintentan con backoff exponencial; el motor de matching no
reintenta por su cuenta.
"""

from typing import Optional

import structlog
from supabase import Client
from tenacity import retry, stop_after_attempt, wait_exponential

from realtymatch.database.supabase_client import get_supabase_client
from realtymatch.matching.catalog import CandidateFilter

logger = structlog.get_logger()

READ_ATTEMPTS = 3

_read_retry = retry(
    stop=stop_after_attempt(READ_ATTEMPTS),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    reraise=True,
)


class BaseRepository:
    """Clase base para repositorios."""

    TABLE = ""

    def __init__(self, client: Optional[Client] = None):
        self._client = client or get_supabase_client()

    @property
    def client(self) -> Client:
        return self._client

    def _by_status(self, status: str):
        """Query base: filas en un estado, más recientes primero."""
        return (
            self.client.table(self.TABLE)
            .select("*")
            .eq("status", status)
            .order("created_at", desc=True)
        )

    @_read_retry
    def get_by_id(self, row_id: str) -> Optional[dict]:
        """Obtiene una fila por su UUID."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("id", row_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None


class PropertyRepository(BaseRepository):
    """Repositorio para listings (properties)."""

    TABLE = "properties"

    @_read_retry
    def get_available(self) -> list[dict]:
        """Obtiene todas las propiedades disponibles, más recientes primero."""
        return self._by_status("available").execute().data

    @_read_retry
    def search_candidates(self, candidate_filter: CandidateFilter) -> list[dict]:
        """
        Pre-filtro en SQL: estado, transacción, categoría y solapamiento
        de precio. Superficie y ubicación se resuelven en memoria para
        no descartar filas con valores nulos.

        El solapamiento usa price_min/price_max: las filas legacy que solo
        tienen la columna price no son candidatas (se leen por id).
        """
        response = (
            self._by_status("available")
            .eq("transaction_type", candidate_filter.transaction_type)
            .eq("property_type", candidate_filter.category)
            .lte("price_min", candidate_filter.price_max)
            .gte("price_max", candidate_filter.price_min)
            .execute()
        )
        logger.debug(
            "Candidatos pre-filtrados",
            transaction_type=candidate_filter.transaction_type,
            category=candidate_filter.category,
            rows=len(response.data),
        )
        return response.data


class RequirementRepository(BaseRepository):
    """Repositorio para requerimientos de compradores."""

    TABLE = "buyer_requirements"

    @_read_retry
    def get_active(self) -> list[dict]:
        """Obtiene los requerimientos activos, más recientes primero."""
        return self._by_status("active").execute().data

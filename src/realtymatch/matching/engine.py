"""
Motor de matching entre requerimientos y propiedades.

Implementa:
- Matches de un requerimiento (ranking completo)
- Best matches (score mínimo + límite de resultados)
- Dirección inversa: requerimientos activos que una propiedad satisface
- Conteo de matches por lotes, tolerante a fallas individuales
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Optional

import structlog

from realtymatch.config import LIMIT_BOUNDS, MIN_SCORE_BOUNDS, Settings, get_settings
from realtymatch.exceptions import InvalidInputError, NotFoundError
from realtymatch.matching.catalog import Catalog, CandidateFilter
from realtymatch.matching.scoring import score_property
from realtymatch.matching.weights import DEFAULT_WEIGHTS, MatchWeights
from realtymatch.models import Property, Requirement

logger = structlog.get_logger()


@dataclass
class MatchResult:
    """
    Resultado de matching.

    En la dirección requerimiento -> propiedades se completa `listing`;
    en la dirección inversa se completa `requirement`.
    """

    score: int  # 0 a 100
    reasons: list[str] = field(default_factory=list)
    listing: Optional[Property] = None
    requirement: Optional[Requirement] = None

    def to_dict(self) -> dict:
        """Serializa para la capa de transporte."""
        entity = self.listing if self.listing is not None else self.requirement
        data = entity.model_dump(mode="json") if entity is not None else {}
        data["score"] = self.score
        data["reasons"] = list(self.reasons)
        return data


@dataclass
class RequirementMatches:
    """Ranking completo de propiedades para un requerimiento."""

    requirement: Requirement
    matches: list[MatchResult]
    total_count: int


@dataclass
class BatchMatchCount:
    """Cantidad de matches de un requerimiento dentro de un lote."""

    requirement_id: str
    count: int
    error: Optional[str] = None


def _recency_key(timestamp: Optional[datetime]) -> tuple:
    # Más reciente primero; sin fecha al final
    if timestamp is None:
        return (1, 0.0)
    return (0, -timestamp.timestamp())


def rank_matches(
    matches: Iterable[MatchResult],
    timestamp: Callable[[MatchResult], Optional[datetime]],
) -> list[MatchResult]:
    """
    Ordena por score descendente.

    Empates: más reciente primero y, si persiste, el orden de
    recuperación (sorted es estable).
    """
    return sorted(matches, key=lambda m: (-m.score, _recency_key(timestamp(m))))


def _listing_time(match: MatchResult) -> Optional[datetime]:
    return match.listing.listed_at if match.listing else None


def _requirement_time(match: MatchResult) -> Optional[datetime]:
    return match.requirement.created_at if match.requirement else None


class MatchEngine:
    """
    Motor de matching sin estado.

    Cada llamada lee el catálogo una sola vez y recalcula todo;
    no hay resultados cacheados ni persistidos.
    """

    def __init__(
        self,
        catalog: Catalog,
        weights: Optional[MatchWeights] = None,
        settings: Optional[Settings] = None,
        use_location_filter: bool = False,
    ):
        self.catalog = catalog
        self.weights = weights or DEFAULT_WEIGHTS
        self.settings = settings or get_settings()
        self.use_location_filter = use_location_filter

    def find_matches_for_requirement(self, requirement_id: str) -> RequirementMatches:
        """
        Ranking completo de propiedades disponibles para un requerimiento.

        Args:
            requirement_id: UUID del requerimiento

        Returns:
            RequirementMatches con todos los candidatos ordenados

        Raises:
            NotFoundError: Si el requerimiento no existe
        """
        requirement = self.catalog.get_requirement(requirement_id)
        if requirement is None:
            logger.warning("Requerimiento no encontrado", requirement_id=requirement_id)
            raise NotFoundError("Requirement", requirement_id)

        return self.find_matches_for_criteria(requirement)

    def find_matches_for_criteria(self, requirement: Requirement) -> RequirementMatches:
        """Ranking para un requerimiento no persistido (consulta de disponibilidad)."""
        candidate_filter = CandidateFilter.from_requirement(
            requirement, self.weights, use_locations=self.use_location_filter
        )
        candidates = self.catalog.find_candidate_properties(candidate_filter)

        matches = []
        for listing in candidates:
            breakdown = score_property(listing, requirement, self.weights)
            matches.append(
                MatchResult(
                    score=breakdown.score,
                    reasons=breakdown.reasons,
                    listing=listing,
                )
            )

        ranked = rank_matches(matches, _listing_time)

        logger.info(
            "Matches calculados",
            requirement_id=requirement.id,
            candidates=len(candidates),
            top_score=ranked[0].score if ranked else None,
        )

        return RequirementMatches(
            requirement=requirement,
            matches=ranked,
            total_count=len(ranked),
        )

    def find_best_matches(
        self,
        requirement_id: str,
        min_score: Optional[int] = None,
        limit: Optional[int] = None,
        strict: bool = False,
    ) -> list[MatchResult]:
        """
        Mejores propiedades para un requerimiento.

        Args:
            requirement_id: UUID del requerimiento
            min_score: Score mínimo (default de settings: 60)
            limit: Máximo de resultados (default de settings: 10)
            strict: Si es True, parámetros fuera de rango fallan en vez de ajustarse

        Returns:
            Lista de MatchResult con score >= min_score, a lo sumo `limit`
        """
        min_score, limit = self._resolve_threshold(min_score, limit, strict)
        result = self.find_matches_for_requirement(requirement_id)
        best = [m for m in result.matches if m.score >= min_score][:limit]

        logger.info(
            "Best matches",
            requirement_id=requirement_id,
            total=result.total_count,
            above_threshold=len(best),
            min_score=min_score,
        )
        return best

    def find_matches_for_property(
        self,
        property_id: str,
        min_score: Optional[int] = None,
        limit: Optional[int] = None,
        strict: bool = False,
    ) -> list[MatchResult]:
        """
        Requerimientos activos que una propiedad satisface.

        Raises:
            NotFoundError: Si la propiedad no existe
        """
        min_score, limit = self._resolve_threshold(min_score, limit, strict)

        listing = self.catalog.get_property(property_id)
        if listing is None:
            logger.warning("Propiedad no encontrada", property_id=property_id)
            raise NotFoundError("Property", property_id)

        requirements = self.catalog.get_active_requirements()
        matches = []
        for requirement in requirements:
            breakdown = score_property(listing, requirement, self.weights)
            if breakdown.score >= min_score:
                matches.append(
                    MatchResult(
                        score=breakdown.score,
                        reasons=breakdown.reasons,
                        requirement=requirement,
                    )
                )

        ranked = rank_matches(matches, _requirement_time)[:limit]

        logger.info(
            "Requerimientos compatibles",
            property_id=property_id,
            active_requirements=len(requirements),
            above_threshold=len(ranked),
        )
        return ranked

    def count_matches_batch(
        self,
        requirement_ids: list[str],
        min_score: Optional[int] = None,
    ) -> list[BatchMatchCount]:
        """
        Cuenta matches (score >= min_score) para cada requerimiento.

        Cada entrada se calcula de forma independiente; una falla se
        registra como conteo 0 con el error y no aborta el lote.
        El resultado respeta el orden de entrada.
        """
        threshold, _ = self._resolve_threshold(min_score, None, strict=False)

        def count_one(requirement_id: str) -> BatchMatchCount:
            try:
                result = self.find_matches_for_requirement(requirement_id)
            except Exception as e:
                logger.error(
                    "Error contando matches",
                    requirement_id=requirement_id,
                    error=str(e),
                )
                return BatchMatchCount(requirement_id=requirement_id, count=0, error=str(e))
            count = sum(1 for m in result.matches if m.score >= threshold)
            return BatchMatchCount(requirement_id=requirement_id, count=count)

        if not requirement_ids:
            return []

        workers = min(self.settings.match_workers, len(requirement_ids))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            counts = list(executor.map(count_one, requirement_ids))

        logger.info(
            "Conteo por lotes completado",
            requirements=len(counts),
            errors=sum(1 for c in counts if c.error),
        )
        return counts

    def _resolve_threshold(
        self,
        min_score: Optional[int],
        limit: Optional[int],
        strict: bool,
    ) -> tuple[int, int]:
        """Aplica defaults y ajusta min_score a [0, 100] y limit a [1, 100]."""
        if min_score is None:
            min_score = self.settings.min_match_score
        if limit is None:
            limit = self.settings.max_match_results

        low, high = MIN_SCORE_BOUNDS
        if not low <= min_score <= high:
            if strict:
                raise InvalidInputError(f"min_score fuera de rango: {min_score}")
            logger.warning("min_score ajustado", requested=min_score)
            min_score = max(low, min(high, min_score))

        low, high = LIMIT_BOUNDS
        if not low <= limit <= high:
            if strict:
                raise InvalidInputError(f"limit fuera de rango: {limit}")
            logger.warning("limit ajustado", requested=limit)
            limit = max(low, min(high, limit))

        return int(min_score), int(limit)

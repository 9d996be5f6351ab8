"""
Motor de matching.

Combina un pre-filtro grueso del catálogo con scoring ponderado
para rankear propiedades contra requerimientos de compradores.
"""

from realtymatch.matching.weights import MatchWeights, DEFAULT_WEIGHTS
from realtymatch.matching.scoring import ScoreBreakdown, format_price, score_property
from realtymatch.matching.catalog import Catalog, CandidateFilter, InMemoryCatalog
from realtymatch.matching.engine import (
    BatchMatchCount,
    MatchEngine,
    MatchResult,
    RequirementMatches,
)

__all__ = [
    # Pesos y scoring
    "MatchWeights",
    "DEFAULT_WEIGHTS",
    "ScoreBreakdown",
    "format_price",
    "score_property",
    # Catálogo
    "Catalog",
    "CandidateFilter",
    "InMemoryCatalog",
    # Motor
    "MatchEngine",
    "MatchResult",
    "RequirementMatches",
    "BatchMatchCount",
]

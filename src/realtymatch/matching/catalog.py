"""
Catálogo de candidatos para el motor de matching.

Define la interfaz que el motor usa para leer requerimientos y
propiedades, el filtro grueso (pre-filtro) y una implementación
en memoria.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from realtymatch.matching.weights import DEFAULT_WEIGHTS, MatchWeights
from realtymatch.models import Property, Requirement


@dataclass(frozen=True)
class CandidateFilter:
    """
    Filtro grueso previo al scoring.

    Es deliberadamente más amplio que el scoring: las ventanas de
    precio y superficie incluyen las bandas de tolerancia, de modo
    que nunca excluye algo que el scoring premiaría por precio.
    El filtro de ubicación es opcional y solo se aplica si
    `locations` no está vacío.
    """

    transaction_type: str
    category: str
    price_min: float
    price_max: float
    area_min: Optional[float] = None
    area_max: Optional[float] = None
    locations: tuple[str, ...] = ()

    @classmethod
    def from_requirement(
        cls,
        requirement: Requirement,
        weights: MatchWeights = DEFAULT_WEIGHTS,
        use_locations: bool = False,
    ) -> "CandidateFilter":
        price_tol = weights.price_tolerance_pct
        area_tol = weights.area_tolerance_pct
        area_min = area_max = None
        if requirement.area is not None:
            if requirement.area.lower is not None:
                area_min = requirement.area.lower * (100 - area_tol) / 100
            if requirement.area.upper is not None:
                area_max = requirement.area.upper * (100 + area_tol) / 100

        return cls(
            transaction_type=requirement.transaction_type,
            category=requirement.category,
            price_min=requirement.budget.lower * (100 - price_tol) / 100,
            price_max=requirement.budget.upper * (100 + price_tol) / 100,
            area_min=area_min,
            area_max=area_max,
            locations=tuple(requirement.preferred_areas) if use_locations else (),
        )

    def accepts(self, listing: Property) -> bool:
        """True si la propiedad pasa el filtro grueso."""
        if not listing.is_available:
            return False
        if listing.transaction_type != self.transaction_type:
            return False
        if listing.category != self.category:
            return False

        # Solapamiento del rango de precio con la ventana ampliada
        if listing.price.upper < self.price_min or listing.price.lower > self.price_max:
            return False

        # Superficie desconocida no se descarta
        if listing.area is not None:
            if self.area_min is not None and listing.area < self.area_min:
                return False
            if self.area_max is not None and listing.area > self.area_max:
                return False

        if self.locations:
            place = listing.location.casefold()
            if not any(
                loc.casefold() in place or (place and place in loc.casefold())
                for loc in self.locations
            ):
                return False

        return True


class Catalog(ABC):
    """Fuente de requerimientos y propiedades para el matching."""

    @abstractmethod
    def get_requirement(self, requirement_id: str) -> Optional[Requirement]:
        """Obtiene un requerimiento por ID (None si no existe)."""

    @abstractmethod
    def get_property(self, property_id: str) -> Optional[Property]:
        """Obtiene una propiedad por ID (None si no existe)."""

    @abstractmethod
    def get_active_requirements(self) -> list[Requirement]:
        """Requerimientos con status active."""

    @abstractmethod
    def get_available_properties(self) -> list[Property]:
        """Propiedades con status available."""

    def find_candidate_properties(self, candidate_filter: CandidateFilter) -> list[Property]:
        """
        Propiedades que pasan el filtro grueso.

        Implementación por defecto: filtra en memoria sobre todas las
        disponibles. Los catálogos persistentes pueden delegar parte
        del filtro a la base.
        """
        return [p for p in self.get_available_properties() if candidate_filter.accepts(p)]


class InMemoryCatalog(Catalog):
    """Catálogo en memoria; preserva el orden de inserción."""

    def __init__(
        self,
        properties: Optional[Iterable[Property]] = None,
        requirements: Optional[Iterable[Requirement]] = None,
    ):
        self._properties: dict[str, Property] = {}
        self._requirements: dict[str, Requirement] = {}
        for listing in properties or []:
            self.add_property(listing)
        for requirement in requirements or []:
            self.add_requirement(requirement)

    def add_property(self, listing: Property) -> Property:
        if not listing.id:
            listing = listing.model_copy(update={"id": f"prop-{len(self._properties) + 1}"})
        self._properties[listing.id] = listing
        return listing

    def add_requirement(self, requirement: Requirement) -> Requirement:
        if not requirement.id:
            requirement = requirement.model_copy(
                update={"id": f"req-{len(self._requirements) + 1}"}
            )
        self._requirements[requirement.id] = requirement
        return requirement

    def remove_requirement(self, requirement_id: str) -> None:
        self._requirements.pop(requirement_id, None)

    def get_requirement(self, requirement_id: str) -> Optional[Requirement]:
        return self._requirements.get(requirement_id)

    def get_property(self, property_id: str) -> Optional[Property]:
        return self._properties.get(property_id)

    def get_active_requirements(self) -> list[Requirement]:
        return [r for r in self._requirements.values() if r.is_active]

    def get_available_properties(self) -> list[Property]:
        return [p for p in self._properties.values() if p.is_available]

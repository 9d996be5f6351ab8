"""
Modelos de datos del sistema.

- Property: listing de un inmueble
- Requirement: criterios de búsqueda de un comprador
"""

from realtymatch.models.ranges import NumericRange, PriceRange
from realtymatch.models.property import Property
from realtymatch.models.requirement import Requirement

__all__ = [
    # Rangos
    "NumericRange",
    "PriceRange",
    # Entidades
    "Property",
    "Requirement",
]

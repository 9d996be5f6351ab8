"""
Modelo de Propiedad (listing)

Representa un inmueble disponible para venta o alquiler.
El motor de matching solo lo lee; su ciclo de vida es externo.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from realtymatch.config import (
    BEDROOM_CATEGORIES,
    PROPERTY_CATEGORIES,
    PROPERTY_STATUSES,
    TRANSACTION_TYPES,
)
from realtymatch.models.ranges import PriceRange


# Valores heredados de versiones previas del esquema
_CHOICE_ALIASES = {
    "sale": "buy",
    "sold": "sold_or_rented",
    "rented": "sold_or_rented",
    "under_negotiation": "on_hold",
}


def normalize_choice(value: str, choices: list[str], field: str) -> str:
    """Normaliza un valor categórico ("Sold/Rented" -> "sold_or_rented")."""
    normalized = str(value).strip().lower().replace(" ", "_").replace("/", "_or_")
    normalized = _CHOICE_ALIASES.get(normalized, normalized)
    if normalized not in choices:
        raise ValueError(f"{field} inválido: {value!r} (opciones: {', '.join(choices)})")
    return normalized


class Property(BaseModel):
    """Listing de una propiedad."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = Field(None, description="UUID generado por Supabase")

    # Clasificación
    transaction_type: str = Field(..., description="buy o rent")
    category: str = Field(..., description="residential, commercial, plot, ...")
    subtype: str = Field(default="", description="Texto libre, ej: Flat/Apartment")

    # Precio: un número suelto se convierte en rango [p, p]
    price: PriceRange = Field(..., description="Precio o rango de precio")

    # Características físicas
    area: Optional[float] = Field(None, gt=0, description="Superficie en sq.ft.")
    bhk: Optional[int] = Field(None, ge=0, description="Cantidad de dormitorios")

    # Ubicación
    location: str = Field(default="", description="Localidad como texto libre")

    # Estado
    status: str = Field(default="available", description="available, on_hold, sold_or_rented")

    # Dueño
    owner_name: Optional[str] = Field(None, description="Nombre del dueño")
    owner_phone: Optional[str] = Field(None, description="Teléfono del dueño")

    # Metadatos
    listed_at: Optional[datetime] = Field(None, description="Fecha de publicación")

    @field_validator("transaction_type")
    @classmethod
    def _check_transaction_type(cls, value: str) -> str:
        return normalize_choice(value, TRANSACTION_TYPES, "transaction_type")

    @field_validator("category")
    @classmethod
    def _check_category(cls, value: str) -> str:
        return normalize_choice(value, PROPERTY_CATEGORIES, "category")

    @field_validator("status")
    @classmethod
    def _check_status(cls, value: str) -> str:
        return normalize_choice(value, PROPERTY_STATUSES, "status")

    @property
    def is_available(self) -> bool:
        return self.status == "available"

    @property
    def has_bedrooms(self) -> bool:
        """Las categorías sin dormitorios (ej: plot) no evalúan BHK."""
        return self.category in BEDROOM_CATEGORIES

    @classmethod
    def from_db_row(cls, row: dict) -> "Property":
        """
        Construye una propiedad desde una fila de la tabla properties.

        Las filas legacy con una sola columna price se leen como rango
        [price, price]; solo se acceden por id, el pre-filtro de candidatos
        trabaja sobre price_min/price_max.
        """
        price_min = row.get("price_min")
        if price_min is None:
            price_min = row.get("price")
        price_max = row.get("price_max")
        if price_max is None:
            price_max = row.get("price") if row.get("price") is not None else price_min
        return cls(
            id=row.get("id"),
            transaction_type=row["transaction_type"],
            category=row["property_type"],
            subtype=row.get("property_subtype") or "",
            price=PriceRange(lower=price_min, upper=price_max),
            area=row.get("area"),
            bhk=row.get("bhk"),
            location=row.get("location") or "",
            status=row.get("status") or "available",
            owner_name=row.get("owner_name"),
            owner_phone=row.get("owner_phone"),
            listed_at=row.get("created_at"),
        )

    def to_db_dict(self) -> dict:
        """Convierte a diccionario para inserción en Supabase."""
        return {
            "transaction_type": self.transaction_type,
            "property_type": self.category,
            "property_subtype": self.subtype,
            "price_min": self.price.lower,
            "price_max": self.price.upper,
            "area": self.area,
            "bhk": self.bhk,
            "location": self.location,
            "status": self.status,
            "owner_name": self.owner_name,
            "owner_phone": self.owner_phone,
        }

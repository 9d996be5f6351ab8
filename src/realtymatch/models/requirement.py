"""
Modelo de Requerimiento del comprador

Define los criterios de búsqueda que el staff registra para una
consulta (enquiry): presupuesto obligatorio y criterios opcionales
de superficie, dormitorios y ubicación.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from realtymatch.config import (
    PROPERTY_CATEGORIES,
    REQUIREMENT_STATUSES,
    TRANSACTION_TYPES,
)
from realtymatch.models.property import normalize_choice
from realtymatch.models.ranges import NumericRange, PriceRange


class Requirement(BaseModel):
    """
    Requerimiento de un comprador.

    El presupuesto es obligatorio (ambos extremos). Superficie,
    dormitorios y ubicaciones son opcionales: su ausencia no
    penaliza a ningún candidato.
    """

    model_config = ConfigDict(from_attributes=True)

    # Identificadores
    id: Optional[str] = Field(None, description="UUID generado por Supabase")
    enquiry_id: Optional[str] = Field(None, description="FK a la consulta de origen")

    # Clasificación
    transaction_type: str = Field(..., description="buy o rent")
    category: str = Field(..., description="residential, commercial, plot, ...")
    subtype: str = Field(default="", description="Texto libre, ej: Flat/Apartment")

    # Criterios
    budget: PriceRange = Field(..., description="Presupuesto [min, max]")
    area: Optional[NumericRange] = Field(None, description="Superficie [min, max] en sq.ft.")
    bedrooms: Optional[NumericRange] = Field(None, description="Dormitorios [min, max]")
    preferred_areas: list[str] = Field(
        default_factory=list, description="Localidades aceptables"
    )
    notes: str = Field(default="", description="Notas libres del staff")

    # Estado
    status: str = Field(default="active", description="active, matched o closed")
    created_at: Optional[datetime] = Field(None, description="Fecha de alta")

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
        return normalize_choice(value, REQUIREMENT_STATUSES, "status")

    @field_validator("preferred_areas")
    @classmethod
    def _clean_areas(cls, value: list[str]) -> list[str]:
        return [area.strip() for area in value if area and area.strip()]

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @classmethod
    def from_db_row(cls, row: dict) -> "Requirement":
        """Construye un requerimiento desde una fila de buyer_requirements."""
        area = NumericRange(lower=row.get("area_min"), upper=row.get("area_max"))
        bedrooms = NumericRange(lower=row.get("bhk_min"), upper=row.get("bhk_max"))
        return cls(
            id=row.get("id"),
            enquiry_id=row.get("enquiry_id"),
            transaction_type=row["transaction_type"],
            category=row["property_type"],
            subtype=row.get("property_subtype") or "",
            budget=PriceRange(lower=row["budget_min"], upper=row["budget_max"]),
            area=area if area.is_constrained else None,
            bedrooms=bedrooms if bedrooms.is_constrained else None,
            preferred_areas=row.get("preferred_areas") or [],
            notes=row.get("notes") or "",
            status=row.get("status") or "active",
            created_at=row.get("created_at"),
        )

    def to_db_dict(self) -> dict:
        """Convierte a diccionario para inserción en Supabase."""
        area = self.area or NumericRange()
        bedrooms = self.bedrooms or NumericRange()
        return {
            "enquiry_id": self.enquiry_id,
            "transaction_type": self.transaction_type,
            "property_type": self.category,
            "property_subtype": self.subtype,
            "budget_min": self.budget.lower,
            "budget_max": self.budget.upper,
            "area_min": area.lower,
            "area_max": area.upper,
            "bhk_min": bedrooms.lower,
            "bhk_max": bedrooms.upper,
            "preferred_areas": self.preferred_areas,
            "notes": self.notes,
            "status": self.status,
        }

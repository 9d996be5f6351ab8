"""
Rangos numéricos cerrados.

Un precio único se representa como un rango degenerado [p, p],
lo que unifica listings con precio fijo y con rango de precio.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NumericRange(BaseModel):
    """Rango [lower, upper] con extremos opcionales (abiertos si son None)."""

    model_config = ConfigDict(frozen=True)

    lower: Optional[float] = Field(None, ge=0, description="Extremo inferior")
    upper: Optional[float] = Field(None, ge=0, description="Extremo superior")

    @model_validator(mode="after")
    def _check_order(self) -> "NumericRange":
        if self.lower is not None and self.upper is not None and self.upper < self.lower:
            raise ValueError(
                f"El extremo superior ({self.upper}) es menor que el inferior ({self.lower})"
            )
        return self

    @property
    def is_constrained(self) -> bool:
        """True si al menos un extremo está definido."""
        return self.lower is not None or self.upper is not None

    @property
    def is_bounded(self) -> bool:
        """True si ambos extremos están definidos."""
        return self.lower is not None and self.upper is not None

    @property
    def midpoint(self) -> Optional[float]:
        if not self.is_bounded:
            return None
        return (self.lower + self.upper) / 2

    @property
    def width(self) -> Optional[float]:
        if not self.is_bounded:
            return None
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value > self.upper:
            return False
        return True


class PriceRange(NumericRange):
    """Rango de precio/presupuesto: ambos extremos son obligatorios."""

    lower: float = Field(..., ge=0, description="Precio mínimo")
    upper: float = Field(..., ge=0, description="Precio máximo")

    @model_validator(mode="before")
    @classmethod
    def _from_single_price(cls, value):
        # Un número suelto es un precio único
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return {"lower": value, "upper": value}
        return value

    @classmethod
    def single(cls, price: float) -> "PriceRange":
        return cls(lower=price, upper=price)

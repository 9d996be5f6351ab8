"""
Tabla de pesos del matching.

Única fuente de verdad para los puntos de cada criterio, las bandas
de tolerancia y los pisos/valores neutros. Se pasa explícitamente al
scoring para poder ajustar y testear sin tocar código.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MatchWeights(BaseModel):
    """Pesos del scoring aditivo (sobre 100, con clamp final)."""

    model_config = ConfigDict(frozen=True)

    # Criterios base
    transaction: int = Field(20, ge=0, description="Coincidencia de buy/rent")
    category: int = Field(15, ge=0, description="Coincidencia de categoría")
    subtype: int = Field(10, ge=0, description="Bonus por subtipo exacto")

    # Precio
    price_max: int = Field(30, ge=0, description="Precio en el centro del presupuesto")
    price_floor: int = Field(20, ge=0, description="Precio en el borde del presupuesto")
    price_over_band: int = Field(15, ge=0, description="Hasta N% por encima del máximo")
    price_under_band: int = Field(10, ge=0, description="Hasta N% por debajo del mínimo")
    price_tolerance_pct: int = Field(10, ge=0, le=100, description="Banda de tolerancia de precio")
    sweet_spot_ratio: float = Field(
        0.5, ge=0, le=1, description="Fracción central del rango que cuenta como precio ideal"
    )

    # Superficie
    area_max: int = Field(20, ge=0, description="Superficie en el centro del rango")
    area_floor: int = Field(15, ge=0, description="Superficie en el borde del rango")
    area_band: int = Field(10, ge=0, description="Hasta N% fuera de cualquiera de los bordes")
    area_neutral: int = Field(10, ge=0, description="Sin restricción de superficie")
    area_tolerance_pct: int = Field(15, ge=0, le=100, description="Banda de tolerancia de superficie")

    # Ubicación
    location_exact: int = Field(20, ge=0, description="Localidad idéntica")
    location_partial: int = Field(15, ge=0, description="Localidad contenida en la otra")
    location_floor: int = Field(5, ge=0, description="Hay preferencias pero ninguna coincide")
    location_neutral: int = Field(10, ge=0, description="Sin preferencias de ubicación")

    # Dormitorios
    bedrooms: int = Field(15, ge=0, description="BHK dentro del rango pedido")

    @model_validator(mode="after")
    def _check_floors(self) -> "MatchWeights":
        if self.price_floor > self.price_max:
            raise ValueError("price_floor no puede superar price_max")
        if self.area_floor > self.area_max:
            raise ValueError("area_floor no puede superar area_max")
        return self


DEFAULT_WEIGHTS = MatchWeights()

"""Jerarquía de excepciones de realtymatch."""


class RealtyMatchError(Exception):
    """Excepción base de realtymatch."""


class NotFoundError(RealtyMatchError):
    """Un requerimiento o propiedad no existe en el catálogo."""

    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")


class InvalidInputError(RealtyMatchError):
    """Parámetros inválidos en modo estricto."""


class CatalogError(RealtyMatchError):
    """Falla en la capa de almacenamiento del catálogo."""


class ConfigurationError(RealtyMatchError):
    """Configuración faltante o inválida."""

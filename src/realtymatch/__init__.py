"""
RealtyMatch: matching de requerimientos de compradores con listings.
"""

__version__ = "0.1.0"

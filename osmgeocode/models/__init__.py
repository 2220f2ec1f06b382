"""
Modelos de datos para osmgeocode.
"""

from .address import GeocodeAddress
from .result import GeocodeResult
from .response import GeocodeResponse

__all__ = ["GeocodeAddress", "GeocodeResult", "GeocodeResponse"]

"""
Plate-Type Catalog
Which plate types a vehicle may be issued, by vehicle type and model year
"""
import re
from types import MappingProxyType
from typing import List, Optional

import config


class PlateType:
    """Plate type name constants"""
    PRIVATE = "Private"
    FOR_HIRE = "For Hire"
    PUBLIC_UTILITY = "PublicUtility"
    GOVERNMENT = "Government"
    DIPLOMATIC = "Diplomatic"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"
    TRAILER = "Trailer"
    VINTAGE = "Vintage"
    MOTORCYCLE = "Motorcycle"
    TRICYCLE = "Tricycle"


class VehicleType:
    """Vehicle types that carry their own plate rules"""
    TWO_WHEEL = "2-Wheel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"
    TRAILER = "Trailer"
    VINTAGE = "Vintage"


DEFAULT_KEY = "default"

_GENERAL = (PlateType.PRIVATE, PlateType.FOR_HIRE, PlateType.GOVERNMENT, PlateType.DIPLOMATIC)

PLATE_TYPES_BY_VEHICLE = MappingProxyType({
    VehicleType.TWO_WHEEL: (PlateType.MOTORCYCLE, PlateType.TRICYCLE),
    VehicleType.ELECTRIC: _GENERAL + (PlateType.ELECTRIC,),
    VehicleType.HYBRID: _GENERAL + (PlateType.HYBRID,),
    VehicleType.TRAILER: _GENERAL + (PlateType.TRAILER,),
    VehicleType.VINTAGE: _GENERAL + (PlateType.VINTAGE,),
    DEFAULT_KEY: _GENERAL + (
        PlateType.ELECTRIC,
        PlateType.HYBRID,
        PlateType.TRAILER,
        PlateType.VINTAGE,
    ),
})

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)', re.ASCII)


def parse_year(year) -> Optional[int]:
    """
    Read a model year the lenient way form inputs deliver it

    Leading digits are used and trailing text is ignored ("1975 model" -> 1975).
    Returns None when no number can be read.
    """
    if year is None or isinstance(year, bool):
        return None
    if isinstance(year, int):
        return year
    match = _LEADING_INT.match(str(year))
    if not match:
        return None
    return int(match.group(1))


def is_vintage_year(year) -> bool:
    parsed = parse_year(year)
    return parsed is not None and parsed < config.VINTAGE_CUTOFF_YEAR


def allowed_plate_types(vehicle_type: str, year=None) -> List[str]:
    """
    Get the plate types a vehicle may be issued

    Args:
        vehicle_type: Vehicle type, e.g. "Sedan" or "2-Wheel"
        year: Optional model year; anything before the vintage cutoff
              gets the Vintage set regardless of vehicle type

    Returns:
        list: Plate type names in display order (a fresh list each call)
    """
    if is_vintage_year(year):
        return list(PLATE_TYPES_BY_VEHICLE[VehicleType.VINTAGE])
    return list(PLATE_TYPES_BY_VEHICLE.get(vehicle_type, PLATE_TYPES_BY_VEHICLE[DEFAULT_KEY]))


def default_plate_type(vehicle_type: str) -> str:
    """Plate type preselected for a new registration"""
    if vehicle_type == VehicleType.TWO_WHEEL:
        return PlateType.MOTORCYCLE
    return PlateType.PRIVATE

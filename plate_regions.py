"""
Region Table
Maps issuing regions to the single-letter prefix that starts a plate number
"""
import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple

import config

logger = logging.getLogger(__name__)


class Region(NamedTuple):
    """An issuing region and its plate prefix"""
    code: str
    prefix_letter: str
    display_name: str


# Prefixes skip I, O and Q so they cannot be misread as 1 / 0
PREFIX_ALPHABET = 'ABCDEFGHJKLMNPRS'

REGIONS = (
    Region('NCR', 'A', 'National Capital Region'),
    Region('CALABARZON', 'B', 'CALABARZON (Region 4A)'),
    Region('CENTRAL_LUZON', 'C', 'Central Luzon (Region 3)'),
    Region('WESTERN_VISAYAS', 'D', 'Western Visayas (Region 6)'),
    Region('CENTRAL_VISAYAS', 'E', 'Central Visayas (Region 7)'),
    Region('EASTERN_VISAYAS', 'F', 'Eastern Visayas (Region 8)'),
    Region('NORTHERN_MINDANAO', 'G', 'Northern Mindanao (Region 10)'),
    Region('SOUTHERN_MINDANAO', 'H', 'Davao Region (Region 11)'),
    Region('CAR', 'J', 'Cordillera Administrative Region'),
    Region('CARAGA', 'K', 'CARAGA (Region 13)'),
    Region('BICOL', 'L', 'Bicol Region (Region 5)'),
    Region('ILOCOS', 'M', 'Ilocos Region (Region 1)'),
    Region('MIMAROPA', 'N', 'MIMAROPA (Region 4B)'),
    Region('SOCCSKSARGEN', 'P', 'SOCCSKSARGEN (Region 12)'),
    Region('ZAMBOANGA', 'R', 'Zamboanga Peninsula (Region 9)'),
    Region('BARMM', 'S', 'Bangsamoro Autonomous Region in Muslim Mindanao'),
)


def _build_tables(regions) -> Tuple[Mapping[str, Region], Mapping[str, str]]:
    by_code: Dict[str, Region] = {}
    by_prefix: Dict[str, str] = {}
    for region in regions:
        if region.prefix_letter not in PREFIX_ALPHABET:
            raise ValueError(f"Region {region.code} uses illegal prefix {region.prefix_letter!r}")
        if region.prefix_letter in by_prefix:
            raise ValueError(
                f"Prefix {region.prefix_letter!r} shared by {by_prefix[region.prefix_letter]} and {region.code}"
            )
        by_code[region.code] = region
        by_prefix[region.prefix_letter] = region.code
    return MappingProxyType(by_code), MappingProxyType(by_prefix)


_REGIONS_BY_CODE, _CODES_BY_PREFIX = _build_tables(REGIONS)

if config.DEFAULT_REGION in _REGIONS_BY_CODE:
    DEFAULT_REGION = config.DEFAULT_REGION
else:
    logger.warning(f"Unknown PLATE_DEFAULT_REGION {config.DEFAULT_REGION!r}, falling back to NCR")
    DEFAULT_REGION = 'NCR'


def get_region(code: str) -> Optional[Region]:
    """Look up a region by code, None if it is not defined"""
    return _REGIONS_BY_CODE.get(code)


def region_prefix(code: str) -> str:
    """
    Get the plate prefix letter for a region

    Unknown codes resolve to the default region's prefix.
    """
    region = _REGIONS_BY_CODE.get(code) or _REGIONS_BY_CODE[DEFAULT_REGION]
    return region.prefix_letter


def region_for_prefix(value: str) -> str:
    """
    Decode the region from a prefix letter or a full plate number

    Only the first character is read. Anything that is not a known
    uppercase prefix resolves to the default region.
    """
    if not value or not ('A' <= value[0] <= 'Z'):
        return DEFAULT_REGION
    return _CODES_BY_PREFIX.get(value[0], DEFAULT_REGION)


def region_list() -> List[Dict[str, str]]:
    """Regions for a dropdown, in table order"""
    return [{'code': r.code, 'displayName': r.display_name} for r in REGIONS]

"""
Plate Number Generator
Generates candidate plate numbers by vehicle type, plate type and region

Formats:
    LLL NNNN      standard (first letter = region prefix)
    LLTX NNNN     vintage (TX/TY/TZ suffix)
    CCC-NNNN      diplomatic (country code)
    L-NNN         motorcycle
    LL-NNNNN      motorcycle

Usage:
    python plate_generator.py
    python plate_generator.py --vehicle-type 2-Wheel --count 5
    python plate_generator.py --plate-type Electric --region CENTRAL_VISAYAS --seed 42
"""
import argparse
import logging
import random
from typing import Optional

import config
from plate_catalog import PlateType, VehicleType, allowed_plate_types
from plate_regions import DEFAULT_REGION, region_list, region_prefix
from plate_validator import PlateIssuanceRecord, validate_plate

logger = logging.getLogger(__name__)


class PlateNumberGenerator:
    """Generate plate numbers following per plate type letter rules"""

    # Latin alphabet without I, O and Q
    LETTERS = 'ABCDEFGHJKLMNPRSTUVWXYZ'
    ELECTRIC_SERIES = 'ABCDEFGHJKLM'
    HYBRID_SERIES = 'NPRSTUVWXYZ'
    GREEN_SUFFIX = 'VWXYZ'
    VINTAGE_SUFFIXES = ('TX', 'TY', 'TZ')
    DIPLOMATIC_COUNTRIES = ('USA', 'JPN', 'KOR', 'CHN', 'GBR', 'AUS')

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source to draw from (pass a seeded random.Random
                 for reproducible plates); a fresh one is created otherwise
        """
        self.rng = rng or random.Random()

    def _letter(self, pool: str = LETTERS) -> str:
        return self.rng.choice(pool)

    def _sequence(self) -> int:
        return self.rng.randint(1000, 9999)

    def _motorcycle(self, prefix: str) -> str:
        number = self._sequence()
        if self.rng.random() > 0.5:
            return f"{prefix}-{str(number)[:3]}"
        return f"{prefix}{self._letter()}-{self.rng.randint(10000, 99999)}"

    def _series(self, plate_type: str):
        """Second and third components of a four-wheeler plate"""
        if plate_type == PlateType.GOVERNMENT:
            return 'S', self._letter()
        if plate_type == PlateType.ELECTRIC:
            return self._letter(self.ELECTRIC_SERIES), self._letter(self.GREEN_SUFFIX)
        if plate_type == PlateType.HYBRID:
            return self._letter(self.HYBRID_SERIES), self._letter(self.GREEN_SUFFIX)
        if plate_type == PlateType.TRAILER:
            return 'U', self._letter()
        if plate_type == PlateType.VINTAGE:
            return self._letter(), self.rng.choice(self.VINTAGE_SUFFIXES)
        # Private, For Hire, PublicUtility and anything unrecognized
        return self._letter(), self._letter()

    def generate(self, vehicle_type: str, plate_type: str = PlateType.PRIVATE,
                 region: str = DEFAULT_REGION) -> str:
        """
        Generate a plate number

        Never fails: unknown regions use the default region prefix and
        unknown plate types use the private plate rules. No check is made
        against plates that were already issued.

        Args:
            vehicle_type: Vehicle type ("2-Wheel" gives a motorcycle plate)
            plate_type: Plate type name
            region: Region code

        Returns:
            str: Plate number (e.g. "ABC 1234", "USA-1234", "A-123")
        """
        prefix = region_prefix(region)

        if vehicle_type == VehicleType.TWO_WHEEL:
            plate = self._motorcycle(prefix)
        elif plate_type == PlateType.DIPLOMATIC:
            plate = f"{self.rng.choice(self.DIPLOMATIC_COUNTRIES)}-{self._sequence()}"
        else:
            second, third = self._series(plate_type)
            plate = f"{prefix}{second}{third} {self._sequence()}"

        logger.debug(f"Generated {plate} for {vehicle_type}/{plate_type}/{region}")
        return plate


_default_generator = PlateNumberGenerator(
    random.Random(config.RANDOM_SEED) if config.RANDOM_SEED is not None else None
)


def generate_plate_number(vehicle_type: str, plate_type: str = PlateType.PRIVATE,
                          region: str = DEFAULT_REGION,
                          rng: Optional[random.Random] = None) -> str:
    """Generate a plate number with the shared generator, or with rng if given"""
    generator = PlateNumberGenerator(rng) if rng is not None else _default_generator
    return generator.generate(vehicle_type, plate_type, region)


def main(argv=None):
    """Print sample plates with their validation status"""
    parser = argparse.ArgumentParser(description='Plate number generator')
    parser.add_argument('--vehicle-type', default='Sedan', help='Vehicle type (e.g. Sedan, 2-Wheel)')
    parser.add_argument('--plate-type', default=None, help='Plate type (default: all allowed types)')
    parser.add_argument('--region', default=DEFAULT_REGION, help='Region code')
    parser.add_argument('--count', type=int, default=3, help='Plates per plate type')
    parser.add_argument('--year', default=None, help='Model year (before 1980 is vintage)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--list-regions', action='store_true', help='Print the region table and exit')
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))

    if args.list_regions:
        for region in region_list():
            print(f"{region_prefix(region['code'])}  {region['code']:20s} {region['displayName']}")
        return 0

    generator = PlateNumberGenerator(random.Random(args.seed) if args.seed is not None else None)
    plate_types = allowed_plate_types(args.vehicle_type, args.year)

    print("=" * 70)
    print(f"PLATE NUMBERS: {args.vehicle_type} / {args.region}")
    print(f"Allowed plate types: {', '.join(plate_types)}")
    print("=" * 70)

    for plate_type in ([args.plate_type] if args.plate_type else plate_types):
        print(f"\n{plate_type}:")
        for _ in range(args.count):
            plate = generator.generate(args.vehicle_type, plate_type, args.region)
            record = PlateIssuanceRecord(plate, plate_type, args.region, '2024-01-01', '2027-01-01')
            result = validate_plate(record, args.vehicle_type)
            status = "VALID" if result.is_valid else f"INVALID ({'; '.join(result.errors.values())})"
            print(f"  {plate:12s} -> {status}")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

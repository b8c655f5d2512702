"""
Candidate plate workflow
Holds the plate offered during registration, throttles regeneration per
region and turns the accepted candidate into an issuance record
"""
import logging
from datetime import date
from typing import Optional

from plate_catalog import PlateType
from plate_generator import PlateNumberGenerator, generate_plate_number
from plate_regions import DEFAULT_REGION
from plate_validator import DateLike, PlateIssuanceRecord, PlateValidationResult, validate_plate

logger = logging.getLogger(__name__)


class PlateError(Exception):
    """Base error for the candidate workflow"""


class NoCandidateError(PlateError):
    """Raised when a record is requested before any plate was generated"""


class PlateValidationError(PlateError):
    """Raised when an issuance record does not pass validation"""

    def __init__(self, result: PlateValidationResult):
        self.result = result
        super().__init__('; '.join(f"{field}: {message}" for field, message in result.errors.items()))


class PlateCandidate:
    """A generated plate number that has not been issued yet"""

    def __init__(self, plate_number: str, vehicle_type: str, plate_type: str, region: str):
        self.plate_number = plate_number
        self.vehicle_type = vehicle_type
        self.plate_type = plate_type
        self.region = region

    def to_dict(self) -> dict:
        return {
            'plateNumber': self.plate_number,
            'vehicleType': self.vehicle_type,
            'plateType': self.plate_type,
            'region': self.region,
        }

    def __repr__(self):
        return f"PlateCandidate({self.plate_number!r}, {self.vehicle_type!r}, {self.plate_type!r}, {self.region!r})"


class PlateCandidateSession:
    """
    Caller-side state of one registration's plate step

    A new candidate is only produced when the selected region differs from
    the region of the last one. This limits rerolling in the form; it does
    not make plates unique.
    """

    def __init__(self, generator: Optional[PlateNumberGenerator] = None):
        self.generator = generator
        self.current: Optional[PlateCandidate] = None
        self.last_region: Optional[str] = None
        self.generated_once = False

    def _generate(self, vehicle_type: str, plate_type: str, region: str) -> str:
        if self.generator is not None:
            return self.generator.generate(vehicle_type, plate_type, region)
        return generate_plate_number(vehicle_type, plate_type, region)

    def can_generate(self, region: str) -> bool:
        return not self.generated_once or region != self.last_region

    def request(self, vehicle_type: str, plate_type: str, region: str) -> Optional[PlateCandidate]:
        """
        Generate a candidate for the selected region

        Returns:
            PlateCandidate: the new candidate, or None if one was already
            generated for this region (the current candidate is kept)
        """
        if not self.can_generate(region):
            logger.info(f"Plate already generated for region {region}, keeping {self.current.plate_number}")
            return None

        plate_number = self._generate(vehicle_type, plate_type, region)
        self.current = PlateCandidate(plate_number, vehicle_type, plate_type, region)
        self.last_region = region
        self.generated_once = True
        return self.current

    def reset(self):
        """Forget the current candidate so the next request generates again"""
        self.current = None
        self.last_region = None
        self.generated_once = False

    def build_record(self, plate_issue_date: DateLike = None,
                     plate_expiration_date: DateLike = None) -> PlateIssuanceRecord:
        """
        Build the issuance record for the current candidate

        The issue date defaults to today.

        Raises:
            NoCandidateError: if no plate has been generated yet
        """
        if self.current is None:
            raise NoCandidateError("No plate number has been generated")

        return PlateIssuanceRecord(
            plate_number=self.current.plate_number,
            plate_type=self.current.plate_type or PlateType.PRIVATE,
            region=self.current.region or DEFAULT_REGION,
            plate_issue_date=plate_issue_date or date.today().isoformat(),
            plate_expiration_date=plate_expiration_date,
        )

    def issue(self, plate_issue_date: DateLike = None,
              plate_expiration_date: DateLike = None) -> PlateIssuanceRecord:
        """
        Build and validate the issuance record for the current candidate

        Raises:
            NoCandidateError: if no plate has been generated yet
            PlateValidationError: if the record does not validate
        """
        record = self.build_record(plate_issue_date, plate_expiration_date)
        result = validate_plate(record, self.current.vehicle_type)
        if not result.is_valid:
            raise PlateValidationError(result)

        logger.info(f"Plate {record.plate_number} ready for issue ({record.plate_type}, {record.region})")
        return record

"""
Plate Validator
Checks a plate issuance record before it is handed to persistence
"""
import re
from datetime import date, datetime, timezone
from typing import Dict, Mapping, Optional, Union

from plate_catalog import PlateType, VehicleType
from plate_regions import region_for_prefix

MOTORCYCLE_PATTERN = re.compile(r'^[A-Z]-\d{3}$|^[A-Z]{2}-\d{5}$', re.ASCII)
DIPLOMATIC_PATTERN = re.compile(r'^[A-Z]{3}-\d{4}$', re.ASCII)
# Whitespace as JavaScript's \s defines it (includes no-break spaces)
JS_WHITESPACE = '[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]'
# Vintage plates (e.g. "ABTX 1234") do not pass this pattern
STANDARD_PATTERN = re.compile(r'^[A-Z]{3}' + JS_WHITESPACE + r'[0-9]{4}$')

DateLike = Union[str, date, datetime, None]


class PlateIssuanceRecord:
    """A filled-in plate issuance form"""

    def __init__(self, plate_number: str = '', plate_type: str = '', region: str = '',
                 plate_issue_date: DateLike = None, plate_expiration_date: DateLike = None):
        self.plate_number = plate_number
        self.plate_type = plate_type
        self.region = region
        self.plate_issue_date = plate_issue_date
        self.plate_expiration_date = plate_expiration_date

    @classmethod
    def from_dict(cls, data: Mapping) -> 'PlateIssuanceRecord':
        """Build from a camelCase (form) or snake_case (API) mapping"""
        def pick(camel, snake):
            value = data.get(camel)
            return value if value is not None else data.get(snake)

        return cls(
            plate_number=pick('plateNumber', 'plate_number') or '',
            plate_type=pick('plateType', 'plate_type') or '',
            region=pick('region', 'region') or '',
            plate_issue_date=pick('plateIssueDate', 'plate_issue_date'),
            plate_expiration_date=pick('plateExpirationDate', 'plate_expiration_date'),
        )

    def to_dict(self) -> dict:
        """Convert to the snake_case shape the plates API expects"""
        return {
            'plate_number': self.plate_number,
            'plate_type': self.plate_type,
            'region': self.region,
            'plate_issue_date': _isoformat(self.plate_issue_date),
            'plate_expiration_date': _isoformat(self.plate_expiration_date),
        }

    def __repr__(self):
        return (f"PlateIssuanceRecord(plate_number={self.plate_number!r}, plate_type={self.plate_type!r}, "
                f"region={self.region!r}, plate_issue_date={self.plate_issue_date!r}, "
                f"plate_expiration_date={self.plate_expiration_date!r})")


class PlateValidationResult:
    """Outcome of validate_plate: aggregate flag plus per-field messages"""

    def __init__(self, errors: Optional[Dict[str, str]] = None):
        self.errors: Dict[str, str] = dict(errors or {})

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {'isValid': self.is_valid, 'errors': dict(self.errors)}

    def __bool__(self):
        return self.is_valid

    def __repr__(self):
        return f"PlateValidationResult(is_valid={self.is_valid}, errors={self.errors!r})"


def _isoformat(value: DateLike) -> Optional[str]:
    if value is None or value == '':
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _to_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _parse_date(value: DateLike) -> Optional[datetime]:
    """Parse an ISO date/datetime; None if it cannot be read"""
    if isinstance(value, datetime):
        return _to_utc_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return _to_utc_naive(datetime.fromisoformat(str(value).strip()))
    except ValueError:
        return None


def _is_blank(value) -> bool:
    return value is None or value == ''


def _plate_number_error(plate_number: str, plate_type: str, vehicle_type: str) -> Optional[str]:
    if vehicle_type == VehicleType.TWO_WHEEL:
        if not MOTORCYCLE_PATTERN.fullmatch(plate_number):
            return 'Motorcycle plate numbers must follow the format: X-NNN or XX-NNNNN'
    elif plate_type == PlateType.DIPLOMATIC:
        if not DIPLOMATIC_PATTERN.fullmatch(plate_number):
            return 'Diplomatic plates must follow the format DDD-NNNN'
    elif not STANDARD_PATTERN.fullmatch(plate_number):
        return 'Plate numbers must follow the format LLL NNNN'
    return None


def validate_plate(record: Union[PlateIssuanceRecord, Mapping], vehicle_type: str) -> PlateValidationResult:
    """
    Validate a plate issuance record

    Every field is checked and all problems are reported; nothing is raised.

    Args:
        record: PlateIssuanceRecord or a mapping with the form fields
        vehicle_type: Vehicle type of the registration ("2-Wheel" switches
                      to motorcycle plate formats)

    Returns:
        PlateValidationResult: is_valid and a field -> message map
    """
    if not isinstance(record, PlateIssuanceRecord):
        record = PlateIssuanceRecord.from_dict(record or {})

    errors: Dict[str, str] = {}

    if _is_blank(record.plate_number):
        errors['plateNumber'] = 'Plate number is required'
    else:
        message = _plate_number_error(str(record.plate_number), record.plate_type, vehicle_type)
        if message:
            errors['plateNumber'] = message

    if _is_blank(record.plate_type):
        errors['plateType'] = 'Plate type is required'

    if _is_blank(record.region):
        errors['region'] = 'Region is required'

    issue_date = None
    if _is_blank(record.plate_issue_date):
        errors['plateIssueDate'] = 'Issue date is required'
    else:
        issue_date = _parse_date(record.plate_issue_date)
        if issue_date is None:
            errors['plateIssueDate'] = 'Issue date must be a valid date (YYYY-MM-DD)'

    if _is_blank(record.plate_expiration_date):
        errors['plateExpirationDate'] = 'Expiration date is required'
    else:
        expiration_date = _parse_date(record.plate_expiration_date)
        if expiration_date is None:
            errors['plateExpirationDate'] = 'Expiration date must be a valid date (YYYY-MM-DD)'
        elif issue_date is not None and expiration_date <= issue_date:
            errors['plateExpirationDate'] = 'Expiration date must be after issue date'

    return PlateValidationResult(errors)


def parse_plate_number(plate: str, vehicle_type: Optional[str] = None,
                       plate_type: Optional[str] = None) -> Optional[Dict[str, str]]:
    """
    Parse a plate number into its components

    Args:
        plate: Plate number string
        vehicle_type: Vehicle type the plate belongs to
        plate_type: Plate type the plate belongs to

    Returns:
        dict: region, series and sequence (country for diplomatic plates)
              or None if the plate does not pass validation for its context
    """
    if not plate or _plate_number_error(plate, plate_type or '', vehicle_type or ''):
        return None

    if plate_type == PlateType.DIPLOMATIC and vehicle_type != VehicleType.TWO_WHEEL:
        country, sequence = plate.split('-')
        return {'country': country, 'sequence': sequence}

    if vehicle_type == VehicleType.TWO_WHEEL:
        letters, sequence = plate.split('-')
    else:
        letters, sequence = re.split(JS_WHITESPACE, plate, maxsplit=1)
    return {
        'region': region_for_prefix(letters),
        'prefix': letters[0],
        'series': letters[1:],
        'sequence': sequence,
    }

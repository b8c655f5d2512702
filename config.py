"""
Configuration for the plate number module
Values are read once from the environment (and an optional .env file)
"""
import os
import logging
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


# Region used when a caller passes an unknown region code
DEFAULT_REGION = os.getenv('PLATE_DEFAULT_REGION', 'NCR').strip().upper() or 'NCR'

# Vehicles with a model year below this get the Vintage plate types
VINTAGE_CUTOFF_YEAR = _int_from_env('PLATE_VINTAGE_CUTOFF_YEAR', 1980)

# Seed for the shared generator (None = system entropy)
RANDOM_SEED = _int_from_env('PLATE_RANDOM_SEED', None)

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

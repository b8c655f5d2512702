"""Pytest configuration and fixtures for plate number tests."""
import pytest
import os
import random
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from plate_generator import PlateNumberGenerator


@pytest.fixture
def rng():
    """Seeded random source so generated plates are reproducible."""
    return random.Random(20240101)


@pytest.fixture
def generator(rng):
    """Plate generator drawing from the seeded random source."""
    return PlateNumberGenerator(rng)


@pytest.fixture
def valid_record():
    """A fully valid standard plate issuance record."""
    return {
        "plateNumber": "ABC 1234",
        "plateType": "Private",
        "region": "NCR",
        "plateIssueDate": "2024-01-01",
        "plateExpirationDate": "2027-01-01",
    }

"""
Shared fixtures for the Provider Directory test suite.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from directory.records import Location, RecordStore
from state_backends import MemoryQueryStore
from tests.factories import make_record


@pytest.fixture
def ana_and_ben():
    """The two-record set used throughout the listing scenarios."""
    return [
        make_record("Ana", fees=500, experience_years=3, mode="video", categories=["Cardio"]),
        make_record("Ben", fees=300, experience_years=10, mode="in-clinic", categories=["Cardio", "Derm"]),
    ]


@pytest.fixture
def providers():
    """A larger record set with ties on fees and experience."""
    return [
        make_record("Dr. Anita Rao", fees=500, experience_years=12, mode="video",
                    categories=["Dentist", "Orthodontist"], location=Location("Koramangala", "Bangalore")),
        make_record("Dr. Brian Shah", fees=300, experience_years=5, mode="in-clinic",
                    categories=["Dentist"]),
        make_record("Dr. Chitra Iyer", fees=500, experience_years=5, mode="video",
                    categories=["General Physician"]),
        make_record("Dr. Dev Anand", fees=800, experience_years=20, mode="in-clinic",
                    categories=["Dentist", "Orthodontist", "Surgeon"]),
        make_record("Dr. Esha Patel", fees=300, experience_years=12, mode=None, categories=()),
    ]


@pytest.fixture
def raw_payload():
    """Entries shaped like the mock provider API response."""
    return [
        {
            "id": "111",
            "name": "Dr. Anita Rao",
            "photo": "https://example.org/anita.jpg",
            "specialities": [{"name": "Dentist"}, {"name": "Orthodontist"}],
            "fees": "₹ 500",
            "experience": "13 Years of experience",
            "video_consult": True,
            "in_clinic": False,
            "clinic": {"name": "Smile Care", "address": {"locality": "Koramangala", "city": "Bangalore"}},
        },
        {
            "id": 112,
            "name": "Dr. Brian Shah",
            "specialties": ["General Physician"],
            "fees": 300,
            "experienceYears": 7,
            "mode": "in-clinic",
        },
    ]


@pytest.fixture
def record_store(providers):
    store = RecordStore()
    store.load(providers)
    return store


@pytest.fixture
def memory_store():
    return MemoryQueryStore()

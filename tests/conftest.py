# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and data for calculators and APIs

REFERENCE VALUES (bundled 2025-26 Scale of Values):
- Jumps:     3Lz 5.90, 3F 5.30, 3T 4.20, 2Lz 2.10, 2Lo 1.70, 2T 1.30, 2A 3.30, 1Eu 0.50
- Spins:     FCCoSp4 3.50, FCSp3 2.80, CSp3 2.30, CLSp4 3.20
- Sequences: StSq4 3.90, StSq3 3.30, ChSq1 3.00
"""

import json

import pytest
from fastapi.testclient import TestClient

from skatescore.config import DEFAULT_SOV_PATH
from skatescore.main import app
from skatescore.scoring.element_calculator import ElementCalculator
from skatescore.scoring.sov import ScaleOfValues


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SCALE OF VALUES FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def sov():
    """The bundled Scale of Values."""
    return ScaleOfValues.load(DEFAULT_SOV_PATH)


@pytest.fixture
def calc(sov):
    """Element calculator over the bundled table."""
    return ElementCalculator(sov)


@pytest.fixture
def write_sov(tmp_path):
    """Write a custom SOV document and return its path."""
    def _write(document, name="sov.json"):
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write


# =============================================================================
# ELEMENT PAYLOAD FIXTURES
# =============================================================================

@pytest.fixture
def lutz_toe_combo_payload():
    """3Lz+3T with GOE +2."""
    return {
        "parts": [
            {"type": "jump", "name": "Lz", "lod": "3"},
            {"type": "jump", "name": "T", "lod": "3"},
        ],
        "goe": 2,
        "bonus": False,
    }


@pytest.fixture
def flying_combo_spin_payload():
    """FCCoSp4 with GOE +3."""
    return {
        "parts": [
            {"type": "spin", "name": "CoSp", "lod": "4", "fly": True, "cof": True},
        ],
        "goe": 3,
    }


@pytest.fixture
def program_payload(lutz_toe_combo_payload, flying_combo_spin_payload):
    """Three-element program, mixed structured and notation rows."""
    return {
        "elements": [
            lutz_toe_combo_payload,
            flying_combo_spin_payload,
            {"notation": "StSq4", "goe": 4},
        ],
        "components": {
            "skating_skills": 8.0,
            "transitions": 8.0,
            "performance": 8.0,
            "composition": 8.0,
            "interpretation": 8.0,
        },
        "pcs_factor": 1.67,
        "deductions": -1.0,
    }

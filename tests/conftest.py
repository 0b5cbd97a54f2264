"""Pytest fixtures for dailycal tests."""

from __future__ import annotations

import pytest

from dailycal.config import settings as settings_module
from dailycal.config.settings import Settings
from dailycal.profiles import ActivityLevel, BiometricInput, Sex


@pytest.fixture(autouse=True)
def default_settings():
    """Use default settings instead of the user's ~/.dailycal/config.yaml."""
    previous = settings_module._settings
    settings_module._settings = Settings()
    yield settings_module._settings
    settings_module._settings = previous


@pytest.fixture
def male_input() -> BiometricInput:
    """25 year old male, 70 kg, 175 cm."""
    return BiometricInput(sex=Sex.MALE, age_years=25, weight_kg=70, height_cm=175)


@pytest.fixture
def female_input() -> BiometricInput:
    """30 year old female, 60 kg, 165 cm."""
    return BiometricInput(sex=Sex.FEMALE, age_years=30, weight_kg=60, height_cm=165)


@pytest.fixture
def raw_male() -> dict:
    """Raw form-style inputs for the male fixture, moderately active."""
    return {
        "sex": "male",
        "age_years": "25",
        "weight_kg": "70",
        "height_cm": "175",
        "activity": "1.55",
    }


@pytest.fixture
def moderate() -> ActivityLevel:
    return ActivityLevel.MODERATELY_ACTIVE

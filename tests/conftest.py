"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from datetime import date

import pytest
from loguru import logger

from fitquest.catalog.loader import ExerciseCatalog, load_catalog
from fitquest.domains.fitness.enums import EquipmentAccess
from fitquest.domains.fitness.models import ExerciseTemplate, PlayerProfile


@pytest.fixture(autouse=True)
def reset_logger():
    """Capture fitquest logs during a test, then drop sinks added by it (e.g. CLI runs)."""
    logger.enable("fitquest")
    yield
    logger.remove()
    logger.disable("fitquest")


@pytest.fixture
def catalog() -> ExerciseCatalog:
    """Default exercise catalog shipped with the package."""
    return load_catalog()


@pytest.fixture
def templates(catalog: ExerciseCatalog) -> list[ExerciseTemplate]:
    return list(catalog.templates)


@pytest.fixture
def requirements(catalog: ExerciseCatalog) -> dict[str, frozenset[EquipmentAccess]]:
    return dict(catalog.equipment)


@pytest.fixture
def week_start() -> date:
    """A Sunday (2026-10-18)."""
    return date(2026, 10, 18)


@pytest.fixture
def default_profile() -> PlayerProfile:
    return PlayerProfile(weekly_workout_goal=3)

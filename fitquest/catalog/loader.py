"""Exercise catalog loader.

Reads the YAML catalog shipped in ``fitquest/data`` (or the file configured
through ``FITQUEST_CATALOG_PATH``), validates it and converts it into
immutable domain objects. Parsed catalogs are cached per path.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, ValidationError, model_validator

from fitquest.config.settings import settings
from fitquest.domains.fitness.enums import EquipmentAccess, MuscleGroup, WorkoutType
from fitquest.domains.fitness.models import ExerciseTemplate
from fitquest.errors import CatalogLoadError


class CatalogTemplateEntry(BaseModel):
    """One template entry as written in the catalog file."""

    name: str
    workout_type: WorkoutType
    muscle_group: MuscleGroup | None = None
    icon_name: str = "figure.walk"
    base_xp: int = 50

    @model_validator(mode="after")
    def check_muscle_group(self) -> "CatalogTemplateEntry":
        if self.workout_type == WorkoutType.STRENGTH and self.muscle_group is None:
            raise ValueError(f"Strength template '{self.name}' needs a muscle_group")
        return self


class CatalogFile(BaseModel):
    """Top-level catalog document."""

    templates: list[CatalogTemplateEntry]
    equipment: dict[str, list[EquipmentAccess]] = {}

    @model_validator(mode="after")
    def check_unique_names(self) -> "CatalogFile":
        names = [entry.name for entry in self.templates]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate template names: {duplicates}")
        return self


@dataclass(frozen=True)
class ExerciseCatalog:
    """Parsed catalog.

    Attributes:
        templates: Default templates in catalog order
        equipment: Template name -> equipment that allows it
    """

    templates: tuple[ExerciseTemplate, ...]
    equipment: dict[str, frozenset[EquipmentAccess]]


@lru_cache(maxsize=8)
def load_catalog(path: Path | None = None) -> ExerciseCatalog:
    """Load and validate an exercise catalog.

    Args:
        path: Catalog YAML path. Defaults to the configured catalog.

    Returns:
        Parsed ExerciseCatalog

    Raises:
        CatalogLoadError: If the file is missing or its content is invalid
    """
    catalog_path = Path(path) if path is not None else settings.catalog_path

    if not catalog_path.exists():
        raise CatalogLoadError(f"Exercise catalog not found: {catalog_path}")

    try:
        with catalog_path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Exercise catalog is not valid YAML: {catalog_path}: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogLoadError(f"Invalid exercise catalog format: {catalog_path}")

    try:
        parsed = CatalogFile.model_validate(raw)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid exercise catalog {catalog_path}: {e}") from e

    templates = tuple(
        ExerciseTemplate(
            name=entry.name,
            workout_type=entry.workout_type,
            muscle_group=entry.muscle_group,
            icon_name=entry.icon_name,
            base_xp=entry.base_xp,
        )
        for entry in parsed.templates
    )
    equipment = {name: frozenset(access) for name, access in parsed.equipment.items()}

    logger.debug(f"Loaded exercise catalog from {catalog_path}: templates={len(templates)}, equipment_rules={len(equipment)}")
    return ExerciseCatalog(templates=templates, equipment=equipment)


def load_default_templates(path: Path | None = None) -> list[ExerciseTemplate]:
    """Default (non-custom) templates from the catalog."""
    return list(load_catalog(path).templates)


def load_equipment_requirements(path: Path | None = None) -> dict[str, frozenset[EquipmentAccess]]:
    """Template name -> equipment requirement table from the catalog."""
    return dict(load_catalog(path).equipment)

"""Exercise catalog - default templates and equipment requirements."""

from fitquest.catalog.loader import (
    ExerciseCatalog,
    load_catalog,
    load_default_templates,
    load_equipment_requirements,
)

__all__ = [
    "ExerciseCatalog",
    "load_catalog",
    "load_default_templates",
    "load_equipment_requirements",
]

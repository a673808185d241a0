"""Equipment filtering of exercise templates."""

from collections.abc import Collection, Iterable, Mapping

from fitquest.catalog.loader import load_equipment_requirements
from fitquest.domains.fitness.enums import EquipmentAccess
from fitquest.domains.fitness.models import ExerciseTemplate


def resolve_equipment(equipment: Collection[EquipmentAccess]) -> frozenset[EquipmentAccess]:
    """Player equipment as a set; no selection means every kind of equipment."""
    if not equipment:
        return frozenset(EquipmentAccess)
    return frozenset(equipment)


def is_template_available(
    template: ExerciseTemplate,
    equipment: frozenset[EquipmentAccess],
    requirements: Mapping[str, Collection[EquipmentAccess]],
) -> bool:
    """Whether a template can be planned with the given equipment.

    Custom templates are never planned. Templates without a requirement entry
    are available everywhere.
    """
    if template.is_custom:
        return False
    required = requirements.get(template.name)
    if not required:
        return True
    return not equipment.isdisjoint(required)


def filter_templates(
    templates: Iterable[ExerciseTemplate],
    equipment: Collection[EquipmentAccess],
    requirements: Mapping[str, Collection[EquipmentAccess]] | None = None,
) -> list[ExerciseTemplate]:
    """Keep templates usable with the player's equipment, preserving order.

    Args:
        templates: Candidate templates
        equipment: Player equipment (empty means no restriction)
        requirements: Template name -> allowed equipment; defaults to the catalog table

    Returns:
        Available templates
    """
    table = load_equipment_requirements() if requirements is None else requirements
    available_equipment = resolve_equipment(equipment)
    return [t for t in templates if is_template_available(t, available_equipment, table)]

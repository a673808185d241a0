"""Tests for exercise catalog loading."""

import pytest

from fitquest.catalog.loader import load_catalog, load_default_templates, load_equipment_requirements
from fitquest.domains.fitness.enums import EquipmentAccess, MuscleGroup, WorkoutType
from fitquest.errors import CatalogLoadError


def test_default_catalog_contents():
    templates = load_default_templates()
    assert len(templates) == 27
    assert sum(1 for t in templates if t.workout_type == WorkoutType.CARDIO) == 5
    assert all(not t.is_custom for t in templates)
    assert all(t.muscle_group is not None for t in templates if t.workout_type == WorkoutType.STRENGTH)
    assert all(t.muscle_group is None for t in templates if t.workout_type == WorkoutType.CARDIO)


def test_template_names_are_unique():
    names = [t.name for t in load_default_templates()]
    assert len(names) == len(set(names))


def test_every_default_template_has_equipment_rules():
    requirements = load_equipment_requirements()
    for template in load_default_templates():
        assert requirements[template.name]


def test_equipment_rules_parse_to_enums():
    requirements = load_equipment_requirements()
    assert requirements["Swimming"] == frozenset({EquipmentAccess.FULL_GYM})
    assert requirements["Padel"] == frozenset({EquipmentAccess.FULL_GYM, EquipmentAccess.BODYWEIGHT})


def test_every_strength_group_has_templates():
    groups = {t.muscle_group for t in load_default_templates() if t.muscle_group}
    assert groups == set(MuscleGroup) - {MuscleGroup.FULL_BODY}


def test_catalog_is_cached():
    assert load_catalog() is load_catalog()


def test_custom_catalog_path(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "templates:\n"
        "  - {name: Burpees, workout_type: strength, muscle_group: core, base_xp: 20}\n"
        "equipment:\n"
        "  Burpees: [bodyweight]\n",
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert [t.name for t in catalog.templates] == ["Burpees"]
    assert catalog.templates[0].base_xp == 20
    assert catalog.templates[0].icon_name == "figure.walk"
    assert catalog.equipment == {"Burpees": frozenset({EquipmentAccess.BODYWEIGHT})}


def test_missing_catalog_raises(tmp_path):
    with pytest.raises(CatalogLoadError, match="not found"):
        load_catalog(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("templates: [unclosed\n", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="not valid YAML"):
        load_catalog(path)


def test_non_mapping_document_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="Invalid exercise catalog format"):
        load_catalog(path)


def test_strength_template_without_muscle_group_raises(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text("templates:\n  - {name: Mystery Lift, workout_type: strength}\n", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="needs a muscle_group"):
        load_catalog(path)


def test_duplicate_names_raise(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "templates:\n"
        "  - {name: Run, workout_type: cardio}\n"
        "  - {name: Run, workout_type: cardio}\n",
        encoding="utf-8",
    )
    with pytest.raises(CatalogLoadError, match="Duplicate template names"):
        load_catalog(path)


def test_unknown_equipment_raises(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "templates:\n"
        "  - {name: Run, workout_type: cardio}\n"
        "equipment:\n"
        "  Run: [treadmill_only]\n",
        encoding="utf-8",
    )
    with pytest.raises(CatalogLoadError):
        load_catalog(path)

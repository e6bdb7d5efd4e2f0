#!/usr/bin/env python3
"""Tests for preset YAML loading and validation."""

import pytest

from vehicles import (
    PresetError,
    VehicleKind,
    available_factories,
    create,
    load_presets,
    load_schema,
    register_presets,
    unregister_factory,
    validate_presets_file,
)

VALID_PRESETS = """
presets:
  - name: honda-cbr
    brand: Honda
    model: CBR600RR
    color: red
    year: 2024
    kind: motorcycle
    fuelCapacity: 18
  - name: volvo-vnl
    brand: Volvo
    model: VNL
    kind: truck
    tires: 18
"""


class TestLoadSchema:
    """Tests for load_schema function."""

    def test_returns_dict(self):
        schema = load_schema()
        assert isinstance(schema, dict)

    def test_has_expected_structure(self):
        schema = load_schema()
        assert "presets" in schema["properties"]
        assert "preset" in schema["definitions"]


class TestValidatePresetsFile:
    """Tests for validate_presets_file function."""

    def test_valid_returns_no_errors(self, tmp_path):
        path = tmp_path / "valid.yaml"
        path.write_text(VALID_PRESETS)
        assert validate_presets_file(path) == []

    def test_missing_name_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
presets:
  - brand: Ford
    model: Explorer
""")
        errors = validate_presets_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)
        assert any("at path: presets.0" in e for e in errors)

    def test_unknown_kind_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
presets:
  - name: boat
    kind: boat
""")
        assert validate_presets_file(path) != []

    def test_invalid_yaml_returns_parse_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("""
presets:
  - name: [unclosed
""")
        errors = validate_presets_file(path)
        assert any("YAML" in e for e in errors)

    def test_nonexistent_file_returns_errors(self, tmp_path):
        errors = validate_presets_file(tmp_path / "does_not_exist.yaml")
        assert len(errors) == 1
        assert errors[0].startswith("Error:")


class TestLoadPresets:
    """Tests for load_presets and register_presets."""

    def test_loads_presets(self, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text(VALID_PRESETS)

        presets = load_presets(path)

        assert [p.name for p in presets] == ["honda-cbr", "volvo-vnl"]
        bike, truck = presets
        assert bike.kind is VehicleKind.MOTORCYCLE
        assert bike.fuel_capacity == 18
        assert bike.tires is None
        assert truck.kind is VehicleKind.TRUCK
        assert truck.tires == 18
        assert truck.year is None

    def test_kind_defaults_to_car(self, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text("presets:\n  - name: plain\n")
        assert load_presets(path)[0].kind is VehicleKind.CAR

    def test_invalid_file_raises(self, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text("presets:\n  - name: x\n    wings: 2\n")
        with pytest.raises(PresetError) as exc_info:
            load_presets(path)
        assert exc_info.value.errors

    def test_register_presets(self, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text(VALID_PRESETS)

        factories = register_presets(path)
        try:
            assert [f.name for f in factories] == ["honda-cbr", "volvo-vnl"]
            assert "honda-cbr" in available_factories()
            bike = create("honda-cbr")
            assert bike.tires == 2
            assert bike.color == "red"
            assert create("volvo-vnl").tires == 18
        finally:
            for factory in factories:
                unregister_factory(factory.name)

    def test_register_duplicate_of_existing_leaves_registry_unchanged(self, tmp_path):
        """A name clash with a registered factory registers nothing."""
        path = tmp_path / "presets.yaml"
        path.write_text("presets:\n  - name: kia-soul\n  - name: ford-explorer\n")
        before = available_factories()

        with pytest.raises(PresetError) as exc_info:
            register_presets(path)

        assert available_factories() == before
        assert exc_info.value.errors == ["Duplicate preset name: ford-explorer"]

    def test_register_duplicate_within_file_leaves_registry_unchanged(self, tmp_path):
        path = tmp_path / "presets.yaml"
        path.write_text("presets:\n  - name: kia-soul\n  - name: kia-soul\n")
        before = available_factories()

        with pytest.raises(PresetError):
            register_presets(path)

        assert available_factories() == before

"""YAML loading and validation of vehicle preset files."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from jsonschema import validate, ValidationError

from .errors import PresetError
from .factory import VehicleFactory, available_factories, register_factory
from .kind import VehicleKind
from .preset import Preset

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def validate_presets_file(
    filepath: Union[str, Path], schema: Optional[dict] = None
) -> List[str]:
    """Validate a single preset YAML file. Returns list of errors."""
    if schema is None:
        schema = load_schema()
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def _parse_preset(dct: Dict[str, Any]) -> Preset:
    """Build a Preset from its camelCase YAML mapping."""
    return Preset(
        name=dct["name"],
        brand=dct.get("brand"),
        model=dct.get("model"),
        color=dct.get("color"),
        year=dct.get("year"),
        kind=VehicleKind[dct.get("kind", "car").upper()],
        tires=dct.get("tires"),
        fuel_capacity=dct.get("fuelCapacity"),
    )


def load_presets(filename: Union[str, Path]) -> List[Preset]:
    """Load and validate presets from a YAML file."""
    errors = validate_presets_file(filename)
    if errors:
        raise PresetError(f"Invalid preset file {filename}", errors)
    with open(filename, "rb") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)
    return [_parse_preset(dct) for dct in data["presets"]]


def register_presets(filename: Union[str, Path]) -> List[VehicleFactory]:
    """
    Load a preset file and register a factory for each preset.

    Names are checked before anything is registered, so a file with a
    duplicate name leaves the registry unchanged.
    """
    presets = load_presets(filename)
    taken = set(available_factories())
    duplicates = []
    for preset in presets:
        if preset.name in taken:
            duplicates.append(f"Duplicate preset name: {preset.name}")
        taken.add(preset.name)
    if duplicates:
        raise PresetError(f"Cannot register presets from {filename}", duplicates)
    return [register_factory(preset) for preset in presets]

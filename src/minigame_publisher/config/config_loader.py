import copy
import yaml
from pathlib import Path
from typing import Optional, Union
from box import Box
from jsonschema import Draft7Validator

"""
Module for configuration validation using JSON Schema.

This module defines the ConfigValidator class that loads JSON schemas (in YAML format)
from the package schema directory and validates configuration documents against them.
"""

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"


class ConfigValidator:
    """
    A utility class for validating configuration files using JSON Schema.

    Schemas are looked up by task name (``<task>.schema.yaml``) in the schema directory.
    Validated documents are returned as :class:`Box` objects with the schema defaults
    filled in, so callers can rely on every optional key being present.
    """

    def __init__(self, schema_dir: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize the ConfigValidator instance.

        Parameters:
            schema_dir (str | Path | None): The directory containing ``*.schema.yaml`` files.
                Defaults to the schemas shipped with the package.
        """
        self.schema_dir = Path(schema_dir).resolve() if schema_dir else SCHEMA_DIR
        self.schema_store = {}

    def _load_schema(self, schema_name: str) -> dict:
        """
        Load (and cache) the schema for the given task name.

        :raises FileNotFoundError: If no schema exists for the task.
        """
        if schema_name not in self.schema_store:
            schema_path = self.schema_dir / f"{schema_name}.schema.yaml"
            if not schema_path.exists():
                available_schemas = [p.name for p in self.schema_dir.glob("*.schema.yaml")]
                raise FileNotFoundError(
                    f"No schema file found for task '{schema_name}'. "
                    f"Available schemas: {', '.join(available_schemas)}"
                )
            with open(schema_path, 'r') as f:
                self.schema_store[schema_name] = yaml.safe_load(f)
        return self.schema_store[schema_name]

    def _apply_defaults(self, data: dict, schema: dict) -> dict:
        """Recursively fill missing object properties with their schema ``default``."""
        for key, prop in schema.get("properties", {}).items():
            if key not in data and "default" in prop:
                data[key] = prop["default"]
            elif isinstance(data.get(key), dict) and prop.get("type") == "object":
                self._apply_defaults(data[key], prop)
        return data

    def apply_defaults(self, config_data: dict, schema_name: str) -> Box:
        """Return a copy of ``config_data`` with the defaults of the named schema filled in."""
        schema = self._load_schema(schema_name)
        return Box(self._apply_defaults(copy.deepcopy(dict(config_data)), schema), box_dots=True)

    def validate_data(self, config_data: dict, schema_name: str) -> Box:
        """
        Validate an already-loaded configuration mapping.

        :param config_data: The configuration mapping.
        :param schema_name: The task name used to locate the schema.
        :return: The validated configuration, defaults applied, with dot access.
        :raises ValueError: If the configuration fails validation.
        """
        if not isinstance(config_data, dict):
            raise ValueError("Configuration must be a mapping at the top level")

        schema = self._load_schema(schema_name)
        validator = Draft7Validator(schema)
        errors = sorted(validator.iter_errors(config_data), key=lambda e: [str(p) for p in e.absolute_path])

        if errors:
            error_messages = []
            for error in errors:
                path = ".".join(map(str, error.absolute_path))
                error_messages.append(f"[{path}] {error.message}")
            raise ValueError(
                f"Configuration validation failed using schema '{schema_name}.schema.yaml':\n" +
                "\n".join(error_messages)
            )

        return self.apply_defaults(config_data, schema_name)

    def validate(self, config_path: Union[str, Path], schema_name: str) -> Box:
        """
        Validate a configuration file against the schema for ``schema_name``.

        :param config_path: The file path to the configuration YAML file to be validated.
        :param schema_name: The task name used to locate the schema.
        :return: A Box object containing the configuration data.
        :raises ValueError: If the configuration fails validation.
        :raises FileNotFoundError: If the configuration file or the schema is missing.
        """
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)

        return self.validate_data(config_data, schema_name)

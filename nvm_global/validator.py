"""Schema validation for config files."""

from __future__ import annotations

import json
from importlib import resources

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError, best_match

from nvm_global.errors import ConfigError


def _load_schema(package: str, resource_name: str) -> dict:
    with resources.files(package).joinpath(resource_name).open("r", encoding="utf-8") as f:
        return json.load(f)


def _config_schema() -> dict:
    return _load_schema("nvm_global.schema", "config.schema.json")


def validate_config(data: dict, *, path: str | None = None) -> None:
    """Raise ConfigError if *data* does not match the config schema.

    Only the best-matching violation is reported, with its JSON path.
    """
    validator = Draft202012Validator(_config_schema())
    err: ValidationError | None = best_match(validator.iter_errors(data))
    if err is None:
        return
    where = "/".join(str(p) for p in err.absolute_path) or "<root>"
    raise ConfigError(f"{where}: {err.message}", path=path)

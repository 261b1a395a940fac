"""
Argument lists from configuration text.

Lets callers keep name-value arguments in JSON or YAML files and feed them to
`to_struct`. A document's top level is either:

    - a mapping:  flattened to [name1, value1, name2, value2, ...]
    - a sequence: used as an alternating name/value list as-is

Records can be written back out with `record_to_json` / `record_to_yaml`.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from acdc.arglist import to_arg_list


class ConfigError(Exception):
    """Raised when configuration text cannot be turned into an argument list."""
    pass


def _arg_list_from_document(doc: Any) -> List[Any]:
    if doc is None:
        return []
    if isinstance(doc, Mapping):
        return to_arg_list(doc)
    if isinstance(doc, list):
        return list(doc)
    raise ConfigError(
        f"Expected a mapping or a sequence at top level, got {type(doc).__name__}"
    )


def arg_list_from_json(s: str) -> List[Any]:
    try:
        doc = json.loads(s)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON: {e}") from e
    return _arg_list_from_document(doc)


def arg_list_from_yaml(s: str) -> List[Any]:
    try:
        doc = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e
    return _arg_list_from_document(doc)


def record_to_json(record: Dict[str, Any]) -> str:
    return json.dumps(record, sort_keys=True)


def record_to_yaml(record: Dict[str, Any]) -> str:
    return yaml.safe_dump(record)


def load_arg_list(path: Union[str, Path]) -> List[Any]:
    """Read an argument list from a .json, .yaml or .yml file."""
    path = Path(path)
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".json":
        return arg_list_from_json(text)
    if suffix in (".yaml", ".yml"):
        return arg_list_from_yaml(text)
    raise ConfigError(f"Unsupported configuration file type: {path.name}")

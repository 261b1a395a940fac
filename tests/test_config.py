"""
Tests for reading argument lists from JSON/YAML configuration.
"""

import json

import pytest
import yaml

from acdc.arglist import to_struct
from acdc.config import (
    ConfigError,
    arg_list_from_json,
    arg_list_from_yaml,
    load_arg_list,
    record_to_json,
    record_to_yaml,
)


SAMPLE_YAML = """
Vnom: 380
Type: DC
Losses: [0.1, 0.2]
"""


def test_mapping_document_matches_literal_list():
    literal = ["Vnom", 380, "Type", "DC", "Losses", [0.1, 0.2]]
    assert arg_list_from_yaml(SAMPLE_YAML) == literal
    assert to_struct(arg_list_from_yaml(SAMPLE_YAML)) == to_struct(literal)


def test_sequence_document_used_as_is():
    assert arg_list_from_json('["a", 1, "b", 2]') == ["a", 1, "b", 2]


def test_empty_yaml_document():
    assert arg_list_from_yaml("") == []


def test_scalar_document_rejected():
    with pytest.raises(ConfigError, match="mapping or a sequence"):
        arg_list_from_json("42")


def test_invalid_json():
    with pytest.raises(ConfigError, match="Invalid JSON"):
        arg_list_from_json("{not json")


def test_invalid_yaml():
    with pytest.raises(ConfigError, match="Invalid YAML"):
        arg_list_from_yaml("a: [1, 2")


def test_record_dumps():
    record = {"b": 2, "a": 1}
    assert json.loads(record_to_json(record)) == record
    assert record_to_json(record) == '{"a": 1, "b": 2}'
    assert yaml.safe_load(record_to_yaml(record)) == record


def test_load_arg_list_files(tmp_path):
    yml = tmp_path / "bus.yml"
    yml.write_text(SAMPLE_YAML, encoding="utf-8")
    js = tmp_path / "bus.json"
    js.write_text('{"Vnom": 48}', encoding="utf-8")

    assert load_arg_list(yml)[:2] == ["Vnom", 380]
    assert load_arg_list(str(js)) == ["Vnom", 48]


def test_load_arg_list_unsupported_suffix(tmp_path):
    path = tmp_path / "bus.txt"
    path.write_text("Vnom: 1", encoding="utf-8")
    with pytest.raises(ConfigError, match="Unsupported"):
        load_arg_list(path)

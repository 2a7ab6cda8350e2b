import json

import pytest

from noname.inputs import InputsError, JsonFileError, ParsingError, parse_inputs


def test_inline_json():
    result = parse_inputs('{"public_input": "2"}')
    assert result == {"public_input": "2"}


def test_inline_nested_values():
    text = '{"a": "1", "b": ["2", "3"], "c": true}'
    assert parse_inputs(text) == json.loads(text)


def test_empty_object():
    assert parse_inputs("{}") == {}


def test_inputs_from_file(tmp_path):
    path = tmp_path / "inputs.json"
    data = {"xx": ["3", "3"]}
    path.write_text(json.dumps(data), encoding="utf-8")
    assert parse_inputs(str(path)) == data


def test_missing_file_raises_inputs_error(tmp_path):
    missing = str(tmp_path / "nope.json")
    with pytest.raises(InputsError) as info:
        parse_inputs(missing)
    assert info.value.text == missing
    assert str(info.value) == f"error parsing input {missing}"


def test_bad_json_file_raises_json_file_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(JsonFileError) as info:
        parse_inputs(str(path))
    assert info.value.file == str(path)
    assert str(info.value).startswith(f"JSON parsing error in file {path}: ")


def test_file_holding_non_object_is_rejected(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(JsonFileError):
        parse_inputs(str(path))


def test_inline_non_object_is_a_parsing_error():
    with pytest.raises(ParsingError):
        parse_inputs('["1"]')
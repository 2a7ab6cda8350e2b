"""Parsing of the public and private inputs given to a program."""

from __future__ import annotations

import json
from typing import Any


class ParsingError(Exception):
    """Base class of the errors raised while reading inputs."""


class JsonFileError(ParsingError):
    """A file of inputs could be read but does not hold a JSON object."""

    def __init__(self, file: str, source: Exception) -> None:
        self.file = file
        self.source = source
        super().__init__(f"JSON parsing error in file {file}: {source}")


class InputsError(ParsingError):
    """The inputs were neither JSON nor the path of a readable file."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"error parsing input {text}")


def _as_object(text: str) -> dict[str, Any]:
    value = json.loads(text)
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got {type(value).__name__}")
    return value


def parse_inputs(text: str) -> dict[str, Any]:
    """Read inputs given inline as a JSON object or as the path of a JSON file."""
    try:
        return _as_object(text)
    except ValueError:
        pass

    try:
        with open(text, encoding="utf-8") as handle:
            contents = handle.read()
    except (OSError, ValueError, UnicodeDecodeError):
        raise InputsError(text) from None

    try:
        return _as_object(contents)
    except ValueError as exc:
        raise JsonFileError(text, exc) from exc
"""Reading and validating the `Noname.toml` manifest of a package."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

MANIFEST_FILE = "Noname.toml"

_PACKAGE_NAME = re.compile(r"[a-z0-9_-]+/[a-z0-9_-]+")


class ManifestError(Exception):
    """A package, its manifest or one of its dependencies is invalid."""


@dataclass
class Package:
    """The `[package]` table of a manifest."""

    name: str
    version: str
    description: str | None = None
    dependencies: list[str] | None = field(default=None)


@dataclass
class Manifest:
    """The contents of a `Noname.toml` file."""

    package: Package

    def dependencies(self) -> list[str]:
        """Return the dependencies listed, or an empty list if there are none."""
        return list(self.package.dependencies or [])


def _optional_str(table: dict[str, Any], key: str) -> str | None:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"`{key}` must be a string")
    return value


def _required_str(table: dict[str, Any], key: str) -> str:
    value = _optional_str(table, key)
    if value is None:
        raise ValueError(f"missing field `{key}`")
    return value


def _manifest_from_data(data: dict[str, Any]) -> Manifest:
    table = data.get("package")
    if not isinstance(table, dict):
        raise ValueError("missing table `package`")

    dependencies = table.get("dependencies")
    if dependencies is not None:
        if not isinstance(dependencies, list) or not all(
            isinstance(dep, str) for dep in dependencies
        ):
            raise ValueError("`dependencies` must be a list of strings")

    return Manifest(
        Package(
            name=_required_str(table, "name"),
            version=_required_str(table, "version"),
            description=_optional_str(table, "description"),
            dependencies=dependencies,
        )
    )


def _invalid_name(name: str) -> ManifestError:
    return ManifestError(
        f"invalid package name `{name}`. Package names must be in the format `user/repo`"
    )


def read_manifest(path: str | PathLike[str]) -> Manifest:
    """Read and validate the manifest of the package found at ``path``."""
    path = Path(path)
    if not path.exists():
        raise ManifestError(
            f"path `{path}` doesn't exists. Use `noname new` to create a new package "
            "in an non-existing directory"
        )

    manifest_file = path / MANIFEST_FILE
    try:
        content = manifest_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"could not find manifest file `{manifest_file}`") from exc

    try:
        manifest = _manifest_from_data(tomllib.loads(content))
    except (tomllib.TOMLDecodeError, ValueError) as exc:
        raise ManifestError(f"could not parse file `{manifest_file}`: {exc}") from exc

    name = manifest.package.name
    if not _PACKAGE_NAME.fullmatch(name):
        raise _invalid_name(name)

    if name.startswith("std"):
        raise ManifestError("package name `std` is reserved")

    for dep in manifest.dependencies():
        if dep.startswith("std"):
            raise ManifestError("package `std/..` cannot be a dependency")
        if not _PACKAGE_NAME.fullmatch(dep):
            raise _invalid_name(dep)

    return manifest
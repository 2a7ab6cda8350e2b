"""Creation of new packages on disk: the `new` and `init` commands."""

from __future__ import annotations

import subprocess
from os import PathLike
from pathlib import Path

from noname.manifest import MANIFEST_FILE

MAIN_CONTENT = """fn main(pub xx: Field, yy: Field) {
    let zz = yy + 1;
    assert_eq(zz, xx);
}
"""

LIB_CONTENT = """fn add(xx: Field, yy: Field) -> Field {
    return xx + yy;
}
"""

_MANIFEST_TEMPLATE = """[package]
name = "{user}/{package_name}"
version = "0.1.0"
# see the documentation for more information on how to edit this file

dependencies = []
"""


class ScaffoldError(Exception):
    """A package could not be created at the requested location."""


def get_git_user() -> str:
    """Return the git user name, lower-cased and with spaces turned into underscores."""
    try:
        completed = subprocess.run(
            ["git", "config", "user.name"], capture_output=True, text=True, check=False
        )
    except OSError as exc:
        raise ScaffoldError(f"failed to execute git command: {exc}") from exc

    if completed.returncode != 0:
        raise ScaffoldError("failed to get git user name")

    return completed.stdout.strip().replace(" ", "_").lower()


def _write(path: Path, content: str, what: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ScaffoldError(f"cannot create {what} at given path: `{path}`") from exc


def create_package(
    path: str | PathLike[str],
    package_name: str,
    is_lib: bool,
    user: str | None = None,
) -> Path:
    """Write a manifest and a starter source file into the existing directory ``path``.

    The package is named ``user/package_name``; the git user name is used when
    ``user`` is not given. Returns the package directory.
    """
    path = Path(path)
    if user is None:
        user = get_git_user()

    manifest_file = path / MANIFEST_FILE
    if manifest_file.exists():
        raise ScaffoldError(f"manifest file already exists at `{manifest_file}`")
    _write(
        manifest_file,
        _MANIFEST_TEMPLATE.format(user=user, package_name=package_name),
        f"{MANIFEST_FILE} file",
    )

    src_path = path / "src"
    if src_path.exists():
        raise ScaffoldError(f"src directory already exists at `{src_path}`")
    try:
        src_path.mkdir()
    except OSError as exc:
        raise ScaffoldError(
            f"cannot create src directory at given path: `{src_path}`"
        ) from exc

    content, file_name = (LIB_CONTENT, "lib.no") if is_lib else (MAIN_CONTENT, "main.no")
    file_path = src_path / file_name
    if file_path.exists():
        raise ScaffoldError(f"file already exists at `{file_path}`")
    _write(file_path, content, "file")

    return path


def cmd_new(path: str | PathLike[str], lib: bool = False) -> Path:
    """Create a new directory at ``path`` holding a fresh package named after it."""
    path = Path(path)
    package_name = str(path)

    if path.exists():
        raise ScaffoldError(
            f"path `{path}` already exists. Use `noname init` to create a new package "
            "in an existing directory"
        )

    try:
        path.mkdir()
    except OSError as exc:
        raise ScaffoldError("couldn't create directory at given path") from exc

    return create_package(path, package_name, lib)


def cmd_init(path: str | PathLike[str] | None = None, lib: bool = False) -> Path:
    """Turn the existing directory ``path`` (default: the current one) into a package."""
    path = Path.cwd() if path is None else Path(path)

    package_name = path.name
    if not package_name:
        raise ScaffoldError("invalid path given in argument to CLI")

    if not path.exists():
        raise ScaffoldError(
            f"path `{path}` doesn't exists. Use `noname new` to create a new package "
            "in an non-existing directory"
        )

    if not path.is_dir():
        raise ScaffoldError(f"path `{path}` is not a directory")

    return create_package(path, package_name, lib)
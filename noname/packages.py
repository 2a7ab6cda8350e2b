"""Package dependencies: locating, downloading and ordering them."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from noname.manifest import Manifest, ManifestError, read_manifest

NONAME_DIRECTORY = ".noname"
"""The directory under the user's home holding all noname-related files."""

PACKAGE_DIRECTORY = "packages"
"""The directory under NONAME_DIRECTORY holding downloaded packages."""


@dataclass(frozen=True)
class UserRepo:
    """A dependency, named as a `user/repo` pair."""

    user: str
    repo: str

    @classmethod
    def parse(cls, text: str) -> UserRepo:
        """Parse a `user/repo` string."""
        parts = text.split("/")
        if len(parts) != 2:
            raise ValueError(f"invalid dependency name `{text}` (expected: user/repo)")
        return cls(parts[0], parts[1])

    def __str__(self) -> str:
        return f"{self.user}/{self.repo}"


@dataclass
class DependencyNode:
    """A package together with the nodes of its own dependencies."""

    dep: UserRepo
    deps: list[DependencyNode] = field(default_factory=list)


class DependencyGraph:
    """The tree of dependencies of a package, checked for cycles."""

    def __init__(self, this: UserRepo | None) -> None:
        self.this = this
        self.root: list[DependencyNode] = []
        self.cached_manifests: dict[UserRepo, list[UserRepo]] = {}

    @classmethod
    def from_manifest(cls, this: UserRepo | None, manifest: Manifest) -> DependencyGraph:
        """Build the graph of all dependencies listed in ``manifest``."""
        graph = cls(this)
        graph.add_deps(get_deps_of_package(manifest))
        return graph

    def add_deps(self, deps: list[UserRepo]) -> None:
        """Add each dependency, in order, as a root of the graph."""
        for dep in deps:
            self.add_dep(dep)

    def add_dep(self, dep: UserRepo) -> None:
        """Add one dependency, and everything it depends on, as a root of the graph."""
        parents: set[UserRepo] = set()
        if self.this is not None:
            if self.this == dep:
                raise ManifestError(f"this library (`{dep}`) cannot depend on itself")
            parents.add(self.this)

        self.root.append(self.init_package(dep, parents))

    def init_package(self, package: UserRepo, parents: set[UserRepo]) -> DependencyNode:
        """Resolve ``package`` and its dependencies, refusing any cycle through ``parents``."""
        parents = parents | {package}

        cached = self.cached_manifests.get(package)
        if cached is not None:
            deps = list(cached)
        else:
            path = path_to_package(package)
            if not path.exists():
                download_from_github(package)

            try:
                manifest = validate_package_and_get_manifest(path, True)
            except ManifestError as exc:
                raise ManifestError(f"the dependency {package} is invalid.: {exc}") from exc

            if manifest.package.name != str(package):
                raise ManifestError(
                    f"package `{package}` has a different name in its manifest: "
                    f"`{manifest.package.name}`"
                )

            deps = get_deps_of_package(manifest)

        nodes = []
        for dep in deps:
            if dep in parents:
                raise ManifestError(
                    f"circular dependency detected: {dep} is already a parent of {package}"
                )
            nodes.append(self.init_package(dep, parents))

        return DependencyNode(package, nodes)

    def from_leaves_to_roots(self) -> list[UserRepo]:
        """Return every package once, each after all of its dependencies."""
        result: list[UserRepo] = []

        for root in self.root:
            stack = [root]
            while stack:
                node = stack.pop()
                if node.dep in result:
                    continue

                if all(dep.dep in result for dep in node.deps):
                    result.append(node.dep)
                else:
                    stack.append(node)
                    stack.extend(node.deps)

        return result


def get_dep(dep: UserRepo) -> Manifest:
    """Download ``dep`` if needed and return its validated manifest."""
    path = path_to_package(dep)
    if not path.exists():
        download_from_github(dep)
    return validate_package_and_get_manifest(path, True)


def get_deps_of_package(manifest: Manifest) -> list[UserRepo]:
    """Return the dependencies listed in a manifest."""
    return [UserRepo.parse(dep) for dep in manifest.dependencies()]


def get_dep_code(dep: UserRepo) -> str:
    """Return the source of the `lib.no` file of a downloaded package."""
    path = path_to_package(dep)
    lib_file = path / "src" / "lib.no"
    try:
        return lib_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"could not read file `{path}`") from exc


def path_to_package(dep: UserRepo) -> Path:
    """Return the local directory where ``dep`` is stored."""
    return Path.home() / NONAME_DIRECTORY / PACKAGE_DIRECTORY / dep.user / dep.repo


def download_from_github(dep: UserRepo) -> None:
    """Clone ``dep`` from GitHub into its local package directory."""
    url = f"https://github.com/{dep.user}/{dep.repo}.git"
    path = path_to_package(dep)
    try:
        completed = subprocess.run(
            ["git", "clone", url, str(path)], capture_output=True, check=False
        )
    except OSError as exc:
        raise ManifestError(f"failed to execute git command: {exc}") from exc

    if completed.returncode != 0:
        raise ManifestError(
            f"could not download package `{dep}`. Are you sure that "
            f"https://www.github.com/{dep} is a valid package?"
        )


def is_lib(path: str | PathLike[str]) -> bool:
    """Return True if the package at ``path`` is a library (has `src/lib.no`)."""
    return (Path(path) / "src" / "lib.no").exists()


def validate_package_and_get_manifest(path: str | PathLike[str], must_be_lib: bool) -> Manifest:
    """Check that ``path`` holds a valid package and return its manifest."""
    path = Path(path)
    if not path.exists():
        raise ManifestError(
            f"path `{path}` doesn't exists. Use `noname new` to create a new package "
            "in an non-existing directory"
        )

    manifest = read_manifest(path)

    src_path = path / "src"
    has_lib = (src_path / "lib.no").exists()
    has_main = (src_path / "main.no").exists()

    if has_lib and has_main:
        raise ManifestError(
            "package has both a `lib.no` and a `main.no` file. Only one of them is allowed"
        )
    if not has_lib and not has_main:
        raise ManifestError(
            "package has neither a `lib.no` nor a `main.no` file. At least one of them is required"
        )
    if not has_lib and must_be_lib:
        raise ManifestError("package is missing a `lib.no` file")

    return manifest
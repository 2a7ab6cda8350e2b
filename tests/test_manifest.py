from pathlib import Path

import pytest

from noname.manifest import Manifest, ManifestError, Package, read_manifest


def write_manifest(path: Path, content: str) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    (path / "Noname.toml").write_text(content, encoding="utf-8")
    return path


def test_reads_valid_manifest(tmp_path):
    write_manifest(
        tmp_path,
        '[package]\nname = "mimoo/example"\nversion = "0.1.0"\n'
        'description = "demo"\ndependencies = ["mimoo/lib", "user/repo"]\n',
    )
    manifest = read_manifest(tmp_path)
    assert manifest.package.name == "mimoo/example"
    assert manifest.package.version == "0.1.0"
    assert manifest.package.description == "demo"
    assert manifest.dependencies() == ["mimoo/lib", "user/repo"]


def test_dependencies_default_to_empty(tmp_path):
    write_manifest(tmp_path, '[package]\nname = "mimoo/example"\nversion = "0.1.0"\n')
    manifest = read_manifest(tmp_path)
    assert manifest.dependencies() == []
    assert manifest.package.description is None


def test_dependencies_returns_a_copy():
    manifest = Manifest(Package("mimoo/example", "0.1.0", dependencies=["mimoo/lib"]))
    deps = manifest.dependencies()
    deps.append("mimoo/other")
    assert manifest.dependencies() == ["mimoo/lib"]


def test_missing_path(tmp_path):
    with pytest.raises(ManifestError, match="doesn't exists"):
        read_manifest(tmp_path / "nope")


def test_missing_manifest_file(tmp_path):
    with pytest.raises(ManifestError, match="could not find manifest file"):
        read_manifest(tmp_path)


def test_invalid_toml(tmp_path):
    write_manifest(tmp_path, "[package\nname = ")
    with pytest.raises(ManifestError, match="could not parse file"):
        read_manifest(tmp_path)


def test_missing_version(tmp_path):
    write_manifest(tmp_path, '[package]\nname = "mimoo/example"\n')
    with pytest.raises(ManifestError, match="could not parse file"):
        read_manifest(tmp_path)


@pytest.mark.parametrize("name", ["example", "Mimoo/example", "a/b/c", "mimoo/ex ample"])
def test_invalid_package_name(tmp_path, name):
    write_manifest(tmp_path, f'[package]\nname = "{name}"\nversion = "0.1.0"\n')
    with pytest.raises(ManifestError, match="Package names must be in the format `user/repo`"):
        read_manifest(tmp_path)


def test_std_name_is_reserved(tmp_path):
    write_manifest(tmp_path, '[package]\nname = "std/thing"\nversion = "0.1.0"\n')
    with pytest.raises(ManifestError, match="package name `std` is reserved"):
        read_manifest(tmp_path)


def test_std_dependency_is_rejected(tmp_path):
    write_manifest(
        tmp_path,
        '[package]\nname = "mimoo/example"\nversion = "0.1.0"\ndependencies = ["std/crypto"]\n',
    )
    with pytest.raises(ManifestError, match="cannot be a dependency"):
        read_manifest(tmp_path)


def test_invalid_dependency_name(tmp_path):
    write_manifest(
        tmp_path,
        '[package]\nname = "mimoo/example"\nversion = "0.1.0"\ndependencies = ["nouser"]\n',
    )
    with pytest.raises(ManifestError, match="invalid package name `nouser`"):
        read_manifest(tmp_path)
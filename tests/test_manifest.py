"""Tests for manifest loading."""

import pytest

from version_sync.manifest import ManifestError, load_manifest, load_version


def test_load_version_json(tmp_path):
    """Version is read from package.json."""
    path = tmp_path / "package.json"
    path.write_text('{"name": "cordova-plugin-x", "version": "4.5.6"}', encoding="utf-8")
    assert load_version(path) == "4.5.6"


def test_load_version_yaml(tmp_path):
    """YAML manifests are parsed by suffix."""
    path = tmp_path / "pubspec.yaml"
    path.write_text("name: x\nversion: 1.0.0+3\n", encoding="utf-8")
    assert load_version(path) == "1.0.0+3"


def test_missing_version_field(tmp_path):
    """Manifest without version raises ManifestError."""
    path = tmp_path / "package.json"
    path.write_text('{"name": "x"}', encoding="utf-8")
    with pytest.raises(ManifestError, match="no 'version'"):
        load_version(path)


def test_non_string_version(tmp_path):
    """Numeric version is rejected."""
    path = tmp_path / "package.json"
    path.write_text('{"version": 3}', encoding="utf-8")
    with pytest.raises(ManifestError, match="must be a string"):
        load_version(path)


def test_malformed_json(tmp_path):
    """Invalid JSON raises ManifestError chained from the decode error."""
    path = tmp_path / "package.json"
    path.write_text('{"version": ', encoding="utf-8")
    with pytest.raises(ManifestError) as exc_info:
        load_manifest(path)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_manifest_not_a_mapping(tmp_path):
    """Top-level list is not a manifest record."""
    path = tmp_path / "package.json"
    path.write_text('["1.0.0"]', encoding="utf-8")
    with pytest.raises(ManifestError, match="not a key-value record"):
        load_manifest(path)


def test_missing_manifest_file(tmp_path):
    """Missing file surfaces as FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_version(tmp_path / "package.json")


def test_manifest_error_is_value_error():
    """ManifestError can be caught as ValueError."""
    assert issubclass(ManifestError, ValueError)


def test_json_with_bom(tmp_path):
    """A package.json saved with a UTF-8 BOM still parses."""
    path = tmp_path / "package.json"
    path.write_bytes(b'\xef\xbb\xbf{"version": "2.1.0"}')
    assert load_version(path) == "2.1.0"

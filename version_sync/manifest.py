"""Package manifest loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from version_sync.utils.logger import get_logger

logger = get_logger()

YAML_EXTENSIONS = {".yaml", ".yml"}


class ManifestError(ValueError):
    """The manifest is not valid structured data or has no usable version."""


def _parse(path: Path, text: str) -> Any:
    if path.suffix.lower() in YAML_EXTENSIONS:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ManifestError(f"Invalid YAML in manifest {path}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in manifest {path}: {e}") from e


def load_manifest(manifest_path: str | Path) -> dict[str, Any]:
    """Read and parse a manifest file into a mapping.

    JSON unless the file has a .yaml/.yml suffix. Missing or unreadable
    files raise the usual OSError subclasses.
    """
    path = Path(manifest_path)
    # utf-8-sig drops a leading BOM
    with open(path, encoding="utf-8-sig") as f:
        text = f.read()

    data = _parse(path, text)
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} is not a key-value record")
    return data


def load_version(manifest_path: str | Path) -> str:
    """Return the `version` field of the manifest at manifest_path."""
    data = load_manifest(manifest_path)
    if "version" not in data:
        raise ManifestError(f"Manifest {manifest_path} has no 'version' field")

    version = data["version"]
    if not isinstance(version, str):
        raise ManifestError(
            f"Manifest {manifest_path} 'version' must be a string, got {type(version).__name__}"
        )

    logger.debug("Read version %s from %s", version, manifest_path)
    return version

"""Splice the manifest version into a plugin.xml-style document."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import click

from version_sync.manifest import load_version
from version_sync.utils.logger import get_logger

logger = get_logger()


@dataclass
class SyncResult:
    """Outcome of one sync run."""

    version: str
    document: Path
    replacements: int = 0
    changed: bool = False


def plugin_pattern(plugin_id: str) -> re.Pattern[str]:
    """Match `plugin id="<plugin_id>" version="..."`, capturing the version."""
    return re.compile(rf'plugin id="{re.escape(plugin_id)}" version="([^"]*)"')


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF documents byte-identical outside the patched span
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def replace_version(text: str, plugin_id: str, version: str) -> tuple[str, int]:
    """Rewrite every matching plugin version in text. Returns (text, count)."""
    replacement = f'plugin id="{plugin_id}" version="{version}"'
    return plugin_pattern(plugin_id).subn(lambda _m: replacement, text)


def read_document_version(document_path: str | Path, plugin_id: str) -> str | None:
    """Return the version currently recorded for plugin_id, or None if absent."""
    match = plugin_pattern(plugin_id).search(_read_text(Path(document_path)))
    return match.group(1) if match else None


def sync(manifest_path: str | Path, document_path: str | Path, plugin_id: str) -> SyncResult:
    """Copy the manifest's version into every matching plugin element of the document.

    The manifest is read before the document is opened, so a bad manifest
    leaves the document untouched. The document is always rewritten in full,
    even when nothing matched.
    """
    document = Path(document_path)

    version = load_version(manifest_path)
    click.echo(version)

    original = _read_text(document)
    updated, count = replace_version(original, plugin_id, version)

    if count == 0:
        logger.warning('No plugin id="%s" found in %s; leaving content as is', plugin_id, document)
    else:
        logger.info("Set %d occurrence(s) of %s to version %s in %s", count, plugin_id, version, document)

    _write_text(document, updated)

    return SyncResult(
        version=version,
        document=document,
        replacements=count,
        changed=updated != original,
    )

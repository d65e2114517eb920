"""Plugin variant models and the built-in variant registry."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Variant:
    """One plugin build: which id to update, and where its files live."""

    name: str
    plugin_id: str
    manifest: str = "package.json"
    document: str = "plugin.xml"

    def manifest_path(self, root: Path) -> Path:
        return root / self.manifest

    def document_path(self, root: Path) -> Path:
        return root / self.document

    @classmethod
    def from_dict(cls, name: str, data: dict) -> Variant:
        """Build a Variant from a config mapping, defaulting the file paths."""
        plugin_id = data.get("plugin_id") if isinstance(data, dict) else None
        if not plugin_id:
            raise ValueError(f"Variant '{name}' has no plugin_id")
        return cls(
            name=name,
            plugin_id=plugin_id,
            manifest=data.get("manifest") or "package.json",
            document=data.get("document") or "plugin.xml",
        )

    def to_dict(self) -> dict:
        return {
            "plugin_id": self.plugin_id,
            "manifest": self.manifest,
            "document": self.document,
        }


DEFAULT_VARIANTS: dict[str, Variant] = {
    "firebasex-cc": Variant(
        name="firebasex-cc",
        plugin_id="@canalcircle/cordova-plugin-firebasex-cc",
    ),
    "firebasex": Variant(
        name="firebasex",
        plugin_id="cordova-plugin-firebasex",
    ),
}

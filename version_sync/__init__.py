"""plugin-version-sync: keep plugin.xml versions in step with package.json."""

try:
    from importlib.metadata import version

    __version__ = version("plugin-version-sync")
except Exception:
    __version__ = "0.1.0"

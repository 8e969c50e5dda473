# -----------------------------------------------------------------------------
# VITRINA PLUGINS - PLUGGABLE UTILITIES
# -----------------------------------------------------------------------------
# Plugins contribute extra utility classes to the style pipeline.
# Each plugin is a folder with:
#   - handler.py - exposes a module-level `plugin` object
# A plugin only takes effect when styles.yaml lists it under `plugins`.
# -----------------------------------------------------------------------------

from pathlib import Path
from typing import Protocol

from rich.console import Console

console = Console()

# Plugins directory
PLUGINS_DIR = Path(__file__).parent


class UtilityPlugin(Protocol):
    """Protocol for plugins - defines the interface all plugins must implement."""

    name: str
    description: str

    def utilities(self) -> dict[str, list[str]]:
        """Return class name -> CSS declarations."""
        ...


class PluginRegistry:
    """
    Registry for dynamically loaded utility plugins.

    Plugins are loaded from the plugins/ folder on demand.
    Each plugin folder must have a handler.py with a `plugin` object.
    """

    def __init__(self, plugins_dir: Path = PLUGINS_DIR) -> None:
        self._plugins_dir = plugins_dir
        self._plugins: dict[str, UtilityPlugin] = {}

    def register(self, plugin: UtilityPlugin) -> None:
        """Register a plugin."""
        self._plugins[plugin.name] = plugin
        console.print(f"[green][PLUGINS] Registered: {plugin.name}[/green]")

    def get(self, name: str) -> UtilityPlugin | None:
        """Get a plugin by name."""
        return self._plugins.get(name)

    def list_plugins(self) -> list[str]:
        """List all registered plugin names."""
        return list(self._plugins.keys())

    def load_all(self) -> None:
        """Load all plugins from the plugins directory."""
        for plugin_dir in sorted(self._plugins_dir.iterdir()):
            if plugin_dir.is_dir() and not plugin_dir.name.startswith("_"):
                self._load_plugin(plugin_dir)

    def _load_plugin(self, plugin_dir: Path) -> None:
        """Load a single plugin from a directory."""
        handler_path = plugin_dir / "handler.py"
        if not handler_path.exists():
            return

        try:
            # Dynamic import
            import importlib.util

            spec = importlib.util.spec_from_file_location(
                f"vitrina_plugins.{plugin_dir.name}", handler_path
            )
            if spec and spec.loader:
                module = importlib.util.module_from_spec(spec)
                spec.loader.exec_module(module)

                if hasattr(module, "plugin"):
                    self.register(module.plugin)
                else:
                    console.print(
                        f"[yellow][PLUGINS] No 'plugin' object in {plugin_dir.name}[/yellow]"
                    )
        except Exception as e:
            console.print(f"[red][PLUGINS] Failed to load {plugin_dir.name}: {e}[/red]")

    def utilities_for(self, names: list[str]) -> dict[str, list[str]]:
        """
        Merge the utilities of the named plugins, in order.

        Later plugins win when two define the same class.

        Raises:
            KeyError: If a name is not registered.
        """
        merged: dict[str, list[str]] = {}
        for name in names:
            plugin = self.get(name)
            if plugin is None:
                raise KeyError(name)
            merged.update(plugin.utilities())
        return merged


def load_registry(plugins_dir: Path = PLUGINS_DIR) -> PluginRegistry:
    """Build a registry with every plugin found on disk."""
    registry = PluginRegistry(plugins_dir)
    registry.load_all()
    return registry

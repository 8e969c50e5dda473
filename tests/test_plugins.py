"""
Tests for the utility plugin registry.
"""

import pytest

from src.plugins import PluginRegistry, load_registry


class TestPluginRegistry:
    """Tests for PluginRegistry loading and lookup."""

    def test_shipped_plugins_load(self):
        registry = load_registry()
        assert "aspect_ratio" in registry.list_plugins()

    def test_utilities_for(self):
        registry = load_registry()
        utilities = registry.utilities_for(["aspect_ratio"])
        assert utilities["aspect-video"] == ["aspect-ratio: 16 / 9"]

    def test_utilities_for_unknown(self):
        registry = PluginRegistry()
        with pytest.raises(KeyError):
            registry.utilities_for(["typography"])

    def test_later_plugin_wins(self, tmp_path):
        for name, value in (("first", "1"), ("second", "2")):
            plugin_dir = tmp_path / name
            plugin_dir.mkdir()
            (plugin_dir / "handler.py").write_text(
                "class P:\n"
                f"    name = '{name}'\n"
                "    description = ''\n"
                "    def utilities(self):\n"
                f"        return {{'z-top': ['z-index: {value}']}}\n"
                "plugin = P()\n",
                encoding="utf-8",
            )
        registry = load_registry(tmp_path)
        assert registry.utilities_for(["first", "second"])["z-top"] == ["z-index: 2"]
        assert registry.utilities_for(["second", "first"])["z-top"] == ["z-index: 1"]

    def test_handler_without_plugin_object_skipped(self, tmp_path):
        plugin_dir = tmp_path / "empty"
        plugin_dir.mkdir()
        (plugin_dir / "handler.py").write_text("x = 1\n", encoding="utf-8")
        assert load_registry(tmp_path).list_plugins() == []

    def test_broken_handler_skipped(self, tmp_path):
        plugin_dir = tmp_path / "broken"
        plugin_dir.mkdir()
        (plugin_dir / "handler.py").write_text("def oops(:\n", encoding="utf-8")
        assert load_registry(tmp_path).list_plugins() == []

    def test_private_dirs_ignored(self, tmp_path):
        plugin_dir = tmp_path / "_hidden"
        plugin_dir.mkdir()
        (plugin_dir / "handler.py").write_text(
            "class P:\n    name = 'hidden'\n    description = ''\n"
            "    def utilities(self):\n        return {}\nplugin = P()\n",
            encoding="utf-8",
        )
        assert load_registry(tmp_path).list_plugins() == []

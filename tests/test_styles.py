"""
Tests for the style pipeline (config loading, scanning, purging).
"""

from pathlib import Path

import pytest

from src.core.styles import (
    DEFAULT_CONFIG,
    StyleConfigError,
    StylePipeline,
    build_stylesheet,
    expand_pattern,
    extract_candidates,
    load_config,
)
from src.domain.models import StyleConfig
from src.plugins import PluginRegistry, load_registry

PROJECT_ROOT = Path(__file__).parent.parent


class TestLoadConfig:
    """Tests for reading styles.yaml."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """A missing config should fall back to the built-in defaults."""
        config = load_config(tmp_path / "missing.yaml")
        assert config.safelist == set(DEFAULT_CONFIG["safelist"])
        assert config.content == DEFAULT_CONFIG["content"]
        assert config.plugins == []

    def test_shipped_config_matches_defaults(self):
        """styles.yaml and the built-in defaults should describe the same build."""
        config = load_config(PROJECT_ROOT / "styles.yaml")
        assert config.content == DEFAULT_CONFIG["content"]
        assert config.safelist == set(DEFAULT_CONFIG["safelist"])
        assert config.theme.extend.font_family == {"roboto-mono": ['"Roboto Mono"', "monospace"]}

    def test_duplicate_safelist_entries_collapse(self, tmp_path):
        """Safelist is loaded as a set."""
        path = tmp_path / "styles.yaml"
        path.write_text(
            "content: ['./src/**/*.py']\nsafelist: [flex, flex, p-4]\n", encoding="utf-8"
        )
        config = load_config(path)
        assert config.safelist == {"flex", "p-4"}

    def test_malformed_yaml_raises(self, tmp_path):
        """Broken YAML should raise StyleConfigError."""
        path = tmp_path / "styles.yaml"
        path.write_text("content: [unclosed\n", encoding="utf-8")
        with pytest.raises(StyleConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "<file>"

    def test_non_mapping_raises(self, tmp_path):
        """A YAML list is not a config."""
        path = tmp_path / "styles.yaml"
        path.write_text("- flex\n", encoding="utf-8")
        with pytest.raises(StyleConfigError):
            load_config(path)

    def test_empty_content_raises(self, tmp_path):
        """At least one content pattern is required."""
        path = tmp_path / "styles.yaml"
        path.write_text("content: []\n", encoding="utf-8")
        with pytest.raises(StyleConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "content"

    def test_absolute_pattern_raises(self, tmp_path):
        path = tmp_path / "styles.yaml"
        path.write_text(f"content: ['{tmp_path}/*.py']\n", encoding="utf-8")
        with pytest.raises(StyleConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "content"

    def test_dot_slash_only_pattern_raises(self, tmp_path):
        path = tmp_path / "styles.yaml"
        path.write_text("content: ['./']\n", encoding="utf-8")
        with pytest.raises(StyleConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "content"

    def test_blank_safelist_entry_raises(self, tmp_path):
        """Safelist entries must be single class names."""
        path = tmp_path / "styles.yaml"
        path.write_text("content: ['a.py']\nsafelist: ['two words']\n", encoding="utf-8")
        with pytest.raises(StyleConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "safelist"


class TestPatterns:
    """Tests for content glob handling."""

    def test_leading_dot_slash_stripped(self):
        assert expand_pattern("./src/main.py") == ["src/main.py"]

    def test_brace_expansion(self):
        assert expand_pattern("./src/**/*.{css,js}") == ["src/**/*.css", "src/**/*.js"]

    def test_multiple_brace_groups(self):
        assert expand_pattern("{a,b}/*.{py,js}") == ["a/*.py", "a/*.js", "b/*.py", "b/*.js"]

    def test_content_files_in_pattern_order(self, site_tree, site_config):
        """Files should follow pattern order and skip node_modules."""
        files = StylePipeline(site_config, site_tree).iter_content_files()
        names = [path.name for path in files]
        assert names == ["home.py", "app.js", "widget.mjs"]

    def test_overlapping_patterns_list_files_once(self, site_tree):
        config = StyleConfig(content=["./src/**/*.py", "./src/views/*.py"])
        files = StylePipeline(config, site_tree).iter_content_files()
        assert len(files) == 1

    def test_git_and_pycache_excluded(self, site_tree):
        """Matches inside .git and __pycache__ are never scanned."""
        for folder in (".git", "__pycache__"):
            hidden = site_tree / "src" / "views" / folder
            hidden.mkdir()
            (hidden / "cached.py").write_text('"bg-rose-500"\n', encoding="utf-8")
        config = StyleConfig(content=["./src/views/**/*.py"])
        files = StylePipeline(config, site_tree).iter_content_files()
        assert [path.name for path in files] == ["home.py"]

    def test_empty_brace_option_raises(self, site_tree, tmp_path):
        """A brace group that expands to an empty pattern is a config error."""
        config = StyleConfig(content=["{src/views/*.py,}"])
        with pytest.raises(StyleConfigError) as exc_info:
            build_stylesheet(config, site_tree, tmp_path / "styles.css")
        assert exc_info.value.key == "content"
        assert not (tmp_path / "styles.css").exists()


class TestExtractCandidates:
    """Tests for the textual scan."""

    def test_html_attribute(self):
        assert {"px-4", "py-2"} <= extract_candidates('<a class="px-4 py-2">')

    def test_trailing_punctuation_stripped(self):
        assert "mt-28" in extract_candidates("Use mt-28.")

    def test_css_selector(self):
        assert "text-white" in extract_candidates(".text-white { color: #fff }")

    def test_concatenated_names_are_invisible(self):
        """Runtime-built names cannot be found, which is why they are safelisted."""
        candidates = extract_candidates('"bg-" + color + "-200"')
        assert "bg-blue-200" not in candidates


class TestBuild:
    """Tests for the purge and the written stylesheet."""

    def test_discovered_utilities_are_emitted(self, site_tree, site_config, tmp_path):
        report = build_stylesheet(site_config, site_tree, tmp_path / "out" / "styles.css")
        for name in ("bg-white", "text-red-500", "hover:bg-cyan-500", "md:text-4xl", "rounded-lg"):
            assert name in report.emitted

    def test_unknown_tokens_are_dropped(self, site_tree, site_config, tmp_path):
        report = build_stylesheet(site_config, site_tree, tmp_path / "styles.css")
        assert "not-a-class" not in report.emitted
        assert "bg-green-500" not in report.emitted

    def test_safelist_kept_without_reference(self, site_tree, site_config, tmp_path):
        """Safelisted classes appear even though no file mentions them."""
        output = tmp_path / "styles.css"
        report = build_stylesheet(site_config, site_tree, output)
        assert "mt-28" in report.emitted
        assert ".mt-28 { margin-top: 7rem }" in output.read_text(encoding="utf-8")

    def test_safelist_without_utility_is_reported(self, site_tree, site_config, tmp_path):
        report = build_stylesheet(site_config, site_tree, tmp_path / "styles.css")
        assert report.unknown == ["text-md"]
        assert "text-md" not in report.emitted

    def test_variants_render_pseudo_and_media(self, site_tree, site_config, tmp_path):
        output = tmp_path / "styles.css"
        build_stylesheet(site_config, site_tree, output)
        css = output.read_text(encoding="utf-8")
        assert ".hover\\:bg-cyan-500:hover { background-color: #06b6d4 }" in css
        assert "@media (min-width: 768px) {" in css
        assert css.index(".bg-white") < css.index("@media")

    def test_report_counts(self, site_tree, site_config, tmp_path):
        output = tmp_path / "nested" / "dir" / "styles.css"
        report = build_stylesheet(site_config, site_tree, output)
        assert report.files_scanned == 3
        assert report.output == output
        assert report.bytes_written == len(output.read_bytes())

    def test_output_is_deterministic(self, site_tree, site_config, tmp_path):
        first = tmp_path / "a.css"
        second = tmp_path / "b.css"
        build_stylesheet(site_config, site_tree, first)
        build_stylesheet(site_config, site_tree, second)
        assert first.read_bytes() == second.read_bytes()

    def test_safelist_order_irrelevant(self, tmp_path):
        forward = StyleConfig(content=["none/*.py"], safelist=["p-4", "flex", "text-sm"])
        backward = StyleConfig(content=["none/*.py"], safelist=["text-sm", "flex", "p-4"])
        css_a = StylePipeline(forward, tmp_path).render_css(forward.safelist)
        css_b = StylePipeline(backward, tmp_path).render_css(backward.safelist)
        assert css_a == css_b

    def test_theme_font_family(self, tmp_path):
        config = StyleConfig(
            content=["none/*.py"],
            theme={"extend": {"fontFamily": {"roboto-mono": ['"Roboto Mono"', "monospace"]}}},
        )
        css = StylePipeline(config, tmp_path).render_css({"font-roboto-mono"})
        assert '.font-roboto-mono { font-family: "Roboto Mono", monospace }' in css

    def test_unreadable_file_skipped(self, site_tree, site_config, tmp_path):
        (site_tree / "src" / "views" / "binary.py").write_bytes(b"\xff\xfe\x00bg-white")
        report = build_stylesheet(site_config, site_tree, tmp_path / "styles.css")
        assert report.files_scanned == 3
        assert "bg-white" in report.emitted

    def test_shipped_site_build(self, tmp_path):
        """Building the real site keeps the clock classes and the theme font."""
        report = build_stylesheet(load_config(PROJECT_ROOT / "styles.yaml"), PROJECT_ROOT, tmp_path / "s.css")
        assert report.unknown == ["text-md"]
        assert "bg-blue-200" in report.emitted
        assert "font-roboto-mono" in report.emitted
        assert "hover:bg-gray-100" in report.emitted


class TestPlugins:
    """Tests for plugin utilities inside the pipeline."""

    def test_enabled_plugin_contributes_utilities(self, tmp_path):
        config = StyleConfig(content=["none/*.py"], safelist=["aspect-video"], plugins=["aspect_ratio"])
        report = StylePipeline(config, tmp_path, load_registry()).build(tmp_path / "styles.css")
        assert "aspect-video" in report.emitted
        assert report.unknown == []

    def test_disabled_plugin_contributes_nothing(self, tmp_path):
        config = StyleConfig(content=["none/*.py"], safelist=["aspect-video"])
        report = build_stylesheet(config, tmp_path, tmp_path / "styles.css")
        assert report.unknown == ["aspect-video"]

    def test_unknown_plugin_raises(self, tmp_path):
        config = StyleConfig(content=["none/*.py"], plugins=["typography"])
        with pytest.raises(StyleConfigError) as exc_info:
            StylePipeline(config, tmp_path, PluginRegistry(tmp_path))
        assert exc_info.value.key == "plugins"

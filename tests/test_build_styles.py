"""
Tests for the scripts/build_styles.py command.
"""

from scripts.build_styles import main


class TestBuildStylesCommand:
    """Tests for the build_styles CLI."""

    def test_builds_stylesheet(self, site_tree, tmp_path):
        config = site_tree / "styles.yaml"
        config.write_text(
            "content: ['./src/views/**/*.py']\nsafelist: [mt-28]\n", encoding="utf-8"
        )
        output = tmp_path / "build" / "styles.css"

        code = main(["--config", str(config), "--root", str(site_tree), "--output", str(output)])

        assert code == 0
        css = output.read_text(encoding="utf-8")
        assert ".mt-28" in css
        assert ".bg-white" in css

    def test_list_flag(self, site_tree, tmp_path, capsys):
        config = site_tree / "styles.yaml"
        config.write_text("content: ['./src/views/**/*.py']\n", encoding="utf-8")

        code = main(
            [
                "--config", str(config),
                "--root", str(site_tree),
                "--output", str(tmp_path / "styles.css"),
                "--list",
            ]
        )

        assert code == 0
        assert "text-red-500" in capsys.readouterr().out

    def test_invalid_config_exits_nonzero(self, tmp_path):
        config = tmp_path / "styles.yaml"
        config.write_text("content: []\n", encoding="utf-8")

        code = main(["--config", str(config), "--root", str(tmp_path), "--output", str(tmp_path / "s.css")])

        assert code == 1

    def test_unwritable_output_exits_nonzero(self, site_tree, tmp_path):
        config = site_tree / "styles.yaml"
        config.write_text("content: ['./src/views/**/*.py']\n", encoding="utf-8")
        output = tmp_path / "build"
        output.mkdir()

        code = main(["--config", str(config), "--root", str(site_tree), "--output", str(output)])

        assert code == 1

    def test_absolute_pattern_exits_nonzero(self, tmp_path):
        config = tmp_path / "styles.yaml"
        config.write_text(f"content: ['{tmp_path}/*.py']\n", encoding="utf-8")
        output = tmp_path / "styles.css"

        code = main(["--config", str(config), "--root", str(tmp_path), "--output", str(output)])

        assert code == 1
        assert not output.exists()

    def test_empty_brace_option_exits_nonzero(self, site_tree, tmp_path):
        config = site_tree / "styles.yaml"
        config.write_text("content: ['{src/views/*.py,}']\n", encoding="utf-8")

        code = main(["--config", str(config), "--root", str(site_tree), "--output", str(tmp_path / "s.css")])

        assert code == 1

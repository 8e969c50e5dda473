"""
Pytest configuration and fixtures for Vitrina tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Set test environment variables
os.environ.setdefault("VITRINA_BUILD_STYLES_ON_STARTUP", "false")


@pytest.fixture
def client():
    """TestClient for the site (lifespan not started)."""
    from fastapi.testclient import TestClient

    from src.main import app

    return TestClient(app)


@pytest.fixture
def site_tree(tmp_path):
    """
    A tiny project tree for the style pipeline.

    views reference two utilities and one made-up class; a script references
    variant utilities; node_modules must never be scanned.
    """
    views = tmp_path / "src" / "views"
    views.mkdir(parents=True)
    (views / "home.py").write_text(
        'CARD = "bg-white text-red-500 not-a-class"\n', encoding="utf-8"
    )

    scripts = tmp_path / "src" / "static" / "js"
    scripts.mkdir(parents=True)
    (scripts / "app.js").write_text(
        'el.className = "hover:bg-cyan-500 md:text-4xl";\n', encoding="utf-8"
    )
    (scripts / "widget.mjs").write_text('const css = "rounded-lg";\n', encoding="utf-8")

    vendored = scripts / "node_modules" / "lib"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text('"bg-green-500"\n', encoding="utf-8")

    return tmp_path


@pytest.fixture
def site_config():
    """Style config matching the site_tree fixture."""
    from src.domain.models import StyleConfig

    return StyleConfig(
        content=["./src/views/**/*.py", "./src/static/js/**/*.{js,mjs}"],
        safelist=["mt-28", "text-md", "mt-28"],
        theme={"extend": {"fontFamily": {"roboto-mono": ['"Roboto Mono"', "monospace"]}}},
    )

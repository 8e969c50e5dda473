# -----------------------------------------------------------------------------
# SITE CONFIGURATION
# -----------------------------------------------------------------------------
# Responsibility: Single place where environment variables are read.
# Values come from the process environment, optionally seeded by a .env
# file at the project root.
# -----------------------------------------------------------------------------

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

load_dotenv(PROJECT_ROOT / ".env")

SERVICE_NAME = "vitrina"
VERSION = "1.0.0"

STATIC_DIR = PROJECT_ROOT / "src" / "static"
STYLESHEET_URL = "/static/build/styles.css"


def _flag(name: str, default: str) -> bool:
    """Read a boolean environment flag ("1", "true", "yes", "on")."""
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


SERVER_CONFIG = {
    "host": os.getenv("VITRINA_HOST", "127.0.0.1"),
    "port": int(os.getenv("VITRINA_PORT", "5050")),
}

STYLES_CONFIG = {
    "config_path": Path(os.getenv("VITRINA_STYLES_CONFIG", str(PROJECT_ROOT / "styles.yaml"))),
    "output_path": Path(
        os.getenv("VITRINA_STYLES_OUTPUT", str(STATIC_DIR / "build" / "styles.css"))
    ),
    "build_on_startup": _flag("VITRINA_BUILD_STYLES_ON_STARTUP", "true"),
}

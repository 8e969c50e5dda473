# -----------------------------------------------------------------------------
# DOMAIN LAYER
# -----------------------------------------------------------------------------
# Contains the Pydantic models shared by the page server (Route, PageId)
# and the style pipeline (StyleConfig, BuildReport).
# -----------------------------------------------------------------------------

from .models import BuildReport, PageId, Route, StyleConfig, Theme, ThemeExtension

__all__ = ["BuildReport", "PageId", "Route", "StyleConfig", "Theme", "ThemeExtension"]

# -----------------------------------------------------------------------------
# CORE LAYER
# -----------------------------------------------------------------------------
# The site logic:
# - Route table: the three fixed pages
# - StylePipeline: scan content, keep the safelist, write the stylesheet
# - Utility generator: class name -> CSS rules
# -----------------------------------------------------------------------------

from .pages import ROUTES, get_route, resolve
from .styles import StyleConfigError, StylePipeline, build_stylesheet, load_config
from .utilities import escape_class, rules_for

__all__ = [
    "ROUTES", "get_route", "resolve",
    "StyleConfigError", "StylePipeline", "build_stylesheet", "load_config",
    "escape_class", "rules_for",
]

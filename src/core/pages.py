# -----------------------------------------------------------------------------
# ROUTE TABLE
# -----------------------------------------------------------------------------
# Responsibility: The fixed set of pages the site serves. Declared once at
# import time; nothing registers routes at runtime.
# -----------------------------------------------------------------------------

from src.domain.models import PageId, Route

ROUTES: tuple[Route, ...] = (
    Route(path="/", page=PageId.ROOT, name="static_pages_root", title="Inicio"),
    Route(path="/somos", page=PageId.SOMOS, name="static_pages_somos", title="Somos"),
    Route(path="/tech", page=PageId.TECH, name="static_pages_tech", title="Tech"),
)

_BY_PAGE = {route.page: route for route in ROUTES}
_BY_PATH = {route.path: route for route in ROUTES}


def get_route(page: PageId) -> Route:
    """
    Look up the route of a page.

    Raises:
        KeyError: If the page has no route.
    """
    try:
        return _BY_PAGE[PageId(page)]
    except ValueError:
        raise KeyError(page)


def resolve(path: str) -> Route | None:
    """Find the route serving a URL path ("/somos/" is the same as "/somos")."""
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return _BY_PATH.get(path)

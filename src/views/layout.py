# -----------------------------------------------------------------------------
# SHARED LAYOUT
# -----------------------------------------------------------------------------
# Every page is wrapped in the same document: stylesheet, font, clock script,
# navigation over the fixed routes, and a footer.
# -----------------------------------------------------------------------------

from html import escape

from src.core.config import SERVICE_NAME, STYLESHEET_URL
from src.core.pages import ROUTES
from src.domain.models import PageId
from src.helpers.html import nav_link

FONT_URL = "https://fonts.googleapis.com/css2?family=Roboto+Mono:wght@400;600;700&display=swap"
CLOCK_SCRIPT_URL = "/static/js/clock.js"
SITE_CSS_URL = "/static/css/site.css"


def navigation(active: PageId | None) -> str:
    links = [nav_link(route.path, route.title, active=route.page == active) for route in ROUTES]
    return '<nav class="flex space-x-4">' + "".join(links) + "</nav>"


def html_doc(title: str, body: str, active: PageId | None = None) -> str:
    """
    Wrap a page body in the site document.

    Args:
        title: Page title (escaped).
        body: Trusted HTML for <main>.
        active: Page highlighted in the navigation, if any.
    """
    return (
        "<!doctype html>\n"
        '<html lang="es">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)} · {SERVICE_NAME}</title>\n"
        f'<link rel="stylesheet" href="{escape(FONT_URL, quote=True)}">\n'
        f'<link rel="stylesheet" href="{STYLESHEET_URL}">\n'
        f'<link rel="stylesheet" href="{SITE_CSS_URL}">\n'
        f'<script src="{CLOCK_SCRIPT_URL}" defer></script>\n'
        "</head>\n"
        '<body class="flex flex-col min-h-screen bg-gray-100 font-roboto-mono">\n'
        '<header class="bg-white shadow-md">\n'
        '<div class="container mx-auto flex items-center justify-between px-5 py-3">\n'
        f'<a href="/" class="text-lg font-bold text-gray-900">{SERVICE_NAME}</a>\n'
        f"{navigation(active)}\n"
        "</div>\n"
        "</header>\n"
        '<main class="container mx-auto flex-1 px-5 py-6">\n'
        f"{body}\n"
        "</main>\n"
        '<footer class="py-3 text-center text-sm text-gray-600">\n'
        f"{SERVICE_NAME}\n"
        "</footer>\n"
        "</body>\n"
        "</html>\n"
    )

# -----------------------------------------------------------------------------
# PAGES
# -----------------------------------------------------------------------------
# Page bodies for the static pages and the not-found page. Every class string
# here is picked up by the style pipeline scan.
# -----------------------------------------------------------------------------

from datetime import datetime
from html import escape
from typing import Callable

from src.core.pages import get_route
from src.domain.models import PageId
from src.helpers.html import heading, item_list, link, para
from src.views.layout import html_doc

HERO_TITLE = "mt-28 text-4xl font-bold text-gray-900"
CARD = "bg-white rounded-lg shadow-md p-4"

TECH_STACK = [
    ("Backend", ["Python", "FastAPI", "Uvicorn", "Pydantic"]),
    ("Frontend", ["HTML renderizado en el servidor", "Utilidades CSS", "JavaScript sin frameworks"]),
    ("Calidad", ["pytest", "TestClient", "Hojas de estilo purgadas"]),
]


def clock_widget(now: datetime | None = None) -> str:
    """
    Clock card. The server renders the initial time; clock.js keeps it ticking
    and swaps the card colours, building those class names at runtime.
    """
    now = now or datetime.now()
    return (
        f'<section class="{CARD} text-center space-y-6" data-clock>\n'
        f'<p class="text-lg font-semibold" data-clock-time>{now:%H:%M:%S}</p>\n'
        f'<p class="text-sm text-gray-600" data-clock-date>{now:%Y-%m-%d}</p>\n'
        "</section>"
    )


def render_root(now: datetime | None = None) -> str:
    route = get_route(PageId.ROOT)
    body = "\n".join(
        [
            heading("Bienvenidos", css=HERO_TITLE),
            para(
                "Un sitio sencillo, rápido y sin estado: tres páginas y una hoja de estilos "
                "que solo contiene lo que se usa.",
                css="py-2 text-gray-600",
            ),
            clock_widget(now),
        ]
    )
    return html_doc(route.title, body, active=route.page)


def render_somos() -> str:
    route = get_route(PageId.SOMOS)
    body = "\n".join(
        [
            heading("Somos", css=HERO_TITLE),
            f'<div class="{CARD} space-y-6">',
            para(
                "Un equipo pequeño que construye herramientas web claras y mantenibles.",
                css="text-lg",
            ),
            para(
                "Preferimos páginas renderizadas en el servidor, pocas dependencias "
                "y pruebas que comprueban lo que importa.",
                css="text-gray-600",
            ),
            "</div>",
            para("¿Quieres saber con qué trabajamos?", css="py-2"),
            link("/tech", "Ver la tecnología", css="px-4 py-2 rounded bg-cyan-500 text-white"),
        ]
    )
    return html_doc(route.title, body, active=route.page)


def render_tech() -> str:
    route = get_route(PageId.TECH)
    sections = []
    for title, items in TECH_STACK:
        sections.append(
            f'<div class="{CARD} flex-1">\n'
            f"{heading(title, level=2, css='text-lg font-semibold')}\n"
            f"{item_list(items, css='text-sm text-gray-600')}\n"
            "</div>"
        )
    body = "\n".join(
        [
            heading("Tecnología", css=HERO_TITLE),
            '<div class="flex flex-col md:flex-row gap-4 py-6">',
            *sections,
            "</div>",
        ]
    )
    return html_doc(route.title, body, active=route.page)


def render_not_found(path: str) -> str:
    body = "\n".join(
        [
            heading("Página no encontrada", css=HERO_TITLE),
            f'<p class="py-2 text-gray-600">No existe nada en <code>{escape(path)}</code>.</p>',
            link("/", "Volver al inicio", css="px-4 py-2 rounded bg-red-500 text-white"),
        ]
    )
    return html_doc("No encontrada", body)


RENDERERS: dict[PageId, Callable[[], str]] = {
    PageId.ROOT: render_root,
    PageId.SOMOS: render_somos,
    PageId.TECH: render_tech,
}


def render_page(page: PageId) -> str:
    """Render a page by id."""
    return RENDERERS[PageId(page)]()

# -----------------------------------------------------------------------------
# VITRINA - FASTAPI INTERFACE
# -----------------------------------------------------------------------------
# Server-rendered static pages.
#
# Endpoints:
# - GET  /        : Inicio (root)
# - GET  /somos   : Somos
# - GET  /tech    : Tech
# - GET  /health  : Health check
# - GET  /static  : CSS / JS assets (built stylesheet under /static/build)
# Anything else renders the HTML not-found page with a 404.
# -----------------------------------------------------------------------------

import sys
from contextlib import asynccontextmanager
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from rich.console import Console
from rich.panel import Panel
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import SERVER_CONFIG, SERVICE_NAME, STATIC_DIR, STYLES_CONFIG, VERSION
from src.core.pages import ROUTES, resolve
from src.core.styles import StyleConfigError, build_stylesheet, load_config
from src.domain.models import Route
from src.views.pages import render_not_found, render_page

console = Console()


def build_styles_on_startup() -> None:
    """Build the stylesheet once; a failure leaves the pages unstyled, not down."""
    try:
        config = load_config(STYLES_CONFIG["config_path"])
        build_stylesheet(config, PROJECT_ROOT, STYLES_CONFIG["output_path"])
    except StyleConfigError as e:
        console.print(f"[red][STYLES] Config error ({e.key}): {e} {e.details}[/red]")
    except OSError as e:
        console.print(f"[red][STYLES] Could not write stylesheet: {e}[/red]")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    print_banner()
    if STYLES_CONFIG["build_on_startup"]:
        build_styles_on_startup()

    console.print("[green]VITRINA ONLINE[/green]")

    yield

    # Shutdown
    console.print("[yellow]VITRINA SHUTTING DOWN[/yellow]")


app = FastAPI(
    title="Vitrina",
    description="Static pages with a purged utility stylesheet",
    version=VERSION,
    lifespan=lifespan,
    redirect_slashes=False,
)

# Static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


# =============================================================================
# ENDPOINTS
# =============================================================================


def _page_endpoint(route: Route):
    async def endpoint() -> HTMLResponse:
        return HTMLResponse(render_page(route.page))

    endpoint.__name__ = route.name
    endpoint.__doc__ = f"Serve the {route.page.value} page."
    return endpoint


for _route in ROUTES:
    app.add_api_route(
        _route.path,
        _page_endpoint(_route),
        methods=["GET"],
        name=_route.name,
        response_class=HTMLResponse,
    )


@app.get("/health")
async def health_check():
    """Health check for uptime probes and load balancers."""
    return {"status": "online", "service": SERVICE_NAME, "version": VERSION}


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """
    Render 404s as a page; other HTTP errors keep FastAPI's JSON body.

    A page path with trailing slashes ("/somos/") redirects to the route's
    own path.
    """
    if exc.status_code == 404:
        route = resolve(request.url.path)
        if route is not None and route.path != request.url.path:
            target = route.path
            if request.url.query:
                target = f"{target}?{request.url.query}"
            return RedirectResponse(target, status_code=308)
        return HTMLResponse(render_not_found(request.url.path), status_code=404)
    return await http_exception_handler(request, exc)


# =============================================================================
# BANNER
# =============================================================================


def print_banner() -> None:
    """Print the Vitrina startup banner."""
    banner = f"""
  ██╗   ██╗██╗████████╗██████╗ ██╗███╗   ██╗ █████╗
  ██║   ██║██║╚══██╔══╝██╔══██╗██║████╗  ██║██╔══██╗
  ██║   ██║██║   ██║   ██████╔╝██║██╔██╗ ██║███████║
  ╚██╗ ██╔╝██║   ██║   ██╔══██╗██║██║╚██╗██║██╔══██║
   ╚████╔╝ ██║   ██║   ██║  ██║██║██║ ╚████║██║  ██║
    ╚═══╝  ╚═╝   ╚═╝   ╚═╝  ╚═╝╚═╝╚═╝  ╚═══╝╚═╝  ╚═╝

    {len(ROUTES)} pages · v{VERSION}
    """
    console.print(Panel(banner, border_style="cyan"))


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=SERVER_CONFIG["host"], port=SERVER_CONFIG["port"])

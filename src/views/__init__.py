from .layout import html_doc
from .pages import render_not_found, render_page, render_root, render_somos, render_tech

__all__ = ["html_doc", "render_not_found", "render_page", "render_root", "render_somos", "render_tech"]

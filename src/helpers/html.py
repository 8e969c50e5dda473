# -----------------------------------------------------------------------------
# HTML HELPERS
# -----------------------------------------------------------------------------
# Small escaping helpers shared by the layout and the pages. Class strings
# written here are picked up by the style pipeline scan.
# -----------------------------------------------------------------------------

from html import escape

NAV_LINK = "px-4 py-2 rounded text-gray-600 hover:bg-gray-100"
NAV_LINK_ACTIVE = "px-4 py-2 rounded bg-cyan-500 text-white"


def classes(*tokens: str | None) -> str:
    """Join utility classes, skipping empty tokens and duplicates."""
    seen = []
    for token in tokens:
        if not token:
            continue
        for name in token.split():
            if name not in seen:
                seen.append(name)
    return " ".join(seen)


def attr_class(*tokens: str | None) -> str:
    value = classes(*tokens)
    return f' class="{escape(value, quote=True)}"' if value else ""


def link(href: str, text: str, css: str | None = None) -> str:
    return f'<a href="{escape(href, quote=True)}"{attr_class(css)}>{escape(text)}</a>'


def nav_link(href: str, text: str, active: bool = False) -> str:
    """Navigation link; the active page gets the highlighted style."""
    css = NAV_LINK_ACTIVE if active else NAV_LINK
    current = ' aria-current="page"' if active else ""
    return (
        f'<a href="{escape(href, quote=True)}" class="{css}"{current}>'
        f"{escape(text)}</a>"
    )


def heading(text: str, level: int = 1, css: str | None = None) -> str:
    level = min(max(level, 1), 6)
    return f"<h{level}{attr_class(css)}>{escape(text)}</h{level}>"


def para(text: str, css: str | None = None) -> str:
    return f"<p{attr_class(css)}>{escape(text)}</p>"


def item_list(items: list[str], css: str | None = None) -> str:
    lines = [f"<ul{attr_class(css)}>"]
    for item in items:
        lines.append(f"<li>{escape(item)}</li>")
    lines.append("</ul>")
    return "\n".join(lines)

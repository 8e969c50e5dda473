# -----------------------------------------------------------------------------
# UTILITY GENERATOR
# -----------------------------------------------------------------------------
# Responsibility: Turn a utility class name ("px-4", "hover:bg-red-500",
# "md:text-4xl") into CSS rules. Unknown classes produce no rules, which is
# how the style pipeline tells real utilities apart from random tokens.
#
# Scope: Tailwind's core utility families with the default theme values
# (layout, position, box model, sizing, typography, colors, effects), plus
# the theme's font family aliases and whatever enabled plugins contribute.
# -----------------------------------------------------------------------------

import re
from dataclasses import dataclass, field
from typing import Sequence

from src.domain.models import Theme

BREAKPOINTS = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

PSEUDO_VARIANTS = {
    "hover": ":hover",
    "focus": ":focus",
    "focus-visible": ":focus-visible",
    "focus-within": ":focus-within",
    "active": ":active",
    "visited": ":visited",
    "disabled": ":disabled",
    "first": ":first-child",
    "last": ":last-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
}

SPACING_SCALE = {
    "0": "0px",
    "px": "1px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "36": "9rem",
    "40": "10rem",
    "44": "11rem",
    "48": "12rem",
    "52": "13rem",
    "56": "14rem",
    "60": "15rem",
    "64": "16rem",
    "72": "18rem",
    "80": "20rem",
    "96": "24rem",
}

SPACING_PROPERTIES = {
    "p": ("padding",),
    "px": ("padding-left", "padding-right"),
    "py": ("padding-top", "padding-bottom"),
    "pt": ("padding-top",),
    "pr": ("padding-right",),
    "pb": ("padding-bottom",),
    "pl": ("padding-left",),
    "m": ("margin",),
    "mx": ("margin-left", "margin-right"),
    "my": ("margin-top", "margin-bottom"),
    "mt": ("margin-top",),
    "mr": ("margin-right",),
    "mb": ("margin-bottom",),
    "ml": ("margin-left",),
}

INSET_PROPERTIES = {
    "inset-x": ("left", "right"),
    "inset-y": ("top", "bottom"),
    "inset": ("inset",),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
}

SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")

# Default palette: one hex per shade, in SHADES order
_PALETTE_HEX = {
    "slate": "f8fafc f1f5f9 e2e8f0 cbd5e1 94a3b8 64748b 475569 334155 1e293b 0f172a 020617",
    "gray": "f9fafb f3f4f6 e5e7eb d1d5db 9ca3af 6b7280 4b5563 374151 1f2937 111827 030712",
    "zinc": "fafafa f4f4f5 e4e4e7 d4d4d8 a1a1aa 71717a 52525b 3f3f46 27272a 18181b 09090b",
    "neutral": "fafafa f5f5f5 e5e5e5 d4d4d4 a3a3a3 737373 525252 404040 262626 171717 0a0a0a",
    "stone": "fafaf9 f5f5f4 e7e5e4 d6d3d1 a8a29e 78716c 57534e 44403c 292524 1c1917 0c0a09",
    "red": "fef2f2 fee2e2 fecaca fca5a5 f87171 ef4444 dc2626 b91c1c 991b1b 7f1d1d 450a0a",
    "orange": "fff7ed ffedd5 fed7aa fdba74 fb923c f97316 ea580c c2410c 9a3412 7c2d12 431407",
    "amber": "fffbeb fef3c7 fde68a fcd34d fbbf24 f59e0b d97706 b45309 92400e 78350f 451a03",
    "yellow": "fefce8 fef9c3 fef08a fde047 facc15 eab308 ca8a04 a16207 854d0e 713f12 422006",
    "lime": "f7fee7 ecfccb d9f99d bef264 a3e635 84cc16 65a30d 4d7c0f 3f6212 365314 1a2e05",
    "green": "f0fdf4 dcfce7 bbf7d0 86efac 4ade80 22c55e 16a34a 15803d 166534 14532d 052e16",
    "emerald": "ecfdf5 d1fae5 a7f3d0 6ee7b7 34d399 10b981 059669 047857 065f46 064e3b 022c22",
    "teal": "f0fdfa ccfbf1 99f6e4 5eead4 2dd4bf 14b8a6 0d9488 0f766e 115e59 134e4a 042f2e",
    "cyan": "ecfeff cffafe a5f3fc 67e8f9 22d3ee 06b6d4 0891b2 0e7490 155e75 164e63 083344",
    "sky": "f0f9ff e0f2fe bae6fd 7dd3fc 38bdf8 0ea5e9 0284c7 0369a1 075985 0c4a6e 082f49",
    "blue": "eff6ff dbeafe bfdbfe 93c5fd 60a5fa 3b82f6 2563eb 1d4ed8 1e40af 1e3a8a 172554",
    "indigo": "eef2ff e0e7ff c7d2fe a5b4fc 818cf8 6366f1 4f46e5 4338ca 3730a3 312e81 1e1b4b",
    "violet": "f5f3ff ede9fe ddd6fe c4b5fd a78bfa 8b5cf6 7c3aed 6d28d9 5b21b6 4c1d95 2e1065",
    "purple": "faf5ff f3e8ff e9d5ff d8b4fe c084fc a855f7 9333ea 7e22ce 6b21a8 581c87 3b0764",
    "fuchsia": "fdf4ff fae8ff f5d0fe f0abfc e879f9 d946ef c026d3 a21caf 86198f 701a75 4a044e",
    "pink": "fdf2f8 fce7f3 fbcfe8 f9a8d4 f472b6 ec4899 db2777 be185d 9d174d 831843 500724",
    "rose": "fff1f2 ffe4e6 fecdd3 fda4af fb7185 f43f5e e11d48 be123c 9f1239 881337 4c0519",
}

COLOR_PALETTE: dict[str, dict[str, str]] = {
    "black": {"DEFAULT": "#000"},
    "white": {"DEFAULT": "#fff"},
    "transparent": {"DEFAULT": "transparent"},
    "current": {"DEFAULT": "currentColor"},
    "inherit": {"DEFAULT": "inherit"},
}
COLOR_PALETTE.update(
    {
        name: dict(zip(SHADES, (f"#{value}" for value in hexes.split())))
        for name, hexes in _PALETTE_HEX.items()
    }
)

FONT_SIZES = {
    "xs": ("0.75rem", "1rem"),
    "sm": ("0.875rem", "1.25rem"),
    "base": ("1rem", "1.5rem"),
    "lg": ("1.125rem", "1.75rem"),
    "xl": ("1.25rem", "1.75rem"),
    "2xl": ("1.5rem", "2rem"),
    "3xl": ("1.875rem", "2.25rem"),
    "4xl": ("2.25rem", "2.5rem"),
    "5xl": ("3rem", "1"),
    "6xl": ("3.75rem", "1"),
    "7xl": ("4.5rem", "1"),
    "8xl": ("6rem", "1"),
    "9xl": ("8rem", "1"),
}

FONT_WEIGHTS = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

DEFAULT_FONT_FAMILIES = {
    "sans": [
        "ui-sans-serif",
        "system-ui",
        "sans-serif",
        '"Apple Color Emoji"',
        '"Segoe UI Emoji"',
    ],
    "serif": ["ui-serif", "Georgia", "Cambria", '"Times New Roman"', "Times", "serif"],
    "mono": [
        "ui-monospace",
        "SFMono-Regular",
        "Menlo",
        "Monaco",
        "Consolas",
        '"Liberation Mono"',
        '"Courier New"',
        "monospace",
    ],
}

BORDER_RADIUS = {
    "rounded-none": "0px",
    "rounded-sm": "0.125rem",
    "rounded": "0.25rem",
    "rounded-md": "0.375rem",
    "rounded-lg": "0.5rem",
    "rounded-xl": "0.75rem",
    "rounded-2xl": "1rem",
    "rounded-3xl": "1.5rem",
    "rounded-full": "9999px",
}

SHADOWS = {
    "shadow-sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "shadow": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "shadow-md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "shadow-lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "shadow-xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "shadow-2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "shadow-inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "shadow-none": "0 0 #0000",
}

SIZE_PROPERTIES = {
    "min-w": "min-width",
    "min-h": "min-height",
    "max-w": "max-width",
    "max-h": "max-height",
    "w": "width",
    "h": "height",
}

SIZE_KEYWORDS = {
    "full": "100%",
    "auto": "auto",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

FRACTIONS = {
    "1/2": "50%",
    "1/3": "33.333333%",
    "2/3": "66.666667%",
    "1/4": "25%",
    "2/4": "50%",
    "3/4": "75%",
    "1/5": "20%",
    "2/5": "40%",
    "3/5": "60%",
    "4/5": "80%",
    "1/6": "16.666667%",
    "5/6": "83.333333%",
}

MAX_WIDTHS = {
    "none": "none",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
    "prose": "65ch",
    **{f"screen-{name}": width for name, width in BREAKPOINTS.items()},
}

Z_INDEX = {"0": "0", "10": "10", "20": "20", "30": "30", "40": "40", "50": "50", "auto": "auto"}

OPACITY = {str(step): f"{step / 100:g}" for step in range(0, 101, 5)}

BORDER_WIDTHS = {"": "1px", "-0": "0px", "-2": "2px", "-4": "4px", "-8": "8px"}

BORDER_SIDES = {
    "border": ("border-width",),
    "border-x": ("border-left-width", "border-right-width"),
    "border-y": ("border-top-width", "border-bottom-width"),
    "border-t": ("border-top-width",),
    "border-r": ("border-right-width",),
    "border-b": ("border-bottom-width",),
    "border-l": ("border-left-width",),
}

DURATIONS = ("0", "75", "100", "150", "200", "300", "500", "700", "1000")

OVERFLOW_VALUES = ("auto", "hidden", "clip", "visible", "scroll")

_TRANSITION_TIMING = [
    "transition-timing-function: cubic-bezier(0.4, 0, 0.2, 1)",
    "transition-duration: 150ms",
]

# Utilities with no value part: class name -> declarations
STATIC_UTILITIES: dict[str, list[str]] = {
    # Display
    "block": ["display: block"],
    "inline-block": ["display: inline-block"],
    "inline": ["display: inline"],
    "flex": ["display: flex"],
    "inline-flex": ["display: inline-flex"],
    "grid": ["display: grid"],
    "inline-grid": ["display: inline-grid"],
    "table": ["display: table"],
    "table-row": ["display: table-row"],
    "table-cell": ["display: table-cell"],
    "flow-root": ["display: flow-root"],
    "contents": ["display: contents"],
    "list-item": ["display: list-item"],
    "hidden": ["display: none"],
    # Position and visibility
    "static": ["position: static"],
    "fixed": ["position: fixed"],
    "absolute": ["position: absolute"],
    "relative": ["position: relative"],
    "sticky": ["position: sticky"],
    "visible": ["visibility: visible"],
    "invisible": ["visibility: hidden"],
    "collapse": ["visibility: collapse"],
    "isolate": ["isolation: isolate"],
    "float-left": ["float: left"],
    "float-right": ["float: right"],
    "float-none": ["float: none"],
    "clear-both": ["clear: both"],
    "box-border": ["box-sizing: border-box"],
    "box-content": ["box-sizing: content-box"],
    "sr-only": [
        "position: absolute",
        "width: 1px",
        "height: 1px",
        "padding: 0",
        "margin: -1px",
        "overflow: hidden",
        "clip: rect(0, 0, 0, 0)",
        "white-space: nowrap",
        "border-width: 0",
    ],
    # Flexbox and grid
    "flex-row": ["flex-direction: row"],
    "flex-row-reverse": ["flex-direction: row-reverse"],
    "flex-col": ["flex-direction: column"],
    "flex-col-reverse": ["flex-direction: column-reverse"],
    "flex-wrap": ["flex-wrap: wrap"],
    "flex-wrap-reverse": ["flex-wrap: wrap-reverse"],
    "flex-nowrap": ["flex-wrap: nowrap"],
    "flex-1": ["flex: 1 1 0%"],
    "flex-auto": ["flex: 1 1 auto"],
    "flex-initial": ["flex: 0 1 auto"],
    "flex-none": ["flex: none"],
    "grow": ["flex-grow: 1"],
    "grow-0": ["flex-grow: 0"],
    "shrink": ["flex-shrink: 1"],
    "shrink-0": ["flex-shrink: 0"],
    "items-start": ["align-items: flex-start"],
    "items-center": ["align-items: center"],
    "items-end": ["align-items: flex-end"],
    "items-baseline": ["align-items: baseline"],
    "items-stretch": ["align-items: stretch"],
    "justify-start": ["justify-content: flex-start"],
    "justify-center": ["justify-content: center"],
    "justify-end": ["justify-content: flex-end"],
    "justify-between": ["justify-content: space-between"],
    "justify-around": ["justify-content: space-around"],
    "justify-evenly": ["justify-content: space-evenly"],
    "content-start": ["align-content: flex-start"],
    "content-center": ["align-content: center"],
    "content-end": ["align-content: flex-end"],
    "content-between": ["align-content: space-between"],
    "self-auto": ["align-self: auto"],
    "self-start": ["align-self: flex-start"],
    "self-center": ["align-self: center"],
    "self-end": ["align-self: flex-end"],
    "self-stretch": ["align-self: stretch"],
    "place-items-center": ["place-items: center"],
    "place-content-center": ["place-content: center"],
    "grid-cols-none": ["grid-template-columns: none"],
    "col-span-full": ["grid-column: 1 / -1"],
    # Typography
    "text-left": ["text-align: left"],
    "text-center": ["text-align: center"],
    "text-right": ["text-align: right"],
    "text-justify": ["text-align: justify"],
    "uppercase": ["text-transform: uppercase"],
    "lowercase": ["text-transform: lowercase"],
    "capitalize": ["text-transform: capitalize"],
    "normal-case": ["text-transform: none"],
    "italic": ["font-style: italic"],
    "not-italic": ["font-style: normal"],
    "underline": ["text-decoration-line: underline"],
    "line-through": ["text-decoration-line: line-through"],
    "no-underline": ["text-decoration-line: none"],
    "truncate": ["overflow: hidden", "text-overflow: ellipsis", "white-space: nowrap"],
    "whitespace-normal": ["white-space: normal"],
    "whitespace-nowrap": ["white-space: nowrap"],
    "whitespace-pre": ["white-space: pre"],
    "whitespace-pre-line": ["white-space: pre-line"],
    "whitespace-pre-wrap": ["white-space: pre-wrap"],
    "break-words": ["overflow-wrap: break-word"],
    "break-all": ["word-break: break-all"],
    "tracking-tighter": ["letter-spacing: -0.05em"],
    "tracking-tight": ["letter-spacing: -0.025em"],
    "tracking-normal": ["letter-spacing: 0em"],
    "tracking-wide": ["letter-spacing: 0.025em"],
    "tracking-wider": ["letter-spacing: 0.05em"],
    "tracking-widest": ["letter-spacing: 0.1em"],
    "leading-none": ["line-height: 1"],
    "leading-tight": ["line-height: 1.25"],
    "leading-snug": ["line-height: 1.375"],
    "leading-normal": ["line-height: 1.5"],
    "leading-relaxed": ["line-height: 1.625"],
    "leading-loose": ["line-height: 2"],
    "list-none": ["list-style-type: none"],
    "list-disc": ["list-style-type: disc"],
    "list-decimal": ["list-style-type: decimal"],
    "antialiased": ["-webkit-font-smoothing: antialiased", "-moz-osx-font-smoothing: grayscale"],
    "tabular-nums": ["font-variant-numeric: tabular-nums"],
    # Media
    "object-contain": ["object-fit: contain"],
    "object-cover": ["object-fit: cover"],
    "object-fill": ["object-fit: fill"],
    "object-center": ["object-position: center"],
    # Interactivity and transitions
    "cursor-default": ["cursor: default"],
    "cursor-pointer": ["cursor: pointer"],
    "cursor-not-allowed": ["cursor: not-allowed"],
    "pointer-events-none": ["pointer-events: none"],
    "pointer-events-auto": ["pointer-events: auto"],
    "select-none": ["user-select: none"],
    "select-text": ["user-select: text"],
    "select-all": ["user-select: all"],
    "outline-none": ["outline: 2px solid transparent", "outline-offset: 2px"],
    "transition": [
        "transition-property: color, background-color, border-color, box-shadow, transform",
        *_TRANSITION_TIMING,
    ],
    "transition-colors": [
        "transition-property: color, background-color, border-color, text-decoration-color, fill, stroke",
        *_TRANSITION_TIMING,
    ],
    "transition-opacity": ["transition-property: opacity", *_TRANSITION_TIMING],
    "transition-all": ["transition-property: all", *_TRANSITION_TIMING],
    "transition-none": ["transition-property: none"],
    "ease-linear": ["transition-timing-function: linear"],
    "ease-in": ["transition-timing-function: cubic-bezier(0.4, 0, 1, 1)"],
    "ease-out": ["transition-timing-function: cubic-bezier(0, 0, 0.2, 1)"],
    "ease-in-out": ["transition-timing-function: cubic-bezier(0.4, 0, 0.2, 1)"],
}
STATIC_UTILITIES.update({f"overflow-{value}": [f"overflow: {value}"] for value in OVERFLOW_VALUES})
STATIC_UTILITIES.update({f"overflow-x-{value}": [f"overflow-x: {value}"] for value in OVERFLOW_VALUES})
STATIC_UTILITIES.update({f"overflow-y-{value}": [f"overflow-y: {value}"] for value in OVERFLOW_VALUES})
STATIC_UTILITIES.update({f"duration-{ms}": [f"transition-duration: {ms}ms"] for ms in DURATIONS})
STATIC_UTILITIES.update(
    {
        f"{side}{suffix}": [f"{prop}: {width}" for prop in props]
        for side, props in BORDER_SIDES.items()
        for suffix, width in BORDER_WIDTHS.items()
    }
)

VARIANT_RE = re.compile(r"^(?:(?P<variant>[a-z0-9-]+):)?(?P<base>-?[a-z0-9][a-z0-9./-]*)$")


@dataclass(frozen=True)
class RuleSpec:
    """
    One CSS rule produced for a utility.

    selector_suffix is appended to the escaped class selector (used by
    space-x/space-y for the child combinator). media is a min-width
    breakpoint the rule must be wrapped in.
    """

    selector_suffix: str
    declarations: Sequence[str]
    media: str | None = None


@dataclass(frozen=True)
class CssRule:
    """A fully resolved rule, ready to be rendered."""

    selector: str
    declarations: tuple[str, ...]
    media: str | None = None

    def render(self) -> str:
        body = "; ".join(self.declarations)
        return f"{self.selector} {{ {body} }}"


@dataclass
class UtilityContext:
    """Everything the generator needs besides the class name."""

    theme: Theme = field(default_factory=Theme)
    extra: dict[str, list[str]] = field(default_factory=dict)

    def font_families(self) -> dict[str, list[str]]:
        families = dict(DEFAULT_FONT_FAMILIES)
        families.update(self.theme.extend.font_family)
        return families


def escape_class(name: str) -> str:
    """
    Escape a class name for use in a CSS selector.

    Punctuation gets a backslash. An identifier cannot start with a digit,
    so a leading digit becomes a hex escape ("2xl:p-4" -> "\\32 xl\\:p-4").
    """
    escaped = re.sub(r"([:/.\[\]%#(),])", r"\\\1", name)
    if escaped[:1].isdigit():
        escaped = f"\\{ord(escaped[0]):x} {escaped[1:]}"
    return escaped


def resolve_color(token: str) -> str | None:
    """Resolve "red-500", "white" or "gray-100" to a color value."""
    if token in COLOR_PALETTE:
        return COLOR_PALETTE[token].get("DEFAULT")
    name, _, shade = token.rpartition("-")
    palette = COLOR_PALETTE.get(name)
    if not palette:
        return None
    return palette.get(shade)


def spacing_value(token: str) -> str | None:
    return SPACING_SCALE.get(token)


def size_value(prefix: str, token: str) -> str | None:
    """Value of a sizing utility ("w-1/2", "min-h-screen", "max-w-prose")."""
    if token == "screen":
        return "100vw" if prefix.endswith("w") else "100vh"
    if prefix == "max-w" and token in MAX_WIDTHS:
        return MAX_WIDTHS[token]
    if prefix.startswith(("min-", "max-")):
        if token == "auto":
            return None
        if token == "none":
            return "none" if prefix.startswith("max-") else None
    return SIZE_KEYWORDS.get(token) or FRACTIONS.get(token) or spacing_value(token)


def _spacing_rules(prefix: str, token: str, negative: bool) -> list[RuleSpec]:
    props = SPACING_PROPERTIES[prefix]
    if token == "auto":
        if negative or prefix.startswith("p"):
            return []
        value = "auto"
    else:
        value = spacing_value(token)
        if value is None:
            return []
        if negative:
            if prefix.startswith("p"):
                return []
            value = f"-{value}"
    return [RuleSpec("", [f"{prop}: {value}" for prop in props])]


def _inset_rules(props: tuple[str, ...], token: str, negative: bool) -> list[RuleSpec]:
    if token == "auto":
        if negative:
            return []
        value = "auto"
    else:
        value = spacing_value(token) or FRACTIONS.get(token) or (
            "100%" if token == "full" else None
        )
        if value is None:
            return []
        if negative:
            value = f"-{value}"
    return [RuleSpec("", [f"{prop}: {value}" for prop in props])]


def _space_between_rules(base: str) -> list[RuleSpec]:
    axis, _, token = base[len("space-"):].partition("-")
    value = spacing_value(token)
    if value is None or axis not in {"x", "y"}:
        return []
    prop = "margin-left" if axis == "x" else "margin-top"
    return [RuleSpec(" > :not([hidden]) ~ :not([hidden])", [f"{prop}: {value}"])]


def _container_rules() -> list[RuleSpec]:
    specs = [RuleSpec("", ["width: 100%"])]
    for width in BREAKPOINTS.values():
        specs.append(RuleSpec("", [f"max-width: {width}"], media=width))
    return specs


def _grid_rules(base: str) -> list[RuleSpec]:
    for prefix, template in (
        ("grid-cols-", "grid-template-columns: repeat({n}, minmax(0, 1fr))"),
        ("grid-rows-", "grid-template-rows: repeat({n}, minmax(0, 1fr))"),
        ("col-span-", "grid-column: span {n} / span {n}"),
        ("row-span-", "grid-row: span {n} / span {n}"),
    ):
        if base.startswith(prefix):
            token = base[len(prefix):]
            if token.isdigit() and 1 <= int(token) <= 12:
                return [RuleSpec("", [template.format(n=token)])]
            return []
    return []


def rules_for(base: str, context: UtilityContext | None = None) -> list[RuleSpec]:
    """
    Return the rules for a base utility (no variant prefix).

    Args:
        base: Utility class name, e.g. "px-4" or "font-roboto-mono".
        context: Theme and plugin utilities. Defaults to an empty theme.

    Returns:
        RuleSpec list; empty when the class is not a known utility.
    """
    context = context or UtilityContext()

    if base in context.extra:
        return [RuleSpec("", list(context.extra[base]))]
    if base in STATIC_UTILITIES:
        return [RuleSpec("", STATIC_UTILITIES[base])]
    if base == "container":
        return _container_rules()
    if base in BORDER_RADIUS:
        return [RuleSpec("", [f"border-radius: {BORDER_RADIUS[base]}"])]
    if base in SHADOWS:
        return [RuleSpec("", [f"box-shadow: {SHADOWS[base]}"])]

    negative = base.startswith("-")
    body = base[1:] if negative else base
    prefix, _, token = body.partition("-")
    if prefix in SPACING_PROPERTIES and token:
        return _spacing_rules(prefix, token, negative)
    for prefix, props in INSET_PROPERTIES.items():
        if body.startswith(f"{prefix}-"):
            return _inset_rules(props, body[len(prefix) + 1:], negative)
    if body.startswith("z-"):
        value = Z_INDEX.get(body[len("z-"):])
        if value is None or (negative and value in {"0", "auto"}):
            return []
        return [RuleSpec("", [f"z-index: {'-' if negative else ''}{value}"])]
    if negative:
        return []

    if base.startswith("space-"):
        return _space_between_rules(base)

    if base.startswith("text-"):
        token = base[len("text-"):]
        if token in FONT_SIZES:
            size, line_height = FONT_SIZES[token]
            return [RuleSpec("", [f"font-size: {size}", f"line-height: {line_height}"])]
        color = resolve_color(token)
        return [RuleSpec("", [f"color: {color}"])] if color else []

    if base.startswith("bg-"):
        color = resolve_color(base[len("bg-"):])
        return [RuleSpec("", [f"background-color: {color}"])] if color else []

    if base.startswith("border-"):
        color = resolve_color(base[len("border-"):])
        return [RuleSpec("", [f"border-color: {color}"])] if color else []

    if base.startswith("font-"):
        token = base[len("font-"):]
        if token in FONT_WEIGHTS:
            return [RuleSpec("", [f"font-weight: {FONT_WEIGHTS[token]}"])]
        families = context.font_families()
        if token in families:
            return [RuleSpec("", [f"font-family: {', '.join(families[token])}"])]
        return []

    if base.startswith("opacity-"):
        value = OPACITY.get(base[len("opacity-"):])
        return [RuleSpec("", [f"opacity: {value}"])] if value else []

    for prefix, prop in (("gap-x-", "column-gap"), ("gap-y-", "row-gap"), ("gap-", "gap")):
        if base.startswith(prefix):
            value = spacing_value(base[len(prefix):])
            return [RuleSpec("", [f"{prop}: {value}"])] if value else []

    if base.startswith(("grid-", "col-", "row-")):
        return _grid_rules(base)

    for prefix, prop in SIZE_PROPERTIES.items():
        if base.startswith(f"{prefix}-"):
            value = size_value(prefix, base[len(prefix) + 1:])
            return [RuleSpec("", [f"{prop}: {value}"])] if value else []

    return []


def resolve(class_name: str, context: UtilityContext | None = None) -> list[CssRule]:
    """
    Resolve a full class name, including an optional variant prefix.

    "hover:bg-red-500" becomes `.hover\\:bg-red-500:hover { ... }` and
    "md:text-4xl" becomes a rule wrapped in the md breakpoint.
    """
    match = VARIANT_RE.match(class_name)
    if not match:
        return []
    variant = match.group("variant")
    base = match.group("base")

    pseudo = ""
    media = None
    if variant is not None:
        if variant in PSEUDO_VARIANTS:
            pseudo = PSEUDO_VARIANTS[variant]
        elif variant in BREAKPOINTS:
            media = BREAKPOINTS[variant]
        else:
            return []

    selector = f".{escape_class(class_name)}{pseudo}"
    rules = []
    for spec in rules_for(base, context):
        if media and spec.media:
            # Breakpoint variants of already-responsive utilities are not generated.
            continue
        rules.append(
            CssRule(
                selector=selector + spec.selector_suffix,
                declarations=tuple(spec.declarations),
                media=media or spec.media,
            )
        )
    return rules


def is_utility(class_name: str, context: UtilityContext | None = None) -> bool:
    return bool(resolve(class_name, context))

# -----------------------------------------------------------------------------
# THE STYLE PIPELINE - SCAN & PURGE
# -----------------------------------------------------------------------------
# Responsibility: Build the site stylesheet at build time.
#
# 1. Load styles.yaml (content globs, safelist, theme, plugins)
# 2. Scan every file matching the content globs for class-name tokens
# 3. Keep the tokens that are real utilities, plus the whole safelist
# 4. Render the CSS and write it next to the other static assets
#
# The safelist exists for class names assembled at runtime (the clock widget
# builds "bg-" + color + "-200" in JavaScript), which no scan can see.
# -----------------------------------------------------------------------------

import re
from pathlib import Path

import yaml
from pydantic import ValidationError
from rich.console import Console

from src.core.utilities import BREAKPOINTS, CssRule, UtilityContext, resolve
from src.domain.models import BuildReport, StyleConfig
from src.plugins import PluginRegistry, load_registry

console = Console()

# Default config location (project root)
CONFIG_PATH = Path(__file__).parent.parent.parent / "styles.yaml"

EXCLUDE_PARTS = {"node_modules", ".git", "__pycache__"}

CANDIDATE_RE = re.compile(r"[A-Za-z0-9_\-:/.\[\]%#]+")
BRACE_RE = re.compile(r"\{([^{}]*)\}")

DEFAULT_CONFIG = {
    "content": [
        "./src/views/**/*.py",
        "./src/helpers/**/*.py",
        "./src/static/css/**/*.css",
        "./src/main.py",
        "./src/static/js/**/*.js",
    ],
    "safelist": [
        "bg-cyan-500",
        "bg-red-500",
        "text-white",
        "text-gray-600",
        "font-bold",
        "text-4xl",
        "py-2",
        "px-4",
        "rounded",
        "bg-gray-100",
        "mt-28",
        "px-5",
        "container",
        "mx-auto",
        "flex",
        "min-h-screen",
        # Clock widget
        "bg-white",
        "rounded-lg",
        "shadow-md",
        "p-4",
        "text-center",
        "text-lg",
        "font-semibold",
        "text-md",
        "text-sm",
        "bg-blue-200",
        "space-x-4",
        "flex-1",
        "py-3",
        "px-6",
        "space-y-6",
    ],
    "theme": {"extend": {"fontFamily": {"roboto-mono": ['"Roboto Mono"', "monospace"]}}},
    "plugins": [],
}


class StyleConfigError(Exception):
    """
    Raised when the style configuration cannot be used.

    Contains the offending configuration key and details for the CLI.
    """

    def __init__(self, message: str, key: str, details: str = "") -> None:
        super().__init__(message)
        self.key = key
        self.details = details


def load_config(path: Path = CONFIG_PATH) -> StyleConfig:
    """
    Load the style configuration from YAML.

    Args:
        path: Path to styles.yaml.

    Returns:
        StyleConfig validated by Pydantic. Falls back to DEFAULT_CONFIG when
        the file does not exist.

    Raises:
        StyleConfigError: If the YAML is malformed or fails validation.
    """
    if not path.exists():
        console.print(f"[yellow][STYLES] Config not found at {path}, using defaults[/yellow]")
        return StyleConfig(**DEFAULT_CONFIG)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise StyleConfigError(f"Malformed style config: {path}", key="<file>", details=str(e))

    if not isinstance(data, dict):
        raise StyleConfigError(
            f"Style config must be a mapping: {path}",
            key="<file>",
            details=f"Got {type(data).__name__}",
        )

    try:
        return StyleConfig(**data)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise StyleConfigError(f"Invalid style config: {key}", key=key, details=first["msg"])


def expand_pattern(pattern: str) -> list[str]:
    """
    Expand brace groups and normalize a content glob.

    "./src/**/*.{css,js}" -> ["src/**/*.css", "src/**/*.js"]
    """
    if pattern.startswith("./"):
        pattern = pattern[2:]

    match = BRACE_RE.search(pattern)
    if not match:
        return [pattern]

    expanded = []
    for option in match.group(1).split(","):
        candidate = pattern[: match.start()] + option + pattern[match.end():]
        expanded.extend(expand_pattern(candidate))
    return expanded


def extract_candidates(text: str) -> set[str]:
    """
    Pull every token that could be a class name out of arbitrary text.

    The scan is purely textual: it does not parse HTML, Python or JS, so it
    finds class names in string literals, attributes and selectors alike.
    """
    candidates = set()
    for raw in CANDIDATE_RE.findall(text):
        token = raw.strip(".:/")
        if token:
            candidates.add(token)
    return candidates


class StylePipeline:
    """
    Scans content, applies the safelist and renders the stylesheet.

    Stateless between runs: every call to build() rescans the content.
    """

    def __init__(
        self,
        config: StyleConfig,
        root: Path,
        registry: PluginRegistry | None = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            config: Validated style configuration.
            root: Directory the content globs are relative to.
            registry: Plugin registry. Defaults to the plugins shipped on disk,
                loaded only when the config enables any.

        Raises:
            StyleConfigError: If the config enables an unknown plugin.
        """
        self._config = config
        self._root = root
        if registry is None and config.plugins:
            registry = load_registry()
        self._context = UtilityContext(
            theme=config.theme,
            extra=self._plugin_utilities(registry),
        )

    def _plugin_utilities(self, registry: PluginRegistry | None) -> dict[str, list[str]]:
        if not self._config.plugins:
            return {}
        try:
            return registry.utilities_for(self._config.plugins)
        except KeyError as e:
            name = e.args[0]
            raise StyleConfigError(
                f"Unknown plugin: {name}",
                key="plugins",
                details=f"Available: {registry.list_plugins()}",
            )

    @property
    def config(self) -> StyleConfig:
        return self._config

    def iter_content_files(self) -> list[Path]:
        """
        Files matching the content globs, in pattern order, each once.

        Raises:
            StyleConfigError: If a pattern cannot be globbed (e.g. a brace
                group that expands to an empty pattern).
        """
        seen: set[Path] = set()
        files = []
        for pattern in self._config.content:
            for expanded in expand_pattern(pattern):
                try:
                    matches = sorted(self._root.glob(expanded))
                except (ValueError, NotImplementedError) as e:
                    raise StyleConfigError(
                        f"Unusable content pattern: {pattern}", key="content", details=str(e)
                    )
                for path in matches:
                    if not path.is_file() or path in seen:
                        continue
                    if any(part in EXCLUDE_PARTS for part in path.relative_to(self._root).parts):
                        continue
                    seen.add(path)
                    files.append(path)
        return files

    def scan(self) -> tuple[set[str], int]:
        """
        Collect candidate tokens from all content files.

        Returns:
            (candidates, number of files read)
        """
        candidates: set[str] = set()
        count = 0
        for path in self.iter_content_files():
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                console.print(f"[yellow][STYLES] Skipping unreadable file {path}: {e}[/yellow]")
                continue
            candidates |= extract_candidates(text)
            count += 1
        return candidates, count

    def is_utility(self, class_name: str) -> bool:
        return bool(resolve(class_name, self._context))

    def render_css(self, classes: set[str]) -> str:
        """
        Render the stylesheet for the given classes.

        Order is deterministic: plain utilities sorted by name, then variant
        utilities, then one media block per breakpoint (smallest first).
        """
        plain: list[CssRule] = []
        media: dict[str, list[CssRule]] = {width: [] for width in BREAKPOINTS.values()}

        for name in sorted(classes, key=lambda c: (":" in c, c)):
            for rule in resolve(name, self._context):
                if rule.media:
                    media[rule.media].append(rule)
                else:
                    plain.append(rule)

        lines = ["/* Generated by scripts/build_styles.py. Do not edit. */"]
        lines.extend(rule.render() for rule in plain)
        for width, rules in media.items():
            if not rules:
                continue
            lines.append(f"@media (min-width: {width}) {{")
            lines.extend(f"  {rule.render()}" for rule in rules)
            lines.append("}")
        return "\n".join(lines) + "\n"

    def build(self, output: Path) -> BuildReport:
        """
        Scan, purge and write the stylesheet.

        Args:
            output: Where to write the CSS file (parents are created).

        Returns:
            BuildReport describing what was kept and what was unknown.
        """
        candidates, files_scanned = self.scan()
        discovered = {c for c in candidates if self.is_utility(c)}
        safelisted = set(self._config.safelist)
        unknown = sorted(c for c in safelisted if not self.is_utility(c))
        retained = discovered | (safelisted - set(unknown))

        for name in unknown:
            console.print(f"[yellow][STYLES] Safelisted class has no utility: {name}[/yellow]")

        css = self.render_css(retained)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(css, encoding="utf-8")

        report = BuildReport(
            discovered=discovered,
            safelisted=safelisted,
            emitted=sorted(retained),
            unknown=unknown,
            files_scanned=files_scanned,
            output=output,
            bytes_written=len(css.encode("utf-8")),
        )
        console.print(
            f"[green][STYLES] Wrote {len(report.emitted)} classes "
            f"from {files_scanned} files -> {output}[/green]"
        )
        return report


def build_stylesheet(
    config: StyleConfig,
    root: Path,
    output: Path,
    registry: PluginRegistry | None = None,
) -> BuildReport:
    """Run the whole pipeline once."""
    return StylePipeline(config, root, registry).build(output)

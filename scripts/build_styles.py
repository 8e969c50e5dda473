#!/usr/bin/env python3
"""
Build the site stylesheet from styles.yaml.

Use when:
- You changed a view, helper, stylesheet or script and want fresh CSS.
- You want to check which classes end up in the stylesheet (--list).
- You deploy with VITRINA_BUILD_STYLES_ON_STARTUP=false.

Run from project root:
  python scripts/build_styles.py
  # or
  python -m scripts.build_styles --list
"""

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console
from rich.table import Table

from src.core.config import STYLES_CONFIG
from src.core.styles import StyleConfigError, build_stylesheet, load_config

console = Console()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="build_styles",
        description="Scan the site sources and write the purged utility stylesheet.",
    )
    parser.add_argument("--config", type=Path, default=STYLES_CONFIG["config_path"])
    parser.add_argument("--root", type=Path, default=PROJECT_ROOT, help="Base for content globs")
    parser.add_argument("--output", "-o", type=Path, default=STYLES_CONFIG["output_path"])
    parser.add_argument("--list", action="store_true", help="Print every emitted class")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        report = build_stylesheet(config, args.root, args.output)
    except StyleConfigError as e:
        console.print(f"[bold red]Config error[/bold red] ({e.key}): {e}")
        if e.details:
            console.print(f"  {e.details}")
        return 1
    except OSError as e:
        console.print(f"[bold red]Build failed:[/bold red] {e}")
        return 1

    table = Table(title="Stylesheet", show_header=False)
    table.add_row("Output", str(report.output))
    table.add_row("Files scanned", str(report.files_scanned))
    table.add_row("Discovered", str(len(report.discovered)))
    table.add_row("Safelisted", str(len(report.safelisted)))
    table.add_row("Emitted", str(len(report.emitted)))
    table.add_row("Size", f"{report.bytes_written / 1024:.1f} KB")
    if report.unknown:
        table.add_row("Unknown", ", ".join(report.unknown), style="yellow")
    console.print(table)

    if args.list:
        for name in report.emitted:
            marker = "safelist" if name in report.safelisted else "scan"
            console.print(f"  {name} [dim]({marker})[/dim]")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

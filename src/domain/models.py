# Copyright 2026 Pramod Kumar Voola
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# -----------------------------------------------------------------------------
# DOMAIN MODELS - ROUTES & STYLE CONFIGURATION
# -----------------------------------------------------------------------------
# These Pydantic models define the two contracts of the site:
# - Route: a fixed URL path bound to one of the static pages
# - StyleConfig: what the style pipeline scans and what it always keeps
#
# Both are built once (import time / build time) and never mutated.
# -----------------------------------------------------------------------------

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class PageId(str, Enum):
    """
    The static pages served by the site.

    The set is closed: routes are never registered at runtime.
    """

    ROOT = "root"
    SOMOS = "somos"
    TECH = "tech"


class Route(BaseModel):
    """
    A fixed mapping from a URL path to a page renderer.

    Fields:
    - path: Absolute URL path ("/", "/somos", ...)
    - page: Which page the path renders
    - name: Named route used for URL reversal (e.g. "static_pages_somos")
    - title: Human title shown in the navigation and <title>
    """

    path: str = Field(..., pattern=r"^/[a-z0-9/_-]*$", description="Absolute URL path")
    page: PageId
    name: str = Field(..., min_length=1, pattern=r"^[a-z][a-z0-9_]*$")
    title: str = Field(..., min_length=1)

    class Config:
        """Routes are immutable once declared."""

        frozen = True


class ThemeExtension(BaseModel):
    """
    Theme additions layered on top of the built-in utilities.

    font_family maps an alias ("roboto-mono") to an ordered fallback list
    (['"Roboto Mono"', "monospace"]). The alias becomes a `font-<alias>` class.
    """

    font_family: dict[str, list[str]] = Field(default_factory=dict, alias="fontFamily")

    class Config:
        populate_by_name = True

    @field_validator("font_family")
    @classmethod
    def _fallbacks_not_empty(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for alias, fonts in value.items():
            if not alias.strip():
                raise ValueError("font family alias must not be blank")
            if not fonts:
                raise ValueError(f"font family '{alias}' needs at least one font")
        return value


class Theme(BaseModel):
    """Theme section of the style configuration."""

    extend: ThemeExtension = Field(default_factory=ThemeExtension)


class StyleConfig(BaseModel):
    """
    The style pipeline configuration.

    Fields:
    - content: Ordered glob patterns of files scanned for class tokens
    - safelist: Classes always emitted, found or not (duplicates collapse)
    - theme: Theme extension (font family aliases)
    - plugins: Ordered names of utility plugins to enable
    """

    content: list[str] = Field(..., min_length=1)
    safelist: set[str] = Field(default_factory=set)
    theme: Theme = Field(default_factory=Theme)
    plugins: list[str] = Field(default_factory=list)

    @field_validator("content")
    @classmethod
    def _patterns_relative(cls, value: list[str]) -> list[str]:
        for pattern in value:
            normalized = pattern.strip()
            if normalized.startswith("./"):
                normalized = normalized[2:]
            if not normalized or not Path(normalized).parts:
                raise ValueError(f"content pattern matches nothing: {pattern!r}")
            if normalized.startswith(("/", "\\")) or Path(normalized).anchor:
                raise ValueError(f"content patterns must be relative: {pattern!r}")
        return value

    @field_validator("safelist")
    @classmethod
    def _classes_not_blank(cls, value: set[str]) -> set[str]:
        for name in value:
            if not name.strip() or any(ch.isspace() for ch in name):
                raise ValueError(f"invalid safelist entry: {name!r}")
        return value


class BuildReport(BaseModel):
    """Outcome of one style pipeline run."""

    discovered: set[str] = Field(default_factory=set)
    safelisted: set[str] = Field(default_factory=set)
    emitted: list[str] = Field(default_factory=list)
    unknown: list[str] = Field(default_factory=list)
    files_scanned: int = 0
    output: Path | None = None
    bytes_written: int = 0

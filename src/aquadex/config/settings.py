# src/aquadex/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/aquadex/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `AQUADEX_CONFIG_PATH`
- environment variables (`AQUADEX_LOG_LEVEL`, `AQUADEX_CATALOG_PATH`), including ones
  set in a `.env` file at the project root

Relative catalog paths resolve against the project root: the nearest directory
(from the working directory, then from this package) that holds `data/catalogs/`,
or `AQUADEX_PROJECT_ROOT` when set.

Design rule:
- Tuning knobs (default radius, unit, page sizes) live in YAML, not in search code.
"""

from __future__ import annotations

import copy
import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

CATALOG_DIR = Path("data") / "catalogs"


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `aquadex.config`."""
    text = resources.files("aquadex.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


def project_root() -> Path:
    """Directory that relative catalog paths (and `.env`) are resolved against."""
    override = os.getenv("AQUADEX_PROJECT_ROOT")
    if override:
        return Path(override).expanduser().resolve()
    for start in (Path.cwd(), Path(__file__).parent):
        start = start.resolve()
        for candidate in (start, *start.parents):
            if (candidate / CATALOG_DIR).is_dir():
                return candidate
    return Path.cwd().resolve()


class AppSettings(BaseModel):
    name: str = "AquaDex"
    log_level: str = "INFO"


class CatalogSettings(BaseModel):
    path: str = "data/catalogs/stores.json"

    def resolved_path(self) -> Path:
        return resolve_path(self.path)


class SearchSettings(BaseModel):
    default_unit: Literal["km", "mi"] = "mi"
    default_radius: float = Field(25, gt=0)
    max_radius: float = Field(250, gt=0)
    page_size_default: int = Field(24, ge=6, le=60)
    listed_only: bool = True

    @model_validator(mode="after")
    def _validate_radius_cap(self) -> "SearchSettings":
        if self.default_radius > self.max_radius:
            raise ValueError("search.default_radius must not exceed search.max_radius")
        return self


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)


def resolve_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against `project_root()`."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (project_root() / p).resolve()


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("AQUADEX_LOG_LEVEL")
    if log_level:
        data["app"] = {**(data.get("app") or {}), "log_level": log_level}

    catalog_path = os.getenv("AQUADEX_CATALOG_PATH")
    if catalog_path:
        data["catalog"] = {**(data.get("catalog") or {}), "path": catalog_path}

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    env_file = project_root() / ".env"
    if env_file.is_file():
        # Real environment variables win over `.env` entries.
        load_dotenv(dotenv_path=env_file, override=False)
    config_path = os.getenv("AQUADEX_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def _logging_config() -> dict[str, Any]:
    return _read_package_yaml("logging.yaml")


def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (a fresh copy; callers mutate it before `dictConfig`)."""
    return copy.deepcopy(_logging_config())

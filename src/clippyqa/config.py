# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reader configuration model and TOML loading."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .core.errors import ConfigError

CONFIG_FILENAME: Final[str] = ".clippyqa.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "clippyqa"
DEFAULT_ENCODING: Final[str] = "utf-8"
DEFAULT_NOISE_LEVELS: Final[tuple[str, ...]] = ("note",)
DEFAULT_NOISE_PREFIXES: Final[tuple[str, ...]] = ("for further information visit",)


class ReaderConfig(BaseModel):
    """Options controlling how reports are decoded and messages are composed."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = DEFAULT_ENCODING
    noise_levels: tuple[str, ...] = DEFAULT_NOISE_LEVELS
    noise_prefixes: tuple[str, ...] = DEFAULT_NOISE_PREFIXES

    @field_validator("noise_levels", mode="after")
    @classmethod
    def _fold_levels(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Case-fold the configured levels so lookups ignore case."""

        return tuple(level.casefold() for level in value)

    def is_noise_level(self, level: str | None) -> bool:
        """Return whether a child ``level`` marks the child as noise."""

        return level is not None and level.casefold() in self.noise_levels

    def is_noise_message(self, message: str | None) -> bool:
        """Return whether a child ``message`` starts with a suppressed prefix."""

        return message is not None and message.startswith(self.noise_prefixes)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file {path}: {exc}") from exc


def _pyproject_section(document: Mapping[str, Any]) -> Mapping[str, Any]:
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return section


def _build(data: Mapping[str, Any], *, source: Path) -> ReaderConfig:
    try:
        return ReaderConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


def load_config(path: Path | None = None, *, root: Path | None = None) -> ReaderConfig:
    """Resolve the reader configuration.

    An explicit ``path`` wins; its top-level table is used unless the file is a
    ``pyproject.toml``, in which case ``[tool.clippyqa]`` is read. Without an
    explicit path, ``.clippyqa.toml`` and then ``pyproject.toml`` under ``root``
    are consulted before falling back to the defaults.

    Args:
        path: Optional configuration file supplied by the caller.
        root: Directory searched for implicit configuration files.

    Returns:
        ReaderConfig: Validated configuration.

    Raises:
        ConfigError: If a file is unreadable, malformed, or fails validation.
    """

    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
        document = _read_toml(path)
        if path.name == PYPROJECT_FILENAME:
            return _build(_pyproject_section(document), source=path)
        return _build(document, source=path)

    base = root if root is not None else Path.cwd()
    candidate = base / CONFIG_FILENAME
    if candidate.is_file():
        return _build(_read_toml(candidate), source=candidate)
    pyproject = base / PYPROJECT_FILENAME
    if pyproject.is_file():
        return _build(_pyproject_section(_read_toml(pyproject)), source=pyproject)
    return ReaderConfig()


__all__ = ["CONFIG_FILENAME", "ConfigError", "ReaderConfig", "load_config"]

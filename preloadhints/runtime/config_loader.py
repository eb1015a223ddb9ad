"""Helpers for loading hint configuration from TOML/JSON sources.

This module provides a single entry point `load_hint_config` that
accepts various configuration sources:

* None -> default HintConfig
* dict -> HintConfig.model_validate
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings

TOML documents may keep the options at the top level or nest them in a
``[preload]`` table.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from preloadhints.hints.config import HintConfig

logger = logging.getLogger("preloadhints.runtime.config_loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]

SECTION = "preload"


def _unwrap_section(data: Dict[str, Any]) -> Dict[str, Any]:
    section = data.get(SECTION)
    if isinstance(section, dict):
        return section
    return data


def _detect_format(text: str) -> str:
    # "[" opens a TOML table header here, never a JSON array
    return "json" if text.lstrip().startswith("{") else "toml"


def load_hint_config(source: ConfigSource) -> HintConfig:
    """Load HintConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns the default HintConfig
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        HintConfig instance.

    Raises:
        ValueError: If the configuration is not a mapping or fails
            validation (pydantic ``ValidationError`` is a ``ValueError``).
    """
    if source is None:
        logger.debug("No config source provided; using default HintConfig")
        return HintConfig()

    if isinstance(source, dict):
        logger.debug("Loading HintConfig from provided dict")
        return HintConfig.model_validate(_unwrap_section(source))

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None

        if path.exists():
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _detect_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _detect_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        if fmt == "json":
            data = json.loads(text)
        else:
            data = tomllib.loads(text)

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return HintConfig.model_validate(_unwrap_section(data))

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_hint_config"]

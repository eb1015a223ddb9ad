"""Configuration loading and the build hook."""

from preloadhints.runtime.config_loader import load_hint_config
from preloadhints.runtime.plugin import PreloadPlugin

__all__ = ["PreloadPlugin", "load_hint_config"]

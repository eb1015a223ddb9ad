"""Exception hierarchy for preloadhints.

Resolution itself performs no I/O, so every error raised here describes
bad input: a configuration value the resolver cannot interpret, an entry
key the caller got wrong, or a bundle description that cannot be loaded.
"""

from typing import Any


class PreloadHintsError(Exception):
    """Base class for all preloadhints errors."""
    pass


class ConfigurationError(PreloadHintsError):
    """Plugin options or call arguments are unusable.

    Raised for usage errors that must abort the current document rather
    than silently fall back to a default.
    """
    pass


class InvalidConfigurationError(ConfigurationError):
    """An option holds a value of an unsupported shape.

    Attributes:
        option: Name of the offending option.
        value: The value that was rejected.
    """

    def __init__(self, option: str, value: Any) -> None:
        self.option = option
        self.value = value
        super().__init__(
            f"The '{option}' option isn't set to a recognized value: {value!r}"
        )


class EntryNotFoundError(ConfigurationError):
    """The entry chunk requested for a document is not part of the bundle."""

    def __init__(self, entry_key: str) -> None:
        self.entry_key = entry_key
        super().__init__(f"Entry chunk not found in bundle: {entry_key}")


class BundleFormatError(PreloadHintsError):
    """A bundle dump or manifest could not be turned into an artifact graph."""
    pass


__all__ = [
    "BundleFormatError",
    "ConfigurationError",
    "EntryNotFoundError",
    "InvalidConfigurationError",
    "PreloadHintsError",
]

"""Resource hint generation for bundler entry documents."""

from preloadhints.errors import (
    BundleFormatError,
    ConfigurationError,
    EntryNotFoundError,
    InvalidConfigurationError,
    PreloadHintsError,
)
from preloadhints.graph import (
    AllArtifacts,
    ArtifactGraph,
    ArtifactKind,
    ArtifactSpec,
    AsyncClosure,
    ExplicitNames,
    InitialClosure,
    load_bundle,
    load_vite_manifest,
    resolve,
)
from preloadhints.hints import (
    HintBuilder,
    HintConfig,
    HintDescriptor,
    HtmlTag,
    build_hints,
    determine_as,
)
from preloadhints.runtime import PreloadPlugin, load_hint_config

__version__ = "0.1.0"

__all__ = [
    "AllArtifacts",
    "ArtifactGraph",
    "ArtifactKind",
    "ArtifactSpec",
    "AsyncClosure",
    "BundleFormatError",
    "ConfigurationError",
    "EntryNotFoundError",
    "ExplicitNames",
    "HintBuilder",
    "HintConfig",
    "HintDescriptor",
    "HtmlTag",
    "InitialClosure",
    "InvalidConfigurationError",
    "PreloadHintsError",
    "PreloadPlugin",
    "build_hints",
    "determine_as",
    "load_bundle",
    "load_hint_config",
    "load_vite_manifest",
    "resolve",
]

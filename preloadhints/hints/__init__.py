"""Hint configuration, resource-type resolution and descriptor building."""

from preloadhints.hints.builder import (
    HintBuilder,
    HintDescriptor,
    HtmlTag,
    build_hints,
    public_url,
)
from preloadhints.hints.config import HintConfig, policy_from_include
from preloadhints.hints.resource_type import as_resolver, determine_as

__all__ = [
    "HintBuilder",
    "HintConfig",
    "HintDescriptor",
    "HtmlTag",
    "as_resolver",
    "build_hints",
    "determine_as",
    "policy_from_include",
    "public_url",
]

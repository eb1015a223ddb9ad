"""Configuration schema for hint generation using Pydantic for validation.

Option names follow the bundler plugin convention (``include``, ``rel``,
``as``, ``fileBlacklist``, ``media``); snake_case field names are
accepted as well.
"""

import re
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from preloadhints.graph.walker import (
    AllArtifacts,
    AsyncClosure,
    ExplicitNames,
    InclusionPolicy,
    InitialClosure,
)

INCLUDE_INITIAL = "initial"
INCLUDE_ASYNC_CHUNKS = "asyncChunks"
INCLUDE_ALL_CHUNKS = "allChunks"

_NAMED_POLICIES = {
    INCLUDE_INITIAL: InitialClosure,
    INCLUDE_ASYNC_CHUNKS: AsyncClosure,
    INCLUDE_ALL_CHUNKS: AllArtifacts,
}

DEFAULT_REL = "modulepreload"
DEFAULT_FILE_BLACKLIST = r"\.map"


def policy_from_include(include: Union[List[str], str, None]) -> InclusionPolicy:
    """Map an ``include`` option value to an inclusion policy.

    Args:
        include: A list of chunk names, one of ``initial``, ``asyncChunks``,
            ``allChunks``, or None for the default.

    Returns:
        InclusionPolicy: The policy to resolve with.

    Raises:
        ValueError: If ``include`` is an unknown string.
    """
    if include is None:
        return AsyncClosure()
    if isinstance(include, str):
        try:
            return _NAMED_POLICIES[include]()
        except KeyError:
            raise ValueError(
                f"Invalid include value '{include}'. "
                f"Valid values: a list of chunk names or one of {sorted(_NAMED_POLICIES)}"
            ) from None
    return ExplicitNames(include)


class HintConfig(BaseModel):
    """Options controlling which hints are generated and how they look.

    Attributes:
        include: Chunk names or a named inclusion policy.
        rel: Relation written to every hint.
        as_: Resource type for ``rel="preload"``: a string, a callable
            taking the href, or None to derive it from the file extension.
            Checked when a document is resolved, not here.
        file_blacklist: Patterns tested against artifact keys. A key is
            dropped only when every pattern matches it.
        media: Optional media query written to every hint.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    include: Union[List[str], str] = INCLUDE_ASYNC_CHUNKS
    rel: str = DEFAULT_REL
    as_: Any = Field(default=None, alias="as")
    file_blacklist: Optional[List[re.Pattern]] = Field(
        default_factory=lambda: [re.compile(DEFAULT_FILE_BLACKLIST)],
        alias="fileBlacklist",
    )
    media: Optional[str] = None

    @field_validator("include")
    @classmethod
    def validate_include(cls, v: Union[List[str], str]) -> Union[List[str], str]:
        """Validate that named policies are known."""
        policy_from_include(v)
        return v

    @field_validator("rel")
    @classmethod
    def validate_rel(cls, v: str) -> str:
        """Validate that the relation is a non-empty token."""
        if not v or not v.strip():
            raise ValueError("rel must be a non-empty string")
        return v

    @property
    def policy(self) -> InclusionPolicy:
        return policy_from_include(self.include)

    def keeps(self, key: str) -> bool:
        """Return whether ``key`` survives the file blacklist.

        A key is kept as long as at least one pattern fails to match it,
        so only keys matched by every pattern are dropped. With a single
        pattern this is the usual exclusion filter; with several it is
        more permissive.
        """
        if not self.file_blacklist:
            return True
        return any(not pattern.search(key) for pattern in self.file_blacklist)


__all__ = [
    "DEFAULT_FILE_BLACKLIST",
    "DEFAULT_REL",
    "HintConfig",
    "INCLUDE_ALL_CHUNKS",
    "INCLUDE_ASYNC_CHUNKS",
    "INCLUDE_INITIAL",
    "policy_from_include",
]

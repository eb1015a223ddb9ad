"""Artifact schema models.

An artifact is one file written by the bundler. Chunks are executable
code and carry import edges; assets (stylesheets, fonts, images, source
maps) are leaves. All graph construction code builds ``ArtifactSpec``
instances instead of passing raw bundle dictionaries around.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger("preloadhints.graph.models.schema")


class ArtifactKind(str, Enum):
    """Kinds of bundle output files."""

    CHUNK = "chunk"
    ASSET = "asset"


class ImportKind(str, Enum):
    """Edge kinds between artifacts."""

    STATIC_IMPORT = "static_import"
    DYNAMIC_IMPORT = "dynamic_import"


def _unique(keys: List[str]) -> List[str]:
    return list(dict.fromkeys(keys))


class ArtifactSpec(BaseModel):
    """Structured, immutable representation of one output file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    file_name: Annotated[
        str, Field(..., description="Path relative to the output root; unique key")
    ]
    kind: Annotated[
        ArtifactKind, Field(default=ArtifactKind.CHUNK, description="chunk or asset")
    ]
    name: Annotated[
        Optional[str],
        Field(
            default=None,
            description="Logical chunk name used for name-based selection",
        ),
    ]
    static_imports: Annotated[
        List[str],
        Field(
            default_factory=list,
            description="Artifacts loaded unconditionally, in bundle order",
        ),
    ]
    dynamic_imports: Annotated[
        List[str],
        Field(
            default_factory=list,
            description="Artifacts loaded lazily through import()",
        ),
    ]

    @field_validator("file_name")
    @classmethod
    def _check_file_name_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Artifact file_name must be a non-empty string")
        return value

    @field_validator("static_imports", "dynamic_imports")
    @classmethod
    def _dedupe_imports(cls, value: List[str]) -> List[str]:
        return _unique(value)

    @model_validator(mode="after")
    def _assets_have_no_imports(self) -> "ArtifactSpec":
        if self.kind is ArtifactKind.ASSET and (
            self.static_imports or self.dynamic_imports
        ):
            raise ValueError(f"Asset {self.file_name} cannot declare imports")
        return self

    @property
    def is_chunk(self) -> bool:
        return self.kind is ArtifactKind.CHUNK

    def all_imports(self) -> List[str]:
        """Return static then dynamic imports, de-duplicated."""
        return _unique([*self.static_imports, *self.dynamic_imports])


__all__ = ["ArtifactKind", "ArtifactSpec", "ImportKind"]

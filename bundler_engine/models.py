"""
Core models for the bundler.

A Bundle is built fresh for every run and holds the raw bytes of each file;
base64 only appears when the bundle is serialized to JSON.
"""

import base64
from typing import List

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator


class BundleEntry(BaseModel):
    """One bundled file: path relative to the scan root plus its bytes."""

    path: str
    content: bytes = b""

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value:
            raise ValueError("path must not be empty")
        if value.startswith("./") or value.startswith("/"):
            raise ValueError(f"path must be relative without a leading './': {value}")
        return value

    @field_serializer("content", when_used="json")
    def _encode_content(self, content: bytes) -> str:
        return base64.b64encode(content).decode("ascii")

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class Bundle(BaseModel):
    """Ordered collection of bundled files."""

    files: List[BundleEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_paths(self) -> "Bundle":
        seen = set()
        for entry in self.files:
            if entry.path in seen:
                raise ValueError(f"duplicate path in bundle: {entry.path}")
            seen.add(entry.path)
        return self

    @property
    def total_bytes(self) -> int:
        return sum(entry.size_bytes for entry in self.files)

    def paths(self) -> List[str]:
        return [entry.path for entry in self.files]

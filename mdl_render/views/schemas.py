"""Rendered view schema — the JSON record written by the generation step.

Field names on disk are capitalized (Key, Title, ...); the model exposes
them as snake_case attributes and accepts either form on input.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderedView(BaseModel):
    """One generated view: metadata plus Mermaid diagram source."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    key: str = Field(
        ..., alias="Key",
        description="Unique, file-name safe view identifier (e.g. 'SystemContext')",
    )
    title: str = Field(default="", alias="Title", description="View title")
    description: str = Field(default="", alias="Description", description="View description")
    version: str = Field(default="", alias="Version", description="Version of the design")
    mermaid: str = Field(default="", alias="Mermaid", description="Mermaid diagram source")

    @field_validator("key")
    @classmethod
    def key_is_file_name_safe(cls, v: str) -> str:
        if not v:
            raise ValueError("view key must not be empty")
        if any(c in v for c in ("/", "\\", "\x00")) or v in (".", ".."):
            raise ValueError(f"view key is not a safe file name: {v!r}")
        return v

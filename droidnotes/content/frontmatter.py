"""Front-matter parsing and validation."""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from ..errors import FrontMatterError

DELIMITER = "---"


class FrontMatter(BaseModel):
    """Metadata block every content document must declare."""

    model_config = ConfigDict(extra="allow")

    title: str
    description: str

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    def extras(self) -> dict[str, Any]:
        """Keys beyond title/description (icon, full, ...)."""
        return dict(self.model_extra or {})


def split_front_matter(text: str, path: str = "<string>") -> tuple[dict[str, Any], str]:
    """Split a document into its front-matter mapping and body.

    Args:
        text: Full document text
        path: Source path, used in error messages

    Returns:
        (front-matter dict, body). Documents without a block yield ({}, text).

    Raises:
        FrontMatterError: If the block is unterminated, invalid YAML, or not a mapping
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if text.startswith("\ufeff"):
        text = text[1:]

    lines = text.split("\n")
    if not lines or lines[0].strip() != DELIMITER:
        return {}, text

    for i in range(1, len(lines)):
        if lines[i].strip() == DELIMITER:
            raw = "\n".join(lines[1:i])
            body = "\n".join(lines[i + 1 :]).lstrip("\n")
            break
    else:
        raise FrontMatterError(path, "unterminated front-matter block")

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise FrontMatterError(path, f"invalid YAML in front-matter: {e}") from e

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontMatterError(path, "front-matter must be a mapping")

    return {str(k): v for k, v in data.items()}, body

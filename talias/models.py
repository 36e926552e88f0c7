"""Option tree data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Node(BaseModel):
    """A single entry of the options file.

    A node with children is a group (navigable); a node without children is a
    leaf whose ``command`` is emitted on activation. When both are present the
    children win and the command is ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = ""
    details: str = ""
    command: str = ""
    children: tuple["Node", ...] = Field(default_factory=tuple)

    @field_validator("title", "details", "command", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("children", mode="before")
    @classmethod
    def _null_children(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def is_group(self) -> bool:
        return bool(self.children)

    @property
    def is_leaf(self) -> bool:
        return not self.children

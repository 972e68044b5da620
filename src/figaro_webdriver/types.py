"""Identifiers and value objects passed to commands and decoded from responses."""

from __future__ import annotations

from enum import Enum
from typing import Any, NewType

from pydantic import BaseModel, ConfigDict, Field, model_validator

SessionId = NewType("SessionId", str)
ElementId = NewType("ElementId", str)
WindowHandle = NewType("WindowHandle", str)

# W3C web element identifier key. Legacy servers use "ELEMENT" instead.
MAGIC_ELEMENT_ID = "element-6066-11e4-a52e-4f735466cecf"
LEGACY_ELEMENT_ID = "ELEMENT"


def element_reference(element_id: ElementId) -> dict[str, str]:
    """Serialize an element id for embedding in a request body.

    Both the legacy and the W3C key are always written with the same value so
    that either kind of server can resolve the reference.
    """
    return {LEGACY_ELEMENT_ID: str(element_id), MAGIC_ELEMENT_ID: str(element_id)}


class SameSite(str, Enum):
    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        """Wire representation: camelCase keys, unset fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Cookie(_WireModel):
    name: str
    value: str
    path: str | None = None
    domain: str | None = None
    secure: bool | None = None
    http_only: bool | None = Field(default=None, alias="httpOnly")
    expiry: int | None = None
    same_site: SameSite | None = Field(default=None, alias="sameSite")


class TimeoutConfiguration(_WireModel):
    """Session timeouts in milliseconds."""

    script: int | None = None
    page_load: int | None = Field(default=None, alias="pageLoad")
    implicit: int | None = None


class OptionRect(_WireModel):
    """Window rectangle where every field may be left unset independently."""

    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None


class ElementRect(BaseModel):
    x: float
    y: float
    width: float
    height: float


class ServerStatus(BaseModel):
    ready: bool
    message: str


class ElementReference(BaseModel):
    """An element as returned by the find and active-element endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    legacy_id: str | None = Field(default=None, alias=LEGACY_ELEMENT_ID)
    w3c_id: str | None = Field(default=None, alias=MAGIC_ELEMENT_ID)

    @model_validator(mode="after")
    def _require_identifier(self) -> ElementReference:
        if self.legacy_id is None and self.w3c_id is None:
            raise ValueError(
                f"element reference has neither {LEGACY_ELEMENT_ID!r} nor {MAGIC_ELEMENT_ID!r}"
            )
        return self

    @property
    def element_id(self) -> ElementId:
        return ElementId(self.w3c_id if self.w3c_id is not None else self.legacy_id)

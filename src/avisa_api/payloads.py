"""Modelos de corpo de requisição da AvisaAPI.

Cada modelo declara o nome remoto de cada campo via ``alias``; campos
opcionais ausentes (None) não entram no JSON. A casing segue o contrato
da API remota (camelCase/PascalCase por endpoint).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

MediaType = Literal["image", "video", "audio", "document"]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_body(self) -> dict[str, Any]:
        """Serializa com nomes remotos, omitindo campos ausentes."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ContextInfo(_Payload):
    """Referência à mensagem respondida."""

    stanza_id: str = Field(alias="StanzaId")
    participant: str | None = Field(default=None, alias="Participant")


class TextMessagePayload(_Payload):
    number: str
    message: str
    id: str | None = None
    context_info: ContextInfo | None = Field(default=None, alias="contextInfo")


class MediaUrlPayload(_Payload):
    number: str
    file_url: str = Field(alias="fileUrl")
    type: MediaType = "image"
    message: str | None = None
    file_name: str | None = Field(default=None, alias="fileName")

    @field_validator("message", "file_name", mode="before")
    @classmethod
    def blank_as_none(cls, value: Any) -> Any:
        return _blank_to_none(value)


class ImagePayload(_Payload):
    number: str
    image: str
    message: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def blank_as_none(cls, value: Any) -> Any:
        return _blank_to_none(value)


class DocumentPayload(_Payload):
    number: str
    document: str
    file_name: str = Field(alias="fileName")
    caption: str | None = None

    @field_validator("caption", mode="before")
    @classmethod
    def blank_as_none(cls, value: Any) -> Any:
        return _blank_to_none(value)


class LocationPayload(_Payload):
    number: str
    latitude: float
    longitude: float
    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def blank_as_none(cls, value: Any) -> Any:
        return _blank_to_none(value)


class PreviewPayload(_Payload):
    number: str
    message: str
    url_site: str = Field(alias="urlSite")
    image: str
    title: str | None = None
    description: str | None = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def blank_as_none(cls, value: Any) -> Any:
        return _blank_to_none(value)


class GroupUpdatePayload(_Payload):
    id: str
    add: list[str] | None = None
    remove: list[str] | None = None

    @field_validator("add", "remove", mode="before")
    @classmethod
    def empty_as_none(cls, value: Any) -> Any:
        if value is not None and len(value) == 0:
            return None
        return value

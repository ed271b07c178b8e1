"""Data models for parsed Postman collections.

The collection format is permissive: a node may be a folder, a request,
or both at once, and almost every field can be missing. These models keep
that shape and ignore any fields the converter does not read.
"""

from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator


def _description_text(value):
    # Postman v2.1 also allows {"content": "...", "type": "text/markdown"}
    if isinstance(value, dict):
        return value.get("content")
    return value


def _path_from_raw(raw: str) -> list[str]:
    """Split a raw URL such as ``{{baseUrl}}/users/:id?x=1`` into segments."""
    raw = raw.split("?", 1)[0].split("#", 1)[0]
    if "://" in raw:
        raw = urlsplit(raw).path
    segments = [s for s in raw.split("/") if s]
    if segments and segments[0].startswith("{{"):
        segments = segments[1:]
    return segments


class KeyValue(BaseModel):
    """A header, query parameter or urlencoded field."""

    key: str | None = None
    value: str | None = None


class FormDataField(BaseModel):
    key: str | None = None
    type: str = "text"  # text / file
    value: str | None = None


class RequestBody(BaseModel):
    mode: str | None = None  # raw / formdata / urlencoded
    raw: str | None = None
    formdata: list[FormDataField] | None = None
    urlencoded: list[KeyValue] | None = None


class Url(BaseModel):
    raw: str | None = None
    path: list[str] | None = None
    query: list[KeyValue] | None = None

    @field_validator("path", mode="before")
    @classmethod
    def split_path_string(cls, value):
        if isinstance(value, str):
            return [s for s in value.split("/") if s]
        return value

    def segments(self) -> list[str]:
        if self.path is not None:
            return self.path
        if self.raw:
            return _path_from_raw(self.raw)
        return []


class Request(BaseModel):
    method: str = ""
    url: Url = Field(default_factory=Url)
    header: list[KeyValue] | None = None
    body: RequestBody | None = None
    description: str | None = None

    @field_validator("url", mode="before")
    @classmethod
    def url_from_string(cls, value):
        if value is None:
            return {}
        if isinstance(value, str):
            return {"raw": value}
        return value

    @field_validator("description", mode="before")
    @classmethod
    def flatten_description(cls, value):
        return _description_text(value)


class Item(BaseModel):
    """A collection node: folder (``item``), request (``request``) or both."""

    name: str = ""
    item: list["Item"] | None = None
    request: Request | None = None

    @field_validator("request", mode="before")
    @classmethod
    def request_from_string(cls, value):
        # A bare string request is shorthand for a GET of that URL
        if isinstance(value, str):
            return {"method": "GET", "url": value}
        return value


class CollectionInfo(BaseModel):
    name: str | None = None
    description: str | None = None
    version: str | None = None

    @field_validator("description", mode="before")
    @classmethod
    def flatten_description(cls, value):
        return _description_text(value)

    @field_validator("version", mode="before")
    @classmethod
    def version_to_string(cls, value):
        # Postman v2.0 allows {"major": 1, "minor": 0, "patch": 0}
        if isinstance(value, dict):
            return ".".join(str(value.get(k, 0)) for k in ("major", "minor", "patch"))
        if isinstance(value, (int, float)):
            return str(value)
        return value


class Collection(BaseModel):
    """A whole collection document."""

    info: CollectionInfo = Field(default_factory=CollectionInfo)
    item: list[Item] = []

    @field_validator("info", "item", mode="before")
    @classmethod
    def none_to_default(cls, value, info):
        if value is None:
            return {} if info.field_name == "info" else []
        return value

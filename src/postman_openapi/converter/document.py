"""OpenAPI description document models and the builder that fills them.

Field names follow Python conventions; the OpenAPI spellings
(``requestBody``, ``in``) are used as aliases when dumping.
"""

from pydantic import BaseModel, ConfigDict, Field

OPENAPI_VERSION = "3.0.0"
DEFAULT_TITLE = "API Documentation"
DEFAULT_VERSION = "1.0.0"
SUCCESS_RESPONSE = {"200": {"description": "Success"}}


class MediaType(BaseModel):
    schema_: dict = Field(alias="schema")

    model_config = ConfigDict(populate_by_name=True)


class RequestBody(BaseModel):
    content: dict[str, MediaType] = {}


class Parameter(BaseModel):
    name: str
    location: str = Field(default="query", alias="in")
    required: bool
    schema_: dict = Field(default_factory=lambda: {"type": "string"}, alias="schema")

    model_config = ConfigDict(populate_by_name=True)


class Operation(BaseModel):
    summary: str
    description: str = ""
    responses: dict[str, dict] = Field(default_factory=lambda: {k: dict(v) for k, v in SUCCESS_RESPONSE.items()})
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    parameters: list[Parameter] | None = None

    model_config = ConfigDict(populate_by_name=True)


class DocumentInfo(BaseModel):
    title: str = DEFAULT_TITLE
    description: str = ""
    version: str = DEFAULT_VERSION


class Components(BaseModel):
    # Reserved for shared schemas; the converter never fills it
    schemas: dict = {}


class OpenApiDocument(BaseModel):
    openapi: str = OPENAPI_VERSION
    info: DocumentInfo = Field(default_factory=DocumentInfo)
    paths: dict[str, dict[str, Operation]] = {}
    components: Components = Field(default_factory=Components)

    def operation_count(self) -> int:
        return sum(len(methods) for methods in self.paths.values())

    def to_dict(self) -> dict:
        """Plain OpenAPI mapping, ready for json/yaml serialization."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DocumentBuilder:
    """Accumulates operations for one conversion call."""

    def __init__(self, title: str | None = None, description: str | None = None, version: str | None = None):
        self.info = DocumentInfo(
            title=title or DEFAULT_TITLE,
            description=description or "",
            version=version or DEFAULT_VERSION,
        )
        self.paths: dict[str, dict[str, Operation]] = {}

    def add_operation(self, path: str, method: str, operation: Operation) -> None:
        """Store an operation; an existing entry for the same path and method is replaced."""
        self.paths.setdefault(path, {})[method] = operation

    def build(self) -> OpenApiDocument:
        return OpenApiDocument(info=self.info, paths=self.paths)

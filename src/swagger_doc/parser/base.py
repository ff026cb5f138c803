"""Data models for a parsed Swagger / OpenAPI document.

Only the parts of the document that post-processing touches are declared;
everything else (vendor extensions, OpenAPI 3 only fields, unknown keys) is
kept as model extras so it survives the round trip unchanged. Declared
fields serialize first, in declaration order, followed by extras in
insertion order.
"""

from enum import Enum
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

BADGES_EXTENSION = "x-badges"


class HttpMethod(str, Enum):
    """Operation slots of a path item, in slot order."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"


class Badge(BaseModel):
    """A coloured marker shown next to an operation."""

    label: str
    color: str


class Operation(BaseModel):
    """A single HTTP-method-bound endpoint definition."""

    model_config = ConfigDict(extra="allow")

    description: str | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    schemes: list[str] | None = None
    tags: list[str] | None = None
    summary: str | None = None
    externalDocs: dict[str, Any] | None = None
    operationId: str | None = None
    deprecated: bool | None = None
    security: list[dict[str, Any]] | None = None
    parameters: list[Any] | None = None
    responses: dict[str, Any] | None = None

    @field_validator("responses", mode="before")
    @classmethod
    def _stringify_status_codes(cls, value: Any) -> Any:
        # YAML reads unquoted status codes (200:) as integers
        if isinstance(value, dict):
            return {str(k): v for k, v in value.items()}
        return value

    @property
    def extensions(self) -> dict[str, Any]:
        """Ordered store of every non-declared key (``x-*`` and friends)."""
        return self.__pydantic_extra__

    def get_badges(self) -> list[Badge]:
        """Return the badges stored under ``x-badges``, or an empty list."""
        raw = self.extensions.get(BADGES_EXTENSION) or []
        return [Badge.model_validate(item) for item in raw]

    def set_badges(self, badges: list[Badge]) -> None:
        """Write ``badges`` under ``x-badges``, replacing any previous value."""
        self.extensions[BADGES_EXTENSION] = [badge.model_dump() for badge in badges]


class PathItem(BaseModel):
    """All operations available on one URL template."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    ref: str | None = Field(default=None, alias="$ref")
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    parameters: list[Any] | None = None

    def get_operation(self, method: HttpMethod) -> Operation | None:
        """Return the operation in the ``method`` slot, if any."""
        return getattr(self, method.value)

    def set_operation(self, method: HttpMethod, operation: Operation | None) -> None:
        """Fill the ``method`` slot, or clear it with None."""
        setattr(self, method.value, operation)

    def operations(self) -> Iterator[tuple[HttpMethod, Operation]]:
        """Yield the defined (method, operation) pairs in slot order."""
        for method in HttpMethod:
            operation = self.get_operation(method)
            if operation is not None:
                yield method, operation

    def is_empty(self) -> bool:
        """Return True if no method slot holds an operation."""
        return next(self.operations(), None) is None


class Document(BaseModel):
    """Top-level Swagger 2.0 or OpenAPI 3.x object."""

    model_config = ConfigDict(extra="allow")

    swagger: str | None = None
    openapi: str | None = None
    info: dict[str, Any] | None = None
    host: str | None = None
    basePath: str | None = None
    schemes: list[str] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    servers: list[Any] | None = None
    paths: dict[str, PathItem] = Field(default_factory=dict)
    definitions: dict[str, Any] | None = None
    components: dict[str, Any] | None = None
    parameters: dict[str, Any] | None = None
    responses: dict[str, Any] | None = None
    securityDefinitions: dict[str, Any] | None = None
    security: list[Any] | None = None
    tags: list[Any] | None = None
    externalDocs: dict[str, Any] | None = None

    def iter_operations(self) -> Iterator[tuple[str, HttpMethod, Operation]]:
        """Yield every (path, method, operation) in the document."""
        for path, item in self.paths.items():
            for method, operation in item.operations():
                yield path, method, operation

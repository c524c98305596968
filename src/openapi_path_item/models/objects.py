"""Collaborator objects referenced by a Path Item.

Only the parts of these objects that a path item needs to carry around are
typed; nested schemas, bodies and responses stay opaque mappings.
"""

from typing import Any

from pydantic import Field

from .base import ExtendableModel, ReferenceOr


class ServerVariableObject(ExtendableModel):
    """OpenAPI Server Variable Object."""

    enum: list[str] = Field(default_factory=list)
    default: str
    description: str | None = None


class ServerObject(ExtendableModel):
    """OpenAPI Server Object."""

    url: str
    description: str | None = None
    variables: dict[str, ServerVariableObject] = Field(default_factory=dict)


class ParameterObject(ExtendableModel):
    """OpenAPI Parameter Object. Unique by (name, location)."""

    name: str
    location: str = Field(alias="in")  # query / header / path / cookie
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = Field(default=None, alias="allowEmptyValue")
    param_schema: dict[str, Any] | None = Field(default=None, alias="schema")
    example: Any | None = None


ParameterOrReference = ReferenceOr[ParameterObject]


class OperationObject(ExtendableModel):
    """OpenAPI Operation Object."""

    tags: list[str] = Field(default_factory=list)
    summary: str | None = None
    description: str | None = None
    operation_id: str | None = Field(default=None, alias="operationId")
    parameters: list[ParameterOrReference] = Field(default_factory=list)
    request_body: dict[str, Any] | None = Field(default=None, alias="requestBody")
    responses: dict[str, Any] = Field(default_factory=dict)
    deprecated: bool | None = None
    security: list[dict[str, list[str]]] | None = None
    servers: list[ServerObject] = Field(default_factory=list)

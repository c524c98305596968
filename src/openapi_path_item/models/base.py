"""Shared building blocks for OpenAPI objects.

Every object in the model can carry specification extensions (``x-`` keys),
encodes to a JSON-compatible tree with absent and empty-default fields left
out, and decodes from such a tree raising ``DecodingError`` on bad input.
"""

from typing import Any, Generic, Self, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationError,
    field_validator,
    model_serializer,
    model_validator,
)

from openapi_path_item.errors import DecodingError

EXTENSION_PREFIX = "x-"

T = TypeVar("T")


def _is_extension(key: Any) -> bool:
    return isinstance(key, str) and key.startswith(EXTENSION_PREFIX)


class Encodable:
    """encode()/decode() shared by plain and root models."""

    @classmethod
    def decode(cls, data: Any, location: str = "") -> Self:
        """Build an instance from a JSON-compatible tree."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DecodingError.from_validation_error(e, prefix=location) from e

    def encode(self) -> Any:
        """Return the JSON-compatible tree for this object."""
        return self.model_dump(mode="json", by_alias=True)


class ExtendableModel(Encodable, BaseModel):
    """Base for OpenAPI objects that accept specification extensions."""

    extensions: dict[str, Any] = Field(default_factory=dict, exclude=True)

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def collect_extensions(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        found = {k: v for k, v in data.items() if _is_extension(k)}
        if not found and "extensions" not in data:
            return data
        given = data.get("extensions")
        if not isinstance(given, dict):
            given = {}
        data = {k: v for k, v in data.items() if k not in found and k != "extensions"}
        data["extensions"] = {**given, **found}
        return data

    @field_validator("extensions")
    @classmethod
    def only_extension_keys(cls, value: dict[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in value.items() if _is_extension(k)}

    @model_serializer(mode="wrap")
    def omit_empty_fields(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            key = field.alias if info.by_alias and field.alias else name
            if key not in data:
                continue
            value = data[key]
            # empty collections are the default, same as absent
            if value is None or (field.default_factory is not None and not value):
                del data[key]
        data.update((k, v) for k, v in self.extensions.items() if _is_extension(k))
        return data


class Reference(ExtendableModel):
    """OpenAPI Reference Object."""

    ref: str = Field(alias="$ref")
    summary: str | None = None
    description: str | None = None


class ReferenceOr(Encodable, RootModel[Union[Reference, T]], Generic[T]):
    """Either an inline object or a ``$ref`` to one defined elsewhere."""

    @classmethod
    def of(cls, value: T) -> Self:
        return cls(value)

    @classmethod
    def ref_to(cls, ref: str) -> Self:
        return cls(Reference(ref=ref))

    @property
    def is_reference(self) -> bool:
        return isinstance(self.root, Reference)

    @property
    def ref(self) -> str | None:
        return self.root.ref if self.is_reference else None

    @property
    def value(self) -> T | None:
        return None if self.is_reference else self.root

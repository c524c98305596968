"""OpenAPI Path Item Object and the helpers for building one.

A path item describes the operations available on a single path. It MAY be
empty, e.g. when access control hides every operation from the viewer; the
path is still listed, only its operations and parameters are not.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Union

from pydantic import Field

from .base import ExtendableModel, ReferenceOr
from .objects import OperationObject, ParameterObject, ParameterOrReference, ServerObject


class PathItemKey(str, Enum):
    """The HTTP methods a path item has a slot for."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"

    def read(self, item: "PathItemObject") -> OperationObject | None:
        return getattr(item, self.value)

    def write(self, item: "PathItemObject", operation: OperationObject | None) -> None:
        setattr(item, self.value, operation)


OperationsInput = Union[
    Mapping[PathItemKey | str, OperationObject],
    Iterable[tuple[PathItemKey | str, OperationObject]],
]


class BuildableFromPathItem(ABC):
    """Anything that can be made from a PathItemObject.

    Implementers provide ``from_path_item``; the per-method builders below
    come for free, so a path can be declared as e.g.
    ``PathItemReferenceOr.from_get(list_pets, summary="Pets")``.
    """

    @classmethod
    @abstractmethod
    def from_path_item(cls, item: "PathItemObject"):
        ...

    @classmethod
    def from_operations(
        cls,
        operations: OperationsInput,
        *,
        summary: str | None = None,
        description: str | None = None,
        servers: Iterable[ServerObject] = (),
        parameters: Iterable[ParameterObject | ParameterOrReference] = (),
    ):
        """Build from a method -> operation mapping; missing methods stay absent."""
        pairs = operations.items() if isinstance(operations, Mapping) else operations
        item = PathItemObject(
            summary=summary,
            description=description,
            servers=list(servers),
            parameters=list(parameters),
        )
        for key, operation in pairs:
            PathItemKey(key).write(item, operation)
        return cls.from_path_item(item)

    @classmethod
    def from_method(
        cls,
        method: PathItemKey | str,
        operation: OperationObject,
        *,
        summary: str | None = None,
        description: str | None = None,
        servers: Iterable[ServerObject] = (),
        parameters: Iterable[ParameterObject | ParameterOrReference] = (),
    ):
        """Build with a single operation in the given method slot."""
        return cls.from_operations(
            [(method, operation)],
            summary=summary,
            description=description,
            servers=servers,
            parameters=parameters,
        )

    @classmethod
    def from_get(cls, operation: OperationObject, **kwargs):
        """A definition of a GET operation on this path."""
        return cls.from_method(PathItemKey.GET, operation, **kwargs)

    @classmethod
    def from_put(cls, operation: OperationObject, **kwargs):
        """A definition of a PUT operation on this path."""
        return cls.from_method(PathItemKey.PUT, operation, **kwargs)

    @classmethod
    def from_post(cls, operation: OperationObject, **kwargs):
        """A definition of a POST operation on this path."""
        return cls.from_method(PathItemKey.POST, operation, **kwargs)

    @classmethod
    def from_delete(cls, operation: OperationObject, **kwargs):
        """A definition of a DELETE operation on this path."""
        return cls.from_method(PathItemKey.DELETE, operation, **kwargs)

    @classmethod
    def from_options(cls, operation: OperationObject, **kwargs):
        """A definition of an OPTIONS operation on this path."""
        return cls.from_method(PathItemKey.OPTIONS, operation, **kwargs)

    @classmethod
    def from_head(cls, operation: OperationObject, **kwargs):
        """A definition of a HEAD operation on this path."""
        return cls.from_method(PathItemKey.HEAD, operation, **kwargs)

    @classmethod
    def from_patch(cls, operation: OperationObject, **kwargs):
        """A definition of a PATCH operation on this path."""
        return cls.from_method(PathItemKey.PATCH, operation, **kwargs)

    @classmethod
    def from_trace(cls, operation: OperationObject, **kwargs):
        """A definition of a TRACE operation on this path."""
        return cls.from_method(PathItemKey.TRACE, operation, **kwargs)


class PathItemObject(ExtendableModel, BuildableFromPathItem):
    """OpenAPI Path Item Object."""

    summary: str | None = None
    description: str | None = None  # CommonMark
    get: OperationObject | None = None
    put: OperationObject | None = None
    post: OperationObject | None = None
    delete: OperationObject | None = None
    options: OperationObject | None = None
    head: OperationObject | None = None
    patch: OperationObject | None = None
    trace: OperationObject | None = None
    servers: list[ServerObject] = Field(default_factory=list)
    # MUST NOT repeat a (name, location) pair; not checked here
    parameters: list[ParameterOrReference] = Field(default_factory=list)

    @classmethod
    def from_path_item(cls, item: "PathItemObject") -> "PathItemObject":
        return item.model_copy(deep=True)

    def __getitem__(self, key: PathItemKey | str) -> OperationObject | None:
        return PathItemKey(key).read(self)

    def __setitem__(self, key: PathItemKey | str, operation: OperationObject | None) -> None:
        PathItemKey(key).write(self, operation)

    def operations(self) -> dict[PathItemKey, OperationObject]:
        """The operations that are present, in method order."""
        return {key: op for key in PathItemKey if (op := key.read(self)) is not None}


class PathItemReferenceOr(ReferenceOr[PathItemObject], BuildableFromPathItem):
    """A path item, either inline or as a ``$ref``."""

    @classmethod
    def from_path_item(cls, item: PathItemObject) -> "PathItemReferenceOr":
        return cls.of(item)


Paths = dict[str, PathItemReferenceOr]

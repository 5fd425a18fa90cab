# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Type metadata port and its graphql-core adapter.

The lowerer and dependency collector only need three facts per field: the
named type to recurse into, whether the field is computed at resolve time,
and which storage paths a computed field reads. A field is computed when it
has a resolver, or when its SDL definition carries ``@computed``::

    type User {
        firstName: String
        lastName: String
        fullName: String @computed(dependencies: ["firstName", "lastName"])
    }

Programmatic schemas declare dependencies through field extensions::

    GraphQLField(GraphQLString, resolve=..., extensions={"dependencies": ["firstName"]})
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from graphql import (
    DirectiveNode,
    GraphQLField,
    get_named_type,
    is_interface_type,
    is_object_type,
    value_from_ast_untyped,
)

from gqlprojection.kernel.exceptions import SchemaMismatchException

COMPUTED_DIRECTIVE = "computed"
DEPENDENCIES_KEY = "dependencies"

COMPUTED_DIRECTIVE_SDL = "directive @computed(dependencies: [String!]) on FIELD_DEFINITION"


@dataclass(frozen=True)
class TypeFieldMeta:
    """What the compiler needs to know about one field of one type."""

    inner_type: Any
    is_computed: bool = False
    dependencies: tuple[str, ...] = ()


@runtime_checkable
class TypeMetadataPort(Protocol):
    """Resolve the field metadata of an object type."""

    def is_object_type(self, type_ref: Any) -> bool: ...

    def get_fields(self, type_ref: Any) -> Mapping[str, TypeFieldMeta]: ...

    def type_name(self, type_ref: Any) -> str: ...


class GraphQLTypeMetadata:
    """:class:`TypeMetadataPort` over graphql-core object and interface types."""

    def is_object_type(self, type_ref: Any) -> bool:
        return is_object_type(type_ref) or is_interface_type(type_ref)

    def get_fields(self, type_ref: Any) -> Mapping[str, TypeFieldMeta]:
        if not self.is_object_type(type_ref):
            raise SchemaMismatchException(
                f"Cannot select sub-fields of non-object type '{self.type_name(type_ref)}'",
                context={"type_name": self.type_name(type_ref)},
            )
        return {name: self._describe(field) for name, field in type_ref.fields.items()}

    def type_name(self, type_ref: Any) -> str:
        return getattr(type_ref, "name", None) or str(type_ref)

    def _describe(self, field: GraphQLField) -> TypeFieldMeta:
        directive = _find_directive(field, COMPUTED_DIRECTIVE)
        is_computed = field.resolve is not None or directive is not None

        extensions = field.extensions or {}
        dependencies: Sequence[str] = extensions.get(DEPENDENCIES_KEY) or ()
        if not dependencies and directive is not None:
            dependencies = _directive_argument(directive, DEPENDENCIES_KEY) or ()

        return TypeFieldMeta(
            inner_type=get_named_type(field.type),
            is_computed=is_computed,
            dependencies=tuple(dependencies),
        )


def _find_directive(field: GraphQLField, name: str) -> DirectiveNode | None:
    if field.ast_node is None:
        return None
    for directive in field.ast_node.directives or ():
        if directive.name.value == name:
            return directive
    return None


def _directive_argument(directive: DirectiveNode, name: str) -> Any:
    for argument in directive.arguments or ():
        if argument.name.value == name:
            return value_from_ast_untyped(argument.value)
    return None

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
"""Lower a merged field tree into flat MongoDB projections and dependency paths."""

from __future__ import annotations

from collections.abc import Collection, Iterator, Mapping
from typing import Any

from gqlprojection.kernel.exceptions import SchemaMismatchException
from gqlprojection.projection.graph import INCLUDE, LEAF, MergedFieldTree, MergedValue, MongoDbProjection
from gqlprojection.projection.metadata import TypeFieldMeta, TypeMetadataPort

PATH_SEPARATOR = "."


class ProjectionLowerer:
    """Walk a :class:`MergedFieldTree` alongside type metadata.

    Args:
        metadata: Source of per-type field metadata.
        typename_field: Meta field that is never stored (``__typename``).
    """

    def __init__(self, metadata: TypeMetadataPort, typename_field: str = "__typename") -> None:
        self._metadata = metadata
        self._typename_field = typename_field

    def lower(
        self,
        tree: MergedFieldTree,
        type_ref: Any,
        excluded_fields: Collection[str] = (),
    ) -> MongoDbProjection:
        """Project the stored fields of *tree*.

        Computed fields, the typename meta field and *excluded_fields* are
        skipped. *excluded_fields* applies to this level only.
        """
        projection: MongoDbProjection = {}
        for name, value, meta in self._fields(tree, type_ref, excluded_fields):
            if meta.is_computed:
                continue
            if value is LEAF:
                projection[name] = INCLUDE
                continue
            child = self.lower(value, meta.inner_type)
            projection.update(_prefixed(name, child))
        return projection

    def dependencies(self, tree: MergedFieldTree, type_ref: Any) -> list[str]:
        """Collect the storage paths computed fields in *tree* read.

        Paths declared by a computed field are relative to the object that
        owns it; they are re-rooted under each stored ancestor on the way up.
        Duplicates are kept.
        """
        collected: list[str] = []
        for name, value, meta in self._fields(tree, type_ref):
            if meta.is_computed:
                collected.extend(meta.dependencies)
            elif value is not LEAF:
                nested = self.dependencies(value, meta.inner_type)
                collected.extend(f"{name}{PATH_SEPARATOR}{path}" for path in nested)
        return collected

    def _fields(
        self, tree: MergedFieldTree, type_ref: Any, skip: Collection[str] = (),
    ) -> Iterator[tuple[str, MergedValue, TypeFieldMeta]]:
        type_fields: Mapping[str, TypeFieldMeta] | None = None
        for name, value in tree.items():
            if name == self._typename_field or name in skip:
                continue
            if type_fields is None:
                type_fields = self._metadata.get_fields(type_ref)
            meta = type_fields.get(name)
            if meta is None:
                type_name = self._metadata.type_name(type_ref)
                raise SchemaMismatchException(
                    f"Field '{name}' is not defined on type '{type_name}'",
                    context={"type_name": type_name, "field": name},
                )
            yield name, value, meta


def _prefixed(prefix: str, projection: Mapping[str, int]) -> Iterator[tuple[str, int]]:
    for path, marker in projection.items():
        yield f"{prefix}{PATH_SEPARATOR}{path}", marker

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
"""Projection compiler: GraphQL selection to MongoDB projection.

Pipeline for one call::

    selection -> FieldGraphBuilder -> forest -> merge_field_graphs -> tree
    tree -> ProjectionLowerer.lower        -> projection
    tree -> ProjectionLowerer.dependencies -> dependency paths
    projection + dependency paths -> merge_projection_and_resolve_dependencies

Usage in a resolver::

    def resolve_users(root, info):
        projection = get_mongodb_projection(info, UserType, "password")
        return list(db.users.find({}, projection=projection))
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from graphql import FieldNode, FragmentDefinitionNode, GraphQLResolveInfo

from gqlprojection.config.properties.projection import ProjectionProperties
from gqlprojection.core.config import Config
from gqlprojection.kernel.exceptions import ContractViolationException
from gqlprojection.logging.decorators import log_on_error
from gqlprojection.projection.builder import FieldGraphBuilder
from gqlprojection.projection.fragments import FragmentCache
from gqlprojection.projection.graph import MergedFieldTree, MongoDbProjection
from gqlprojection.projection.lowerer import ProjectionLowerer
from gqlprojection.projection.merger import merge_field_graphs
from gqlprojection.projection.metadata import GraphQLTypeMetadata, TypeMetadataPort
from gqlprojection.projection.reconciler import merge_projection_and_resolve_dependencies

logger = structlog.get_logger("gqlprojection.projection.compiler")


class ProjectionCompiler:
    """Compile GraphQL selections into flat MongoDB projections.

    The compiler holds no per-call state: every compilation creates its own
    :class:`FragmentCache`, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        properties: ProjectionProperties | None = None,
        metadata: TypeMetadataPort | None = None,
    ) -> None:
        self._properties = properties if properties is not None else ProjectionProperties()
        self._metadata = metadata if metadata is not None else GraphQLTypeMetadata()
        self._lowerer = ProjectionLowerer(self._metadata, self._properties.typename_field)

    @classmethod
    def from_config(cls, config: Config, metadata: TypeMetadataPort | None = None) -> ProjectionCompiler:
        return cls(config.bind(ProjectionProperties), metadata)

    @property
    def properties(self) -> ProjectionProperties:
        return self._properties

    @log_on_error()
    def compile(self, info: GraphQLResolveInfo, graphql_type: Any, *excluded_fields: str) -> MongoDbProjection:
        """Return the projection needed to resolve *info* as *graphql_type*."""
        self._check_info(info)
        return self.compile_nodes(info.field_nodes, info.fragments, graphql_type, *excluded_fields)

    def compile_nodes(
        self,
        field_nodes: Iterable[FieldNode],
        fragments: Mapping[str, FragmentDefinitionNode],
        graphql_type: Any,
        *excluded_fields: str,
    ) -> MongoDbProjection:
        """Compile from raw field nodes and fragment definitions."""
        self._check_type(graphql_type)

        tree = self.requested_fields_from_nodes(field_nodes, fragments)
        projection = self.projection(tree, graphql_type, *excluded_fields)
        dependencies = self.dependencies(tree, graphql_type)
        result = merge_projection_and_resolve_dependencies(projection, dependencies)

        logger.debug(
            "projection_compiled",
            type_name=self._metadata.type_name(graphql_type),
            requested=len(tree),
            projected=len(projection),
            dependencies=len(dependencies),
            keys=len(result),
        )
        return result

    def requested_fields(self, info: GraphQLResolveInfo, cache: FragmentCache | None = None) -> MergedFieldTree:
        """Merge every selection under ``info.field_nodes`` into one tree.

        *cache* may be passed to inspect fragment expansions afterwards; it
        must not outlive the call, since fragment names are per document.
        """
        self._check_info(info)
        return self.requested_fields_from_nodes(info.field_nodes, info.fragments, cache)

    def requested_fields_from_nodes(
        self,
        field_nodes: Iterable[FieldNode],
        fragments: Mapping[str, FragmentDefinitionNode],
        cache: FragmentCache | None = None,
    ) -> MergedFieldTree:
        selections = [
            selection
            for node in field_nodes
            if node.selection_set is not None
            for selection in node.selection_set.selections
        ]
        if cache is None:
            cache = FragmentCache(self._properties.on_fragment_cycle)
        builder = FieldGraphBuilder(fragments, cache)
        return merge_field_graphs(builder.build(selections))

    def projection(self, tree: MergedFieldTree, graphql_type: Any, *excluded_fields: str) -> MongoDbProjection:
        """Lower *tree* into stored-field paths, before dependency reconciliation."""
        excluded = {*self._properties.excluded_fields, *excluded_fields}
        return self._lowerer.lower(tree, graphql_type, excluded)

    def dependencies(self, tree: MergedFieldTree, graphql_type: Any) -> list[str]:
        """Storage paths read by the computed fields selected in *tree*."""
        return self._lowerer.dependencies(tree, graphql_type)

    @staticmethod
    def _check_info(info: Any) -> None:
        if not hasattr(info, "field_nodes") or not hasattr(info, "fragments"):
            raise ContractViolationException(
                "First argument of get_mongodb_projection must be a GraphQLResolveInfo",
                context={"argument": type(info).__name__},
            )

    def _check_type(self, graphql_type: Any) -> None:
        if not self._metadata.is_object_type(graphql_type):
            raise ContractViolationException(
                "Second argument of get_mongodb_projection must be a GraphQL object type",
                context={"argument": repr(graphql_type)},
            )


_default_compiler = ProjectionCompiler()


def get_mongodb_projection(info: GraphQLResolveInfo, graphql_type: Any, *excluded_fields: str) -> MongoDbProjection:
    """Compile *info* into a projection for documents of *graphql_type*.

    *excluded_fields* names top-level fields to leave out even when requested.
    """
    return _default_compiler.compile(info, graphql_type, *excluded_fields)


def get_requested_fields(info: GraphQLResolveInfo, cache: FragmentCache | None = None) -> MergedFieldTree:
    return _default_compiler.requested_fields(info, cache)


def get_projection(tree: MergedFieldTree, graphql_type: Any, *excluded_fields: str) -> MongoDbProjection:
    return _default_compiler.projection(tree, graphql_type, *excluded_fields)


def get_resolve_fields_dependencies(tree: MergedFieldTree, graphql_type: Any) -> list[str]:
    return _default_compiler.dependencies(tree, graphql_type)

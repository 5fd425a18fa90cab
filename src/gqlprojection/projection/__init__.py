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
"""GraphQL selection to MongoDB projection compiler."""

from gqlprojection.projection.builder import FieldGraphBuilder
from gqlprojection.projection.compiler import (
    ProjectionCompiler,
    get_mongodb_projection,
    get_projection,
    get_requested_fields,
    get_resolve_fields_dependencies,
)
from gqlprojection.projection.fragments import FragmentCache
from gqlprojection.projection.graph import (
    INCLUDE,
    LEAF,
    FieldGraph,
    Leaf,
    MergedFieldTree,
    MongoDbProjection,
)
from gqlprojection.projection.lowerer import ProjectionLowerer
from gqlprojection.projection.merger import merge_field_graphs
from gqlprojection.projection.metadata import (
    COMPUTED_DIRECTIVE_SDL,
    GraphQLTypeMetadata,
    TypeFieldMeta,
    TypeMetadataPort,
)
from gqlprojection.projection.reconciler import merge_projection_and_resolve_dependencies

__all__ = [
    # Compiler
    "ProjectionCompiler",
    "get_mongodb_projection",
    "get_requested_fields",
    "get_projection",
    "get_resolve_fields_dependencies",
    "merge_projection_and_resolve_dependencies",
    # Stages
    "FieldGraphBuilder",
    "FragmentCache",
    "ProjectionLowerer",
    "merge_field_graphs",
    # Graph types
    "INCLUDE",
    "LEAF",
    "Leaf",
    "FieldGraph",
    "MergedFieldTree",
    "MongoDbProjection",
    # Metadata
    "COMPUTED_DIRECTIVE_SDL",
    "GraphQLTypeMetadata",
    "TypeFieldMeta",
    "TypeMetadataPort",
]

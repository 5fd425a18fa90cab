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
"""gqlprojection: derive minimal MongoDB projections from GraphQL selections."""

__version__ = "0.1.0"

from gqlprojection.config.properties.projection import FragmentCyclePolicy, ProjectionProperties
from gqlprojection.kernel.exceptions import (
    ContractViolationException,
    FragmentCycleException,
    FragmentNotFoundException,
    ProjectionException,
    SchemaMismatchException,
)
from gqlprojection.kernel.types import ErrorKind
from gqlprojection.projection import (
    COMPUTED_DIRECTIVE_SDL,
    INCLUDE,
    LEAF,
    MergedFieldTree,
    MongoDbProjection,
    ProjectionCompiler,
    get_mongodb_projection,
    get_projection,
    get_requested_fields,
    get_resolve_fields_dependencies,
    merge_projection_and_resolve_dependencies,
)

__all__ = [
    "__version__",
    "COMPUTED_DIRECTIVE_SDL",
    "INCLUDE",
    "LEAF",
    "ContractViolationException",
    "ErrorKind",
    "FragmentCycleException",
    "FragmentCyclePolicy",
    "FragmentNotFoundException",
    "MergedFieldTree",
    "MongoDbProjection",
    "ProjectionCompiler",
    "ProjectionException",
    "ProjectionProperties",
    "SchemaMismatchException",
    "get_mongodb_projection",
    "get_projection",
    "get_requested_fields",
    "get_resolve_fields_dependencies",
    "merge_projection_and_resolve_dependencies",
]

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
"""Tests for GraphQLTypeMetadata: field metadata from graphql-core types."""

from __future__ import annotations

import pytest
from graphql import GraphQLString, build_schema

from gqlprojection.kernel.exceptions import SchemaMismatchException
from gqlprojection.projection.metadata import (
    COMPUTED_DIRECTIVE_SDL,
    GraphQLTypeMetadata,
    TypeFieldMeta,
    TypeMetadataPort,
)

SDL = COMPUTED_DIRECTIVE_SDL + """

interface Named {
    name: String
}

type Profile implements Named {
    name: String
    firstName: String
    lastName: String
    fullName: String @computed(dependencies: ["firstName", "lastName"])
    score: Int @computed
    tags: [String!]!
}

type Query {
    profile: Profile
}
"""


@pytest.fixture
def metadata() -> GraphQLTypeMetadata:
    return GraphQLTypeMetadata()


@pytest.fixture
def schema():
    return build_schema(SDL)


class TestGraphQLTypeMetadata:
    def test_implements_port(self, metadata):
        assert isinstance(metadata, TypeMetadataPort)

    def test_stored_field(self, metadata, user_type):
        meta = metadata.get_fields(user_type)["a"]
        assert meta == TypeFieldMeta(inner_type=GraphQLString, is_computed=False, dependencies=())

    def test_resolver_marks_computed(self, metadata, user_type):
        meta = metadata.get_fields(user_type)["b"]
        assert meta.is_computed
        assert meta.dependencies == ("c",)

    def test_computed_without_dependencies(self, metadata, user_type):
        meta = metadata.get_fields(user_type)["visits"]
        assert meta.is_computed
        assert meta.dependencies == ()

    def test_inner_type_unwraps_list_and_non_null(self, metadata, user_type, address_type):
        assert metadata.get_fields(user_type)["addresses"].inner_type is address_type

    def test_directive_marks_computed(self, metadata, schema):
        fields = metadata.get_fields(schema.get_type("Profile"))
        assert fields["fullName"].is_computed
        assert fields["fullName"].dependencies == ("firstName", "lastName")
        assert fields["score"].is_computed
        assert fields["score"].dependencies == ()
        assert not fields["firstName"].is_computed

    def test_sdl_list_type_unwrapped(self, metadata, schema):
        assert metadata.get_fields(schema.get_type("Profile"))["tags"].inner_type.name == "String"

    def test_interface_types_accepted(self, metadata, schema):
        named = schema.get_type("Named")
        assert metadata.is_object_type(named)
        assert set(metadata.get_fields(named)) == {"name"}

    def test_scalar_is_not_object_type(self, metadata):
        assert not metadata.is_object_type(GraphQLString)
        assert not metadata.is_object_type("User")

    def test_scalar_fields_raise(self, metadata):
        with pytest.raises(SchemaMismatchException, match="String"):
            metadata.get_fields(GraphQLString)

    def test_type_name(self, metadata, user_type):
        assert metadata.type_name(user_type) == "User"

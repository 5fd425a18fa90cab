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
"""Shared schema and selection fixtures for projection tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from graphql import (
    FragmentDefinitionNode,
    GraphQLField,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLString,
    OperationDefinitionNode,
    SelectionNode,
    graphql_sync,
    parse,
)


def _computed(value: Any) -> Callable[..., Any]:
    return lambda _obj, _info: value


NESTED = GraphQLObjectType(
    "Nested",
    {
        "x": GraphQLField(GraphQLString),
        "y": GraphQLField(GraphQLString),
        "z": GraphQLField(GraphQLString),
    },
)

ADDRESS = GraphQLObjectType(
    "Address",
    {
        "street": GraphQLField(GraphQLString),
        "city": GraphQLField(GraphQLString),
        "zip": GraphQLField(GraphQLString),
        "label": GraphQLField(
            GraphQLString,
            resolve=_computed("label"),
            extensions={"dependencies": ["street", "city"]},
        ),
    },
)

USER = GraphQLObjectType(
    "User",
    {
        "a": GraphQLField(GraphQLString),
        "b": GraphQLField(GraphQLString, resolve=_computed("b"), extensions={"dependencies": ["c"]}),
        "c": GraphQLField(GraphQLString),
        "password": GraphQLField(GraphQLString),
        "visits": GraphQLField(GraphQLInt, resolve=_computed(0)),
        "fullAddress": GraphQLField(
            GraphQLString, resolve=_computed("addr"), extensions={"dependencies": ["address"]},
        ),
        "nested": GraphQLField(NESTED),
        "address": GraphQLField(ADDRESS),
        "addresses": GraphQLField(GraphQLList(GraphQLNonNull(ADDRESS))),
    },
)


@pytest.fixture
def user_type() -> GraphQLObjectType:
    return USER


@pytest.fixture
def address_type() -> GraphQLObjectType:
    return ADDRESS


@pytest.fixture
def resolve_info() -> Callable[[str], GraphQLResolveInfo]:
    """Execute a query against the test schema and return the ``user`` resolve info."""

    def _resolve(query: str) -> GraphQLResolveInfo:
        captured: list[GraphQLResolveInfo] = []

        def resolve_user(_root: Any, info: GraphQLResolveInfo) -> dict[str, Any]:
            captured.append(info)
            return {}

        schema = GraphQLSchema(
            query=GraphQLObjectType("Query", {"user": GraphQLField(USER, resolve=resolve_user)}),
        )
        result = graphql_sync(schema, query)
        assert result.errors is None, result.errors
        assert len(captured) == 1
        return captured[0]

    return _resolve


@pytest.fixture
def parse_selection() -> Callable[[str], tuple[list[SelectionNode], dict[str, FragmentDefinitionNode]]]:
    """Parse a document without validation; return the operation's selections and fragments."""

    def _parse(source: str) -> tuple[list[SelectionNode], dict[str, FragmentDefinitionNode]]:
        document = parse(source)
        operation = next(d for d in document.definitions if isinstance(d, OperationDefinitionNode))
        fragments = {
            d.name.value: d for d in document.definitions if isinstance(d, FragmentDefinitionNode)
        }
        return list(operation.selection_set.selections), fragments

    return _parse

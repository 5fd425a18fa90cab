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
"""Field graph builder: flattens a GraphQL selection set into a forest.

The first graph of the forest holds the direct field selections; every
fragment (named or inline) contributes its own graphs after it. Nothing is
merged here, see :mod:`gqlprojection.projection.merger`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from graphql import (
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    SelectionNode,
)

from gqlprojection.kernel.exceptions import ContractViolationException, FragmentNotFoundException
from gqlprojection.projection.fragments import FragmentCache
from gqlprojection.projection.graph import FieldGraph


class FieldGraphBuilder:
    """Build unmerged field graphs for one compilation call."""

    def __init__(
        self,
        fragments: Mapping[str, FragmentDefinitionNode],
        cache: FragmentCache | None = None,
    ) -> None:
        self._fragments = fragments
        self._cache = cache if cache is not None else FragmentCache()

    @property
    def cache(self) -> FragmentCache:
        return self._cache

    def build(self, selections: Iterable[SelectionNode]) -> list[FieldGraph]:
        """Flatten *selections* into a forest of field graphs."""
        field_graph = FieldGraph()
        forest = [field_graph]

        for selection in selections:
            if isinstance(selection, FieldNode):
                name = selection.name.value
                if selection.selection_set is None:
                    field_graph.add_leaf(name)
                elif not field_graph.is_leaf(name):
                    field_graph.add_branches(name, self.build(selection.selection_set.selections))
            elif isinstance(selection, FragmentSpreadNode):
                forest.extend(self._build_fragment(selection.name.value))
            elif isinstance(selection, InlineFragmentNode):
                forest.extend(self.build(selection.selection_set.selections))
            else:
                raise ContractViolationException(
                    f"Unsupported selection node: {type(selection).__name__}",
                    context={"node": type(selection).__name__},
                )

        return forest

    def _build_fragment(self, name: str) -> list[FieldGraph]:
        return self._cache.resolve(name, lambda: self.build(self._lookup(name).selection_set.selections))

    def _lookup(self, name: str) -> FragmentDefinitionNode:
        try:
            return self._fragments[name]
        except KeyError as exc:
            raise FragmentNotFoundException(
                f"Fragment '{name}' is not defined", context={"fragment": name},
            ) from exc

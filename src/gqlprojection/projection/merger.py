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
"""Field graph merger: folds a forest into one :class:`MergedFieldTree`."""

from __future__ import annotations

from collections.abc import Iterable

from gqlprojection.projection.graph import LEAF, FieldGraph, Leaf, MergedFieldTree, MergedValue


def merge_field_graphs(forest: Iterable[FieldGraph]) -> MergedFieldTree:
    """Merge *forest* so each field name appears once.

    A leaf anywhere for a name makes the merged name a leaf; otherwise the
    sub-graphs from every branch are concatenated and merged one level down.
    The result does not depend on the order of the forest.
    """
    pending: dict[str, Leaf | list[FieldGraph]] = {}

    for field_graph in forest:
        for name, value in field_graph.items():
            current = pending.get(name)
            if current is LEAF:
                continue
            if value is LEAF:
                pending[name] = LEAF
            elif current is None:
                pending[name] = list(value)
            else:
                current.extend(value)

    merged: dict[str, MergedValue] = {}
    for name, value in pending.items():
        merged[name] = LEAF if value is LEAF else merge_field_graphs(value)
    return MergedFieldTree(merged)

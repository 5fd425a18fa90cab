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
"""Field graph structures produced while flattening a selection tree.

A field is either a :data:`LEAF` (selected without a sub-selection) or a
branch. Unmerged branches live in :class:`FieldGraph` as a list of nested
graphs; merged branches live in :class:`MergedFieldTree` as a single tree.
Both containers enforce leaf dominance: once a name is a leaf, further
sub-selections for that name are ignored.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Literal, Union


class Leaf(Enum):
    """Tag for a field selected without a sub-selection."""

    LEAF = "LEAF"

    def __repr__(self) -> str:
        return "LEAF"


LEAF: Literal[Leaf.LEAF] = Leaf.LEAF

INCLUDE = 1
"""Inclusion marker used as the value of every projection key."""

MongoDbProjection = dict[str, int]

FieldGraphValue = Union[Leaf, list["FieldGraph"]]
MergedValue = Union[Leaf, "MergedFieldTree"]


class FieldGraph:
    """One unmerged branch of a selection set, keyed by field name.

    Values are :data:`LEAF` or an ordered list of sub-graphs still awaiting
    merge. Insertion order of field names is preserved.
    """

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        self._fields: dict[str, FieldGraphValue] = {}

    def add_leaf(self, name: str) -> None:
        """Mark *name* as a leaf; a leaf replaces any pending sub-graphs."""
        self._fields[name] = LEAF

    def add_branches(self, name: str, graphs: list[FieldGraph]) -> None:
        """Append sub-graphs under *name* unless it is already a leaf."""
        current = self._fields.get(name)
        if current is LEAF:
            return
        if current is None:
            self._fields[name] = list(graphs)
        else:
            current.extend(graphs)

    def is_leaf(self, name: str) -> bool:
        return self._fields.get(name) is LEAF

    def items(self) -> Iterator[tuple[str, FieldGraphValue]]:
        return iter(self._fields.items())

    def __getitem__(self, name: str) -> FieldGraphValue:
        return self._fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldGraph({self._fields!r})"


class MergedFieldTree(Mapping[str, MergedValue]):
    """Canonical, fully merged selection: name -> LEAF or nested tree."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, MergedValue] | None = None) -> None:
        self._fields: dict[str, MergedValue] = dict(fields or {})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MergedFieldTree:
        """Build a tree from a plain nested dict where leaves are ``1`` or LEAF."""
        fields: dict[str, MergedValue] = {}
        for name, value in data.items():
            fields[name] = cls.from_dict(value) if isinstance(value, Mapping) else LEAF
        return cls(fields)

    def to_dict(self) -> dict[str, Any]:
        """Render as a plain nested dict with ``1`` for leaves."""
        return {
            name: INCLUDE if value is LEAF else value.to_dict()
            for name, value in self._fields.items()
        }

    def is_leaf(self, name: str) -> bool:
        return self._fields[name] is LEAF

    def __getitem__(self, name: str) -> MergedValue:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"MergedFieldTree({self.to_dict()!r})"

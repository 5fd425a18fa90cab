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
"""Per-compilation memoization of expanded fragment spreads."""

from __future__ import annotations

from collections.abc import Callable

from gqlprojection.config.properties.projection import FragmentCyclePolicy
from gqlprojection.kernel.exceptions import FragmentCycleException
from gqlprojection.projection.graph import FieldGraph


class FragmentCache:
    """Expanded fragment forests keyed by fragment name.

    One instance belongs to exactly one compilation call. A fragment spread
    N times is expanded once. A spread that re-enters a fragment whose
    expansion is still in progress is a cycle, handled per *on_cycle*:

    * ``REJECT`` raises :class:`FragmentCycleException`.
    * ``BREAK`` resolves the re-entrant spread to no fields. Fragments whose
      expansion was cut short are not memoized, so spreading them later from
      outside the cycle expands them in full.
    """

    def __init__(self, on_cycle: FragmentCyclePolicy = FragmentCyclePolicy.REJECT) -> None:
        self._on_cycle = on_cycle
        self._entries: dict[str, list[FieldGraph]] = {}
        self._expanding: list[str] = []
        self._incomplete: set[str] = set()

    @property
    def on_cycle(self) -> FragmentCyclePolicy:
        return self._on_cycle

    def resolve(self, name: str, expand: Callable[[], list[FieldGraph]]) -> list[FieldGraph]:
        """Return the cached forest for *name*, calling *expand* on first use."""
        cached = self._entries.get(name)
        if cached is not None:
            return cached

        if name in self._expanding:
            return self._on_reentry(name)

        self._expanding.append(name)
        try:
            forest = expand()
        finally:
            self._expanding.pop()

        if name in self._incomplete:
            self._incomplete.discard(name)
        else:
            self._entries[name] = forest
        return forest

    def _on_reentry(self, name: str) -> list[FieldGraph]:
        start = self._expanding.index(name)
        if self._on_cycle is FragmentCyclePolicy.REJECT:
            cycle = [*self._expanding[start:], name]
            raise FragmentCycleException(
                f"Fragment cycle detected: {' -> '.join(cycle)}",
                context={"fragment": name, "cycle": cycle},
            )
        # Everything spread inside the re-entered fragment saw a partial result.
        self._incomplete.update(self._expanding[start + 1:])
        return []

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

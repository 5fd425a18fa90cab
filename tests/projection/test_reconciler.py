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
"""Tests for merge_projection_and_resolve_dependencies: subsumption rules."""

from __future__ import annotations

from itertools import permutations

from gqlprojection.projection.reconciler import merge_projection_and_resolve_dependencies


def _has_redundant_pair(projection: dict[str, int]) -> bool:
    return any(
        other.startswith(key + ".")
        for key in projection
        for other in projection
        if other != key
    )


class TestMergeProjectionAndResolveDependencies:
    def test_adds_missing_dependency(self):
        assert merge_projection_and_resolve_dependencies({"a": 1}, ["c"]) == {"a": 1, "c": 1}

    def test_existing_key_is_satisfied(self):
        assert merge_projection_and_resolve_dependencies({"a": 1}, ["a"]) == {"a": 1}

    def test_ancestor_covers_descendant_dependency(self):
        assert merge_projection_and_resolve_dependencies({"a": 1}, ["a.x"]) == {"a": 1}

    def test_ancestor_dependency_replaces_descendants(self):
        merged = merge_projection_and_resolve_dependencies({"a.x": 1, "a.y": 1, "b": 1}, ["a"])
        assert merged == {"a": 1, "b": 1}

    def test_sibling_with_shared_name_prefix_is_not_descendant(self):
        merged = merge_projection_and_resolve_dependencies({"ab": 1, "a.x": 1}, ["a"])
        assert merged == {"ab": 1, "a": 1}

    def test_sibling_with_shared_name_prefix_is_not_ancestor(self):
        merged = merge_projection_and_resolve_dependencies({"a": 1}, ["ab.x"])
        assert merged == {"a": 1, "ab.x": 1}

    def test_duplicate_dependencies(self):
        assert merge_projection_and_resolve_dependencies({}, ["c", "c", "c"]) == {"c": 1}

    def test_dependencies_processed_in_order(self):
        merged = merge_projection_and_resolve_dependencies({}, ["a.x", "a.y", "a"])
        assert merged == {"a": 1}

    def test_dependency_under_earlier_dependency_skipped(self):
        merged = merge_projection_and_resolve_dependencies({}, ["a", "a.x"])
        assert merged == {"a": 1}

    def test_input_projection_not_mutated(self):
        projection = {"a.x": 1}
        merge_projection_and_resolve_dependencies(projection, ["a"])
        assert projection == {"a.x": 1}

    def test_regex_metacharacters_are_literal(self):
        merged = merge_projection_and_resolve_dependencies({"a+b.x": 1, "aab.x": 1}, ["a+b"])
        assert merged == {"aab.x": 1, "a+b": 1}

    def test_no_dependencies(self):
        assert merge_projection_and_resolve_dependencies({"a": 1}, []) == {"a": 1}


class TestReconciliationProperties:
    PROJECTION = {"a.x": 1, "a.y.z": 1, "b": 1, "c.d": 1}
    DEPENDENCIES = ["a.y", "b.q", "c", "e.f", "a.y.z.w"]

    def test_idempotent(self):
        once = merge_projection_and_resolve_dependencies(self.PROJECTION, self.DEPENDENCIES)
        twice = merge_projection_and_resolve_dependencies(once, self.DEPENDENCIES)
        assert twice == once

    def test_no_redundant_keys_for_any_order(self):
        for ordering in permutations(self.DEPENDENCIES):
            merged = merge_projection_and_resolve_dependencies(self.PROJECTION, ordering)
            assert not _has_redundant_pair(merged)

    def test_every_requested_path_is_covered(self):
        merged = merge_projection_and_resolve_dependencies(self.PROJECTION, self.DEPENDENCIES)
        for path in [*self.PROJECTION, *self.DEPENDENCIES]:
            assert any(path == key or path.startswith(key + ".") for key in merged), path

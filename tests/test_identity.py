#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

Tests for the segment name identity resolver.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

import pytest
from gfagraph.utils.identity import IdentityResolver


class TestIdentityResolver:
    """Dense first-seen id assignment."""

    def test_first_names_get_sequential_ids(self):
        resolver = IdentityResolver()

        assert resolver.add("a") == 0
        assert resolver.add("b") == 1
        assert resolver.add("c") == 2

    def test_same_name_same_id(self):
        resolver = IdentityResolver()
        resolver.add("a")
        resolver.add("b")

        assert resolver.add("a") == 0
        assert resolver.add("a") == 0
        assert len(resolver) == 2

    def test_distinct_names_distinct_ids(self):
        resolver = IdentityResolver()
        names = [f"utg{i}" for i in range(50)]
        ids = [resolver.add(name) for name in names]

        assert len(set(ids)) == len(names)
        assert ids == list(range(50))

    def test_lookups(self):
        resolver = IdentityResolver()
        resolver.add("a")
        resolver.add("b")

        assert resolver.get_id("b") == 1
        assert resolver.get_id("missing") is None
        assert resolver.get_name(0) == "a"
        assert resolver.get_name(5) is None
        assert resolver.get_name(-1) is None
        assert "a" in resolver
        assert "z" not in resolver

    def test_get_name_rejects_non_int(self):
        resolver = IdentityResolver()

        with pytest.raises(TypeError):
            resolver.get_name("0")

    def test_iteration_order(self):
        resolver = IdentityResolver()
        for name in ["x", "y", "x", "z"]:
            resolver.add(name)

        assert list(resolver) == [(0, "x"), (1, "y"), (2, "z")]
        assert list(resolver.names()) == ["x", "y", "z"]

    def test_instances_are_independent(self):
        first = IdentityResolver()
        second = IdentityResolver()
        first.add("a")
        first.add("b")

        assert second.add("b") == 0

# GfaGraph v0.1.0
# Any usage is subject to this software's license.

"""Tests for GroupLocator and extract_ranked_groups."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from tabloc import (
    GroupLocator,
    LocatorConfig,
    Node,
    RankedResult,
    StructuralError,
    UNLABELED,
    UnlabeledPolicy,
    extract_ranked_groups,
    has_label,
    within,
)


def summary(result: RankedResult) -> list[tuple]:
    return [(c.label, c.dominant_label, c.dominant_count) for c in result]


class TestScenario:

    def test_literal_scenario(self, scenario_tree):
        result = extract_ranked_groups(scenario_tree)
        assert summary(result) == [
            ("ul", "li", 5),
            ("div", "a", 3),
            ("body", "div", 1),
        ]

    def test_body_ties_between_its_children(self, scenario_tree):
        body = extract_ranked_groups(scenario_tree)[2]
        assert body.node is scenario_tree
        assert body.histogram == {"div": 1, "ul": 1}
        assert body.tied_labels == ["div", "ul"]
        assert body.homogeneity == 0.5

    def test_positions_follow_preorder(self, scenario_tree):
        result = extract_ranked_groups(scenario_tree)
        assert [c.position for c in result] == [2, 1, 0]


class TestProperties:

    def test_deterministic(self, scenario_tree):
        first = extract_ranked_groups(scenario_tree)
        second = extract_ranked_groups(scenario_tree)
        assert [id(c.node) for c in first] == [id(c.node) for c in second]
        assert first.to_records() == second.to_records()

    def test_monotonic_in_same_label_siblings(self, n):
        x = n("x", n("a"), n("a"), n("b"))
        y = n("y", n("c"), n("c"), n("c"))
        root = n("r", x, y)

        before = extract_ranked_groups(root)
        assert [c.label for c in before][:2] == ["y", "x"]

        x.children.append(Node(label="a"))
        x.bind_parents()
        after = extract_ranked_groups(root)
        candidate = next(c for c in after if c.node is x)
        assert candidate.dominant_count == 3
        # Ties with y, and x comes first in the document
        assert [c.label for c in after][:2] == ["x", "y"]

    def test_leaf_only_tree_gives_empty_result(self, leaf_only_tree):
        result = extract_ranked_groups(leaf_only_tree)
        assert isinstance(result, RankedResult)
        assert result.is_empty

    def test_unlabeled_children_excluded(self, n):
        root = n("r", Node(), Node())
        assert extract_ranked_groups(root).is_empty

    def test_unlabeled_children_sentinel(self, n):
        root = n("r", Node(), Node())
        result = extract_ranked_groups(root, unlabeled_policy=UnlabeledPolicy.SENTINEL)
        assert summary(result) == [("r", UNLABELED, 2)]

    def test_cycle_propagates(self, n):
        root = n("r", n("a", n("b")))
        root.children[0].children.append(root)
        with pytest.raises(StructuralError):
            extract_ranked_groups(root)

    def test_cycle_propagates_with_workers(self, n):
        root = n("r", n("a", n("b")))
        root.children[0].children.append(root)
        with pytest.raises(StructuralError):
            extract_ranked_groups(root, max_workers=4)


class TestResultView:

    def test_children_of_ranked_candidate(self, scenario_tree):
        result = extract_ranked_groups(scenario_tree)
        items = result.children(0)
        assert [child.label for child in items] == ["li"] * 5
        assert [child.text for child in items] == ["0", "1", "2", "3", "4"]
        assert items[0] is scenario_tree.children[1].children[0]

    def test_children_returns_a_copy(self, scenario_tree):
        result = extract_ranked_groups(scenario_tree)
        result.children(0).clear()
        assert len(result.children(0)) == 5

    def test_negative_index(self, scenario_tree):
        result = extract_ranked_groups(scenario_tree)
        assert [c.label for c in result.children(-1)] == ["div", "ul"]

    def test_out_of_range(self, scenario_tree):
        result = extract_ranked_groups(scenario_tree)
        with pytest.raises(IndexError):
            result.children(3)

    def test_empty_result_has_no_children(self, leaf_only_tree):
        with pytest.raises(IndexError):
            extract_ranked_groups(leaf_only_tree).children(0)

    def test_top_and_slices(self, scenario_tree):
        result = extract_ranked_groups(scenario_tree)
        assert summary(result.top(1)) == [("ul", "li", 5)]
        assert isinstance(result[1:], RankedResult)
        assert len(result[1:]) == 2
        with pytest.raises(ValueError):
            result.top(-1)

    def test_records(self, scenario_tree):
        record = extract_ranked_groups(scenario_tree).to_records()[1]
        assert record == {
            "position": 1,
            "label": "div",
            "dominant_label": "a",
            "dominant_count": 3,
            "tied_labels": ["a"],
            "child_count": 3,
            "homogeneity": 1.0,
            "histogram": {"a": 3},
        }


class TestScope:

    def test_within_ancestor(self, scenario_tree):
        result = extract_ranked_groups(scenario_tree, scope=within("body", inclusive=False))
        assert [c.label for c in result] == ["ul", "div"]

    def test_has_label(self, scenario_tree):
        result = extract_ranked_groups(scenario_tree, scope=has_label("div"))
        assert summary(result) == [("div", "a", 3)]


class TestConfiguration:

    def test_top_k(self, scenario_tree):
        result = GroupLocator(top_k=2).locate(scenario_tree)
        assert [c.label for c in result] == ["ul", "div"]

    def test_min_dominant_count(self, scenario_tree):
        result = GroupLocator(min_dominant_count=4).locate(scenario_tree)
        assert [c.label for c in result] == ["ul"]

    def test_options_override_config(self):
        config = LocatorConfig(top_k=3, max_workers=2)
        locator = GroupLocator(config, top_k=1)
        assert locator.config.top_k == 1
        assert locator.config.max_workers == 2

    def test_invalid_option(self):
        with pytest.raises(ValidationError):
            GroupLocator(max_workers=0)


class TestConcurrency:

    def test_thread_pool_matches_sequential(self, scenario_tree):
        sequential = GroupLocator().locate(scenario_tree)
        parallel = GroupLocator(max_workers=4).locate(scenario_tree)
        assert parallel.to_records() == sequential.to_records()

    def test_external_executor(self, scenario_tree):
        with ThreadPoolExecutor(max_workers=2) as executor:
            result = GroupLocator(executor=executor).locate(scenario_tree)
        assert summary(result) == summary(GroupLocator().locate(scenario_tree))

    def test_alocate(self, scenario_tree):
        result = asyncio.run(GroupLocator().alocate(scenario_tree))
        assert result[0].dominant_label == "li"

    def test_locate_many(self, scenario_tree, leaf_only_tree):
        results = GroupLocator().locate_many([scenario_tree, leaf_only_tree])
        assert len(results) == 2
        assert results[0][0].label == "ul"
        assert results[1].is_empty

    def test_locate_many_single_root(self, scenario_tree):
        results = GroupLocator().locate_many(scenario_tree)
        assert len(results) == 1

    def test_locate_many_empty(self):
        assert GroupLocator().locate_many([]) == []

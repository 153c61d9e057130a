"""Tests for the package logger."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import logging

import pytest

from tabloc import Node, extract_ranked_groups
from tabloc.utils import logger, set_level


@pytest.fixture(autouse=True)
def restore_level():
    previous = logger.level
    yield
    logger.setLevel(previous)


class TestLogging:

    def test_set_level_by_name(self):
        set_level("debug")
        assert logger.level == logging.DEBUG

    def test_skipped_nodes_logged_at_debug(self, caplog, n):
        set_level("DEBUG")
        with caplog.at_level(logging.DEBUG):
            extract_ranked_groups(n("r", Node()))
        assert any("no labeled children" in record.getMessage() for record in caplog.records)

    def test_summary_logged_at_info(self, caplog, scenario_tree):
        with caplog.at_level(logging.INFO):
            extract_ranked_groups(scenario_tree)
        assert any("Ranked 3 candidate groups" in record.getMessage() for record in caplog.records)

    def test_empty_result_logged(self, caplog, leaf_only_tree):
        with caplog.at_level(logging.INFO):
            extract_ranked_groups(leaf_only_tree)
        assert any("No repeated-label group found" in r.getMessage() for r in caplog.records)

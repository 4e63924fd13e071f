"""Test helper utilities for the fshandle test suite."""

from tests.helpers.cli_assertions import (
    assert_command_failed,
    assert_command_success,
    assert_error_message,
    assert_output_contains,
    assert_output_lines,
)
from tests.helpers.tree import make_tree, tree_listing

__all__ = [
    "assert_command_success",
    "assert_command_failed",
    "assert_output_contains",
    "assert_output_lines",
    "assert_error_message",
    "make_tree",
    "tree_listing",
]

"""id3tree: Grow categorical decision trees with the ID3 algorithm."""

from loguru import logger

from id3tree.decision_tree import DecisionTreeResult, Leaf, Node, TreeElement, build_tree, classify
from id3tree.logging import PACKAGE_NAME, enable_logging
from id3tree.models import LabeledTable
from id3tree.parsing import parse_table
from id3tree.rendering import render_html, render_text
from id3tree.session import DecisionTreeSession, build_tree_from_text

logger.disable(PACKAGE_NAME)  # noqa: RUF067 - Disable logging for the id3tree package by default

__all__ = [
    "DecisionTreeResult",
    "DecisionTreeSession",
    "LabeledTable",
    "Leaf",
    "Node",
    "TreeElement",
    "build_tree",
    "build_tree_from_text",
    "classify",
    "enable_logging",
    "parse_table",
    "render_html",
    "render_text",
]

"""Decision tree sub-package: entropy, tree models, and tree growing."""

from __future__ import annotations

from id3tree.decision_tree.entropy import (
    conditional_entropy,
    entropy_of,
    group_rows,
    label_distribution,
    select_best_attribute,
)
from id3tree.decision_tree.fitting import (
    build_decision_tree_result,
    build_tree,
    classify,
    count_leaves,
    tree_depth,
)
from id3tree.decision_tree.models import DecisionTreeResult, Leaf, Node, TreeElement

__all__ = [
    "DecisionTreeResult",
    "Leaf",
    "Node",
    "TreeElement",
    "build_decision_tree_result",
    "build_tree",
    "classify",
    "conditional_entropy",
    "count_leaves",
    "entropy_of",
    "group_rows",
    "label_distribution",
    "select_best_attribute",
    "tree_depth",
]

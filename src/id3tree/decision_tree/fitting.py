"""Recursive tree growing, tree statistics, classification, and result assembly."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from loguru import logger

from id3tree.decision_tree.entropy import entropy_of, group_rows, label_distribution, select_best_attribute
from id3tree.decision_tree.models import DecisionTreeResult, Leaf, Node, TreeElement
from id3tree.exceptions import (
    ColumnsNotFoundError,
    EmptySampleSetError,
    MalformedRowError,
    MissingHeaderError,
    UnseenValueError,
)
from id3tree.logging import SPLIT_LEVEL
from id3tree.models import LabeledTable

# ---------------------------------------------------------------------------
# Public interface -- Tree growing
# ---------------------------------------------------------------------------


def build_tree(
    rows: Sequence[Sequence[str]],
    attributes: Sequence[str],
    path_label: str = "",
) -> TreeElement:
    """Grow a decision tree from categorical rows.

    The rows are first checked for shape. Then exactly one of three cases
    applies, in this order:

    1. Every row carries the same label: return a `Leaf` with that label.
    2. Only the label attribute is left: return a `Leaf` with the most
       frequent label. Among equally frequent labels, the one that appears
       first in `rows` wins.
    3. Otherwise split on the attribute selected by `select_best_attribute`,
       grow one child per value (in ascending value order) from the rows with
       that column removed, and return a `Node`.

    Each level removes one attribute, so a tree grown from `n` attributes is
    at most `n - 1` nodes deep.

    Args:
        rows (Sequence[Sequence[str]]): Examples, each index-aligned with
            `attributes` and carrying its label last.
        attributes (Sequence[str]): Attribute names; the last one names the label.
        path_label (str): How the element being built is reached from its
            parent, e.g. `"Schnee: 0"`. Empty for the root.

    Returns:
        TreeElement: The root of the grown (sub)tree.

    Raises:
        MissingHeaderError: If `attributes` is empty.
        EmptySampleSetError: If `rows` is empty.
        MalformedRowError: If a row's length differs from `len(attributes)`.

    Examples:
        >>> tree = build_tree([("sun", "yes"), ("rain", "no")], ["Weather", "Play"])
        >>> tree.attribute
        'Weather'
        >>> [child.decision for child in tree.children]
        ['Play: no', 'Play: yes']
    """
    _validate_sample_set(rows, attributes, path_label)

    label_attribute = attributes[-1]
    distribution = label_distribution(rows)
    sample_count = len(rows)
    entropy = entropy_of(rows)

    if len(distribution) == 1:
        label = distribution[0][0]
        return Leaf(
            path_label=path_label,
            decision=f"{label_attribute}: {label}",
            label=label,
            sample_count=sample_count,
            entropy=entropy,
        )

    if len(attributes) == 1:
        label = _majority_label(distribution)
        logger.debug("No attributes left; using majority label", path_label=path_label, label=label)
        return Leaf(
            path_label=path_label,
            decision=f"{label_attribute}: {label}",
            label=label,
            sample_count=sample_count,
            entropy=entropy,
        )

    split_index = select_best_attribute(rows)
    split_attribute = attributes[split_index]
    child_attributes = _drop_position(attributes, split_index)
    groups = group_rows(rows, split_index)
    logger.log(
        SPLIT_LEVEL,
        "Splitting on attribute",
        path_label=path_label,
        attribute=split_attribute,
        sample_count=sample_count,
        values=list(groups),
    )

    children = tuple(
        build_tree(
            [_drop_position(row, split_index) for row in group],
            child_attributes,
            f"{split_attribute}: {value}",
        )
        for value, group in groups.items()
    )
    return Node(
        path_label=path_label,
        attribute=split_attribute,
        sample_count=sample_count,
        entropy=entropy,
        children=children,
    )


def build_decision_tree_result(table: LabeledTable) -> DecisionTreeResult:
    """Grow a tree from a labeled table and collect its summary statistics.

    Args:
        table (LabeledTable): The examples to learn from.

    Returns:
        DecisionTreeResult: The root of the tree with its depth, leaf count,
            and sample count.

    Raises:
        EmptySampleSetError: If the table has no rows.
    """
    root = build_tree(table.rows, table.attributes)
    result = DecisionTreeResult(
        label_attribute=table.label_attribute,
        feature_attributes=list(table.feature_attributes),
        root=root,
        sample_count=len(table.rows),
        depth=tree_depth(root),
        leaf_count=count_leaves(root),
    )
    logger.info(
        "Decision tree built",
        sample_count=result.sample_count,
        depth=result.depth,
        leaf_count=result.leaf_count,
    )
    return result


# ---------------------------------------------------------------------------
# Public interface -- Tree statistics and classification
# ---------------------------------------------------------------------------


def tree_depth(element: TreeElement) -> int:
    """Return the number of nodes on the longest path below and including `element`.

    Args:
        element (TreeElement): Root of the (sub)tree to measure.

    Returns:
        int: 0 for a leaf, otherwise 1 plus the depth of the deepest child.
    """
    match element:
        case Leaf():
            return 0
        case Node(children=children):
            return 1 + max(tree_depth(child) for child in children)


def count_leaves(element: TreeElement) -> int:
    """Return the number of leaves below and including `element`."""
    match element:
        case Leaf():
            return 1
        case Node(children=children):
            return sum(count_leaves(child) for child in children)


def classify(root: TreeElement, example: Mapping[str, str]) -> str:
    """Follow the tree with one example and return the label of the leaf reached.

    Args:
        root (TreeElement): Root of a grown tree.
        example (Mapping[str, str]): Attribute name to value. Only the
            attributes tested along the path are read.

    Returns:
        str: The label value of the reached leaf.

    Raises:
        ColumnsNotFoundError: If `example` lacks an attribute tested on the path.
        UnseenValueError: If `example` carries a value no branch was grown for.

    Examples:
        >>> tree = build_tree([("sun", "yes"), ("rain", "no")], ["Weather", "Play"])
        >>> classify(tree, {"Weather": "sun"})
        'yes'
    """
    element = root
    while isinstance(element, Node):
        if element.attribute not in example:
            raise ColumnsNotFoundError(missing_columns=[element.attribute], available_columns=list(example))
        value = example[element.attribute]
        branches = {child.path_label: child for child in element.children}
        child = branches.get(f"{element.attribute}: {value}")
        if child is None:
            known_values = [label.removeprefix(f"{element.attribute}: ") for label in branches]
            raise UnseenValueError(element.attribute, value, known_values)
        element = child
    return element.label


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _validate_sample_set(rows: Sequence[Sequence[str]], attributes: Sequence[str], path_label: str) -> None:
    """Raise if `rows` is empty or any row is misaligned with `attributes`.

    Args:
        rows (Sequence[Sequence[str]]): The rows to check.
        attributes (Sequence[str]): Attribute names the rows must align with.
        path_label (str): Path label of the element being built, for error context.

    Raises:
        EmptySampleSetError: If `rows` is empty.
        MissingHeaderError: If `attributes` is empty.
        MalformedRowError: If a row's length differs from `len(attributes)`.
            `row_number` is the 1-based position within `rows`.
    """
    if not attributes:
        raise MissingHeaderError
    if not rows:
        raise EmptySampleSetError(path_label)
    for row_number, row in enumerate(rows, start=1):
        if len(row) != len(attributes):
            raise MalformedRowError(row_number, expected=len(attributes), row=row)


def _majority_label(distribution: list[tuple[str, int]]) -> str:
    """Return the most frequent label; the earliest-seen label wins ties.

    Args:
        distribution (list[tuple[str, int]]): `(label, count)` pairs in first-seen order.

    Returns:
        str: The majority label.
    """
    best_label, best_count = distribution[0]
    for label, count in distribution[1:]:
        if count > best_count:
            best_label, best_count = label, count
    return best_label


def _drop_position(values: Sequence[str], index: int) -> tuple[str, ...]:
    """Return a new tuple holding `values` without the item at `index`."""
    return (*values[:index], *values[index + 1 :])

"""Entropy arithmetic and attribute selection for categorical rows.

Rows are sequences of strings whose last position is the label. Every
function here is pure: inputs are never modified and grouped rows are
returned as new tuples.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from loguru import logger

from id3tree.exceptions import EmptySampleSetError

# ---------------------------------------------------------------------------
# Public interface -- Entropy
# ---------------------------------------------------------------------------


def label_distribution(rows: Sequence[Sequence[str]]) -> list[tuple[str, int]]:
    """Count label values in first-seen order.

    Args:
        rows (Sequence[Sequence[str]]): Rows whose last position is the label.

    Returns:
        list[tuple[str, int]]: `(label, count)` pairs ordered by the position
            of each label's first occurrence in `rows`.

    Examples:
        >>> label_distribution([("a", "1"), ("b", "0"), ("c", "1")])
        [('1', 2), ('0', 1)]
    """
    counts: dict[str, int] = {}
    for row in rows:
        counts[row[-1]] = counts.get(row[-1], 0) + 1
    return list(counts.items())


def entropy_of(rows: Sequence[Sequence[str]]) -> float:
    """Compute the Shannon entropy, in bits, of the label distribution of `rows`.

    Args:
        rows (Sequence[Sequence[str]]): Non-empty rows whose last position is the label.

    Returns:
        float: `-sum(p * log2(p))` over the distinct labels present. Zero when
            every row carries the same label.

    Raises:
        EmptySampleSetError: If `rows` is empty.

    Examples:
        >>> entropy_of([("x", "1"), ("y", "0")])
        1.0
    """
    if not rows:
        raise EmptySampleSetError
    counts = np.array([count for _, count in label_distribution(rows)], dtype=np.float64)
    probabilities = counts / len(rows)
    return float(-np.sum(probabilities * np.log2(probabilities))) + 0.0  # + 0.0 turns -0.0 into 0.0


# ---------------------------------------------------------------------------
# Public interface -- Conditional entropy
# ---------------------------------------------------------------------------


def group_rows(rows: Sequence[Sequence[str]], index: int) -> dict[str, tuple[tuple[str, ...], ...]]:
    """Partition rows by their value at `index`.

    Args:
        rows (Sequence[Sequence[str]]): Rows to partition.
        index (int): Position of the attribute to group by.

    Returns:
        dict[str, tuple[tuple[str, ...], ...]]: Mapping of attribute value to
            the rows carrying it, with keys in ascending order. Within a group,
            rows keep their relative order. Every row lands in exactly one group.
    """
    groups: dict[str, list[tuple[str, ...]]] = {}
    for row in rows:
        groups.setdefault(row[index], []).append(tuple(row))
    return {value: tuple(groups[value]) for value in sorted(groups)}


def conditional_entropy(rows: Sequence[Sequence[str]], index: int) -> float:
    """Compute the label entropy remaining after splitting `rows` on one attribute.

    Each group produced by `group_rows` contributes its entropy weighted by
    its share of the rows, giving H(label | attribute).

    Args:
        rows (Sequence[Sequence[str]]): Non-empty rows whose last position is the label.
        index (int): Position of the candidate attribute.

    Returns:
        float: The weighted entropy of the partition, in bits.

    Raises:
        EmptySampleSetError: If `rows` is empty.
    """
    if not rows:
        raise EmptySampleSetError
    total = len(rows)
    return sum(len(group) / total * entropy_of(group) for group in group_rows(rows, index).values())


# ---------------------------------------------------------------------------
# Public interface -- Attribute selection
# ---------------------------------------------------------------------------


def select_best_attribute(rows: Sequence[Sequence[str]]) -> int:
    """Pick the feature position whose split leaves the least label entropy.

    Candidates are scanned in ascending position order and a later candidate
    replaces the current best only when its conditional entropy is strictly
    lower, so the lowest position wins ties.

    Args:
        rows (Sequence[Sequence[str]]): Non-empty rows whose last position is the label.

    Returns:
        int: Position of the selected feature, in `0 .. len(row) - 2`.

    Raises:
        EmptySampleSetError: If `rows` is empty.
        ValueError: If the rows hold no feature positions.
    """
    if not rows:
        raise EmptySampleSetError
    feature_count = len(rows[0]) - 1
    if feature_count < 1:
        raise ValueError("Rows have no feature positions to select from")

    best_entropy = math.inf
    best_index = 0
    for index in range(feature_count):
        candidate_entropy = conditional_entropy(rows, index)
        logger.debug("Scored candidate attribute", index=index, conditional_entropy=candidate_entropy)
        if candidate_entropy < best_entropy:
            best_entropy = candidate_entropy
            best_index = index

    return best_index

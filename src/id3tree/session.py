"""Session object that loads a table, builds a tree, and keeps the last good result.

A `DecisionTreeSession` holds the state of one interactive workflow: the
most recently loaded table and the most recently built tree. Each step
replaces its state only when it succeeds, so a failed load or build never
disturbs what was shown before.
"""

from __future__ import annotations

from collections.abc import Sequence

import polars as pl
from loguru import logger

from id3tree.decision_tree.fitting import build_decision_tree_result
from id3tree.decision_tree.models import DecisionTreeResult, TreeElement
from id3tree.exceptions import EmptySampleSetError, NoTableLoadedError, NoTreeBuiltError, TableValidationError
from id3tree.models import LabeledTable
from id3tree.parsing import parse_table
from id3tree.polars_utils import table_from_dataframe
from id3tree.rendering import render_html, render_text


class DecisionTreeSession:
    """Load labeled examples, build decision trees, and render the current tree.

    Not thread-safe; a session is meant to be owned by a single caller.

    Examples:
        >>> session = DecisionTreeSession()
        >>> _ = session.load_text("Weather,Play\\nsun,yes\\nrain,no\\n")
        >>> result = session.build()
        >>> result.root.attribute
        'Weather'
        >>> session.tree is result.root
        True
    """

    def __init__(self) -> None:
        """Initialize an empty session with no table and no tree."""
        self._table: LabeledTable | None = None
        self._result: DecisionTreeResult | None = None

    def __repr__(self) -> str:
        """Return a short summary of the session state.

        Returns:
            str: Representation listing the loaded table and tree sizes.
        """
        rows = len(self._table.rows) if self._table is not None else None
        leaves = self._result.leaf_count if self._result is not None else None
        return f"{self.__class__.__name__}(table_rows={rows}, tree_leaves={leaves})"

    @property
    def table(self) -> LabeledTable | None:
        """The most recently loaded table, or None."""
        return self._table

    @property
    def result(self) -> DecisionTreeResult | None:
        """The most recently built result, or None."""
        return self._result

    @property
    def tree(self) -> TreeElement | None:
        """Root of the most recently built tree, or None."""
        return self._result.root if self._result is not None else None

    def load_text(self, text: str) -> LabeledTable:
        """Parse comma-separated text and make it the current table.

        Args:
            text (str): Header line followed by one line per example.

        Returns:
            LabeledTable: The newly loaded table.

        Raises:
            TableValidationError: If the text cannot be parsed. The previously
                loaded table is kept.
        """
        try:
            table = parse_table(text)
        except TableValidationError as error:
            logger.warning("Table load failed", error_type=type(error).__name__, reason=str(error))
            raise
        return self._set_table(table)

    def load_dataframe(
        self,
        df: pl.DataFrame,
        target: str,
        *,
        features: Sequence[str] | None = None,
    ) -> LabeledTable:
        """Convert a DataFrame and make it the current table.

        Args:
            df (pl.DataFrame): The source DataFrame.
            target (str): Name of the label column.
            features (Sequence[str] | None): Feature columns to keep; all other
                columns when None.

        Returns:
            LabeledTable: The newly loaded table.

        Raises:
            TableValidationError: If the DataFrame cannot be converted. The
                previously loaded table is kept.
        """
        try:
            table = table_from_dataframe(df, target, features=features)
        except TableValidationError as error:
            logger.warning("Table load failed", error_type=type(error).__name__, reason=str(error))
            raise
        return self._set_table(table)

    def build(self) -> DecisionTreeResult:
        """Build a tree from the current table and make it the current tree.

        Returns:
            DecisionTreeResult: The newly built result.

        Raises:
            NoTableLoadedError: If no table has been loaded.
            EmptySampleSetError: If the table has no rows. The previously built
                tree is kept.
        """
        if self._table is None:
            raise NoTableLoadedError
        try:
            result = build_decision_tree_result(self._table)
        except EmptySampleSetError as error:
            logger.warning("Decision tree build failed", error_type=type(error).__name__, reason=str(error))
            raise
        self._result = result
        return result

    def render_text(self) -> str:
        """Render the current tree as an indented outline.

        Raises:
            NoTreeBuiltError: If no tree has been built.
        """
        return render_text(self._require_tree())

    def render_html(self) -> str:
        """Render the current tree as nested HTML lists.

        Raises:
            NoTreeBuiltError: If no tree has been built.
        """
        return render_html(self._require_tree())

    def _set_table(self, table: LabeledTable) -> LabeledTable:
        self._table = table
        logger.info(
            "Table loaded",
            attributes=list(table.attributes),
            row_count=len(table.rows),
        )
        return table

    def _require_tree(self) -> TreeElement:
        if self._result is None:
            raise NoTreeBuiltError
        return self._result.root


def build_tree_from_text(text: str) -> TreeElement:
    """Parse comma-separated text and grow a tree from it in one step.

    Args:
        text (str): Header line followed by one line per example.

    Returns:
        TreeElement: Root of the grown tree.

    Raises:
        TableValidationError: If the text cannot be parsed.
        EmptySampleSetError: If the text holds a header but no examples.
    """
    return build_decision_tree_result(parse_table(text)).root

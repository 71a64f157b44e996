"""Models for the labeled tables a decision tree is grown from."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from id3tree.exceptions import (
    DuplicateAttributesError,
    MalformedHeaderError,
    MalformedRowError,
    MissingHeaderError,
    MissingLabelError,
)

# Feature values followed by the label value.
type Row = tuple[str, ...]


class LabeledTable(BaseModel):
    """A table of categorical examples whose last column is the label.

    Attributes:
        attributes (tuple[str, ...]): Attribute names, index-aligned with row
            positions. The last name is the label attribute.
        rows (tuple[Row, ...]): Examples; every row has one value per attribute.

    Examples:
        >>> table = LabeledTable.from_rows(
        ...     ["Wind", "Schnee", "Rad"],
        ...     [("0", "1", "0"), ("1", "0", "1")],
        ... )
        >>> table.label_attribute
        'Rad'
        >>> table.feature_attributes
        ('Wind', 'Schnee')
    """

    model_config = ConfigDict(frozen=True)

    attributes: tuple[str, ...] = Field(
        description="Attribute names; the last one names the label column.",
        min_length=1,
    )
    rows: tuple[Row, ...] = Field(
        default=(),
        description="Examples, each holding one categorical value per attribute.",
    )

    @model_validator(mode="after")
    def _validate_shape(self) -> LabeledTable:
        """Validate attribute names and row lengths.

        Returns:
            LabeledTable: The validated model instance.
        """
        check_table(self.attributes, self.rows)
        return self

    @classmethod
    def from_rows(cls, attributes: Sequence[str], rows: Sequence[Sequence[str]]) -> LabeledTable:
        """Build a table, raising the id3tree exception for the first problem found.

        Constructing the model directly wraps these problems into a pydantic
        `ValidationError`; this constructor surfaces them unwrapped.

        Args:
            attributes (Sequence[str]): Attribute names, label last.
            rows (Sequence[Sequence[str]]): Examples aligned with `attributes`.

        Returns:
            LabeledTable: The validated table.
        """
        attribute_tuple = tuple(attributes)
        row_tuples = tuple(tuple(row) for row in rows)
        check_table(attribute_tuple, row_tuples)
        return cls(attributes=attribute_tuple, rows=row_tuples)

    @property
    def label_attribute(self) -> str:
        """Name of the label attribute."""
        return self.attributes[-1]

    @property
    def feature_attributes(self) -> tuple[str, ...]:
        """Names of the feature attributes, in column order."""
        return self.attributes[:-1]


def check_header(attributes: Sequence[str]) -> None:
    """Validate a list of attribute names.

    Args:
        attributes (Sequence[str]): Attribute names, label last.

    Raises:
        MissingHeaderError: If there are no attribute names.
        MalformedHeaderError: If any attribute name is empty.
        DuplicateAttributesError: If any attribute name repeats.
    """
    if not attributes:
        raise MissingHeaderError
    if any(not name for name in attributes):
        raise MalformedHeaderError(attributes)
    if len(set(attributes)) != len(attributes):
        raise DuplicateAttributesError(attributes)


def check_row(row: Sequence[str], attributes: Sequence[str], row_number: int) -> None:
    """Validate one row against the attribute list.

    Args:
        row (Sequence[str]): The row to check.
        attributes (Sequence[str]): Attribute names, label last.
        row_number (int): 1-based position of the row, used in error messages.

    Raises:
        MalformedRowError: If the field count differs from the attribute count.
        MissingLabelError: If the label field is empty.
    """
    if len(row) != len(attributes):
        raise MalformedRowError(row_number, expected=len(attributes), row=row)
    if not row[-1]:
        raise MissingLabelError(row_number, attributes[-1])


def check_table(attributes: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    """Validate a header and every row, numbering rows from 1.

    Args:
        attributes (Sequence[str]): Attribute names, label last.
        rows (Sequence[Sequence[str]]): Examples aligned with `attributes`.
    """
    check_header(attributes)
    for row_number, row in enumerate(rows, start=1):
        check_row(row, attributes, row_number)

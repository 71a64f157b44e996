"""Custom exceptions for id3tree.

Input table exceptions (subclass ValueError):
- TableValidationError: Base class for every problem found in an input table.
- MissingHeaderError: Raised when the input has no header line.
- MalformedHeaderError: Raised when the header contains an empty attribute name.
- DuplicateAttributesError: Raised when attribute names repeat.
- ColumnsNotFoundError: Raised when requested columns do not exist in a DataFrame.
- MalformedRowError: Raised when a row's field count differs from the header.
- MissingValueError: Raised when a field has no value.
- MissingLabelError: Raised when a row has no label value.

Tree exceptions (subclass ValueError):
- EmptySampleSetError: Raised when a tree is grown from zero rows.
- UnseenValueError: Raised when classification meets a value no branch covers.

Session exceptions (subclass RuntimeError):
- SessionStateError: Base class for operations called in the wrong order.
- NoTableLoadedError: Raised when building before a table has been loaded.
- NoTreeBuiltError: Raised when rendering before a tree has been built.
"""

from __future__ import annotations

from collections.abc import Sequence


class TableValidationError(ValueError):
    """Base exception for all input table validation errors.

    Catching this exception catches every parsing and table validation
    failure raised by id3tree.
    """


class MissingHeaderError(TableValidationError):
    """Raised when the input text has no header line."""

    def __init__(self) -> None:
        """Initialize MissingHeaderError."""
        super().__init__("Input has no header line with attribute names")


class MalformedHeaderError(TableValidationError):
    """Raised when the header contains an empty attribute name.

    Attributes:
        attributes (list[str]): The attribute names as read from the header.
    """

    attributes: list[str]

    def __init__(self, attributes: Sequence[str]) -> None:
        """Initialize MalformedHeaderError.

        Args:
            attributes (Sequence[str]): The attribute names as read from the header.
        """
        super().__init__(f"Header contains an empty attribute name: {list(attributes)}")
        self.attributes = list(attributes)


class DuplicateAttributesError(TableValidationError):
    """Raised when duplicate attribute names are provided.

    Attributes:
        attributes (list[str]): The attribute list that contains duplicates.
        duplicate_attributes (list[str]): The specific names that are
            duplicated (each listed once).

    Examples:
        >>> err = DuplicateAttributesError(attributes=["Wind", "Wind", "Rad"])
        >>> err.duplicate_attributes
        ['Wind']
    """

    attributes: list[str]
    duplicate_attributes: list[str]

    def __init__(self, attributes: Sequence[str]) -> None:
        """Initialize DuplicateAttributesError.

        Args:
            attributes (Sequence[str]): The attribute list containing duplicates.
        """
        self.attributes = list(attributes)
        seen: set[str] = set()
        self.duplicate_attributes = []
        for name in attributes:
            if name in seen and name not in self.duplicate_attributes:
                self.duplicate_attributes.append(name)
            seen.add(name)
        super().__init__(f"Duplicate attribute names are not allowed: {self.duplicate_attributes}")


class ColumnsNotFoundError(TableValidationError):
    """Raised when requested columns do not exist in a DataFrame or example.

    Attributes:
        missing_columns (list[str]): Column names that were not found.
        available_columns (list[str]): Column names that are present.

    Examples:
        >>> err = ColumnsNotFoundError(missing_columns=["x"], available_columns=["a", "b"])
        >>> err.missing_columns
        ['x']
    """

    missing_columns: list[str]
    available_columns: list[str]

    def __init__(self, missing_columns: list[str], available_columns: list[str]) -> None:
        """Initialize ColumnsNotFoundError.

        Args:
            missing_columns (list[str]): Column names that were not found.
            available_columns (list[str]): Column names that are present.
        """
        super().__init__(f"Columns not found: {sorted(missing_columns)}")
        self.missing_columns = missing_columns
        self.available_columns = available_columns


class MalformedRowError(TableValidationError):
    """Raised when a row's field count does not match the attribute count.

    Attributes:
        row_number (int): 1-based position of the row in its source. For text
            input this is the line number in the original text.
        expected (int): Number of attributes, i.e. the required field count.
        actual (int): Number of fields found in the row.
        row (tuple[str, ...]): The offending row.
    """

    row_number: int
    expected: int
    actual: int
    row: tuple[str, ...]

    def __init__(self, row_number: int, *, expected: int, row: Sequence[str]) -> None:
        """Initialize MalformedRowError.

        Args:
            row_number (int): 1-based position of the row in its source.
            expected (int): Required field count.
            row (Sequence[str]): The offending row.
        """
        self.row_number = row_number
        self.expected = expected
        self.actual = len(row)
        self.row = tuple(row)
        super().__init__(f"Row {row_number} has {self.actual} fields, expected {expected}")

    def __repr__(self) -> str:
        """Return detailed representation for debugging.

        Returns:
            str: Representation including row number, field counts, and row.
        """
        return (
            f"{self.__class__.__name__}(row_number={self.row_number}, expected={self.expected}, "
            f"actual={self.actual}, row={self.row!r})"
        )


class MissingValueError(TableValidationError):
    """Raised when a field in a row has no value.

    Attributes:
        row_number (int): 1-based position of the row in its source.
        attribute (str): Name of the attribute whose value is missing.
    """

    row_number: int
    attribute: str

    def __init__(self, row_number: int, attribute: str) -> None:
        """Initialize MissingValueError.

        Args:
            row_number (int): 1-based position of the row in its source.
            attribute (str): Name of the attribute whose value is missing.
        """
        super().__init__(f"Row {row_number} has no value for attribute '{attribute}'")
        self.row_number = row_number
        self.attribute = attribute


class MissingLabelError(MissingValueError):
    """Raised when a row has no value for the label attribute."""


class EmptySampleSetError(ValueError):
    """Raised when a tree is grown from an empty set of rows.

    Attributes:
        path_label (str): Path label of the element that would have been built;
            empty for the root.
    """

    path_label: str

    def __init__(self, path_label: str = "") -> None:
        """Initialize EmptySampleSetError.

        Args:
            path_label (str): Path label of the element being built.
        """
        where = f" at '{path_label}'" if path_label else ""
        super().__init__(f"Cannot build a decision tree from an empty sample set{where}")
        self.path_label = path_label


class UnseenValueError(ValueError):
    """Raised when an example carries a value that no branch of the tree covers.

    Attributes:
        attribute (str): The splitting attribute.
        value (str): The example's value for that attribute.
        known_values (list[str]): Values the tree has branches for.
    """

    attribute: str
    value: str
    known_values: list[str]

    def __init__(self, attribute: str, value: str, known_values: list[str]) -> None:
        """Initialize UnseenValueError.

        Args:
            attribute (str): The splitting attribute.
            value (str): The example's value for that attribute.
            known_values (list[str]): Values the tree has branches for.
        """
        super().__init__(f"Value '{value}' of attribute '{attribute}' was not seen during training")
        self.attribute = attribute
        self.value = value
        self.known_values = known_values


class SessionStateError(RuntimeError):
    """Base exception for session operations called in the wrong order."""


class NoTableLoadedError(SessionStateError):
    """Raised when a build is requested before any table was loaded."""

    def __init__(self) -> None:
        """Initialize NoTableLoadedError."""
        super().__init__("No table loaded; call load_text() or load_dataframe() first")


class NoTreeBuiltError(SessionStateError):
    """Raised when rendering is requested before any tree was built."""

    def __init__(self) -> None:
        """Initialize NoTreeBuiltError."""
        super().__init__("No tree built; call build() first")

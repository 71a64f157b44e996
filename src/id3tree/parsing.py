"""Parse comma-separated text into a labeled table.

The format is deliberately small: the first non-blank line names the
attributes (label last), every following non-blank line is one example, and
fields are separated by commas with no quoting or escaping.
"""

from __future__ import annotations

import re
from typing import Final

from loguru import logger

from id3tree.exceptions import MissingHeaderError
from id3tree.models import LabeledTable, check_header, check_row

FIELD_DELIMITER: Final[str] = ","

# Other Unicode line separators (\f, \x85, \u2028, ...) are field content.
_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|[\r\n]")


def split_fields(line: str) -> tuple[str, ...]:
    """Split one line into whitespace-stripped fields.

    Args:
        line (str): A header or data line.

    Returns:
        tuple[str, ...]: The fields in order.

    Examples:
        >>> split_fields("Wind, Regen ,Rad")
        ('Wind', 'Regen', 'Rad')
    """
    return tuple(field.strip() for field in line.split(FIELD_DELIMITER))


def parse_table(text: str) -> LabeledTable:
    """Parse comma-separated text into a `LabeledTable`.

    Lines may end in `\\n`, `\\r\\n`, or `\\r`; no other character breaks a
    line. Blank lines are skipped wherever they occur. Error line numbers
    refer to lines of `text`, counting from 1 and including skipped blank
    lines.

    Args:
        text (str): The raw table text.

    Returns:
        LabeledTable: Attribute names from the header and one row per data line.

    Raises:
        MissingHeaderError: If `text` holds no non-blank line.
        MalformedHeaderError: If the header contains an empty attribute name.
        DuplicateAttributesError: If the header repeats an attribute name.
        MalformedRowError: If a data line has the wrong number of fields.
        MissingLabelError: If a data line has an empty label field.

    Examples:
        >>> table = parse_table("Wind,Rad\\n0,1\\n\\n1,0\\n")
        >>> table.attributes
        ('Wind', 'Rad')
        >>> table.rows
        (('0', '1'), ('1', '0'))
    """
    numbered_lines = [
        (number, line) for number, line in enumerate(_LINE_BREAK.split(text), start=1) if line.strip()
    ]
    if not numbered_lines:
        raise MissingHeaderError

    _, header_line = numbered_lines[0]
    attributes = split_fields(header_line)
    check_header(attributes)

    rows: list[tuple[str, ...]] = []
    for line_number, line in numbered_lines[1:]:
        row = split_fields(line)
        check_row(row, attributes, line_number)
        rows.append(row)

    logger.debug("Parsed table", attribute_count=len(attributes), row_count=len(rows))
    return LabeledTable(attributes=attributes, rows=tuple(rows))

"""
Scanner for CREATE TABLE statements.

Only the ``CREATE TABLE name (columns);`` shape is recognized. The column
block is matched non-greedily up to the ``);`` terminator rather than the
first closing parenthesis, since type spellings such as
``character varying(32)`` embed their own parentheses.
"""
import re
from typing import NamedTuple

TABLE_REGEX = re.compile(r'CREATE TABLE (\w+) \((.*?)\);(.*)\Z', re.DOTALL)


class TableMatch(NamedTuple):
    name: str
    columns: str
    remainder: str


def scan_one(text: str) -> TableMatch | None:
    """Find the first table definition in ``text``.

    Returns
        TableMatch with the table name, the raw column block and everything
        after the statement terminator, or None when no definition remains
    """
    result = TABLE_REGEX.search(text)
    if result is None:
        return None
    return TableMatch(*result.groups())

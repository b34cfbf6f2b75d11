"""
Canonical formatting of generated source.

Every generated module passes through black, which normalizes layout. Black
parses with a grammar looser than the interpreter's (it accepts ``True: str``
as an annotated assignment), so the formatted text is also compiled to an
AST before it is accepted.
"""
import ast
import logging

import black
from black.parsing import InvalidInput

from ddlgen.exceptions import FormatError

logger = logging.getLogger(__name__)

DEFAULT_LINE_LENGTH = 88


def format_source(src: str, line_length: int = DEFAULT_LINE_LENGTH) -> str:
    """Return ``src`` in canonical black style.

    Raises FormatError if black cannot parse the text or the formatted text
    is not valid Python.
    """
    mode = black.Mode(line_length=line_length)
    try:
        formatted = black.format_str(src, mode=mode)
    except InvalidInput as e:
        raise FormatError(f'Failed to properly format code while generating, {e}') from e
    try:
        ast.parse(formatted)
    except SyntaxError as e:
        raise FormatError(f'Generated code is not valid Python, line {e.lineno}: {e.msg}') from e
    return formatted

"""
Code emission for table schemas.

Each table becomes one Python module containing a dataclass record with:

- ``scan(row)`` which unpacks a positional database row into the fields
- ``insert(cn)`` which issues one parameterized INSERT with ``$n`` placeholders

Scan targets and insert values are both produced in column declaration
order, so a row read with ``scan`` lines up with the columns written by
``insert``. The renderers are pure functions of the schema and are exposed
individually for testing.
"""
import logging
from typing import NamedTuple

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError
from more_itertools import unique_everseen

from ddlgen.exceptions import RenderError
from ddlgen.formatting import DEFAULT_LINE_LENGTH, format_source
from ddlgen.schema import TableSchema
from ddlgen.templates import TEMPLATES

logger = logging.getLogger(__name__)

__all__ = [
    'BASE_IMPORTS',
    'InsertParts',
    'insert_parts',
    'render_record',
    'render_scan',
    'render_insert',
    'render_imports',
    'render_file',
    'emit',
]

BASE_IMPORTS = ('from dataclasses import dataclass',)

RECEIVER = 'self'

_env = Environment(
    loader=DictLoader(TEMPLATES),
    autoescape=False,
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


class InsertParts(NamedTuple):
    """Parallel lists used to build the INSERT statement.

    Index ``i`` of each list refers to the same column.
    """
    columns: list[str]
    placeholders: list[str]
    values: list[str]


def _render(name: str, **context) -> str:
    try:
        rendered = _env.get_template(name).render(**context)
    except TemplateError as e:
        raise RenderError(f'Failed to properly render {name} code while generating, {e}') from e
    if not rendered.strip():
        raise RenderError(f'Rendering {name} code produced no output')
    return rendered


def insert_parts(schema: TableSchema) -> InsertParts:
    """Build the column, placeholder and value lists in lock-step.
    """
    columns, placeholders, values = [], [], []
    for i, column in enumerate(schema.columns):
        columns.append(column.name)
        placeholders.append(f'${i + 1}')
        values.append(column.data_type.render_value(f'{RECEIVER}.{column.attr}'))
    return InsertParts(columns, placeholders, values)


def render_record(schema: TableSchema) -> str:
    """Render the dataclass declaration, one field per column.
    """
    return _render('record', schema=schema)


def render_scan(schema: TableSchema) -> str:
    """Render the ``scan`` method body for the record.
    """
    return _render('scan', schema=schema)


def render_insert(schema: TableSchema) -> str:
    """Render the ``insert`` method body for the record.
    """
    return _render('insert', schema=schema, parts=insert_parts(schema))


def render_imports(schema: TableSchema) -> str:
    """Render the import block, listing each import at most once.
    """
    imports = unique_everseen([*BASE_IMPORTS, *sorted(schema.imports)])
    return _render('imports', imports=list(imports))


def render_file(schema: TableSchema, package_name: str,
                line_length: int = DEFAULT_LINE_LENGTH) -> str:
    """Render and format the full module for ``schema``.

    Raises RenderError for empty template output and FormatError when the
    assembled module is not valid Python.
    """
    src = _render(
        'file',
        schema=schema,
        package_name=package_name,
        imports=render_imports(schema),
        record=render_record(schema),
        scan=render_scan(schema),
        insert=render_insert(schema),
    )
    return format_source(src, line_length=line_length)


def emit(schema: TableSchema, package_name: str,
         line_length: int = DEFAULT_LINE_LENGTH) -> str:
    """Generate the source text of the module for ``schema``.
    """
    logger.debug(f'Generating functions for {schema.name}')
    return render_file(schema, package_name, line_length=line_length)

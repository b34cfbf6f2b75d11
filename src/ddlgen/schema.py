"""
Assembly of table schemas from a DDL document.

The document is consumed with an explicit cursor: each matched CREATE TABLE
statement is parsed and the cursor advances to the text following its
terminator, until no further definition is found. Tables are produced in
document order without reordering or cross-table validation.
"""
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from ddlgen.catalog import DEFAULT_CATALOG, TypeCatalog
from ddlgen.columns import ColumnDescriptor, is_valid_identifier, parse_columns
from ddlgen.exceptions import DuplicateTableError, MalformedColumnError
from ddlgen.exceptions import ScanFailure
from ddlgen.scanner import scan_one

logger = logging.getLogger(__name__)

__all__ = ['TableSchema', 'iter_schemas', 'assemble_all', 'DUPLICATE_POLICIES']

DUPLICATE_POLICIES = ('allow', 'error')


@dataclass(frozen=True)
class TableSchema:
    """All information needed to generate code for one table.
    """
    name: str
    columns: tuple[ColumnDescriptor, ...]
    imports: frozenset[str] = frozenset()

    def __post_init__(self):
        if not self.columns:
            raise MalformedColumnError('', table=self.name)

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]


def get_schema_data(text: str, catalog: TypeCatalog = DEFAULT_CATALOG) -> tuple[TableSchema, str] | None:
    """Parse the first table definition in ``text``.

    Returns
        Tuple of (TableSchema, remaining text) or None when no definition is found
    """
    match = scan_one(text)
    if match is None:
        return None
    if not is_valid_identifier(match.name):
        raise ScanFailure(f'Table name {match.name!r} is not a valid Python class name')
    columns, imports = parse_columns(match.columns, catalog, table=match.name)
    return TableSchema(name=match.name, columns=columns, imports=imports), match.remainder


def iter_schemas(document: str, catalog: TypeCatalog = DEFAULT_CATALOG) -> Iterator[TableSchema]:
    """Lazily yield each table schema in ``document``, in order.
    """
    cursor = document
    while True:
        result = get_schema_data(cursor, catalog)
        if result is None:
            return
        schema, cursor = result
        yield schema


def assemble_all(document: str, catalog: TypeCatalog = DEFAULT_CATALOG,
                 on_duplicate: str = 'allow') -> list[TableSchema]:
    """Read every table schema in ``document``.

    Args:
        document: DDL text with one or more CREATE TABLE statements
        catalog: TypeCatalog used to resolve column types
        on_duplicate: 'allow' keeps repeated table names as independent
            schemas, 'error' raises DuplicateTableError

    Returns
        List of TableSchema in document order (empty if none was found)
    """
    if on_duplicate not in DUPLICATE_POLICIES:
        raise ValueError(f'on_duplicate must be one of: {DUPLICATE_POLICIES}')

    schemas = []
    seen = set()
    for schema in iter_schemas(document, catalog):
        if schema.name in seen:
            if on_duplicate == 'error':
                raise DuplicateTableError(schema.name)
            logger.warning(f'Table {schema.name} is defined more than once')
        seen.add(schema.name)
        schemas.append(schema)
    return schemas

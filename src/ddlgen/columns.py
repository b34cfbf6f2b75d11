"""
Column parsing for CREATE TABLE column blocks.
"""
import keyword
import logging
from dataclasses import dataclass

from ddlgen.catalog import DEFAULT_CATALOG, TypeCatalog, TypeDescriptor
from ddlgen.exceptions import MalformedColumnError, UnknownTypeError

logger = logging.getLogger(__name__)

__all__ = ['ColumnDescriptor', 'parse_columns', 'attribute_name']


def attribute_name(name: str) -> str:
    """Upper-case the first character so the generated attribute is public.
    """
    return name[:1].upper() + name[1:]


def is_valid_identifier(name: str) -> bool:
    """Check that ``name`` can be used as a generated Python name.

    Keywords are rejected, including ``True``, ``False`` and ``None``, which
    the columns ``true``, ``false`` and ``none`` turn into.
    """
    return name.isidentifier() and not keyword.iskeyword(name)


@dataclass(frozen=True)
class ColumnDescriptor:
    """A table column in its generated record form.
    """
    name: str
    attr: str
    data_type: TypeDescriptor

    @classmethod
    def create(cls, name: str, data_type: TypeDescriptor) -> 'ColumnDescriptor':
        return cls(name=name, attr=attribute_name(name), data_type=data_type)


def split_column(entry: str, table: str | None = None) -> tuple[str, str]:
    """Split one column entry into its name and verbatim type spelling.
    """
    parts = entry.strip().split(maxsplit=1)
    if len(parts) != 2:
        raise MalformedColumnError(entry.strip(), table=table)
    name = parts[0]
    if not is_valid_identifier(attribute_name(name)):
        raise MalformedColumnError(
            entry.strip(), table=table,
            reason=f'column {name} maps to invalid attribute {attribute_name(name)!r}',
        )
    return name, parts[1]


def parse_columns(column_str: str, catalog: TypeCatalog = DEFAULT_CATALOG,
                  table: str | None = None) -> tuple[tuple[ColumnDescriptor, ...], frozenset[str]]:
    """Create ColumnDescriptors from the body of a CREATE TABLE statement.

    Every entry is examined before failing, so a single UnknownTypeError
    lists all unsupported types of the block.

    Args:
        column_str: Text between the parentheses of the statement
        catalog: TypeCatalog used to resolve type spellings
        table: Table name, used only for error context

    Returns
        Tuple of (columns in declaration order, set of required imports)
    """
    columns = []
    imports = set()
    unresolved = []

    for entry in column_str.split(','):
        name, spelling = split_column(entry, table=table)
        data_type = catalog.get(spelling)
        if data_type is None:
            logger.debug(f'No {catalog.dialect} type mapping for {name} {spelling!r}')
            unresolved.append((name, spelling))
            continue
        columns.append(ColumnDescriptor.create(name, data_type))
        if data_type.import_needed:
            imports.add(data_type.import_needed)

    if unresolved:
        raise UnknownTypeError(unresolved, table=table)

    return tuple(columns), frozenset(imports)

"""
Type catalog mapping source column types to Python types.

A catalog is keyed by the exact type spelling found in the DDL, qualifiers
included, so ``character varying(32)`` and ``character varying(32) NOT NULL``
are separate entries. Each entry describes:

1. The Python type used for the generated record field
2. The expression used to convert the field before it is bound on insert
3. An import the generated module needs for the type, if any

Catalogs are immutable and passed explicitly to the column parser, which
makes it possible to swap in a different source dialect.
"""
import logging
from dataclasses import dataclass
from types import MappingProxyType

from ddlgen.exceptions import UnknownTypeError

logger = logging.getLogger(__name__)

__all__ = [
    'TypeDescriptor',
    'TypeCatalog',
    'DEFAULT_CATALOG',
    'POSTGRES_TYPES',
]


@dataclass(frozen=True)
class TypeDescriptor:
    """Python-side description of a source column type.

    ``value_expr`` is a template with a single ``{}`` placeholder that is
    replaced by the attribute reference, e.g. ``{}.strftime("%H:%M")``.
    """
    type_name: str
    value_expr: str = '{}'
    import_needed: str | None = None

    def __post_init__(self):
        if not self.type_name:
            raise ValueError('type_name must not be empty')
        if '{}' not in self.value_expr:
            raise ValueError(f'value_expr must contain a {{}} placeholder: {self.value_expr!r}')

    def render_value(self, ref: str) -> str:
        """Apply the value expression to an attribute reference.
        """
        return self.value_expr.replace('{}', ref)


_STRING = TypeDescriptor('str')
_INTEGER = TypeDescriptor('int')
_FLOAT = TypeDescriptor('float')

POSTGRES_TYPES = {
    'text': _STRING,
    'character varying(32)': _STRING,
    'character varying(64)': _STRING,
    'character varying(32) NOT NULL': _STRING,
    'character varying(64) NOT NULL': _STRING,
    'boolean': TypeDescriptor('bool'),
    'double precision': _FLOAT,
    'real': _FLOAT,
    'time without time zone': TypeDescriptor(
        'datetime.time',
        value_expr='{}.strftime("%H:%M")',
        import_needed='import datetime',
    ),
    'date': TypeDescriptor('datetime.date', import_needed='import datetime'),
    'timestamp without time zone': TypeDescriptor(
        'datetime.datetime', import_needed='import datetime'
    ),
    'integer': _INTEGER,
    'bigint': _INTEGER,
    'smallint': _INTEGER,
}


class TypeCatalog:
    """Immutable lookup table from type spelling to TypeDescriptor.
    """

    def __init__(self, entries=None, dialect='postgresql'):
        self.dialect = dialect
        self._entries = MappingProxyType(dict(entries or {}))

    def __contains__(self, spelling):
        return spelling in self._entries

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __repr__(self):
        return f'TypeCatalog(dialect={self.dialect!r}, entries={len(self._entries)})'

    @property
    def entries(self) -> MappingProxyType:
        return self._entries

    def get(self, spelling: str) -> TypeDescriptor | None:
        """Return the descriptor for an exact spelling, or None.
        """
        return self._entries.get(spelling)

    def resolve(self, spelling: str, column: str | None = None) -> TypeDescriptor:
        """Return the descriptor for an exact spelling.

        Raises UnknownTypeError if the spelling is not in the catalog.
        """
        descriptor = self.get(spelling)
        if descriptor is None:
            raise UnknownTypeError([(column or '<column>', spelling)])
        return descriptor

    def extend(self, entries) -> 'TypeCatalog':
        """Return a new catalog with ``entries`` layered over this one.
        """
        merged = dict(self._entries)
        merged.update(entries)
        logger.debug(f'Extended {self.dialect} catalog with {len(entries)} entries')
        return TypeCatalog(merged, dialect=self.dialect)


DEFAULT_CATALOG = TypeCatalog(POSTGRES_TYPES, dialect='postgresql')

"""
Tests for column parsing.
"""
import pytest
from ddlgen.catalog import DEFAULT_CATALOG, TypeCatalog, TypeDescriptor
from ddlgen.columns import ColumnDescriptor, attribute_name, is_valid_identifier
from ddlgen.columns import parse_columns
from ddlgen.exceptions import MalformedColumnError, UnknownTypeError


def test_parse_columns(courses_columns):
    """Test every entry becomes a column in declaration order"""
    columns, imports = parse_columns(courses_columns)

    assert [c.name for c in columns] == [
        'term', 'callnumber', 'bulletinflags', 'classnotes', 'starttime1', 'description'
    ]
    assert columns[0] == ColumnDescriptor(
        name='term',
        attr='Term',
        data_type=DEFAULT_CATALOG.resolve('character varying(32)'),
    )
    assert columns[4].data_type.type_name == 'datetime.time'
    assert imports == frozenset({'import datetime'})


def test_multi_word_type_is_verbatim():
    """The type spelling keeps its embedded spaces"""
    columns, _ = parse_columns('name character varying(64) NOT NULL')
    assert columns[0].data_type.type_name == 'str'


def test_imports_collapse():
    """Duplicate imports across columns appear once"""
    _, imports = parse_columns('a time without time zone, b date, c integer')
    assert imports == frozenset({'import datetime'})


def test_no_imports():
    _, imports = parse_columns('a text, b integer')
    assert imports == frozenset()


@pytest.mark.parametrize(('name', 'expected'), [
    ('term', 'Term'),
    ('starttime1', 'Starttime1'),
    ('Already', 'Already'),
    ('_private', '_private'),
    ('x', 'X'),
])
def test_attribute_name(name, expected):
    """Only the first character is upper-cased"""
    assert attribute_name(name) == expected


def test_unknown_types_are_aggregated():
    """Every unknown type of the block is reported in one error"""
    with pytest.raises(UnknownTypeError) as exc_info:
        parse_columns('a text, b jsonb, c integer, d uuid[]', table='events')

    error = exc_info.value
    assert error.table == 'events'
    assert error.unresolved == [('b', 'jsonb'), ('d', 'uuid[]')]
    assert 'events' in str(error)
    assert "'jsonb'" in str(error)
    assert "'uuid[]'" in str(error)


@pytest.mark.parametrize('block', [
    'a text, b',
    'a text,, b integer',
    'a text,',
    '   ',
])
def test_malformed_column(block):
    """An entry without a type portion is an error, not skipped"""
    with pytest.raises(MalformedColumnError):
        parse_columns(block, table='t')


def test_injected_catalog():
    """Test parsing against a catalog for another dialect"""
    catalog = TypeCatalog({
        'INTEGER': TypeDescriptor('int'),
        'TEXT': TypeDescriptor('str'),
    }, dialect='sqlite')
    columns, _ = parse_columns('id INTEGER, name TEXT', catalog)
    assert [c.data_type.type_name for c in columns] == ['int', 'str']

    with pytest.raises(UnknownTypeError):
        parse_columns('id integer', catalog)


@pytest.mark.parametrize('name', ['none', 'true', 'false'])
def test_keyword_attribute_rejected(name):
    """Columns whose attribute would be a Python keyword are rejected by name"""
    with pytest.raises(MalformedColumnError) as exc_info:
        parse_columns(f'a text, {name} integer', table='t')

    error = exc_info.value
    assert error.table == 't'
    assert error.entry == f'{name} integer'
    assert name.capitalize() in error.reason
    assert 'in table t' in str(error)


@pytest.mark.parametrize('name', ['1st', 'with-dash', '"quoted"'])
def test_non_identifier_attribute_rejected(name):
    with pytest.raises(MalformedColumnError):
        parse_columns(f'{name} text', table='t')


@pytest.mark.parametrize(('name', 'expected'), [
    ('Term', True),
    ('_x1', True),
    ('match', True),
    ('None', False),
    ('True', False),
    ('class', False),
    ('9lives', False),
    ('', False),
])
def test_is_valid_identifier(name, expected):
    assert is_valid_identifier(name) is expected

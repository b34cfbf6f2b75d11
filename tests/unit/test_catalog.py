"""
Tests for the type catalog.
"""
import pytest
from ddlgen.catalog import DEFAULT_CATALOG, TypeCatalog, TypeDescriptor
from ddlgen.exceptions import UnknownTypeError


@pytest.mark.parametrize(('spelling', 'expected'), [
    ('text', 'str'),
    ('character varying(32)', 'str'),
    ('character varying(64)', 'str'),
    ('character varying(32) NOT NULL', 'str'),
    ('character varying(64) NOT NULL', 'str'),
    ('boolean', 'bool'),
    ('double precision', 'float'),
    ('time without time zone', 'datetime.time'),
    ('integer', 'int'),
])
def test_postgres_spellings(spelling, expected):
    """Test the built-in PostgreSQL type spellings"""
    assert DEFAULT_CATALOG.resolve(spelling).type_name == expected


def test_lookup_is_exact():
    """Qualifiers are part of the key, not parsed"""
    assert DEFAULT_CATALOG.get('character varying(128)') is None
    assert DEFAULT_CATALOG.get('TEXT') is None
    assert DEFAULT_CATALOG.get(' text') is None


def test_resolve_unknown_type():
    """Test unknown spellings raise with the spelling in the error"""
    with pytest.raises(UnknownTypeError) as exc_info:
        DEFAULT_CATALOG.resolve('jsonb', column='payload')
    assert exc_info.value.unresolved == [('payload', 'jsonb')]
    assert 'jsonb' in str(exc_info.value)


def test_time_conversion():
    """Time values are formatted before binding and need an import"""
    descriptor = DEFAULT_CATALOG.resolve('time without time zone')
    assert descriptor.render_value('self.Start') == 'self.Start.strftime("%H:%M")'
    assert descriptor.import_needed == 'import datetime'


def test_plain_conversion():
    """Most types bind the raw attribute"""
    descriptor = DEFAULT_CATALOG.resolve('integer')
    assert descriptor.render_value('self.Count') == 'self.Count'
    assert descriptor.import_needed is None


def test_every_entry_has_type_name():
    """Test every catalog entry has a non-empty type name"""
    assert len(DEFAULT_CATALOG) > 0
    for spelling in DEFAULT_CATALOG:
        assert DEFAULT_CATALOG.get(spelling).type_name


def test_descriptor_validation():
    """Test TypeDescriptor rejects empty names and missing placeholders"""
    with pytest.raises(ValueError):
        TypeDescriptor('')
    with pytest.raises(ValueError):
        TypeDescriptor('str', value_expr='str(x)')


def test_catalog_is_immutable():
    """Test entries cannot be changed in place"""
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.entries['jsonb'] = TypeDescriptor('dict')


def test_extend_returns_new_catalog():
    """Test extend layers entries without touching the original"""
    extended = DEFAULT_CATALOG.extend({
        'jsonb': TypeDescriptor('dict'),
        'text': TypeDescriptor('bytes'),
    })
    assert extended.resolve('jsonb').type_name == 'dict'
    assert extended.resolve('text').type_name == 'bytes'
    assert extended.dialect == 'postgresql'
    assert 'jsonb' not in DEFAULT_CATALOG
    assert DEFAULT_CATALOG.resolve('text').type_name == 'str'


def test_custom_dialect():
    """Test a catalog for another source dialect"""
    catalog = TypeCatalog({'INTEGER': TypeDescriptor('int')}, dialect='sqlite')
    assert catalog.resolve('INTEGER').type_name == 'int'
    assert 'integer' not in catalog
    assert 'sqlite' in repr(catalog)

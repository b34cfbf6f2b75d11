"""
Generate Python data access modules from PostgreSQL CREATE TABLE statements.

Each table becomes a module with a dataclass record, a ``scan`` method that
reads one positional row into the record and an ``insert`` method that
writes it back with ``$n`` positional parameters.

    import ddlgen
    ddlgen.generate(open('schema.sql').read(), output_dir='app/models')
"""
__version__ = '0.1.0'

from ddlgen.catalog import DEFAULT_CATALOG, TypeCatalog, TypeDescriptor
from ddlgen.columns import ColumnDescriptor, parse_columns
from ddlgen.config.type_mapping import build_catalog, load_type_mapping
from ddlgen.emitter import emit, insert_parts, render_file, render_imports
from ddlgen.emitter import render_insert, render_record, render_scan
from ddlgen.exceptions import ConfigError, DuplicateTableError, FormatError
from ddlgen.exceptions import GenerationError, GenerationFailed
from ddlgen.exceptions import MalformedColumnError, NoSchemaFound, OutputError
from ddlgen.exceptions import OutputFailure, RenderError, ScanFailure
from ddlgen.exceptions import SchemaError, UnknownTypeError
from ddlgen.formatting import format_source
from ddlgen.generator import generate
from ddlgen.options import GeneratorOptions
from ddlgen.package import resolve_package_name
from ddlgen.scanner import scan_one
from ddlgen.schema import TableSchema, assemble_all, iter_schemas

__all__ = [
    'generate',
    'GeneratorOptions',
    'assemble_all',
    'iter_schemas',
    'scan_one',
    'parse_columns',
    'emit',
    'render_record',
    'render_scan',
    'render_insert',
    'render_imports',
    'render_file',
    'insert_parts',
    'format_source',
    'resolve_package_name',
    'build_catalog',
    'load_type_mapping',
    'TypeCatalog',
    'TypeDescriptor',
    'ColumnDescriptor',
    'TableSchema',
    'DEFAULT_CATALOG',
    'GenerationError',
    'GenerationFailed',
    'ConfigError',
    'ScanFailure',
    'NoSchemaFound',
    'UnknownTypeError',
    'MalformedColumnError',
    'DuplicateTableError',
    'RenderError',
    'FormatError',
    'OutputError',
    'SchemaError',
    'OutputFailure',
]

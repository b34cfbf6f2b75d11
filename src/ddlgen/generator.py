"""
End-to-end generation of data access modules from a DDL document.

All schemas are assembled and every module is rendered in memory before the
first file is written, so a schema error or formatting failure never leaves
a partial set of files behind.
"""
import dataclasses
import logging
import pathlib
import sys
from typing import Any, NamedTuple

from ddlgen.config.type_mapping import build_catalog
from ddlgen.emitter import emit
from ddlgen.exceptions import GenerationError, GenerationFailed, NoSchemaFound
from ddlgen.exceptions import OutputError
from ddlgen.options import GeneratorOptions
from ddlgen.package import resolve_package_name
from ddlgen.schema import TableSchema, assemble_all

logger = logging.getLogger(__name__)

__all__ = [
    'GeneratedFile',
    'make_options',
    'output_path',
    'read_in_schema',
    'render_files',
    'write_file',
    'generate',
]


class GeneratedFile(NamedTuple):
    schema: TableSchema
    path: pathlib.Path
    source: str


def make_options(options: GeneratorOptions | dict[str, Any] | None = None,
                 **kw: Any) -> GeneratorOptions:
    """Build GeneratorOptions from an instance, a dict and/or keyword overrides.
    """
    if isinstance(options, GeneratorOptions):
        return dataclasses.replace(options, **kw) if kw else options
    return GeneratorOptions(**{**(options or {}), **kw})


def output_path(schema: TableSchema, options: GeneratorOptions) -> pathlib.Path:
    """File the module for ``schema`` is written to.
    """
    return pathlib.Path(options.output_dir) / f'{schema.name}{options.file_suffix}'


def read_in_schema(path=None) -> str:
    """Read a complete DDL document from a UTF-8 file, or stdin when no path is given.
    """
    try:
        if path is None:
            return sys.stdin.read()
        return pathlib.Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise OutputError(f'Failed to read in schema => {e}') from e


def _handle_failure(table, exc, options, failures):
    if options.fail_fast:
        raise exc
    logger.error(f'Failed to generate {table} => {exc}')
    failures.append((table, exc))


def render_files(schemas: list[TableSchema], options: GeneratorOptions,
                 package_name: str) -> tuple[list[GeneratedFile], list[tuple[str, GenerationError]]]:
    """Render the module source for every schema without touching the disk.

    Returns
        Tuple of (rendered files, (table name, error) pairs in document order)
    """
    rendered, failures = [], []
    for schema in schemas:
        try:
            source = emit(schema, package_name, line_length=options.line_length)
        except GenerationError as e:
            _handle_failure(schema.name, e, options, failures)
            continue
        rendered.append(GeneratedFile(schema, output_path(schema, options), source))
    return rendered, failures


def write_file(generated: GeneratedFile) -> pathlib.Path:
    """Write one rendered module to its path.
    """
    try:
        generated.path.parent.mkdir(parents=True, exist_ok=True)
        generated.path.write_text(generated.source, encoding='utf-8')
    except OSError as e:
        raise OutputError(f'Failed to write {generated.path} => {e}') from e
    logger.info(f'Generated {generated.path} for table {generated.schema.name}')
    return generated.path


def generate(document: str, options: GeneratorOptions | dict[str, Any] | None = None,
             **kw: Any) -> list[pathlib.Path]:
    """Generate one module per table defined in ``document``.

    Args:
        document: DDL text with one or more CREATE TABLE statements
        options: GeneratorOptions, a dict of options, or None
        **kw: Option overrides

    Returns
        Paths of the written modules, in document order

    Raises
        NoSchemaFound when the document holds no table definition, any
        other GenerationError when fail_fast is set, and GenerationFailed
        summarizing every failed table otherwise
    """
    options = make_options(options, **kw)
    catalog = build_catalog(options.type_mapping, dialect=options.dialect)

    schemas = assemble_all(document, catalog, on_duplicate=options.on_duplicate)
    if not schemas:
        raise NoSchemaFound()

    package_name = options.package_name or resolve_package_name(options.output_dir)
    rendered, failures = render_files(schemas, options, package_name)

    written = []
    for generated in rendered:
        try:
            written.append(write_file(generated))
        except OutputError as e:
            _handle_failure(generated.schema.name, e, options, failures)

    if failures:
        raise GenerationFailed(failures)
    return written

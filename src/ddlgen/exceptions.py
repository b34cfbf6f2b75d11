"""
Generator-specific exception classes.
"""


class GenerationError(Exception):
    """Base class for all ddlgen errors.
    """


class ConfigError(GenerationError):
    """Error loading generator or type mapping configuration.
    """


class ScanFailure(GenerationError):
    """No recognizable table definition in the input.
    """


class NoSchemaFound(ScanFailure):
    """The input document did not contain a single table definition.
    """

    def __init__(self, message='No sql table schemas found'):
        super().__init__(message)


class MalformedColumnError(GenerationError):
    """A column entry has no separable name/type pair.
    """

    def __init__(self, entry, table=None, reason=None):
        self.entry = entry
        self.table = table
        self.reason = reason
        where = f' in table {table}' if table else ''
        why = f' ({reason})' if reason else ''
        super().__init__(f'Malformed column definition{where}: {entry!r}{why}')


class UnknownTypeError(GenerationError):
    """One or more column types have no catalog entry.

    ``unresolved`` is a list of ``(column_name, type_spelling)`` pairs so that
    every offending column of a table is reported at once.
    """

    def __init__(self, unresolved, table=None):
        self.unresolved = list(unresolved)
        self.table = table
        detail = ', '.join(f'{name} ({spelling!r})' for name, spelling in self.unresolved)
        where = f' in table {table}' if table else ''
        super().__init__(f'DataType not yet supported{where}: {detail}')


class DuplicateTableError(GenerationError):
    """The same table name was defined more than once in one document.
    """

    def __init__(self, table):
        self.table = table
        super().__init__(f'Table {table} is defined more than once')


class RenderError(GenerationError):
    """Template assembly produced empty or invalid intermediate text.
    """


class FormatError(GenerationError):
    """The canonical formatter rejected the generated source.
    """


class OutputError(GenerationError):
    """Writing a generated file failed.
    """


class GenerationFailed(GenerationError):
    """Several schemas failed while generation continued past errors.

    ``failures`` is a list of ``(table_name, error)`` pairs; a table defined
    more than once can appear once per definition.
    """

    def __init__(self, failures):
        self.failures = list(failures)
        detail = '; '.join(f'{table}: {exc}' for table, exc in self.failures)
        super().__init__(f'Failed to generate {len(self.failures)} file(s) => {detail}')


SchemaError = (
    ScanFailure,
    UnknownTypeError,
    MalformedColumnError,
    DuplicateTableError,
    )

OutputFailure = (
    RenderError,
    FormatError,
    OutputError,
    )

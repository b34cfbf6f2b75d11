from dataclasses import dataclass

from ddlgen.formatting import DEFAULT_LINE_LENGTH
from ddlgen.schema import DUPLICATE_POLICIES

from libb import ConfigOptions

__all__ = ['GeneratorOptions']


@dataclass
class GeneratorOptions(ConfigOptions):
    """Options

    - output_dir: Directory the generated modules are written to (default: '.')
    - package_name: Package named in the module header (default: inferred
      from output_dir)
    - file_suffix: Appended to the table name to form the file name
      (default: '_sql.py')
    - type_mapping: JSON file with extra type mappings (default: search the
      standard locations)
    - dialect: Section of the type mapping file to use (default: 'postgresql')
    - on_duplicate: 'allow' or 'error' for repeated table names (default: 'allow')
    - fail_fast: Abort on the first failing table (default: True)
    - line_length: Line length used by the formatter (default: 88)
    """
    output_dir: str = '.'
    package_name: str = None
    file_suffix: str = '_sql.py'
    type_mapping: str = None
    dialect: str = 'postgresql'
    on_duplicate: str = 'allow'
    fail_fast: bool = True
    line_length: int = DEFAULT_LINE_LENGTH

    def __post_init__(self):
        if self.on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(f'on_duplicate must be one of: {DUPLICATE_POLICIES}')
        if not self.file_suffix:
            raise ValueError('file_suffix must not be empty')
        if self.line_length <= 0:
            raise ValueError('line_length must be positive')

"""
Configuration for custom column type mappings.

A type mapping file is a JSON object keyed by dialect, each holding entries
keyed by the exact DDL type spelling:

    {
        "postgresql": {
            "uuid": {"type": "uuid.UUID", "value": "str({})", "import": "import uuid"},
            "character varying(255)": {"type": "str"}
        }
    }
"""
import json
import logging
import pathlib

from ddlgen.catalog import DEFAULT_CATALOG, TypeCatalog, TypeDescriptor
from ddlgen.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_LOCATIONS = (
    '~/.config/ddlgen/type_mapping.json',
    '/etc/ddlgen/type_mapping.json',
    'type_mapping.json',  # Current directory
)


def _read_config(config_file):
    with pathlib.Path(config_file).expanduser().open() as f:
        return json.load(f)


def _descriptor_from_entry(spelling, entry):
    if isinstance(entry, str):
        return TypeDescriptor(entry)
    if not isinstance(entry, dict) or 'type' not in entry:
        raise ConfigError(f'Invalid type mapping for {spelling!r}: {entry!r}')
    try:
        return TypeDescriptor(
            entry['type'],
            value_expr=entry.get('value', '{}'),
            import_needed=entry.get('import'),
        )
    except ValueError as e:
        raise ConfigError(f'Invalid type mapping for {spelling!r}: {e}') from e


def load_type_mapping(config_file=None, dialect='postgresql'):
    """Load custom type descriptors for a dialect.

    An explicit ``config_file`` must be readable; failures raise ConfigError.
    Otherwise the default locations are tried in order and the first existing
    file is used, logging and skipping files that cannot be parsed.

    Returns
        dict of spelling to TypeDescriptor (empty when nothing is configured)
    """
    if config_file:
        try:
            config = _read_config(config_file)
        except (OSError, ValueError) as e:
            raise ConfigError(f'Failed to load type mapping config {config_file}: {e}') from e
        source = config_file
    else:
        config, source = None, None
        for location in DEFAULT_LOCATIONS:
            path = pathlib.Path(location).expanduser()
            if not path.exists():
                continue
            try:
                config = _read_config(path)
            except (OSError, ValueError) as e:
                logger.warning(f'Failed to load type mapping config {path}: {e}')
                continue
            source = path
            break
        if config is None:
            return {}

    if not isinstance(config, dict):
        raise ConfigError(f'Type mapping config {source} must be a JSON object')

    mappings = config.get(dialect, {})
    entries = {spelling: _descriptor_from_entry(spelling, entry)
               for spelling, entry in mappings.items()}
    logger.info(f'Loaded {len(entries)} {dialect} type mappings from {source}')
    return entries


def build_catalog(config_file=None, dialect='postgresql', base=DEFAULT_CATALOG) -> TypeCatalog:
    """Layer configured type mappings over the built-in catalog.
    """
    entries = load_type_mapping(config_file, dialect=dialect)
    if not entries:
        return base
    return base.extend(entries)

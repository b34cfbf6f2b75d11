"""
Best-effort discovery of the Python package a module is generated into.
"""
import logging
import pathlib

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE = 'main'


def resolve_package_name(directory='.') -> str:
    """Find the dotted package name of ``directory``.

    A directory is a package when it holds an ``__init__.py``; parent
    directories are included for as long as they are packages too, so
    ``src/app/models`` resolves to ``app.models``. Falls back to
    DEFAULT_PACKAGE when the directory is not a package or cannot be read.
    """
    try:
        path = pathlib.Path(directory).resolve()
        parts = []
        while (path / '__init__.py').is_file():
            parts.append(path.name)
            if path.parent == path:
                break
            path = path.parent
    except OSError as e:
        logger.warning(f'Failed to find package name, defaulting to "{DEFAULT_PACKAGE}" => {e}')
        return DEFAULT_PACKAGE

    if not parts:
        logger.info(f'{directory} is not a package, defaulting to "{DEFAULT_PACKAGE}"')
        return DEFAULT_PACKAGE
    return '.'.join(reversed(parts))

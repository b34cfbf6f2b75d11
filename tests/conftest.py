import pathlib
import site

import pytest

HERE = pathlib.Path(pathlib.Path(__file__).resolve()).parent
site.addsitedir(HERE)


@pytest.fixture(autouse=True)
def no_default_type_mapping(monkeypatch):
    """Keep type mapping files on the test machine out of every test."""
    monkeypatch.setattr('ddlgen.config.type_mapping.DEFAULT_LOCATIONS', ())


pytest_plugins = [
    'tests.fixtures.mocks',
    'tests.fixtures.schemas',
]

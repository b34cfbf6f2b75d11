"""
DDL fixtures shared by the generator tests.
"""
import pytest

COURSES_DDL = """CREATE TABLE courses_t (
    term character varying(32),
    callnumber integer,
    bulletinflags character varying(32),
    classnotes character varying(64),
    starttime1 time without time zone,
    description text
);"""

COURSES_COLUMNS = """
    term character varying(32),
    callnumber integer,
    bulletinflags character varying(32),
    classnotes character varying(64),
    starttime1 time without time zone,
    description text
"""

TWO_TABLES_DDL = """--
-- Name: courses_t; Type: TABLE; Schema: public
--

CREATE TABLE courses_t (
    term character varying(32) NOT NULL,
    callnumber integer,
    starttime1 time without time zone
);

CREATE TABLE rooms_t (
    building character varying(64) NOT NULL,
    room text,
    capacity integer,
    accessible boolean,
    area double precision
);
"""


@pytest.fixture
def courses_ddl():
    return COURSES_DDL


@pytest.fixture
def courses_columns():
    return COURSES_COLUMNS


@pytest.fixture
def two_tables_ddl():
    return TWO_TABLES_DDL


@pytest.fixture
def courses_schema():
    from ddlgen.schema import assemble_all
    return assemble_all(COURSES_DDL)[0]


@pytest.fixture
def simple_schema():
    from ddlgen.schema import assemble_all
    return assemble_all('CREATE TABLE t (a text, b integer);')[0]

"""
Command line entry point.

Reads CREATE TABLE statements from a file or stdin and writes one module
per table.
"""
import argparse
import logging

from ddlgen.exceptions import GenerationError
from ddlgen.generator import generate, read_in_schema
from ddlgen.options import GeneratorOptions
from ddlgen.schema import DUPLICATE_POLICIES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = GeneratorOptions()
    parser = argparse.ArgumentParser(
        prog='ddlgen',
        description='Generate Python data access modules from CREATE TABLE statements',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pg_dump --schema-only mydb | %(prog)s
  %(prog)s schema.sql -o src/app/models --on-duplicate error
        """,
    )
    parser.add_argument(
        'schema', nargs='?',
        help='UTF-8 file with CREATE TABLE statements (default: stdin)',
    )
    parser.add_argument(
        '--output-dir', '-o', default=defaults.output_dir,
        help='Directory for generated modules (default: current directory)',
    )
    parser.add_argument(
        '--package', '-p', dest='package_name',
        help='Package named in the module header (default: inferred from the output directory)',
    )
    parser.add_argument(
        '--suffix', dest='file_suffix', default=defaults.file_suffix,
        help=f'Suffix appended to the table name (default: {defaults.file_suffix})',
    )
    parser.add_argument(
        '--type-mapping', '-t',
        help='JSON file with additional type mappings',
    )
    parser.add_argument(
        '--on-duplicate', choices=DUPLICATE_POLICIES, default=defaults.on_duplicate,
        help='How to treat a table defined more than once (default: allow)',
    )
    parser.add_argument(
        '--keep-going', '-k', dest='fail_fast', action='store_false',
        help='Generate the remaining tables when one fails',
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Enable debug logging',
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        document = read_in_schema(args.schema)
        paths = generate(
            document,
            output_dir=args.output_dir,
            package_name=args.package_name,
            file_suffix=args.file_suffix,
            type_mapping=args.type_mapping,
            on_duplicate=args.on_duplicate,
            fail_fast=args.fail_fast,
        )
    except (GenerationError, ValueError) as e:
        logger.error(f'Failed to generate file => {e}')
        return 1

    logger.info(f'Generated {len(paths)} module(s)')
    return 0

"""Command-line interface for relname."""

import argparse
import logging
import sys
from typing import Optional, Union

from pydantic import BaseModel

from .. import __version__
from ..core.name import Name, new_name
from ..core.related_name import RelatedName, new_related_name
from ..utils.clean import clean_string

logger = logging.getLogger(__name__)

MAX_PARTS = 3


class NameView(BaseModel):
    """Rendered forms of a name, as printed by --json."""
    common: str
    file_as: str
    surname: str
    forename: str
    generation: str
    num_parts: int
    display: str
    relator: Optional[str] = None


def print_name(name: Union[Name, RelatedName], as_json: bool = False) -> None:
    """Print every rendering of a name or related name.

    Args:
        name: Name or RelatedName to show
        as_json: Print a JSON document instead of aligned text
    """
    view = NameView(display=str(name), **name.to_dict())

    if as_json:
        print(view.model_dump_json(indent=2, exclude_none=True))
        return

    print(f"Common:      {view.common}")
    print(f"File-as:     {view.file_as}")
    print(f"Surname:     {view.surname}")
    print(f"Forename:    {view.forename}")
    print(f"Generation:  {view.generation}")
    print(f"Parts:       {view.num_parts}")
    if view.relator is not None:
        print(f"Relator:     {view.relator}")
        print(f"Display:     {view.display}")


def _check_parts(parser: argparse.ArgumentParser, parts: list) -> None:
    if len(parts) > MAX_PARTS:
        parser.error(f"a name has at most {MAX_PARTS} parts, got {len(parts)}")


def name_command(args: argparse.Namespace) -> int:
    """Execute the name command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    name, err = new_name(*args.parts)
    if err is not None:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print_name(name, as_json=args.json)
    return 0


def related_command(args: argparse.Namespace) -> int:
    """Execute the related command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    name, err = new_name(*args.parts)
    if err is not None:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    related, err = new_related_name(name, args.code)
    if err is not None:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print_name(related, as_json=args.json)
    return 0


def clean_command(args: argparse.Namespace) -> int:
    """Execute the clean command."""
    print(clean_string(args.text))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='relname',
        description='Show the common and file-as forms of personal and organizational names.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print names as JSON'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    name_parser = subparsers.add_parser(
        'name',
        help='Build a one, two or three part name and show its forms'
    )
    name_parser.add_argument(
        'parts',
        nargs='+',
        metavar='PART',
        help='Whole name, or forename and surname, or forename, surname and generation'
    )

    related_parser = subparsers.add_parser(
        'related',
        help='Build a name with a MARC relator code (e.g. aut, edt)'
    )
    related_parser.add_argument(
        'code',
        help='Three-letter relator code'
    )
    related_parser.add_argument(
        'parts',
        nargs='+',
        metavar='PART',
        help='Name parts, as for the name command'
    )

    clean_parser = subparsers.add_parser(
        'clean',
        help='Collapse and trim whitespace in a string'
    )
    clean_parser.add_argument(
        'text',
        help='Text to normalize'
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
    logging.getLogger('relname').setLevel(level)

    if not args.command:
        parser.print_help()
        return 0

    if args.command in ('name', 'related'):
        _check_parts(parser, args.parts)

    logger.debug(f"Running {args.command} command")

    if args.command == 'name':
        return name_command(args)
    elif args.command == 'related':
        return related_command(args)
    elif args.command == 'clean':
        return clean_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())

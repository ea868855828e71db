import argparse
import logging
import os
import sys
import textwrap
from pathlib import Path

from . import __version__
from .commands.compare import ComparisonError
from .commands.render import DEFAULT_DIFF_TOOL
from .session import ScanSession
from .utils.profiling import profile_main
from .utils.prompt import Prompter
from .utils.selection import FileSelection

logger = logging.getLogger(__name__)

DIFF_TOOL_ENV = 'PAIRSIM_DIFF_TOOL'


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pairsim',
        description='Compare every pair of text files under a directory with several string-similarity metrics '
                    'and rank the pairs from most to least similar.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
            Examples:
              pairsim
              pairsim src --ext py
              pairsim docs --ext md txt --name chapter_ appendix_

            Without DIRECTORY, the directory and the filters are asked for interactively.
            A file is selected when its name starts with one of the names, continues with
            letters, digits or underscores, and ends with one of the extensions.
            ''').strip()
    )
    parser.add_argument(
        'directory',
        nargs='?',
        metavar='DIRECTORY',
        help='Directory to scan, including its subdirectories. Prompts for the directory and the filters when '
             'omitted.')
    parser.add_argument(
        '--ext',
        nargs='+',
        default=[],
        metavar='EXT',
        help='File extensions to include, without the dot (default: all)')
    parser.add_argument(
        '--name',
        nargs='+',
        default=[],
        metavar='NAME',
        help='File name prefixes to include (default: all)')
    parser.add_argument(
        '--diff-tool',
        metavar='TOOL',
        help=f'Diff tool named in the command printed for each pair. If not provided, uses the {DIFF_TOOL_ENV} '
             f'environment variable or "{DEFAULT_DIFF_TOOL}".')
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Do not print the progress indicator')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file for operation logging. If not provided, nothing is logged.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to INFO when --log-file is provided.')
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'%(prog)s {__version__}')
    return parser


@profile_main
def pairsim_main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.log_file:
        log_level = args.log_level if args.log_level is not None else 'INFO'

        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, log_level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    diff_tool = args.diff_tool
    if diff_tool is None:
        diff_tool = os.environ.get(DIFF_TOOL_ENV, DEFAULT_DIFF_TOOL)

    if args.directory is None:
        prompter = Prompter()
        try:
            root = prompter.ask_directory()
            selection = prompter.ask_selection()
        except EOFError:
            print("\nError: input ended before the directory and filters were given", file=sys.stderr)
            return 1
    else:
        root = Path(args.directory)
        if not root.is_dir():
            parser.error(f"'{args.directory}' is not a valid directory")
        selection = FileSelection(args.ext, args.name)

    session = ScanSession(root, selection, diff_tool=diff_tool, show_progress=not args.quiet)
    session.print_summary()

    try:
        session.run()
    except ComparisonError as e:
        logger.exception(f"Aborting: {e}")
        print(f"\nSource: {e.source}\nDestination: {e.destination}", file=sys.stderr)
        print(f"Error: {e.__cause__!r}", file=sys.stderr)
        return 1

    return 0


def main():
    sys.exit(pairsim_main())


if __name__ == '__main__':
    main()

"""CLI Argument Parsing"""

import argparse
import argcomplete

from commitfmt import __version__


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='commitfmt',
        description='Format git commit messages: one-line subject, wrapped body, untouched comments, trailers and diff',
        epilog='Example: commitfmt -i .git/COMMIT_EDITMSG'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('file', nargs='?', default='-', metavar='FILE', help='Commit message file (default: stdin)')

    # Formatting options
    parser.add_argument('-i', '--in-place', action='store_true', default=None, help='Rewrite FILE instead of printing')
    parser.add_argument('--check', action='store_true', help='Exit 1 if FILE is not formatted, change nothing')
    parser.add_argument('-w', '--width', type=positive_int, metavar='N', help='Wrap body paragraphs at N columns (default: 72)')
    parser.add_argument('--trailer-prefix', action='append', metavar='PREFIX', dest='trailer_prefixes', help='Extra footer prefix to treat like Signed-off-by (repeatable)')

    # Inspection options
    view = parser.add_mutually_exclusive_group()
    view.add_argument('--chunks', action='store_true', help='List the chunks of the message')
    view.add_argument('--outline', action='store_true', help='Show outline entries')
    view.add_argument('--folds', action='store_true', help='Show folding ranges')
    view.add_argument('--subject', action='store_true', help='Show the subject line range')
    view.add_argument('--edits', action='store_true', help='Show the per-chunk edits formatting would make')
    parser.add_argument('--json', action='store_true', help='Print inspection output as JSON')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug info (chunk counts, timing)')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')
    parser.add_argument('--install-hook', action='store_true', help='Install a commit-msg hook in the current repository')
    parser.add_argument('--force', action='store_true', help='With --install-hook, overwrite an existing hook')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)

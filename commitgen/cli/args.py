"""CLI Argument Parsing"""

import argparse
import math

import argcomplete

from commitgen import __version__


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number of seconds, got '{value}'")
    if not math.isfinite(number) or number <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be a positive finite number, got '{value}'")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='commitgen',
        description='Generate a commit message for staged changes and commit with it',
        epilog='Example: git add -p && commitgen'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Generation options
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Model name (default: mixtral-8x7b-32768)')
    parser.add_argument('--timeout', type=positive_float, metavar='SECONDS', help='HTTP timeout for the completion request')

    # Config
    parser.add_argument('--env-file', type=str, metavar='PATH', help='Read GROQ_API_KEY from this .env file')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug info (prompt size, tokens used, timings)')

    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)

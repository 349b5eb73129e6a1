__all__ = (
    'ArgParser',
    'STDIN',
    'read_input',
    'unparsed_text_error',
)


import os.path
import sys
from argparse import ArgumentParser

from . import __version__
from .constants import DEBUG, ENCODING
from .errors import CLIFatalError, CLIUsageError, locate
from .lexical import lstrip_white_space
from ._types import FileContents

from typing import Any, Never


PROG = __package__
STDIN = '-'


class ArgParser(ArgumentParser):
    '''
    A custom command line parser used by the command line utility.
    '''
    def __init__(self) -> None:
        super().__init__(
            prog=PROG,
            description=(
                "Parse a semicolon-separated config file and print its"
                " contents as JSON."
            ),
        )
        self.add_arguments()

    def parse_args(self, args: list[str] = None) -> dict[str, Any]:
        '''
        Parse command line arguments and return a dict of options.
        If `args` is None, process from STDIN.

        :param args: The args to parse, get from STDIN by default
        :type args: :class:`list[str]`

        :raises: :exc:`CLIUsageError` for option values that argparse
            cannot check by itself
        '''
        # Use vars() because dict items are more portable than attrs.
        opts = vars(super().parse_args(args))
        if opts['indent'] is not None and opts['indent'] < 0:
            raise CLIUsageError("--indent cannot be negative.")
        return opts

    def add_arguments(self) -> None:
        '''Equip the parser with all its arguments.'''
        self.add_argument(
            'file',
            nargs='?',
            default=STDIN,
            help=(
                "The config file to parse."
                " Read from STDIN when omitted or '-'."
            ),
            metavar='FILE',
        )

        output_group = self.add_argument_group(
            title="Output options",
        )

        output_group.add_argument(
            '--dict', '-d',
            action='store_true',
            dest='as_dict',
            help=(
                "Print objects as JSON objects instead of lists of"
                " key-value pairs. The last of any repeated keys wins."
            ),
        )

        output_group.add_argument(
            '--indent', '-i',
            dest='indent',
            help="Indent the JSON output by this many spaces.",
            metavar='SPACES',
            type=int,
        )

        self.add_argument(
            '--strict', '-s',
            action='store_true',
            dest='strict',
            help="Fail if anything but whitespace is left unparsed.",
        )

        self.add_argument(
            '--debug',
            action='store_true',
            default=DEBUG,
            help="Log what the parser does.",
        )

        self.add_argument(
            '--log-file',
            dest='log_file',
            help="Write log messages to this file instead of STDERR.",
            metavar='FILE',
        )

        self.add_argument(
            '--version', '-v',
            action='version',
            version=f"{PROG} {__version__}",
        )

    def quit(self, message: str = "Exiting...") -> Never:
        '''Print a message and exit the program.'''
        self.exit(1, message + '\n')


def read_input(file: str) -> FileContents:
    '''
    Return the contents of `file`, or of STDIN if `file` is ``'-'``.

    :param file: The file to read
    :type file: :class:`str`

    :raises: :exc:`CLIFatalError` when the file cannot be read
    '''
    if file == STDIN:
        return sys.stdin.read()
    absolute = os.path.abspath(os.path.expanduser(file))
    try:
        with open(absolute, 'r', encoding=ENCODING, newline='') as f:
            return f.read()
    except OSError as e:
        raise CLIFatalError(f"Cannot read {file!r}: {e.strerror}") from None
    except UnicodeDecodeError:
        msg = f"Cannot read {file!r}: not valid {ENCODING} text"
        raise CLIFatalError(msg) from None


def unparsed_text_error(
    text: FileContents,
    remaining: FileContents,
) -> CLIFatalError:
    '''
    Describe the text that was left over after parsing.

    :param text: The whole text that was parsed
    :type text: :class:`FileContents`

    :param remaining: The unparsed end of `text`
    :type remaining: :class:`FileContents`
    '''
    leftover = lstrip_white_space(remaining)
    offset = (
        len(text.encode(ENCODING, 'surrogatepass'))
        - len(leftover.encode(ENCODING, 'surrogatepass'))
    )
    lineno, colno = locate(text, offset)
    too_long = 20
    shown = leftover[:too_long] + ('...' if len(leftover) > too_long else '')
    msg = f"Line {lineno}, column {colno}: Unparsed text: {shown!r}"
    return CLIFatalError(msg)

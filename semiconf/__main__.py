import json
import sys

from .cli import ArgParser, STDIN, read_input, unparsed_text_error
from .errors import CLIFatalError, CLIUsageError, ParseError
from .grammar import parse
from .lexical import lstrip_white_space
from .log import logger, setup_logging
from .values import to_data


def main(args: list[str] = None) -> None:
    '''Run the command line utility.'''
    try:
        parser = ArgParser()
        try:
            options = parser.parse_args(args)
        except CLIUsageError as e:
            parser.error(e.msg)  # Shows usage

        setup_logging(options['debug'], options['log_file'])
        file = options['file']

        try:
            text = read_input(file)
            try:
                remaining, pairs = parse(text)
            except ParseError as e:
                if file != STDIN:
                    e.filename = file
                logger.debug(f"Failed to parse: {e!r}")
                parser.quit(e.highlight(text))

            if options['strict'] and lstrip_white_space(remaining):
                raise unparsed_text_error(text, remaining)

        except CLIFatalError as e:
            parser.quit(e.msg)

        data = to_data(pairs, as_dict=options['as_dict'])
        print(json.dumps(data, indent=options['indent'], ensure_ascii=False))

    except KeyboardInterrupt:
        print()
        sys.exit(1)


if __name__ == '__main__':
    main()

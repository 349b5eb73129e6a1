__all__ = (
    'logger',
    'setup_logging',
)


import logging
from os import PathLike

from .constants import DEBUG, LOG_DATE_FORMAT, LOG_FORMAT


logger = logging.getLogger(__package__)


def setup_logging(debug: bool = DEBUG, file: PathLike = None) -> None:
    '''
    Configure the root logger for the command line tool.
    The library itself never installs handlers.

    :param debug: Log DEBUG records instead of only WARNING and above,
        defaults to :obj:`semiconf.constants.DEBUG`
    :type debug: :class:`bool`

    :param file: Log to this file instead of STDERR, optional
    :type file: :class:`PathLike`
    '''
    logging.basicConfig(
        level='DEBUG' if debug else 'WARNING',
        filename=file,
        filemode='w',
        datefmt=LOG_DATE_FORMAT,
        format=LOG_FORMAT,
        style='{',
    )

#!python
import argparse
import logging
import platform
import sys
import time

from . import __version__
from . import config as _config
from . import gomap as _gomap
from . import util as _util
from .annotate import main as annotate_main
from .annotate.constants import DEFAULTS as ANNOTATE_DEFAULTS
from .annotate.file_io import REFERENCE_DEFAULTS
from .constants import EXIT_OK, PROGNAME, TrackmapNamespace

SUBCOMMAND = TrackmapNamespace(ANNOTATE='annotate', GOMAP='gomap')
""":class:`TrackmapNamespace`: holds controlled vocabulary for the subcommands

- ``ANNOTATE``: annotate the profile table of a genome with the reference features
- ``GOMAP``: join the gene ontology slim mapping with translational efficiency tables
"""


def main(argv=None):
    """
    sets up the parser and checks the validity of command line args
    loads reference files and redirects into subcommand main functions

    Args:
        argv (list): List of arguments, defaults to command line arguments
    """
    if argv is None:  # need to do at run time or patching will not behave as expected
        argv = sys.argv[1:]
    start_time = int(time.time())

    parser = argparse.ArgumentParser(prog=PROGNAME, formatter_class=_config.CustomHelpFormatter)
    parser.add_argument(
        '-v', '--version', action='version', version='%(prog)s version ' + __version__,
        help='Outputs the version number')
    subp = parser.add_subparsers(dest='command', help='specifies which subprogram to use')
    subp.required = True
    required = {}  # hold required argument group by subparser command name
    optional = {}  # hold optional argument group by subparser command name
    for command in SUBCOMMAND.values():
        subparser = subp.add_parser(command, formatter_class=_config.CustomHelpFormatter, add_help=False)
        required[command] = subparser.add_argument_group('required arguments')
        optional[command] = subparser.add_argument_group('optional arguments')
        _config.augment_parser(['help', 'log', 'log_level'], optional[command])
        required[command].add_argument('-o', '--output', help='path to the output file', required=True, metavar='FILEPATH')

    # annotate
    required[SUBCOMMAND.ANNOTATE].add_argument(
        '-i', '--input', help='path to the profile table of the genome', required=True, type=_util.filepath,
        metavar='FILEPATH')
    _config.augment_parser(
        list(ANNOTATE_DEFAULTS.keys()) + list(REFERENCE_DEFAULTS.keys()), optional[SUBCOMMAND.ANNOTATE])

    # gomap
    required[SUBCOMMAND.GOMAP].add_argument(
        '--go_slim', help='path to the tab delimited gene ontology slim mapping', required=True,
        type=_util.filepath, metavar='FILEPATH')
    required[SUBCOMMAND.GOMAP].add_argument(
        '--efficiency', nargs=2, action='append', default=[], metavar=('NAME', 'FILEPATH'),
        help='name of the source followed by the path to its translational efficiency csv table. May be given '
        'more than once', required=True)

    args = TrackmapNamespace(**parser.parse_args(argv).__dict__)

    if args.command == SUBCOMMAND.GOMAP:
        for i, (source, filename) in enumerate(args.efficiency):
            try:
                args.efficiency[i] = (source, _util.filepath(filename))
            except TypeError:
                parser.error('--efficiency file does not exist: {}'.format(filename))

    log_conf = {'format': '{message}', 'style': '{', 'level': args.log_level}

    original_logging_handlers = logging.root.handlers[:]
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    if args.log:  # redirect stdout AND stderr to a log file
        log_conf['filename'] = args.log
    logging.basicConfig(**log_conf)

    _util.LOG('{}: {}'.format(PROGNAME, __version__))
    _util.LOG('hostname:', platform.node(), time_stamp=False)
    _util.log_arguments(args)

    command = args.command
    log_to_file = args.get('log', None)

    # discard any arguments needed for redirect/setup only
    for init_arg in ['command', 'log', 'log_level']:
        args.discard(init_arg)

    try:
        if command == SUBCOMMAND.ANNOTATE:
            annotate_main.main(**args, start_time=start_time)
        else:
            _gomap.main(**args, start_time=start_time)

        duration = int(time.time()) - start_time
        hours = duration - duration % 3600
        minutes = duration - hours - (duration - hours) % 60
        seconds = duration - hours - minutes
        _util.LOG(
            'run time (hh/mm/ss): {}:{:02d}:{:02d}'.format(hours // 3600, minutes // 60, seconds),
            time_stamp=False)
        _util.LOG('run time (s): {}'.format(duration), time_stamp=False)
        return EXIT_OK
    except Exception as err:
        if log_to_file:
            logging.exception(err)  # capture the error in the logging output file
        raise err
    finally:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        for handler in original_logging_handlers:
            logging.root.addHandler(handler)


if __name__ == '__main__':
    main()

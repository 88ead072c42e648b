import argparse

from .annotate.constants import DEFAULTS
from .annotate.file_io import REFERENCE_DEFAULTS
from .constants import cast_boolean, positive_int
from .util import filepath


class CustomHelpFormatter(argparse.ArgumentDefaultsHelpFormatter):
    """
    subclass the default help formatter to stop default printing for required arguments
    """

    def _format_args(self, action, default_metavar):
        if action.metavar is None:
            action.metavar = get_metavar(action.type)
        return super(CustomHelpFormatter, self)._format_args(action, default_metavar)

    def _get_help_string(self, action):
        if action.required:
            return action.help
        return super(CustomHelpFormatter, self)._get_help_string(action)

    def add_arguments(self, actions):
        # sort the arguments alphanumerically so they print in the help that way
        actions = sorted(actions, key=lambda x: getattr(x, 'option_strings'))
        super(CustomHelpFormatter, self).add_arguments(actions)


def get_metavar(arg_type):
    """
    For a given argument type, returns the string to be used for the metavar argument in add_argument

    Example:
        >>> get_metavar(bool)
        '{True,False}'
    """
    if arg_type in [bool, cast_boolean]:
        return '{True,False}'
    elif arg_type == float:
        return 'FLOAT'
    elif arg_type in [int, positive_int]:
        return 'INT'
    elif arg_type == filepath:
        return 'FILEPATH'
    return None


def augment_parser(arguments, parser):
    """
    Adds options to the argument parser. Separate function to facilitate the pipeline steps
    all having a similar look/feel

    Args:
        arguments (:class:`list` of :class:`str`): the names of the arguments to add
        parser (argparse.ArgumentParser): the parser (or argument group) to add them to
    """
    for arg in arguments:
        if arg == 'help':
            parser.add_argument('-h', '--help', action='help', help='show this help message and exit')
        elif arg == 'log':
            parser.add_argument('--log', help='redirect stdout to a log file', default=None)
        elif arg == 'log_level':
            parser.add_argument(
                '--log_level', help='level of logging to output', choices=['INFO', 'DEBUG'], default='INFO')
        elif arg in DEFAULTS:
            value = DEFAULTS[arg]
            cast_type = DEFAULTS.type(arg)
            parser.add_argument(
                '--{}'.format(arg), default=value, type=cast_type, help=DEFAULTS.define(arg),
                metavar=get_metavar(cast_type))
        elif arg in REFERENCE_DEFAULTS:
            parser.add_argument(
                '--{}'.format(arg), default=REFERENCE_DEFAULTS[arg], help=REFERENCE_DEFAULTS.define(arg),
                metavar='DIRPATH' if arg == 'reference_dir' else 'FILEPATH')
        else:
            raise KeyError('invalid argument', arg)

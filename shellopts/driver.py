import os
import sys

from . import log, shell
from .app_version import version
from .arguments import parser as argparse
from .exceptions import ExtensionError, ManifestError, UsageError
from .outcome import EX_BADUSAGE, EXECUTION_FAILURE, EXECUTION_SUCCESS
from .session import Session

logger = log.getLogger(__name__)

description = """
shellopts is a shell-style interpreter for the shell's runtime options. It
applies the option flags given on the command line, imports SHELLOPTS and
BASHOPTS from the environment, and then runs the `set`, `shopt` and `enable`
commands read from COMMAND or from standard input, one per line.
"""


def add_generic_args(parser):
    parser.add_argument('--help', action='help',
                        help='show this help message and exit')
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + version)
    parser.add_argument('--debug', action='store_true',
                        help='report extra information for debugging')
    parser.add_argument('--color', metavar='WHEN',
                        choices=['always', 'never', 'auto'], default='auto',
                        help=('show colored output (one of: %(choices)s; ' +
                              'default: %(default)s)'))
    parser.add_argument('--no-environment', action='store_false',
                        dest='import_environment',
                        help='ignore SHELLOPTS and BASHOPTS when starting')


def main_parser(registry, prog='shellopts'):
    parser = argparse.ArgumentParser(prog=prog, description=description,
                                     prefix_chars='-+')
    add_generic_args(parser)
    parser.add_argument('-c', metavar='COMMAND', dest='command',
                        help='read commands from COMMAND')
    argparse.add_option_args(parser, registry, exclude='co')
    parser.add_argument('args', nargs='*', metavar='ARG',
                        help='positional parameters')
    return parser


def run_lines(session, lines):
    status = EXECUTION_SUCCESS
    for line in lines:
        try:
            argv = shell.split(line)
        except ValueError as e:
            logger.error('syntax error: {}'.format(e))
            status = EX_BADUSAGE
            continue
        if argv:
            status = session.run(argv)
    return status


def main(argv=None, environ=None, stdin=None):
    try:
        session = Session(environ)
    except (ExtensionError, ManifestError) as e:
        sys.stderr.write('shellopts: error: {}\n'.format(e))
        return EXECUTION_FAILURE

    parser = main_parser(session.registry)
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        sys.stderr.write('{}: error: {}\n'.format(parser.prog, e))
        return EX_BADUSAGE

    log.init(color=args.color, debug=args.debug,
             environ=os.environ if environ is None else environ)

    status = session.startup(args.changes, args.import_environment)
    if status != EXECUTION_SUCCESS:
        return status
    session.positional = args.args

    if args.command is not None:
        lines = args.command.splitlines()
    else:
        lines = sys.stdin if stdin is None else stdin
    return run_lines(session, lines)

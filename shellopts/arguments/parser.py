from argparse import *
from collections import namedtuple

from ..exceptions import UsageError

_ArgumentParser = ArgumentParser

Change = namedtuple('Change', ['kind', 'enabled', 'key'])


class ChangeAction(Action):
    """Record a request to turn an option on (`-`) or off (`+`). Changes are
    kept in order so they can be applied the same way they were given."""

    def __init__(self, option_strings, dest, nargs=0, default=None,
                 required=False, metavar=None, help=None):
        super().__init__(option_strings, dest=dest, nargs=nargs,
                         default=[] if default is None else default,
                         required=required, metavar=metavar, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        changes = list(getattr(namespace, self.dest, None) or [])
        changes.append(self._change(option_string[0] == '-', values))
        setattr(namespace, self.dest, changes)


class FlagAction(ChangeAction):
    def __init__(self, option_strings, dest, key, **kwargs):
        super().__init__(option_strings, dest, **kwargs)
        self.key = key

    def _change(self, enabled, values):
        return Change('short', enabled, self.key)


class LongOptionAction(ChangeAction):
    def __init__(self, option_strings, dest, metavar='NAME', **kwargs):
        super().__init__(option_strings, dest, nargs='?', metavar=metavar,
                         **kwargs)

    def _change(self, enabled, values):
        return Change('long', enabled, values)


class ArgumentParser(_ArgumentParser):
    def __init__(self, *args, add_help=False, **kwargs):
        super().__init__(*args, add_help=add_help, **kwargs)
        self.register('action', 'flag', FlagAction)
        self.register('action', 'long_option', LongOptionAction)

    def _get_option_tuples(self, option_string):
        # Don't try to check prefixes for long options; this is similar to
        # `allow_abbrev=False`, except this doesn't break combined short
        # options.
        if any(option_string[:2] == i * 2 for i in self.prefix_chars):
            return []

        return super()._get_option_tuples(option_string)

    def error(self, message):
        raise UsageError(message)


def split_options(argv, takes_arg='o'):
    """Split `argv` into its leading options and the operands after them.
    Options stop at the first word not starting with `-` or `+`, or just
    after `--`. The operands are None if there weren't any and `--` wasn't
    given, so that callers can tell `set --` from a bare `set`."""
    argv = list(argv)
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == '--':
            return argv[:i], argv[i + 1:]
        if len(arg) < 2 or arg[0] not in '-+':
            break
        i += 1
        if ( arg[-1] in takes_arg and i < len(argv) and
             argv[i][:1] not in ('-', '+') ):
            i += 1
    return argv[:i], argv[i:] or None


def add_option_args(parser, registry, exclude='o'):
    """Add `-X`/`+X` for every lettered option in `registry`, along with
    `-o NAME`/`+o NAME`. Both store their requests in `changes`."""
    for i in registry.letters():
        if i in exclude:
            continue
        descriptor = registry.find_by_letter(i)
        parser.add_argument('-' + i, '+' + i, action='flag', key=i,
                            dest='changes',
                            help=(descriptor.name or '').replace('%', '%%'))
    parser.add_argument('-o', '+o', action='long_option', dest='changes',
                        help='turn the option NAME on or off')
    return parser


def set_parser(registry, prog='set'):
    return add_option_args(ArgumentParser(prog=prog, prefix_chars='-+'),
                           registry)

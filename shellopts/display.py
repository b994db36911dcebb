import enum
import sys

from . import accessor
from .flags import bool_to_flag

__all__ = ['format_option', 'HIDE_OFF', 'HIDE_ON', 'list_all',
           'show_option', 'show_option_unless_value', 'Style']

HIDE_OFF = 1 << 0
HIDE_ON = 1 << 1

_OPTFMT = '{:<23}\t{}'


class Style(enum.Enum):
    on_off = 'on_off'
    short = 'short'          # set -X
    set_o = 'set_o'          # set -o NAME
    shopt = 'shopt'          # shopt -s NAME
    help = 'help'
    help_long = 'help_long'
    help_full = 'help_full'

    def __repr__(self):
        return self.name

    def can_show(self, descriptor):
        if self is Style.short:
            return descriptor.letter is not None
        elif self in _help_styles:
            return True
        return descriptor.name is not None


_help_styles = frozenset([Style.help, Style.help_long, Style.help_full])


def _on_off(value):
    return 'on' if value > 0 else 'off'


def _flag(value):
    return bool_to_flag(value > 0)


def _format_help(d, value):
    if d.name is not None:
        line = _OPTFMT.format(d.name, _on_off(value))
        if d.letter is not None:
            line += '\t' + _flag(value) + d.letter
        return line
    elif d.letter is not None:
        return _flag(value) + d.letter
    return '(This option has no name)'


def _format_help_long(d, value):
    lines = ['', _format_help(d, value)]
    if d.read_only:
        lines += ['', '\t(This option is read-only.)']
    if d.help:
        lines += ['\t' + i for i in d.help.splitlines()]
    return '\n'.join(lines)


def _format_help_full(d, value):
    lines = [_format_help_long(d, value)]

    if d.name is not None:
        lines += ['', '\tDisplay:', '\t\tshopt -p ' + d.name]

    lines += ['', '\tQuery:']
    if d.name is not None:
        lines.append('\t\tshopt -q ' + d.name)
        if d.bashopts:
            lines.append('\t\t[[ :$BASHOPTS: = *:{}:* ]]'.format(d.name))
        if d.shellopts:
            lines.append('\t\t[[ :$SHELLOPTS: = *:{}:* ]]'.format(d.name))
    if d.letter is not None:
        lines.append("\t\t[[ $- = *'{}'* ]]".format(d.letter))

    if not d.read_only:
        for title, flag, shopt in (('Turn on', '-', 's'),
                                   ('Turn off', '+', 'u')):
            lines += ['', '\t{}:'.format(title)]
            if d.name is not None:
                lines.append('\t\tshopt -{} {}'.format(shopt, d.name))
                lines.append('\t\tset {}o {}'.format(flag, d.name))
            if d.letter is not None:
                lines.append('\t\tset {}{}'.format(flag, d.letter))

    return '\n'.join(lines)


_formatters = {
    Style.on_off: lambda d, v: _OPTFMT.format(d.name, _on_off(v)),
    Style.short: lambda d, v: 'set {}{}'.format(_flag(v), d.letter),
    Style.set_o: lambda d, v: 'set {}o {}'.format(_flag(v), d.name),
    Style.shopt: lambda d, v: 'shopt -{} {}'.format(
        's' if v > 0 else 'u', d.name
    ),
    Style.help: _format_help,
    Style.help_long: _format_help_long,
    Style.help_full: _format_help_full,
}


def format_option(descriptor, access, style):
    return _formatters[style](descriptor, accessor.read(descriptor, access))


def show_option(descriptor, access, style, out=None):
    out = out or sys.stdout
    out.write(format_option(descriptor, access, style) + '\n')


def _hidden_by_value(value, hide_mask):
    if value < 0:
        return False
    return bool(hide_mask & (HIDE_ON if value > 0 else HIDE_OFF))


def show_option_unless_value(descriptor, access, hide_mask, style, out=None):
    if _hidden_by_value(accessor.read(descriptor, access), hide_mask):
        return False
    show_option(descriptor, access, style, out)
    return True


def list_all(registry, access, hide_mask=0, style=Style.on_off, out=None):
    """Show every option visible to `access` that `style` can display,
    skipping those whose current value is in `hide_mask`. Returns the number
    of options shown."""
    shown = 0
    for i in registry.enumerate(access):
        if not style.can_show(i):
            continue
        if show_option_unless_value(i, access, hide_mask, style, out):
            shown += 1
    return shown

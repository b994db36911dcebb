from .builtin import builtin, logger, report
from ..access import Access
from ..arguments.parser import ArgumentParser
from ..display import HIDE_OFF, HIDE_ON, list_all, show_option, Style
from ..exceptions import UsageError
from ..objutils import memoize
from ..outcome import (EX_BADUSAGE, EXECUTION_FAILURE, EXECUTION_SUCCESS,
                       Outcome)


@memoize
def shopt_parser():
    parser = ArgumentParser(prog='shopt')
    parser.add_argument('-s', action='store_true', dest='set',
                        help='enable each NAME')
    parser.add_argument('-u', action='store_true', dest='unset',
                        help='disable each NAME')
    parser.add_argument('-q', action='store_true', dest='quiet',
                        help='suppress output')
    parser.add_argument('-p', action='store_true', dest='reusable',
                        help='print each option in a reusable form')
    parser.add_argument('-o', action='store_true', dest='set_o',
                        help='restrict NAMEs to those defined for `set -o`')
    parser.add_argument('names', nargs='*', metavar='NAME')
    return parser


def _find(registry, name, access):
    descriptor = registry.find_by_name(name)
    if descriptor is not None and access.hidden(descriptor):
        return None
    return descriptor


def _change(context, names, access, value):
    status = EXECUTION_SUCCESS
    for name in names:
        descriptor = _find(context.registry, name, access)
        result = context.registry.write(descriptor, access, value)
        if result.bad:
            report('shopt', name, result)
            status = result.exit_status
    return status


def _query(context, names, access, style, quiet):
    registry = context.registry
    status = EXECUTION_SUCCESS
    for name in names:
        descriptor = _find(registry, name, access)
        if descriptor is None:
            report('shopt', name, Outcome.not_found)
            status = Outcome.not_found.exit_status
            continue

        if ( registry.read(descriptor, access) <= 0 and
             status == EXECUTION_SUCCESS ):
            status = EXECUTION_FAILURE
        if not quiet:
            show_option(descriptor, access, style, context.out)
    return status


@builtin('shopt')
def shopt_builtin(context, args):
    try:
        ns = shopt_parser().parse_args(args)
    except UsageError as e:
        logger.error('shopt: {}'.format(e))
        return EX_BADUSAGE

    if ns.set and ns.unset:
        logger.error('shopt: cannot set and unset shell options ' +
                     'simultaneously')
        return EX_BADUSAGE

    access = Access.set_o if ns.set_o else Access.shopt
    if ns.reusable:
        style = Style.set_o if ns.set_o else Style.shopt
    else:
        style = Style.on_off

    if not ns.names:
        if not ns.quiet:
            hide_mask = (HIDE_OFF if ns.set else HIDE_ON if ns.unset else 0)
            list_all(context.registry, access, hide_mask, style, context.out)
        return EXECUTION_SUCCESS

    if ns.set or ns.unset:
        return _change(context, ns.names, access, ns.set)
    return _query(context, ns.names, access, style, ns.quiet)

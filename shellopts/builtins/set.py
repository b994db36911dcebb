from .builtin import builtin, logger, report
from .. import shell
from ..access import Access
from ..arguments.parser import set_parser, split_options
from ..display import list_all, Style
from ..exceptions import UsageError
from ..flags import bool_to_flag
from ..outcome import EX_BADUSAGE, EXECUTION_SUCCESS


def _lookup(registry, change, short_access, long_access):
    if change.kind == 'short':
        return registry.find_by_letter(change.key), short_access
    return registry.find_by_name(change.key), long_access


def apply_changes(context, prog, changes, short_access=Access.short,
                  long_access=Access.set_o):
    """Apply a list of `Change`s in order, stopping at the first one that
    fails. A bare `-o` lists the options as `NAME on|off`; a bare `+o` lists
    them as the `set` commands that would recreate them."""
    registry = context.registry
    for i in changes:
        if i.kind == 'long' and i.key is None:
            list_all(registry, long_access,
                     style=Style.on_off if i.enabled else Style.set_o,
                     out=context.out)
            continue

        descriptor, access = _lookup(registry, i, short_access, long_access)
        if descriptor is not None and access.hidden(descriptor):
            descriptor = None

        result = registry.write(descriptor, access, i.enabled)
        if result.bad:
            subject = (bool_to_flag(i.enabled) + i.key if i.kind == 'short'
                       else i.key)
            report(prog, subject, result)
            return result.exit_status
    return EXECUTION_SUCCESS


def list_variables(context):
    variables = context.registry.variables
    for name in sorted(variables):
        context.out.write('{}={}\n'.format(name, shell.quote(variables[name])))


@builtin('set')
def set_builtin(context, args):
    if not args:
        list_variables(context)
        return EXECUTION_SUCCESS

    options, operands = split_options(args)
    try:
        ns = set_parser(context.registry).parse_args(options)
    except UsageError as e:
        logger.error('set: {}'.format(e))
        return EX_BADUSAGE

    status = apply_changes(context, 'set', ns.changes)
    if status == EXECUTION_SUCCESS and operands is not None:
        context.positional = operands
    return status

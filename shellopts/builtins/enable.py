from .builtin import builtin, logger
from ..arguments.parser import ArgumentParser
from ..exceptions import ExtensionError, ManifestError, UsageError
from ..extension import Extension, find_extension
from ..objutils import memoize
from ..outcome import EX_BADUSAGE, EXECUTION_FAILURE, EXECUTION_SUCCESS


@memoize
def enable_parser():
    parser = ArgumentParser(prog='enable')
    parser.add_argument('-f', metavar='FILE', dest='filename',
                        help='load the options for NAME from FILE')
    parser.add_argument('-d', action='store_true', dest='delete',
                        help='remove the options loaded for each NAME')
    parser.add_argument('names', nargs='*', metavar='NAME')
    return parser


def _load(context, filename, name):
    if filename:
        ext = Extension.from_manifest(filename, name)
    else:
        ext = find_extension(name)
    context.load_extension(ext)


@builtin('enable')
def enable_builtin(context, args):
    try:
        ns = enable_parser().parse_args(args)
    except UsageError as e:
        logger.error('enable: {}'.format(e))
        return EX_BADUSAGE

    if ns.filename and ns.delete:
        logger.error('enable: cannot use -f and -d together')
        return EX_BADUSAGE

    if not ns.names:
        if ns.filename or ns.delete:
            logger.error('enable: expected an extension name')
            return EX_BADUSAGE
        for i in context.extensions:
            context.out.write('enable {}\n'.format(i))
        return EXECUTION_SUCCESS

    status = EXECUTION_SUCCESS
    for name in ns.names:
        try:
            if ns.delete:
                context.unload_extension(name)
            else:
                _load(context, ns.filename, name)
        except (ExtensionError, ManifestError, OSError) as e:
            logger.error('enable: {}'.format(e))
            status = EXECUTION_FAILURE
    return status

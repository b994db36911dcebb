import os
import sys

from . import log
from .access import Access
from .builtins import builtin, init as init_builtins
from .builtins.set import apply_changes
from .catalog import builtin_extension
from .environ import inherited_mirrors, initialize
from .exceptions import ExtensionError
from .flags import which_set_flags
from .outcome import EX_NOTFOUND, EXECUTION_SUCCESS
from .registry import Registry
from .variables import Variables

__all__ = ['Session']

logger = log.getLogger(__name__)


class Session:
    """A shell's option state: the registry and the variables it mirrors into,
    the loaded extensions, and the builtins that operate on them."""

    def __init__(self, environ=None, out=None, catalog=True):
        self.registry = Registry(Variables.from_environ(
            os.environ if environ is None else environ
        ))
        # Loading options rewrites the mirror variables, so remember what we
        # inherited first.
        self._inherited = inherited_mirrors(self.registry)
        self.extensions = {}
        self.positional = []
        self._out = out

        init_builtins()
        self.builtins = builtin.builtins.bind(self)
        if catalog:
            self.load_extension(builtin_extension(self.registry))

    @property
    def out(self):
        return self._out or sys.stdout

    @property
    def variables(self):
        return self.registry.variables

    @property
    def flags(self):
        return which_set_flags(self.registry)

    def startup(self, changes=(), import_environment=True):
        initialize(self.registry, import_environment, self._inherited)
        return apply_changes(self, 'shellopts', changes, Access.argv,
                             Access.argv)

    def load_extension(self, extension):
        if extension.name in self.extensions:
            raise ExtensionError('{}: extension already loaded'
                                 .format(extension.name))
        extension.load(self.registry)
        self.extensions[extension.name] = extension

    def unload_extension(self, name):
        try:
            extension = self.extensions.pop(name)
        except KeyError:
            raise ExtensionError('{}: extension not loaded'.format(name))
        extension.unload(self.registry)

    def run(self, argv):
        if not argv:
            return EXECUTION_SUCCESS

        name, args = argv[0], list(argv[1:])
        try:
            fn = self.builtins[name]
        except KeyError:
            logger.error('{}: command not found'.format(name))
            return EX_NOTFOUND
        return fn(args)

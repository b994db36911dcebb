import importlib
import pkgutil

from ..objutils import memoize


@memoize
def init():
    # Each command module registers itself with `builtin.builtins` when it's
    # imported.
    for _, name, _ in pkgutil.iter_modules(__path__, '.'):
        importlib.import_module(name, __package__)

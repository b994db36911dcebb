import functools

from .. import log
from ..outcome import Outcome

__all__ = ['builtin', 'builtins', 'Builtins', 'report']

logger = log.getLogger(__name__)

_messages = {
    Outcome.not_found: 'invalid option name',
    Outcome.read_only: 'cannot change read-only option',
    Outcome.forbidden: 'option cannot be changed',
    Outcome.bad_value: 'invalid value',
    Outcome.duplicate: 'option already exists',
}


class Builtins:
    def __init__(self):
        self._builtins = {}

    def add_builtin(self, name, value):
        self._builtins[name] = value

    def __contains__(self, name):
        return name in self._builtins

    def bind(self, context):
        return {k: v.bind(context=context) for k, v in self._builtins.items()}


builtins = Builtins()


class _Binder:
    def __init__(self, fn):
        self._fn = fn

    def bind(self, context):
        @functools.wraps(self._fn)
        def wrapper(*args, **kwargs):
            return self._fn(context, *args, **kwargs)
        return wrapper


def builtin(name=None):
    def decorator(fn):
        builtins.add_builtin(name or fn.__name__, _Binder(fn))
        fn._builtin_name = name or fn.__name__
        return fn
    return decorator


def report(prog, subject, outcome):
    if outcome == Outcome.not_found and subject[:1] in ('-', '+'):
        message = 'invalid option'
    else:
        message = _messages[outcome]
    logger.error('{}: {}: {}'.format(prog, subject, message))

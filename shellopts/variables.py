import os

from .exceptions import ReadOnlyVariableError

__all__ = ['Variables']


class Variables(dict):
    """The shell's variables. This remembers which variables were inherited
    from the process environment and haven't been assigned since, which are
    read-only, and what has changed since startup."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.initial = dict(self)
        self.readonly = set()
        self._changes = {}

    @classmethod
    def from_environ(cls, environ=os.environ):
        return cls(environ)

    @property
    def changes(self):
        return dict(self._changes)

    def imported(self, name):
        return name in self.initial and name not in self._changes

    def bind(self, name, value, force=False):
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError('expected a string')
        if not force and name in self.readonly:
            raise ReadOnlyVariableError('{}: readonly variable'.format(name))
        super().__setitem__(name, value)
        self._changes[name] = value

    def set_readonly(self, name, readonly=True):
        if readonly:
            self.readonly.add(name)
        else:
            self.readonly.discard(name)

    def reset(self):
        super().clear()
        super().update(self.initial)
        self.readonly.clear()
        self._changes = {}

    def __setitem__(self, key, value):
        self.bind(key, value)

    def __delitem__(self, key):
        if key in self.readonly:
            raise ReadOnlyVariableError('{}: readonly variable'.format(key))
        super().__delitem__(key)
        self._changes[key] = None

    def pop(self, key, *args):
        if key in self:
            value = self[key]
            del self[key]
            return value
        return super().pop(key, *args)

    def setdefault(self, key, default):
        if key not in self:
            self[key] = default
            return default
        return self[key]

    def update(self, *args, **kwargs):
        for k, v in dict(*args, **kwargs).items():
            self[k] = v

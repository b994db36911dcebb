import enum

__all__ = ['Access']


class Access(enum.Enum):
    """Why an option is being read or written. This decides both which
    options are visible (e.g. when listing them) and which writes are
    permitted."""

    # Unrestricted; used by code that wants to see and touch everything.
    any = 'any'
    # User-initiated changes.
    short = 'short'      # set -X
    set_o = 'set_o'      # set -o NAME
    shopt = 'shopt'      # shopt -s NAME
    # Startup.
    argv = 'argv'        # parsed from the command line
    environ = 'environ'  # imported from SHELLOPTS/BASHOPTS
    # Privileged restoration.
    unwind = 'unwind'    # restored when a scope exits
    reinit = 'reinit'    # full reset to the defaults
    unload = 'unload'    # an extension is being removed
    # Reading values to build the mirror variables.
    mirror = 'mirror'

    def __repr__(self):
        return self.name

    @property
    def privileged(self):
        return self in _privileged

    @property
    def startup(self):
        return self in _startup or self.privileged

    @property
    def rank(self):
        if self.privileged:
            return 2
        if self.startup:
            return 1
        return 0

    def outranks(self, rhs):
        return self.rank > rhs.rank

    def hidden(self, descriptor):
        if self is Access.short:
            return descriptor.letter is None
        elif self is Access.set_o:
            return descriptor.hide_set_o
        elif self is Access.shopt:
            return descriptor.hide_shopt
        return False


_privileged = frozenset([Access.any, Access.unwind, Access.reinit,
                         Access.unload])
_startup = frozenset([Access.argv, Access.environ])

import enum

__all__ = ['EX_BADASSIGN', 'EX_BADUSAGE', 'EX_NOTFOUND', 'EXECUTION_FAILURE',
           'EXECUTION_SUCCESS', 'Outcome']

EXECUTION_SUCCESS = 0
EXECUTION_FAILURE = 1
EX_BADUSAGE = 2
EX_NOTFOUND = 127
# Assignment errors are reported with the generic failure status so that the
# value always fits in a process's exit status.
EX_BADASSIGN = 1


class Outcome(enum.Enum):
    # Results from attempting to set values.
    changed = 'changed'
    unchanged = 'unchanged'      # New value is the same as the old value.
    ignored = 'ignored'          # Change request silently discarded.
    not_found = 'not_found'      # No option with that name or letter.
    read_only = 'read_only'      # Change never possible.
    forbidden = 'forbidden'      # Change not permitted after startup.
    bad_value = 'bad_value'      # New value not valid for this option.

    # Results from adding or removing options.
    duplicate = 'duplicate'

    def __repr__(self):
        return self.name

    @property
    def good(self):
        return self in _good_outcomes

    @property
    def bad(self):
        return not self.good

    @property
    def exit_status(self):
        return _exit_status[self]


_good_outcomes = frozenset([Outcome.changed, Outcome.unchanged,
                            Outcome.ignored])

_exit_status = {
    Outcome.changed: EXECUTION_SUCCESS,
    Outcome.unchanged: EXECUTION_SUCCESS,
    Outcome.ignored: EXECUTION_SUCCESS,
    Outcome.not_found: EX_BADUSAGE,
    Outcome.read_only: EX_BADASSIGN,
    Outcome.forbidden: EX_BADASSIGN,
    Outcome.bad_value: EX_BADASSIGN,
    Outcome.duplicate: EXECUTION_FAILURE,
}

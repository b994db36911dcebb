from contextlib import contextmanager

from .access import Access

__all__ = ['bool_to_flag', 'change_flag', 'FLAG_ERROR', 'FLAG_OFF',
           'FLAG_ON', 'flag_to_bool', 'get_current_flags', 'saved_flags',
           'set_current_flags', 'valid_flag', 'which_set_flags']

FLAG_ON = '-'
FLAG_OFF = '+'
FLAG_ERROR = -1


def valid_flag(f):
    return f in (FLAG_ON, FLAG_OFF)


def bool_to_flag(b):
    return FLAG_ON if b else FLAG_OFF


def flag_to_bool(f):
    if not valid_flag(f):
        raise ValueError('expected {!r} or {!r}; but got {!r}'
                         .format(FLAG_ON, FLAG_OFF, f))
    return f == FLAG_ON


def change_flag(registry, letter, on_or_off, access=Access.short):
    """Turn the option for `letter` on or off, returning its old value, or
    `FLAG_ERROR` if there's no such option or it refused to change."""
    descriptor = registry.find_by_letter(letter)
    if descriptor is None:
        return FLAG_ERROR

    old_value = registry.read(descriptor, access)
    result = registry.write(descriptor, access, flag_to_bool(on_or_off))
    return old_value if result.good else FLAG_ERROR


def which_set_flags(registry, extra=''):
    """Get the letters of every lettered option that's currently on, as shown
    by `$-`. `extra` holds letters for states the registry doesn't own, like
    `c` when running a command string."""
    return ''.join(
        i for i in registry.letters()
        if registry.read(registry.find_by_letter(i), Access.short) > 0
    ) + extra


def get_current_flags(registry):
    return {i: registry.read(registry.find_by_letter(i), Access.unwind)
            for i in registry.letters()}


def set_current_flags(registry, flags):
    if flags is None:
        return
    for letter, value in flags.items():
        registry.write(registry.find_by_letter(letter), Access.unwind, value)


@contextmanager
def saved_flags(registry):
    flags = get_current_flags(registry)
    try:
        yield flags
    finally:
        set_current_flags(registry, flags)

from .descriptor import INVALID_VALUE
from .outcome import Outcome

__all__ = ['read', 'write']


def read(descriptor, access):
    if descriptor is None:
        return INVALID_VALUE
    if descriptor.read_hook:
        return descriptor.read_hook(descriptor, access)
    return descriptor.storage.value


def write(descriptor, access, value, on_changed=None):
    """Try to set an option's value on behalf of `access`, returning an
    `Outcome`. If the option participates in any mirror variables and its
    value changed, `on_changed` is called with the descriptor so that the
    mirrors can be regenerated."""

    if descriptor is None:
        return Outcome.not_found

    if descriptor.write_hook:
        result = descriptor.write_hook(descriptor, access, value)
        # Only an actual change needs the mirrors updated; not `unchanged` or
        # `ignored`.
        if result == Outcome.changed and descriptor.mirrored and on_changed:
            on_changed(descriptor)
        return result

    try:
        value = int(value)
    except (TypeError, ValueError):
        return Outcome.bad_value

    if descriptor.read_only and not access.privileged:
        return Outcome.read_only
    if descriptor.forbid_change and not access.startup:
        if value == read(descriptor, access):
            return Outcome.unchanged
        elif descriptor.ignore_change:
            return Outcome.ignored
        return Outcome.forbidden
    if descriptor.ignore_change:
        return Outcome.ignored

    old_value = descriptor.storage.value
    descriptor.storage.value = value
    if old_value != value and descriptor.mirrored and on_changed:
        on_changed(descriptor)
    return Outcome.changed

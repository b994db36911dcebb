import importlib_resources

from .extension import Extension
from .manifest import Hooks, load_manifest
from .outcome import Outcome

__all__ = ['builtin_extension', 'builtin_hooks']


def _as_bool(value):
    try:
        return bool(int(value))
    except (TypeError, ValueError):
        return None


def builtin_hooks(registry):
    def write_editing_mode(descriptor, access, value):
        # `emacs` and `vi` are mutually exclusive; turning one on turns the
        # other off.
        value = _as_bool(value)
        if value is None:
            return Outcome.bad_value
        if value == bool(descriptor.storage.value):
            return Outcome.unchanged

        descriptor.storage.value = int(value)
        if value:
            other = registry.find_by_name(
                'vi' if descriptor.name == 'emacs' else 'emacs'
            )
            if other is not None:
                other.storage.value = 0
        return Outcome.changed

    def write_one_way(descriptor, access, value):
        value = _as_bool(value)
        if value is None:
            return Outcome.bad_value
        if value == bool(descriptor.storage.value):
            return Outcome.unchanged
        if not value and not access.startup:
            return Outcome.forbidden

        descriptor.storage.value = int(value)
        return Outcome.changed

    return {
        'editing_mode': Hooks(write=write_editing_mode),
        'one_way': Hooks(write=write_one_way),
    }


def builtin_extension(registry):
    source = importlib_resources.files(__package__) / 'data' / 'options.yml'
    with source.open() as f:
        name, descriptors = load_manifest(f, builtin_hooks(registry))
    return Extension(name or 'builtin', descriptors)

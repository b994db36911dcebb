import importlib_metadata as metadata
import os

from . import log
from .access import Access
from .exceptions import ExtensionError
from .manifest import load_manifest
from .objutils import memoize
from .outcome import Outcome
from .registry import blocked_signals

__all__ = ['Extension', 'find_extension', 'list_extensions']

logger = log.getLogger(__name__)


class Extension:
    """A group of options that are added to and removed from a registry
    together, e.g. by a loadable module."""

    def __init__(self, name, descriptors):
        self.name = name
        self.descriptors = list(descriptors)

    @classmethod
    def from_manifest(cls, path, name=None, hooks=None):
        manifest_name, descriptors = load_manifest(path, hooks)
        if name is None:
            name = manifest_name or os.path.splitext(
                os.path.basename(path)
            )[0]
        return cls(name, descriptors)

    def load(self, registry):
        added = []
        with blocked_signals():
            for i in self.descriptors:
                result = registry.register(i)
                if result == Outcome.duplicate:
                    for j in reversed(added):
                        registry.deregister(j)
                    raise ExtensionError(
                        '{}: option {!r} conflicts with an existing option'
                        .format(self.name, i.key)
                    )
                elif result == Outcome.changed:
                    added.append(i)

        # Options that start out enabled need to appear in the mirrors.
        for i in added:
            if i.mirrored and registry.read(i, Access.any) > 0:
                registry.synchronize(i)

        logger.debug('loaded extension {!r} ({} options)'
                     .format(self.name, len(added)))
        return added

    def unload(self, registry):
        with blocked_signals():
            for i in self.descriptors:
                registry.deregister(i)
        logger.debug('unloaded extension {!r}'.format(self.name))

    def __repr__(self):
        return '<Extension({!r})>'.format(self.name)


@memoize
def list_extensions():
    return {i.name: i for i in
            metadata.entry_points(group='shellopts.extensions')}


def find_extension(name):
    try:
        entry_point = list_extensions()[name]
    except KeyError:
        raise ExtensionError('{}: extension not found'.format(name))

    try:
        ext = entry_point.load()
        if not isinstance(ext, Extension) and callable(ext):
            ext = ext()
    except Exception as e:
        raise ExtensionError('{}: unable to load extension: {}'
                             .format(name, e)) from e

    if not isinstance(ext, Extension):
        raise ExtensionError('{}: not an extension'.format(name))
    return ext

import enum
import re

from . import log
from .access import Access
from .descriptor import OptionFlag

__all__ = ['deserialize', 'inherited_mirrors', 'initialize', 'Mirror',
           'serialize']

logger = log.getLogger(__name__)

_list_shaped = re.compile(r'^[^\s=]*$')


class Mirror(enum.Enum):
    shellopts = ('SHELLOPTS', OptionFlag.shellopts)
    bashopts = ('BASHOPTS', OptionFlag.bashopts)

    def __init__(self, variable, flag):
        self.variable = variable
        self.flag = flag

    def __repr__(self):
        return self.name

    def participates(self, descriptor):
        return descriptor.name is not None and self.flag in descriptor.flags

    def hidden(self, descriptor):
        return not self.participates(descriptor)


def serialize(registry, mirror):
    """Write the names of every enabled option in `mirror` to its variable,
    e.g. `SHELLOPTS=errexit:noglob`, and return the new value."""
    value = ':'.join(
        i.name for i in registry.enumerate(mirror.hidden)
        if registry.read(i, Access.mirror) > 0
    )

    variables = registry.variables
    variables.bind(mirror.variable, value, force=True)
    variables.set_readonly(mirror.variable)
    return value


def _import_list(registry, mirror, value):
    if not _list_shaped.match(value):
        logger.debug('{} does not look like a list of options; ignoring'
                     .format(mirror.variable))
        return []

    enabled = []
    for name in value.split(':'):
        if not name:
            continue
        descriptor = registry.find_by_name(name)
        if descriptor is None or mirror.hidden(descriptor):
            logger.debug('{}: ignoring unknown option {!r}'
                         .format(mirror.variable, name))
            continue

        result = registry.write(descriptor, Access.environ, True)
        if result.bad:
            logger.debug('{}: unable to enable {!r} ({})'
                         .format(mirror.variable, name, result.name))
            continue
        enabled.append(descriptor)
    return enabled


def deserialize(registry, mirror):
    """Enable every option listed in `mirror`'s variable, if the variable was
    inherited from the environment. Unknown options and options that refuse
    to change are skipped silently, so that environments written by other
    versions still work. Returns the list of options that were enabled."""
    variables = registry.variables
    if not variables.imported(mirror.variable):
        return []
    return _import_list(registry, mirror, variables[mirror.variable])


def inherited_mirrors(registry):
    """Get the values of the mirror variables inherited from the environment.
    Registering or changing a mirrored option rewrites these variables, so
    take note of them before doing either."""
    return {i: registry.variables[i.variable] for i in Mirror
            if registry.variables.imported(i.variable)}


def initialize(registry, import_environment=True, inherited=None):
    if import_environment:
        if inherited is None:
            inherited = inherited_mirrors(registry)
        for mirror, value in inherited.items():
            _import_list(registry, mirror, value)

    for mirror in Mirror:
        serialize(registry, mirror)

import yaml
from collections import namedtuple

from .descriptor import OptionDescriptor
from .exceptions import ManifestError
from .iterutils import ismapping, listify

__all__ = ['Hooks', 'load_manifest', 'parse_manifest']

Hooks = namedtuple('Hooks', ['read', 'write'], defaults=[None, None])

_option_fields = {'name', 'letter', 'default', 'flags', 'help', 'hooks'}


def _parse_option(data, hooks, where):
    if not ismapping(data):
        raise ManifestError('{}: expected a mapping'.format(where))
    unknown = set(data) - _option_fields
    if unknown:
        raise ManifestError('{}: unknown field(s) {}'.format(
            where, ', '.join(repr(i) for i in sorted(unknown))
        ))

    kwargs = {k: v for k, v in data.items() if k != 'hooks'}
    if 'flags' in kwargs:
        kwargs['flags'] = listify(kwargs['flags'])
    if 'default' in kwargs and isinstance(kwargs['default'], bool):
        kwargs['default'] = int(kwargs['default'])

    hook_name = data.get('hooks')
    if hook_name is not None:
        try:
            h = hooks[hook_name]
        except KeyError:
            raise ManifestError('{}: unknown hooks {!r}'
                                .format(where, hook_name))
        kwargs.update(read_hook=h.read, write_hook=h.write)

    try:
        return OptionDescriptor(**kwargs)
    except (TypeError, ValueError) as e:
        raise ManifestError('{}: {}'.format(where, e))


def parse_manifest(data, hooks=None, filename='<manifest>'):
    """Build option descriptors from manifest data, which is either a list of
    options or a mapping with a `name` and a list of `options`. Returns the
    manifest's name (or None) and its descriptors."""
    hooks = hooks or {}

    name = None
    if ismapping(data):
        name = data.get('name')
        data = data.get('options', [])
    if not isinstance(data, list):
        raise ManifestError('{}: expected a list of options'.format(filename))

    descriptors = [
        _parse_option(item, hooks, '{}: option {}'.format(filename, i))
        for i, item in enumerate(data)
    ]
    return name, descriptors


def load_manifest(stream_or_path, hooks=None):
    if isinstance(stream_or_path, str):
        with open(stream_or_path) as f:
            return load_manifest(f, hooks)

    filename = getattr(stream_or_path, 'name', '<manifest>')
    try:
        data = yaml.safe_load(stream_or_path)
    except yaml.YAMLError as e:
        raise ManifestError('{}: {}'.format(filename, e))
    return parse_manifest(data, hooks, filename)

from collections.abc import Iterable, Mapping

__all__ = ['isiterable', 'ismapping', 'listify']


def isiterable(thing):
    return (isinstance(thing, Iterable) and not isinstance(thing, str) and
            not ismapping(thing))


def ismapping(thing):
    return isinstance(thing, Mapping)


def listify(thing):
    """Turn a manifest field that may be a single value, a list of values, or
    absent into a new list."""
    if thing is None:
        return []
    elif isiterable(thing):
        return list(thing)
    return [thing]

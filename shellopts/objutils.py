import functools

from .iterutils import isiterable

__all__ = ['hashify', 'memoize', 'memoize_method']


def hashify(thing):
    if isinstance(thing, dict):
        return tuple((hashify(k), hashify(v)) for k, v in thing.items())
    elif isiterable(thing):
        return tuple(hashify(i) for i in thing)
    return thing


def _cache_key(args, kwargs):
    return hashify(args), hashify(kwargs)


def memoize(fn):
    cache = {}

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        key = _cache_key(args, kwargs)
        if key not in cache:
            cache[key] = fn(*args, **kwargs)
        return cache[key]

    wrapper.reset = cache.clear
    return wrapper


def memoize_method(fn):
    """Like `memoize`, but the cache lives on the instance. Call
    `Class.method.invalidate(instance)` to drop it, e.g. when the data a cached
    view was derived from has changed."""

    cachename = '_memoize_cache_{}'.format(fn.__name__)

    def get_cache(self):
        try:
            return getattr(self, cachename)
        except AttributeError:
            cache = {}
            setattr(self, cachename, cache)
            return cache

    @functools.wraps(fn)
    def wrapper(self, *args, **kwargs):
        cache = get_cache(self)
        key = _cache_key(args, kwargs)
        if key not in cache:
            cache[key] = fn(self, *args, **kwargs)
        return cache[key]

    def invalidate(self):
        get_cache(self).clear()

    wrapper.invalidate = invalidate
    return wrapper

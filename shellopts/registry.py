import signal
from bisect import bisect_left
from contextlib import contextmanager

from . import accessor, environ, log
from .access import Access
from .exceptions import RegistryConsistencyError
from .objutils import memoize_method
from .outcome import Outcome
from .variables import Variables

__all__ = ['blocked_signals', 'Registry']

logger = log.getLogger(__name__)


@contextmanager
def blocked_signals():
    # Signal handlers may themselves register or deregister options, so keep
    # them from running while the indexes are half-updated.
    if not hasattr(signal, 'pthread_sigmask'):
        yield
        return

    old = signal.pthread_sigmask(signal.SIG_BLOCK, signal.valid_signals())
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, old)


class Registry:
    """The live set of option descriptors. Named options are kept sorted by
    name so they can be binary-searched; lettered options are also indexed by
    their letter. Options without a name are listed after all the named ones,
    ordered by letter, and options with neither a name nor a letter come last
    in the order they were registered."""

    def __init__(self, variables=None):
        self.variables = Variables() if variables is None else variables
        self._names = []
        self._named = []
        self._unnamed = []
        self._letters = {}

    def _search(self, name):
        i = bisect_left(self._names, name)
        return i, i < len(self._names) and self._names[i] == name

    def _check_claim(self, index, name):
        # The sorted name list and the descriptors it points to must agree
        # about who owns each name.
        if self._named[index].name == name:
            return True
        msg = 'registry entry at {!r} claims the name {!r}'.format(
            name, self._named[index].name
        )
        if __debug__:
            raise RegistryConsistencyError(msg)
        logger.error(msg)
        return False

    def register(self, descriptor):
        with blocked_signals():
            return self._register(descriptor)

    def _register(self, descriptor):
        name, letter = descriptor.name, descriptor.letter
        have_name = have_letter = False

        if name is not None:
            index, match = self._search(name)
            if match:
                if ( not self._check_claim(index, name) or
                     self._named[index] is not descriptor ):
                    return Outcome.duplicate
                have_name = True
        else:
            have_name = any(i is descriptor for i in self._unnamed)

        if letter is not None:
            old = self._letters.get(letter)
            if old is not None:
                if old is not descriptor:
                    return Outcome.duplicate
                have_letter = True
        else:
            have_letter = True

        if have_name and have_letter:
            return Outcome.unchanged

        if not have_name:
            if name is not None:
                self._names.insert(index, name)
                self._named.insert(index, descriptor)
            else:
                self._unnamed.append(descriptor)
        if not have_letter:
            self._letters[letter] = descriptor
            Registry.letters.invalidate(self)

        logger.debug('registered option {!r}'.format(descriptor))
        return Outcome.changed

    def deregister(self, descriptor):
        with blocked_signals():
            removed = self._deregister(descriptor)

        if removed:
            logger.debug('deregistered option {!r}'.format(descriptor))
            # Regenerate any mirror variables that listed this option.
            if ( descriptor.mirrored and
                 accessor.read(descriptor, Access.unload) > 0 ):
                self.synchronize(descriptor)
            return Outcome.changed
        return Outcome.unchanged

    def _deregister(self, descriptor):
        removed = False

        letters = [k for k, v in self._letters.items() if v is descriptor]
        for i in letters:
            del self._letters[i]
        if letters:
            Registry.letters.invalidate(self)
            removed = True

        for entries in (self._named, self._unnamed):
            indices = [i for i, v in enumerate(entries) if v is descriptor]
            for i in reversed(indices):
                del entries[i]
                if entries is self._named:
                    del self._names[i]
            removed = removed or bool(indices)

        return removed

    def find_by_name(self, name):
        index, match = self._search(name)
        return self._named[index] if match else None

    def find_by_letter(self, letter):
        return self._letters.get(letter)

    @memoize_method
    def letters(self):
        return ''.join(sorted(self._letters))

    def _ordered(self):
        lettered = sorted((i for i in self._unnamed if i.letter is not None),
                          key=lambda i: i.letter)
        return (self._named + lettered +
                [i for i in self._unnamed if i.letter is None])

    def enumerate(self, hidden=None):
        if isinstance(hidden, Access):
            hidden = hidden.hidden
        for i in self._ordered():
            if hidden is None or not hidden(i):
                yield i

    def count(self, hidden=None):
        return sum(1 for i in self.enumerate(hidden))

    def __iter__(self):
        return self.enumerate()

    def __len__(self):
        return len(self._named) + len(self._unnamed)

    def __contains__(self, descriptor):
        if descriptor.name is not None:
            return self.find_by_name(descriptor.name) is descriptor
        return any(i is descriptor for i in self._unnamed)

    def read(self, descriptor, access):
        return accessor.read(descriptor, access)

    def write(self, descriptor, access, value):
        return accessor.write(descriptor, access, value,
                              on_changed=self.synchronize)

    def synchronize(self, descriptor):
        for mirror in environ.Mirror:
            if mirror.participates(descriptor):
                environ.serialize(self, mirror)

    def reset(self, access=Access.reinit):
        """Restore every option to its default value, returning the options
        that refused."""
        failed = []
        for i in list(self.enumerate()):
            if self.write(i, access, i.default).bad:
                failed.append(i)
        return failed

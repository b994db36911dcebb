from unittest import mock

from . import *

from shellopts import environ
from shellopts.access import Access
from shellopts.environ import Mirror
from shellopts.exceptions import ReadOnlyVariableError


def shellopt(name, letter=None, **kwargs):
    return option(name, letter, flags=['shellopts', 'hide_shopt'], **kwargs)


def bashopt(name, **kwargs):
    return option(name, flags=['bashopts', 'hide_set_o'], **kwargs)


class TestMirror(TestCase):
    def test_variables(self):
        self.assertEqual(Mirror.shellopts.variable, 'SHELLOPTS')
        self.assertEqual(Mirror.bashopts.variable, 'BASHOPTS')

    def test_participates(self):
        self.assertTrue(Mirror.shellopts.participates(shellopt('noglob')))
        self.assertFalse(Mirror.bashopts.participates(shellopt('noglob')))
        self.assertTrue(Mirror.bashopts.participates(bashopt('dotglob')))
        self.assertFalse(Mirror.shellopts.participates(option('errexit')))
        self.assertFalse(Mirror.shellopts.participates(
            option(letter='f', flags='shellopts')
        ))

    def test_repr(self):
        self.assertEqual(repr(Mirror.shellopts), 'shellopts')


class TestSerialize(TestCase):
    def setUp(self):
        self.noglob = shellopt('noglob', 'f')
        self.errexit = shellopt('errexit', 'e')
        self.xtrace = shellopt('xtrace', 'x')
        self.dotglob = bashopt('dotglob')
        self.registry = make_registry(self.xtrace, self.noglob, self.errexit,
                                      self.dotglob, option('nounset', 'u'))

    def test_empty(self):
        self.assertEqual(environ.serialize(self.registry, Mirror.shellopts),
                         '')
        self.assertEqual(self.registry.variables['SHELLOPTS'], '')

    def test_enabled(self):
        self.noglob.storage.value = 1
        self.xtrace.storage.value = 1
        self.registry.find_by_name('nounset').storage.value = 1
        self.dotglob.storage.value = 1

        self.assertEqual(environ.serialize(self.registry, Mirror.shellopts),
                         'noglob:xtrace')
        self.assertEqual(environ.serialize(self.registry, Mirror.bashopts),
                         'dotglob')
        self.assertEqual(self.registry.variables['SHELLOPTS'],
                         'noglob:xtrace')
        self.assertEqual(self.registry.variables['BASHOPTS'], 'dotglob')

    def test_read_only(self):
        environ.serialize(self.registry, Mirror.shellopts)
        with self.assertRaises(ReadOnlyVariableError):
            self.registry.variables['SHELLOPTS'] = 'errexit'

        self.errexit.storage.value = 1
        self.assertEqual(environ.serialize(self.registry, Mirror.shellopts),
                         'errexit')

    def test_read_hook(self):
        d = shellopt('history', read_hook=lambda d, access: 1)
        self.registry.register(d)
        self.assertEqual(environ.serialize(self.registry, Mirror.shellopts),
                         'history')

    def test_after_write(self):
        registry = self.registry
        for value in (True, False, True):
            for d in (self.noglob, self.errexit):
                registry.write(d, Access.set_o, value)
                names = registry.variables['SHELLOPTS'].split(':')
                self.assertEqual(d.name in names, value)
                self.assertEqual(len(names), len(set(names)))
                if value:
                    self.assertNotIn('', names)

    def test_unchanged_write_does_not_serialize(self):
        with mock.patch('shellopts.environ.serialize') as serialize:
            self.registry.write(self.noglob, Access.set_o, False)
        serialize.assert_not_called()


class TestDeserialize(TestCase):
    def make_registry(self, value, *descriptors):
        return make_registry(*descriptors, variables={'SHELLOPTS': value})

    def test_known_names(self):
        a, c = shellopt('a'), shellopt('c')
        registry = self.make_registry('a:b:c', a, c)
        with mock.patch('shellopts.environ.logger') as logger:
            self.assertEqual(environ.deserialize(registry, Mirror.shellopts),
                             [a, c])
        self.assertEqual(a.storage.value, 1)
        self.assertEqual(c.storage.value, 1)
        logger.error.assert_not_called()
        logger.warning.assert_not_called()

    def test_not_imported(self):
        a = shellopt('a')
        registry = make_registry(a)
        registry.variables['SHELLOPTS'] = 'a'
        self.assertEqual(environ.deserialize(registry, Mirror.shellopts), [])
        self.assertEqual(a.storage.value, 0)

    def test_missing(self):
        a = shellopt('a')
        registry = make_registry(a)
        self.assertEqual(environ.deserialize(registry, Mirror.shellopts), [])

    def test_not_list_shaped(self):
        a = shellopt('a')
        for i in ('a b', 'a=b', 'x=() { a; }'):
            registry = self.make_registry(i, a)
            self.assertEqual(environ.deserialize(registry, Mirror.shellopts),
                             [])
            self.assertEqual(a.storage.value, 0)

    def test_empty_segments(self):
        a, b = shellopt('a'), shellopt('b')
        registry = self.make_registry('::a::b:', a, b)
        self.assertEqual(environ.deserialize(registry, Mirror.shellopts),
                         [a, b])

    def test_wrong_mirror(self):
        dotglob = bashopt('dotglob')
        registry = self.make_registry('dotglob', dotglob)
        self.assertEqual(environ.deserialize(registry, Mirror.shellopts), [])
        self.assertEqual(dotglob.storage.value, 0)

    def test_refused(self):
        a = shellopt('a')
        locked = option('locked', flags=['shellopts', 'read_only'])
        registry = self.make_registry('locked:a', a, locked)
        self.assertEqual(environ.deserialize(registry, Mirror.shellopts), [a])
        self.assertEqual(locked.storage.value, 0)

    def test_idempotent(self):
        a, b, c = shellopt('a'), shellopt('b'), shellopt('c')
        registry = self.make_registry('c:zzz:a', a, b, c)
        environ.deserialize(registry, Mirror.shellopts)
        first = environ.serialize(registry, Mirror.shellopts)
        self.assertEqual(first, 'a:c')

        registry.variables.initial['SHELLOPTS'] = first
        registry.variables.reset()
        environ.deserialize(registry, Mirror.shellopts)
        self.assertEqual(environ.serialize(registry, Mirror.shellopts), first)


class TestInitialize(TestCase):
    def test_initialize(self):
        noglob, dotglob = shellopt('noglob', 'f'), bashopt('dotglob')
        registry = make_registry(noglob, dotglob, variables={
            'SHELLOPTS': 'noglob', 'BASHOPTS': 'dotglob:unknown',
        })
        environ.initialize(registry)
        self.assertEqual(noglob.storage.value, 1)
        self.assertEqual(dotglob.storage.value, 1)
        self.assertEqual(registry.variables['SHELLOPTS'], 'noglob')
        self.assertEqual(registry.variables['BASHOPTS'], 'dotglob')
        self.assertEqual(registry.variables.readonly,
                         {'SHELLOPTS', 'BASHOPTS'})

    def test_no_import(self):
        noglob = shellopt('noglob', 'f')
        registry = make_registry(noglob, variables={'SHELLOPTS': 'noglob'})
        environ.initialize(registry, import_environment=False)
        self.assertEqual(noglob.storage.value, 0)
        self.assertEqual(registry.variables['SHELLOPTS'], '')

    def test_inherited(self):
        noglob = shellopt('noglob', 'f')
        registry = make_registry(variables={'SHELLOPTS': 'noglob'})
        inherited = environ.inherited_mirrors(registry)
        self.assertEqual(inherited, {Mirror.shellopts: 'noglob'})

        registry.register(noglob)
        registry.write(noglob, Access.any, True)
        registry.write(noglob, Access.any, False)
        self.assertFalse(registry.variables.imported('SHELLOPTS'))

        environ.initialize(registry, inherited=inherited)
        self.assertEqual(noglob.storage.value, 1)
        self.assertEqual(registry.variables['SHELLOPTS'], 'noglob')

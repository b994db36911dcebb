import unittest
from io import StringIO

from shellopts.access import Access
from shellopts.descriptor import OptionDescriptor
from shellopts.registry import Registry
from shellopts.session import Session
from shellopts.variables import Variables

__all__ = ['make_registry', 'option', 'SessionTestCase', 'TestCase']


def option(name=None, letter=None, **kwargs):
    return OptionDescriptor(name=name, letter=letter, **kwargs)


def make_registry(*descriptors, variables=None):
    registry = Registry(Variables(variables or {}))
    for i in descriptors:
        registry.register(i)
    return registry


class TestCase(unittest.TestCase):
    def assertKeys(self, descriptors, keys, msg=None):
        self.assertEqual([i.key for i in descriptors], keys, msg)


class SessionTestCase(TestCase):
    environ = {}

    def setUp(self):
        self.out = StringIO()
        self.session = Session(dict(self.environ), out=self.out)
        self.session.startup()

    def run_builtin(self, *argv):
        return self.session.run(list(argv))

    def output(self):
        result = self.out.getvalue()
        self.out.seek(0)
        self.out.truncate()
        return result

    def value(self, name):
        registry = self.session.registry
        return registry.read(registry.find_by_name(name), Access.any)

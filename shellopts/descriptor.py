import enum
import re
import sys
from collections.abc import Callable
from inspect import Signature, Parameter

from .iterutils import isiterable

__all__ = ['Cell', 'INVALID_VALUE', 'OptionDescriptor', 'OptionFlag']

INVALID_VALUE = -1

_bad_name_chars = re.compile(r'[\s:=]')


class Cell:
    __slots__ = ['value']

    def __init__(self, value=0):
        self.value = value

    def __repr__(self):
        return '<Cell({!r})>'.format(self.value)


class OptionFlag(enum.Flag):
    hide_set_o = enum.auto()
    hide_shopt = enum.auto()
    shellopts = enum.auto()
    bashopts = enum.auto()
    read_only = enum.auto()
    forbid_change = enum.auto()
    ignore_change = enum.auto()

    def __repr__(self):
        return self.name or '|'.join(i.name for i in OptionFlag if i in self)


def _get_ns_annotations(attrs):
    if '__annotations__' in attrs:
        return attrs['__annotations__']

    if sys.version_info >= (3, 14):
        import annotationlib
        annotate = annotationlib.get_annotate_from_class_namespace(attrs)
        if annotate:
            return annotationlib.call_annotate_function(
                annotate, format=annotationlib.Format.FORWARDREF
            )
    return {}


class DescriptorMeta(type):
    @staticmethod
    def __make_parameters(fields, defaults):
        for k, v in fields.items():
            default = defaults.get(k, Parameter.empty)
            yield Parameter(k, Parameter.KEYWORD_ONLY, default=default,
                            annotation=v)

    def __new__(cls, name, bases, attrs):
        annotations = _get_ns_annotations(attrs)
        slots = tuple(annotations.keys())
        defaults = {}
        for i in slots:
            if i in attrs:
                defaults[i] = attrs.pop(i)

        attrs.update({
            '__slots__': slots,
            '_signature': Signature(list(cls.__make_parameters(
                annotations, defaults
            )))
        })
        return type.__new__(cls, name, bases, attrs)


def _flag_property(flag):
    def getter(self):
        return flag in self.flags

    getter.__name__ = flag.name
    return property(getter)


# Descriptors are compared by identity: two descriptors with the same fields
# are still different options as far as the registry is concerned.
class OptionDescriptor(metaclass=DescriptorMeta):
    name: (str, type(None)) = None
    letter: (str, type(None)) = None
    storage: (Cell, type(None)) = None
    default: int = 0
    read_hook: (Callable, type(None)) = None
    write_hook: (Callable, type(None)) = None
    flags: OptionFlag = OptionFlag(0)
    help: (str, type(None)) = None

    @staticmethod
    def __check_type(typ, value):
        if isinstance(value, typ):
            return value
        elif isinstance(typ, type) and issubclass(typ, enum.Flag):
            names = [value] if isinstance(value, str) else value
            if isiterable(names):
                result = typ(0)
                for i in names:
                    try:
                        result |= typ[i]
                    except KeyError:
                        raise ValueError('invalid {} {!r}'.format(
                            typ.__name__, i
                        ))
                return result

        typ = [typ] if isinstance(typ, type) else typ
        raise TypeError('expected {}; but got {}'.format(
            ', '.join(i.__name__ for i in typ), type(value).__name__
        ))

    def __init__(self, **kwargs):
        bound = self._signature.bind(**kwargs)
        bound.apply_defaults()

        for name, value in bound.arguments.items():
            param = self._signature.parameters[name]
            object.__setattr__(self, name,
                               self.__check_type(param.annotation, value))

        if self.name is not None and ( not self.name or
                                       _bad_name_chars.search(self.name) ):
            raise ValueError('invalid option name {!r}'.format(self.name))
        if self.letter is not None and ( len(self.letter) != 1 or
                                         self.letter in '-+' or
                                         self.letter.isspace() ):
            raise ValueError('invalid option letter {!r}'.format(self.letter))
        if self.storage is None:
            object.__setattr__(self, 'storage', Cell(self.default))

    def __setattr__(self, name, value):
        raise AttributeError('option descriptors are immutable')

    def __delattr__(self, name):
        raise AttributeError('option descriptors are immutable')

    hide_set_o = _flag_property(OptionFlag.hide_set_o)
    hide_shopt = _flag_property(OptionFlag.hide_shopt)
    shellopts = _flag_property(OptionFlag.shellopts)
    bashopts = _flag_property(OptionFlag.bashopts)
    read_only = _flag_property(OptionFlag.read_only)
    forbid_change = _flag_property(OptionFlag.forbid_change)
    ignore_change = _flag_property(OptionFlag.ignore_change)

    @property
    def mirrored(self):
        return bool(self.flags & (OptionFlag.shellopts | OptionFlag.bashopts))

    @property
    def key(self):
        return self.name or self.letter

    def __repr__(self):
        return '<{}({})>'.format(self.__class__.__name__, ', '.join(
            '{}={!r}'.format(i, getattr(self, i))
            for i in ('name', 'letter') if getattr(self, i) is not None
        ))

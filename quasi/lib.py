# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation; either version 3 of the
# License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see
# <http://www.gnu.org/licenses/>.


"""
quasi.lib

Exceptions and small predicates shared by the rest of quasi

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from collections.abc import Iterable, Mapping
from functools import partial


__all__ = (
    "QuasiException",
    "InvalidSymbol", "InvalidHead", "MarkerPlacementError",
    "QuoteSyntaxError", "NoCallingContext",
    "ExpansionError",
    "UnquoteTypeError", "SpliceTypeError", "InvalidDefinitionName",
    "EvaluationError",
    "UnboundName", "NotCallable", "NotEvaluable",
    "is_atomic", "is_mapping", "is_sequence_like", "iterate",
    "format_path",
)


def format_path(path):
    """
    render a position hint such as ("args[1]", "value") as the string
    "args[1].value"
    """

    return ".".join(map(str, path)) if path else ""


class QuasiException(Exception):
    """
    Base class for error-driven Exceptions raised by quasi. The
    optional `path` identifies the position of the offending node or
    marker within the tree being processed.
    """

    def __init__(self, message, path=None):
        super().__init__(message)
        self.message = message
        self.path = tuple(path) if path else ()


    def __str__(self):
        if self.path:
            return "%s (at %s)" % (self.message, format_path(self.path))
        else:
            return self.message


class InvalidSymbol(QuasiException):
    """
    An empty or non-string symbol name
    """
    pass


class InvalidHead(QuasiException):
    """
    A node which cannot occupy the head position of a call
    """
    pass


class MarkerPlacementError(QuasiException):
    """
    An unquote marker used where the tree has no room for it
    """
    pass


class QuoteSyntaxError(QuasiException):
    """
    Host syntax which has no node representation
    """
    pass


class NoCallingContext(QuasiException):
    """
    Contextual capture attempted without a caller, or naming something
    which isn't a parameter of the invoked function
    """
    pass


class ExpansionError(QuasiException):
    """
    Base class for failures while resolving unquote markers
    """
    pass


class UnquoteTypeError(ExpansionError):
    pass


class SpliceTypeError(ExpansionError):
    pass


class InvalidDefinitionName(ExpansionError):
    pass


class EvaluationError(QuasiException):
    """
    Base class for structural failures during evaluation
    """
    pass


class UnboundName(EvaluationError):

    def __init__(self, name, path=None):
        super().__init__("unbound name %r" % name, path)
        self.name = name


class NotCallable(EvaluationError):
    pass


class NotEvaluable(EvaluationError):
    pass


def _instance_of(typeobj, value):
    return isinstance(value, typeobj)


class TypePredicate(partial):
    """
    predicate testing whether its argument is an instance of typeobj,
    which may be a type or a tuple of types
    """

    def __new__(cls, name, typeobj):
        obj = partial.__new__(cls, _instance_of, typeobj)
        obj.__name__ = name
        return obj

    def __repr__(self):
        return "<builtin type predicate %s>" % self.__name__


_atomic_types = (type(None), bool, int, float, complex, str, bytes,
                 type(...))


is_atomic = TypePredicate("atomic?", _atomic_types)
is_mapping = TypePredicate("mapping?", Mapping)


def is_sequence_like(value):
    """
    True for values which an unquote-splice can spread across argument
    positions. Strings and bytes are iterable but are atoms here.
    """

    return isinstance(value, Iterable) and \
        not isinstance(value, (str, bytes, bytearray))


def iterate(value):
    """
    yields (name, item) pairs from a sequence-like value. Mappings
    yield their keys as names, other iterables yield None names.
    """

    if is_mapping(value):
        return iter(value.items())
    else:
        return ((None, item) for item in value)


#
# The end.

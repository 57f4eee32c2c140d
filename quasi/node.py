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
Abstract Syntax Tree for quasi

Nodes are immutable. Rewriting passes build new trees, sharing any
unmodified leaves with their input.

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from abc import ABCMeta

from .lib import (
    InvalidSymbol, InvalidHead, MarkerPlacementError, UnquoteTypeError,
    TypePredicate, is_atomic,
)


__all__ = (
    "Node", "Constant", "Symbol", "Missing", "Call", "Pairlist",
    "Argument",
    "Marker", "Single", "Splice", "Define",
    "constant", "symbol", "missing_symbol", "call", "pairlist",
    "lift", "identical", "contains_markers",
    "is_node", "is_marker", "is_symbol", "is_missing", "is_call",
    "is_pairlist", "is_constant",
)


_setattr = object.__setattr__


class Frozen(object):
    """
    Base class for the immutable values of this module
    """

    __slots__ = ()


    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % type(self).__name__)


    def __delattr__(self, name):
        raise AttributeError("%s is immutable" % type(self).__name__)


    def __eq__(self, other):
        return identical(self, other)


    def __ne__(self, other):
        return not identical(self, other)


    def __str__(self):
        from .deparse import deparse
        return deparse(self)


class Node(Frozen, metaclass=ABCMeta):
    """
    Base class for all AST node types
    """

    __slots__ = ()


class Constant(Node):
    """
    An atomic literal, or an inlined host value such as a function
    """

    __slots__ = ("value", )


    def __init__(self, value):
        if isinstance(value, Marker):
            raise MarkerPlacementError("%r cannot be wrapped in a"
                                       " constant" % value)
        _setattr(self, "value", value)


    def __hash__(self):
        try:
            return hash((Constant, type(self.value), self.value))
        except TypeError:
            return hash((Constant, type(self.value)))


    def __repr__(self):
        return "Constant(%r)" % (self.value, )


class Symbol(Node):
    """
    A bare identifier, denoting the variable of that name
    """

    __slots__ = ("name", )


    def __init__(self, name):
        if not isinstance(name, str):
            raise InvalidSymbol("symbol name must be a str, not %s" %
                                type(name).__name__)
        if not name:
            raise InvalidSymbol("empty symbol name, use missing_symbol()"
                                " for an omitted argument")
        _setattr(self, "name", name)


    def __hash__(self):
        return hash((Symbol, self.name))


    def __repr__(self):
        return "Symbol(%r)" % self.name


class Missing(Symbol):
    """
    The empty-named symbol standing in for an omitted argument. Use
    `missing_symbol()` rather than instantiating this directly.
    """

    __slots__ = ()


    def __init__(self):
        _setattr(self, "name", "")


    def __hash__(self):
        return hash(Missing)


    def __repr__(self):
        return "missing_symbol()"


_missing = Missing()
_unset = object()


class Argument(Frozen):
    """
    One entry of an argument list. A `name` of None is positional. At
    template time the name may be a `Define` marker, and the value may
    be any marker.
    """

    __slots__ = ("name", "value")


    def __init__(self, name=None, value=_unset):
        if isinstance(name, Define):
            if name.has_value:
                if value is not _unset:
                    raise MarkerPlacementError("definition marker"
                                               " already carries a"
                                               " value")
                value = name.value_source
                name = Define(name.name_source)

        elif name == "":
            name = None

        elif name is not None and not isinstance(name, str):
            raise InvalidSymbol("argument name must be a str, not %s" %
                                type(name).__name__)

        if value is _unset:
            value = _missing

        elif isinstance(value, Define):
            raise MarkerPlacementError("definition marker is only valid"
                                       " as an argument name")

        elif isinstance(value, Splice) and name is not None:
            raise MarkerPlacementError("splice cannot be named")

        elif not isinstance(value, Marker):
            value = lift(value)

        _setattr(self, "name", name)
        _setattr(self, "value", value)


    def __hash__(self):
        return hash((Argument, self.name, self.value))


    def __repr__(self):
        if self.name is None:
            return "Argument(%r)" % (self.value, )
        else:
            return "Argument(%r, %r)" % (self.name, self.value)


def _argument(item):
    if isinstance(item, Argument):
        return item
    elif isinstance(item, Define):
        return Argument(item)
    else:
        return Argument(None, item)


class Call(Node):
    """
    Application of `head` to an ordered tuple of `Argument`
    """

    __slots__ = ("head", "args")


    def __init__(self, head, args=()):
        if isinstance(head, Marker):
            if not isinstance(head, Single):
                raise MarkerPlacementError("%s marker cannot be a call"
                                           " head" % type(head).__name__)

        elif not isinstance(head, Node):
            raise InvalidHead("call head must be a node, not %s" %
                              type(head).__name__)

        elif isinstance(head, (Pairlist, Missing)):
            raise InvalidHead("%r cannot be a call head" % head)

        elif isinstance(head, Constant) and not callable(head.value):
            raise InvalidHead("constant %r cannot be a call head" %
                              (head.value, ))

        _setattr(self, "head", head)
        _setattr(self, "args", tuple(map(_argument, args)))


    def __hash__(self):
        return hash((Call, self.head, self.args))


    def __repr__(self):
        return "Call(%r, [%s])" % (self.head,
                                   ", ".join(map(repr, self.args)))


class Pairlist(Node):
    """
    An argument list detached from any call
    """

    __slots__ = ("args", )


    def __init__(self, args=()):
        _setattr(self, "args", tuple(map(_argument, args)))


    def __hash__(self):
        return hash((Pairlist, self.args))


    def __len__(self):
        return len(self.args)


    def __iter__(self):
        return iter(self.args)


    def __getitem__(self, key):
        if isinstance(key, str):
            for arg in self.args:
                if arg.name == key:
                    return arg.value
            raise KeyError(key)
        else:
            return self.args[key]


    def names(self):
        return [arg.name for arg in self.args]


    def values(self):
        return [arg.value for arg in self.args]


    def items(self):
        return [(arg.name, arg.value) for arg in self.args]


    def __repr__(self):
        return "Pairlist([%s])" % ", ".join(map(repr, self.args))


class Marker(Frozen):
    """
    Base class for the template-only unquote markers. A `source` which
    is a Node is evaluated at expansion time, any other source is
    already a host value and is used as-is.
    """

    __slots__ = ("source", )


    def __init__(self, source):
        _setattr(self, "source", source)


    def __hash__(self):
        try:
            return hash((type(self), self.source))
        except TypeError:
            return hash(type(self))


    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.source)


class Single(Marker):
    """
    one-to-one substitution of the marked position
    """

    __slots__ = ()


class Splice(Marker):
    """
    one-to-many substitution of the marked argument position
    """

    __slots__ = ()


class Define(Marker):
    """
    computes the name of an argument. May carry the argument's value
    template when used directly as an argument list entry.
    """

    __slots__ = ("value_source", )


    def __init__(self, name_source, value_source=_unset):
        if isinstance(value_source, Define):
            raise MarkerPlacementError("definition marker is only valid"
                                       " as an argument name")
        _setattr(self, "source", name_source)
        _setattr(self, "value_source", value_source)


    @property
    def name_source(self):
        return self.source


    @property
    def has_value(self):
        return self.value_source is not _unset


    def __hash__(self):
        try:
            return hash((Define, self.source, self.value_source))
        except TypeError:
            return hash(Define)


    def __repr__(self):
        if not self.has_value:
            return "Define(%r)" % (self.source, )
        else:
            return "Define(%r, %r)" % (self.source, self.value_source)


is_node = TypePredicate("node?", Node)
is_marker = TypePredicate("marker?", Marker)
is_constant = TypePredicate("constant?", Constant)
is_symbol = TypePredicate("symbol?", Symbol)
is_missing = TypePredicate("missing?", Missing)
is_call = TypePredicate("call?", Call)
is_pairlist = TypePredicate("pairlist?", Pairlist)


def constant(value):
    return Constant(value)


def symbol(name):
    return Symbol(name)


def missing_symbol():
    return _missing


def call(head, args=()):
    return Call(head, args)


def pairlist(args=()):
    return Pairlist(args)


def lift(value):
    """
    Nodes are returned unchanged, atomic values and callables are
    wrapped in a Constant. Raises `UnquoteTypeError` for anything
    else.
    """

    if isinstance(value, Node):
        return value

    elif isinstance(value, Marker):
        raise UnquoteTypeError("cannot lift marker %r to a node" % value)

    elif is_atomic(value) or callable(value):
        return Constant(value)

    else:
        raise UnquoteTypeError("cannot lift %s value to a node" %
                               type(value).__name__)


def _identical_value(a, b):
    if isinstance(a, Frozen) or isinstance(b, Frozen):
        return identical(a, b)
    elif a is b:
        return True
    elif type(a) is not type(b):
        return False
    try:
        return bool(a == b)
    except Exception:
        return False


def identical(a, b):
    """
    recursive structural equality of nodes, arguments and markers
    """

    if a is b:
        return True

    elif type(a) is not type(b):
        return False

    elif isinstance(a, Constant):
        return _identical_value(a.value, b.value)

    elif isinstance(a, Symbol):
        return a.name == b.name

    elif isinstance(a, Call):
        return (identical(a.head, b.head) and
                _identical_args(a.args, b.args))

    elif isinstance(a, Pairlist):
        return _identical_args(a.args, b.args)

    elif isinstance(a, Argument):
        return (_identical_value(a.name, b.name) and
                identical(a.value, b.value))

    elif isinstance(a, Define):
        return (_identical_value(a.source, b.source) and
                _identical_value(a.value_source, b.value_source))

    elif isinstance(a, Marker):
        return _identical_value(a.source, b.source)

    else:
        return _identical_value(a, b)


def _identical_args(a, b):
    return len(a) == len(b) and all(map(identical, a, b))


def contains_markers(tree):
    """
    True if any unquote marker remains anywhere within tree
    """

    if isinstance(tree, Marker):
        return True

    elif isinstance(tree, Call):
        return contains_markers(tree.head) or \
            any(map(contains_markers, tree.args))

    elif isinstance(tree, Pairlist):
        return any(map(contains_markers, tree.args))

    elif isinstance(tree, Argument):
        return isinstance(tree.name, Marker) or \
            contains_markers(tree.value)

    else:
        return False


#
# The end.

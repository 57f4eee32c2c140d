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
The operator symbols produced when quoting host syntax, and their
run-time functions.

author: Christopher O'Brien <obriencj@gmail.com>
license: LGPL v.3
"""


from functools import reduce

import operator as pyop


__all__ = (
    "binary_operators", "unary_operators", "comparison_operators",
    "boolean_operators", "infix_text", "prefix_text", "runtime",
)


_symbol_and = "and"
_symbol_attr = "attr"
_symbol_if = "if"
_symbol_item = "item"
_symbol_list = "#list"
_symbol_or = "or"
_symbol_slice = "#slice"
_symbol_tuple = "#tuple"


# keyed by the class name of the host's ast operator nodes

binary_operators = {
    "Add": "+",
    "BitAnd": "&",
    "BitOr": "|",
    "BitXor": "^",
    "Div": "/",
    "FloorDiv": "//",
    "LShift": "<<",
    "MatMult": "@",
    "Mod": "%",
    "Mult": "*",
    "Pow": "**",
    "RShift": ">>",
    "Sub": "-",
}

unary_operators = {
    "Invert": "~",
    "Not": "not",
    "UAdd": "+",
    "USub": "-",
}

comparison_operators = {
    "Eq": "==",
    "Gt": ">",
    "GtE": ">=",
    "In": "in",
    "Is": "is",
    "IsNot": "is-not",
    "Lt": "<",
    "LtE": "<=",
    "NotEq": "!=",
    "NotIn": "not-in",
}

boolean_operators = {
    "And": _symbol_and,
    "Or": _symbol_or,
}


# keyed by symbol name, the source text for printing

infix_text = dict((sym, sym) for sym in binary_operators.values())
infix_text.update((sym, sym) for sym in comparison_operators.values())
infix_text.update({
    "is-not": "is not",
    "not-in": "not in",
    _symbol_and: "and",
    _symbol_or: "or",
})

prefix_text = {
    "+": "+",
    "-": "-",
    "~": "~",
    "not": "not ",
}


def reducing(binop, unop=None, name=None):
    """
    a variadic run-time form of binop. With a single argument, unop is
    applied instead (or the argument returned as-is).
    """

    def reduced(first, *rest):
        if rest:
            return reduce(binop, rest, first)
        elif unop is not None:
            return unop(first)
        else:
            return first

    reduced.__name__ = name or binop.__name__
    return reduced


def is_in(item, container):
    return item in container


def not_in(item, container):
    return item not in container


def build_list(*items):
    return list(items)


def build_tuple(*items):
    return items


def build_slice(start=None, stop=None, step=None):
    return slice(start, stop, step)


runtime = {
    "+": reducing(pyop.add, pyop.pos, "add"),
    "-": reducing(pyop.sub, pyop.neg, "subtract"),
    "*": reducing(pyop.mul, name="multiply"),
    "@": reducing(pyop.matmul, name="matrix_multiply"),
    "/": reducing(pyop.truediv, name="divide"),
    "//": reducing(pyop.floordiv, name="floor_divide"),
    "%": reducing(pyop.mod, name="modulo"),
    "**": pyop.pow,
    "<<": pyop.lshift,
    ">>": pyop.rshift,
    "&": reducing(pyop.and_, name="bitwise_and"),
    "|": reducing(pyop.or_, name="bitwise_or"),
    "^": reducing(pyop.xor, name="bitwise_xor"),
    "~": pyop.invert,
    "not": pyop.not_,
    "==": pyop.eq,
    "!=": pyop.ne,
    "<": pyop.lt,
    "<=": pyop.le,
    ">": pyop.gt,
    ">=": pyop.ge,
    "is": pyop.is_,
    "is-not": pyop.is_not,
    "in": is_in,
    "not-in": not_in,
    _symbol_attr: getattr,
    _symbol_item: pyop.getitem,
    _symbol_slice: build_slice,
    _symbol_list: build_list,
    _symbol_tuple: build_tuple,
}


#
# The end.

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
quasi.builtins

The standard environment: Python's builtins, the run-time forms of
the operator symbols, and a few quoting functions which need to see
their arguments unevaluated.

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


import builtins as pybuiltins

from .context import Promise, quoting
from .environment import Environment
from .lib import NoCallingContext
from .operators import runtime


__all__ = ( "standard_environment", "quoting_builtins" )


def _force(value):
    # a quoting function called directly from Python gets plain values
    return value.force() if isinstance(value, Promise) else value


@quoting
def builtin_and(context, *exprs):
    """
    evaluates each expression in turn, stopping at the first false
    value. Returns the last value evaluated, or True.
    """

    result = True
    for expr in exprs:
        result = _force(expr)
        if not result:
            break
    return result


@quoting
def builtin_or(context, *exprs):
    """
    evaluates each expression in turn, stopping at the first true
    value. Returns the last value evaluated, or False.
    """

    result = False
    for expr in exprs:
        result = _force(expr)
        if result:
            break
    return result


@quoting
def builtin_if(context, test, body, orelse=None):
    """
    evaluates body if test is true, otherwise orelse
    """

    if _force(test):
        return _force(body)
    else:
        return _force(orelse)


@quoting
def builtin_quote(context, expr):
    """
    the unevaluated node given as expr
    """

    if context is None:
        raise NoCallingContext("quote called without a calling context")
    return context.argument("expr")


quoting_builtins = {
    "and": builtin_and,
    "or": builtin_or,
    "if": builtin_if,
    "quote": builtin_quote,
}


def standard_environment(bindings=None):
    """
    A new environment holding `bindings`, whose parents provide the
    operator and quoting builtins and then Python's own builtins.
    Binding into the result never alters the shared parents.
    """

    python = Environment(vars(pybuiltins))

    base = Environment(runtime, python)
    base.bindings.update(quoting_builtins)

    return Environment(bindings, base)


#
# The end.

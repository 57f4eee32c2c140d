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
quasi.builder

Programmatic construction of call nodes

author: Christopher O'Brien  <obriencj@gmail.com>
license: LGPL v.3
"""


from .lib import InvalidHead
from .node import Node, Constant, Symbol, Call, Argument, Single, Define
from .quasiquote import expand


__all__ = ( "build_call", )


def _head(designator):
    if isinstance(designator, str):
        # a string head names the callable, it is never a constant
        return Symbol(designator)

    elif isinstance(designator, (Node, Single)):
        return designator

    elif callable(designator):
        return Constant(designator)

    else:
        raise InvalidHead("cannot build a call from a %s head" %
                          type(designator).__name__)


def _entry(item):
    # (name, value) pairs, the name being None, a str, or a Define
    if isinstance(item, tuple) and len(item) == 2 and \
       (item[0] is None or isinstance(item[0], (str, Define))):
        return Argument(*item)
    else:
        return item


def build_call(head_designator, args=(), env=None):
    """
    Build a Call node.

    Parameters
    ----------
    head_designator : `str`, `Node`, `Single` or callable
      a string becomes a symbol naming the callable; a node (such as
      a call which yields a function) is used verbatim; a host
      callable is inlined as a constant
    args : sequence
      `Argument` entries, `(name, value)` pairs whose name is None,
      a `str` or a `Define`, nodes, markers, or raw host values. Raw
      values are lifted to constants, so a string argument remains a
      string constant.
    env : `Environment` or mapping
      where the sources of any unquote markers are evaluated

    Returns
    -------
    Call
      a marker-free call node
    """

    args = map(_entry, args)
    return expand(Call(_head(head_designator), args), env)


#
# The end.
